"""Shared utilities for tictactoe_mcts."""
from .seed import RandomSource, set_seeds, warmup_numba

__all__ = ['RandomSource', 'set_seeds', 'warmup_numba']
