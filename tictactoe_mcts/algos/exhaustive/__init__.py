"""Exhaustive game-tree search for tic-tac-toe."""
from tictactoe_mcts.algos.exhaustive.tree_search import ExhaustiveSearch

__all__ = ['ExhaustiveSearch']
