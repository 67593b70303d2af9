"""
Tic-tac-toe Environment Package

Main Components:
- board.py: Board state, move/undo/redo rules, player and outcome enums
- kernels.py: numba kernels for win detection and empty-cell masks
- tictactoe_env.py: Environment class used by the search algorithms
- rewards.py: Outcome scoring from a player's perspective
- visualization.py: Plotting of the board and visit distribution
- logging.py: Result recording utilities
"""

from tictactoe_mcts.envs.tictactoe.board import (
    Board,
    Cell,
    Coordinate,
    GameEnd,
    IllegalMoveError,
    Player,
)
from tictactoe_mcts.envs.tictactoe.tictactoe_env import TicTacToe
from tictactoe_mcts.envs.tictactoe.rewards import get_score

__all__ = [
    'Board',
    'Cell',
    'Coordinate',
    'GameEnd',
    'IllegalMoveError',
    'Player',
    'TicTacToe',
    'get_score',
]
