"""
Environments Package

This package contains the game environments.
Currently includes the tic-tac-toe environment.
"""

from tictactoe_mcts.envs.tictactoe import (
    Board,
    Cell,
    Coordinate,
    GameEnd,
    IllegalMoveError,
    Player,
    TicTacToe,
    get_score,
)

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
