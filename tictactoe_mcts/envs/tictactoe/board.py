"""
Tic-tac-toe rules: board state, move application, undo/redo history and
the suggestion slot filled by the computer players.
"""

from enum import IntEnum
from typing import List, NamedTuple

import numpy as np

from tictactoe_mcts.envs.tictactoe.kernels import (
    CELL_EMPTY,
    CELL_O,
    CELL_X,
    GAME_END_NONE,
    GAME_END_DRAW,
    GAME_END_O_WIN,
    GAME_END_X_WIN,
    detect_game_end_nb,
    get_empty_cells_nb,
    win_cells_mask_nb,
)


class Player(IntEnum):
    O = 0
    X = 1

    def other(self) -> 'Player':
        return Player.X if self == Player.O else Player.O


class Cell(IntEnum):
    EMPTY = CELL_EMPTY
    O = CELL_O
    X = CELL_X


class GameEnd(IntEnum):
    NONE = GAME_END_NONE
    DRAW = GAME_END_DRAW
    O_WIN = GAME_END_O_WIN
    X_WIN = GAME_END_X_WIN


PLAYER_CELLS = (Cell.O, Cell.X)
CELL_SYMBOLS = {Cell.EMPTY: '.', Cell.O: 'O', Cell.X: 'X'}


class Coordinate(NamedTuple):
    row: int
    col: int

    @classmethod
    def from_index(cls, index: int) -> 'Coordinate':
        return cls(int(index) // 3, int(index) % 3)

    @property
    def index(self) -> int:
        return self.row * 3 + self.col

    def is_valid(self) -> bool:
        return 0 <= self.row < 3 and 0 <= self.col < 3


class IllegalMoveError(ValueError):
    """Raised when a move is played on an occupied cell or a finished game."""


class Board:
    """
    Mutable tic-tac-toe position.

    O always moves first. `history` keeps every move played so far, including
    moves that were undone; `history_next_index` marks how many of them are on
    the board, so undone moves can be redone until a new move is played.
    `ai_best_moves` is the caller-owned slot for suggested moves; it is cleared
    whenever the position changes.
    """

    __slots__ = ('cells', 'next_turn', 'game_end', 'history', 'history_next_index', 'ai_best_moves')

    def __init__(self):
        self.cells = np.zeros((3, 3), np.uint8)
        self.next_turn = Player.O
        self.game_end = GameEnd.NONE
        self.history: List[Coordinate] = []
        self.history_next_index = 0
        self.ai_best_moves: List[Coordinate] = []

    @classmethod
    def from_string(cls, text: str) -> 'Board':
        """
        Build a position from three rows of 'O', 'X' and '.' characters,
        e.g. "OO./XX./..." (any whitespace or '/' separates rows).

        The side to move follows from the piece counts. History is filled in
        alternating O/X order so the position can be undone back to empty.
        """
        rows = [r for r in text.replace('/', ' ').split() if r]
        if len(rows) != 3 or any(len(r) != 3 for r in rows):
            raise ValueError(f"Expected three rows of three cells, got {text!r}")

        board = cls()
        o_moves, x_moves = [], []
        for r, row in enumerate(rows):
            for c, ch in enumerate(row.upper()):
                if ch == 'O':
                    board.cells[r, c] = Cell.O
                    o_moves.append(Coordinate(r, c))
                elif ch == 'X':
                    board.cells[r, c] = Cell.X
                    x_moves.append(Coordinate(r, c))
                elif ch != '.':
                    raise ValueError(f"Unknown cell symbol {ch!r}")

        if len(o_moves) not in (len(x_moves), len(x_moves) + 1):
            raise ValueError(f"Unreachable position: {len(o_moves)} O and {len(x_moves)} X")

        for i, coord in enumerate(o_moves):
            board.history.append(coord)
            if i < len(x_moves):
                board.history.append(x_moves[i])
        board.history_next_index = len(board.history)
        board.next_turn = Player.O if len(o_moves) == len(x_moves) else Player.X
        board.game_end = GameEnd(detect_game_end_nb(board.cells))
        return board

    # ---------- queries ----------
    def get_cell(self, coord: Coordinate) -> Cell:
        return Cell(self.cells[coord.row, coord.col])

    def is_over(self) -> bool:
        return self.game_end != GameEnd.NONE

    def empty_cells(self) -> List[Coordinate]:
        mask = get_empty_cells_nb(self.cells)
        return [Coordinate.from_index(i) for i in np.flatnonzero(mask)]

    @property
    def win_cells(self) -> List[Coordinate]:
        """Cells on a completed line (empty unless the game was won)."""
        if self.game_end not in (GameEnd.O_WIN, GameEnd.X_WIN):
            return []
        mask = win_cells_mask_nb(self.cells)
        return [Coordinate.from_index(i) for i in np.flatnonzero(mask)]

    def can_undo(self) -> bool:
        return self.history_next_index > 0

    def can_redo(self) -> bool:
        return self.history_next_index < len(self.history)

    # ---------- mutation ----------
    def play_move(self, coord: Coordinate, is_redo: bool = False):
        if not coord.is_valid():
            raise IllegalMoveError(f"Coordinate {coord} is off the board")
        if self.game_end != GameEnd.NONE:
            raise IllegalMoveError(f"Game is already over ({self.game_end.name})")
        if self.cells[coord.row, coord.col] != CELL_EMPTY:
            raise IllegalMoveError(f"Cell {coord} is already occupied")

        self.cells[coord.row, coord.col] = PLAYER_CELLS[self.next_turn]
        self.next_turn = self.next_turn.other()
        if not is_redo:
            # A fresh move discards the redo tail
            del self.history[self.history_next_index:]
            self.history.append(coord)
        self.history_next_index += 1
        self.ai_best_moves = []
        self.game_end = GameEnd(detect_game_end_nb(self.cells))

    def undo(self):
        if not self.can_undo():
            raise IllegalMoveError("Nothing to undo")
        coord = self.history[self.history_next_index - 1]
        self.cells[coord.row, coord.col] = CELL_EMPTY
        self.history_next_index -= 1
        self.game_end = GameEnd.NONE
        self.next_turn = self.next_turn.other()
        self.ai_best_moves = []

    def redo(self):
        if not self.can_redo():
            raise IllegalMoveError("Nothing to redo")
        self.play_move(self.history[self.history_next_index], is_redo=True)

    def play_computer_move(self, rng) -> Coordinate:
        """Play a uniformly chosen move from the suggestion slot."""
        if not self.ai_best_moves:
            raise IllegalMoveError("No suggested moves to play")
        coord = rng.choice(self.ai_best_moves)
        self.play_move(coord)
        return coord

    # ---------- snapshots ----------
    def copy(self) -> 'Board':
        other = Board.__new__(Board)
        other.cells = self.cells.copy()
        other.next_turn = self.next_turn
        other.game_end = self.game_end
        other.history = list(self.history)
        other.history_next_index = self.history_next_index
        other.ai_best_moves = list(self.ai_best_moves)
        return other

    def restore(self, snapshot: 'Board'):
        """Overwrite this board in place with the contents of `snapshot`."""
        np.copyto(self.cells, snapshot.cells)
        self.next_turn = snapshot.next_turn
        self.game_end = snapshot.game_end
        self.history[:] = snapshot.history
        self.history_next_index = snapshot.history_next_index
        self.ai_best_moves = list(snapshot.ai_best_moves)

    def __eq__(self, other):
        # The suggestion slot is caller-owned and not part of the position
        if not isinstance(other, Board):
            return NotImplemented
        return (np.array_equal(self.cells, other.cells)
                and self.next_turn == other.next_turn
                and self.game_end == other.game_end
                and self.history == other.history
                and self.history_next_index == other.history_next_index)

    __hash__ = None

    def __str__(self):
        return '\n'.join(
            ''.join(CELL_SYMBOLS[Cell(v)] for v in row) for row in self.cells
        )

    def __repr__(self):
        layout = str(self).replace('\n', '/')
        return f"Board({layout!r}, next_turn={self.next_turn.name}, game_end={self.game_end.name})"


def cell_for(player: Player) -> Cell:
    return PLAYER_CELLS[player]
