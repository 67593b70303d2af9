import numpy as np
from numba import njit

# Cell codes stored in Board.cells
CELL_EMPTY = 0
CELL_O = 1
CELL_X = 2

# Game end codes returned by the kernels
GAME_END_NONE = 0
GAME_END_DRAW = 1
GAME_END_O_WIN = 2
GAME_END_X_WIN = 3

# Flat cell indices of the three rows, three columns and two diagonals
WIN_LINES = np.array([
    [0, 1, 2], [3, 4, 5], [6, 7, 8],
    [0, 3, 6], [1, 4, 7], [2, 5, 8],
    [0, 4, 8], [2, 4, 6],
], dtype=np.int64)


@njit(cache=True, nogil=True)
def _line_owner(cells, k):
    """Return the cell code owning winning line k, or CELL_EMPTY."""
    a = WIN_LINES[k, 0]
    b = WIN_LINES[k, 1]
    c = WIN_LINES[k, 2]
    first = cells[a // 3, a % 3]
    if first != CELL_EMPTY and first == cells[b // 3, b % 3] and first == cells[c // 3, c % 3]:
        return first
    return CELL_EMPTY


@njit(cache=True, nogil=True)
def detect_game_end_nb(cells):
    """Classify a 3x3 board: still running, draw, O win or X win."""
    for k in range(WIN_LINES.shape[0]):
        owner = _line_owner(cells, k)
        if owner == CELL_O:
            return GAME_END_O_WIN
        if owner == CELL_X:
            return GAME_END_X_WIN

    for r in range(3):
        for c in range(3):
            if cells[r, c] == CELL_EMPTY:
                return GAME_END_NONE
    return GAME_END_DRAW


@njit(cache=True, nogil=True)
def win_cells_mask_nb(cells):
    """Flat uint8 mask of every cell lying on a completed line."""
    mask = np.zeros(9, np.uint8)
    for k in range(WIN_LINES.shape[0]):
        if _line_owner(cells, k) != CELL_EMPTY:
            for j in range(3):
                mask[WIN_LINES[k, j]] = 1
    return mask


@njit(cache=True, nogil=True)
def get_empty_cells_nb(cells):
    """Flat uint8 mask of empty cells (1 = empty)."""
    mask = np.zeros(9, np.uint8)
    for idx in range(9):
        if cells[idx // 3, idx % 3] == CELL_EMPTY:
            mask[idx] = 1
    return mask
