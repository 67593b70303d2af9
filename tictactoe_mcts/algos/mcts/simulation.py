from numba import njit

from tictactoe_mcts.envs.tictactoe.board import GameEnd, cell_for
from tictactoe_mcts.envs.tictactoe.kernels import (
    CELL_EMPTY,
    CELL_O,
    CELL_X,
    GAME_END_NONE,
    detect_game_end_nb,
)


@njit(cache=True, nogil=True)
def _simulate_nb_core(cells, next_cell, uniforms):
    """
    Play uniformly random moves until the game ends.
    Returns the game end code (simulation core without scoring).

    Args:
        cells: 3x3 board (will be modified during simulation)
        next_cell: Cell code of the player to move
        uniforms: At least one float in [0, 1) per remaining empty cell;
            the k-th ply plays the floor(uniforms[k] * n_empty)-th empty cell

    Note: randomness comes in through `uniforms` so the caller's RNG fully
    determines the rollout.
    """
    game_end = detect_game_end_nb(cells)
    k = 0

    while game_end == GAME_END_NONE:
        n_empty = 0
        for idx in range(9):
            if cells[idx // 3, idx % 3] == CELL_EMPTY:
                n_empty += 1

        pick = int(uniforms[k] * n_empty)
        if pick >= n_empty:
            pick = n_empty - 1

        # Place on the pick-th empty cell in row-major order
        seen = 0
        for idx in range(9):
            if cells[idx // 3, idx % 3] == CELL_EMPTY:
                if seen == pick:
                    cells[idx // 3, idx % 3] = next_cell
                    break
                seen += 1

        next_cell = CELL_O + CELL_X - next_cell
        k += 1
        game_end = detect_game_end_nb(cells)

    return game_end


def simulate_nb(state, rng):
    """
    Random rollout from `state` to the end of the game.

    The rollout runs on a scratch copy of the cells; `state` itself is left
    as it is. A finished game returns its existing outcome immediately.

    Args:
        state: Board to roll out from
        rng: RandomSource supplying the move choices

    Returns:
        GameEnd: Terminal outcome (DRAW, O_WIN or X_WIN)
    """
    if state.game_end != GameEnd.NONE:
        return state.game_end

    tmp = state.cells.copy()
    uniforms = rng.uniforms(9)
    return GameEnd(_simulate_nb_core(tmp, int(cell_for(state.next_turn)), uniforms))
