"""Random number sources, seed management and numba warmup for reproducibility."""
import numpy as np
import random
from numba import config

# Set threading layer once at module import (not per-call)
config.THREADING_LAYER = 'safe'


class RandomSource:
    """
    Explicit random number source handed to a search.

    Wraps a numpy Generator so that two searches built with the same seed
    make exactly the same choices, independent of the global RNG state.
    """

    def __init__(self, seed=None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def uniform_int(self, low: int, high: int) -> int:
        """Return an integer drawn uniformly from [low, high)."""
        if high <= low:
            raise ValueError(f"Empty sampling range [{low}, {high})")
        if high - low == 1:
            return low
        return int(self._rng.integers(low, high))

    def uniforms(self, size: int) -> np.ndarray:
        """Return `size` floats drawn uniformly from [0, 1)."""
        return self._rng.random(size)

    def choice(self, items):
        """Pick one element of a non-empty sequence uniformly."""
        return items[self.uniform_int(0, len(items))]

    def spawn(self, offset: int) -> 'RandomSource':
        """Derive an independent source, e.g. one per game of a match."""
        if self.seed is None:
            return RandomSource(int(self._rng.integers(0, 2**31 - 1)))
        return RandomSource(self.seed + offset * 10000)


def set_seeds(seed: int, worker_id: int = 0) -> int:
    """
    Set random seeds for Python and NumPy.

    Args:
        seed: Base random seed
        worker_id: Worker ID for deterministic per-worker seeding (default 0)

    Returns:
        effective_seed: The actual seed used (seed + worker_id * 10000)
    """
    effective_seed = seed + worker_id * 10000
    np.random.seed(effective_seed)
    random.seed(effective_seed)
    return effective_seed


def warmup_numba():
    """
    Trigger compilation of the numba kernels on a tiny position.
    Call once at process startup so the first search is not charged for JIT.
    """
    # Import here to avoid circular dependencies
    from tictactoe_mcts.envs.tictactoe.kernels import (
        detect_game_end_nb,
        get_empty_cells_nb,
        win_cells_mask_nb,
    )
    from tictactoe_mcts.algos.mcts.simulation import _simulate_nb_core

    dummy_cells = np.zeros((3, 3), dtype=np.uint8)
    detect_game_end_nb(dummy_cells)
    get_empty_cells_nb(dummy_cells)
    win_cells_mask_nb(dummy_cells)
    _ = _simulate_nb_core(dummy_cells.copy(), 1, np.zeros(9))
