"""Move-selection algorithms: MCTS, exhaustive search and a random baseline."""
from tictactoe_mcts.algos.mcts import MCTS, compute_best_moves
from tictactoe_mcts.algos.exhaustive import ExhaustiveSearch
from tictactoe_mcts.algos.random_play import RandomPlay

__all__ = ['MCTS', 'compute_best_moves', 'ExhaustiveSearch', 'RandomPlay']
