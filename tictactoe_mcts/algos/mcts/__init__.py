"""
MCTS (Monte Carlo Tree Search) Package for tic-tac-toe

Main Components:
- node.py: Search tree node (expansion, UCT scoring, backpropagation)
- simulation.py: Random rollout kernel
- policies.py: Highest-value child selection and best-move extraction
- tree_search.py: Search driver (MCTS) and compute_best_moves entry point
- visualization.py: Tree export to interactive HTML

Usage:
    from tictactoe_mcts.algos.mcts import compute_best_moves
    from tictactoe_mcts.envs import Board

    board = Board()
    moves = compute_best_moves(board, args={'num_searches': 20000, 'random_seed': 0})
"""

from tictactoe_mcts.algos.mcts.node import Node
from tictactoe_mcts.algos.mcts.simulation import simulate_nb
from tictactoe_mcts.algos.mcts.policies import (
    action_probs,
    best_children,
    best_move,
    best_moves,
    children_with_highest_value,
    random_child,
    select_child_with_highest_value,
)
from tictactoe_mcts.algos.mcts.tree_search import MCTS, SearchInvariantError, compute_best_moves

__all__ = [
    'Node',
    'simulate_nb',
    'action_probs',
    'best_children',
    'best_move',
    'best_moves',
    'children_with_highest_value',
    'random_child',
    'select_child_with_highest_value',
    'MCTS',
    'SearchInvariantError',
    'compute_best_moves',
]
