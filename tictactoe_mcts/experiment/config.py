"""
Configuration presets for tic-tac-toe experiments.
"""

import math


def get_base_config():
    """Get base configuration common to all experiments."""
    return {
        'environment': 'TicTacToe',
        'process_bar': False,
        'display_state': False,
        'logging_mode': True,
        'record_results': True,
        'table_dir': None,  # Defaults to ./results
        'figure_dir': None,  # Defaults to ./figures
        'tree_visualization': False,
        'web_viz_dir': None,  # Defaults to ./web_visualization
    }


def get_mcts_config(num_searches=100_000, random_seed=0, opponent='Exhaustive'):
    """
    Get MCTS-specific configuration.

    Args:
        num_searches (int): Iteration budget per move
        random_seed (int): Random seed for reproducibility
        opponent (str): Registered algorithm playing X

    Returns:
        dict: MCTS configuration parameters
    """
    config = get_base_config()
    config.update({
        'algorithm': 'MCTS',
        'player_o': 'MCTS',
        'player_x': opponent,
        'num_searches': num_searches,
        'C': math.sqrt(2),
        'final_tie_break': 'none',
        'strict': False,
        'random_seed': random_seed,
    })
    return config
