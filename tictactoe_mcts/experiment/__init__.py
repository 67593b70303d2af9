"""
Experiment module for running games between algorithms.

Usage:
    from tictactoe_mcts.experiment import ExperimentRunner, get_mcts_config

    config = get_mcts_config(num_searches=20000, random_seed=1, opponent='Random')

    # Option 1: Use the runner class
    game_end = ExperimentRunner(config).run()

    # Option 2: Use the convenience functions
    game_end = run_experiment(config)
    results = run_match(config, num_games=10)
"""

from tictactoe_mcts.experiment.config import get_base_config, get_mcts_config
from tictactoe_mcts.experiment.runner import ExperimentRunner, evaluate, run_experiment, run_match
from tictactoe_mcts.experiment.registry import (
    ALGORITHM_REGISTRY,
    ENVIRONMENT_REGISTRY,
    get_algorithm_class,
    get_environment_class,
    list_algorithms,
    list_environments,
)

__all__ = [
    'get_base_config',
    'get_mcts_config',
    'ExperimentRunner',
    'run_experiment',
    'run_match',
    'evaluate',
    'get_algorithm_class',
    'get_environment_class',
    'list_algorithms',
    'list_environments',
    'ALGORITHM_REGISTRY',
    'ENVIRONMENT_REGISTRY',
]
