"""
Registry for algorithms and environments.

This module provides a centralized registry for dynamically loading
algorithms and environments based on configuration strings.
"""

from typing import Dict, Type


# Algorithm registry - maps algorithm names to their classes
ALGORITHM_REGISTRY: Dict[str, Type] = {}

# Environment registry - maps environment names to their classes
ENVIRONMENT_REGISTRY: Dict[str, Type] = {}


def get_algorithm_class(name: str) -> Type:
    """
    Get algorithm class by name.

    Args:
        name: Algorithm name (e.g., 'MCTS', 'Exhaustive', 'Random')

    Returns:
        Algorithm class

    Raises:
        ValueError: If algorithm name is not registered
    """
    _populate_registries()
    if name not in ALGORITHM_REGISTRY:
        available = ', '.join(ALGORITHM_REGISTRY.keys())
        raise ValueError(
            f"Unknown algorithm: {name}. "
            f"Available algorithms: {available}"
        )
    return ALGORITHM_REGISTRY[name]


def get_environment_class(name: str) -> Type:
    """
    Get environment class by name.

    Raises:
        ValueError: If environment name is not registered
    """
    _populate_registries()
    if name not in ENVIRONMENT_REGISTRY:
        available = ', '.join(ENVIRONMENT_REGISTRY.keys())
        raise ValueError(
            f"Unknown environment: {name}. "
            f"Available environments: {available}"
        )
    return ENVIRONMENT_REGISTRY[name]


def _populate_registries():
    """
    Populate registries with the built-in algorithms and environments.
    Called lazily on first use to avoid circular imports.
    """
    if ALGORITHM_REGISTRY or ENVIRONMENT_REGISTRY:
        return  # Already populated

    from tictactoe_mcts.algos.mcts.tree_search import MCTS
    from tictactoe_mcts.algos.exhaustive.tree_search import ExhaustiveSearch
    from tictactoe_mcts.algos.random_play import RandomPlay
    from tictactoe_mcts.envs.tictactoe.tictactoe_env import TicTacToe

    ALGORITHM_REGISTRY['MCTS'] = MCTS
    ALGORITHM_REGISTRY['Exhaustive'] = ExhaustiveSearch
    ALGORITHM_REGISTRY['Random'] = RandomPlay
    ENVIRONMENT_REGISTRY['TicTacToe'] = TicTacToe


def list_algorithms():
    """List all registered algorithms."""
    _populate_registries()
    return list(ALGORITHM_REGISTRY.keys())


def list_environments():
    """List all registered environments."""
    _populate_registries()
    return list(ENVIRONMENT_REGISTRY.keys())
