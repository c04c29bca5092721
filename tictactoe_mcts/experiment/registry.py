"""
Registry for algorithms and environments.

This module provides a centralized registry for dynamically loading
move selectors and environments based on configuration strings.
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
        name: Algorithm name (e.g., 'MCTS', 'Minimax')

    Returns:
        Algorithm class

    Raises:
        ValueError: If algorithm name is not registered
    """
    _populate_registries()  # Lazy initialization
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

    Args:
        name: Environment name (e.g., 'TicTacToe', 'TicTacToe_with_symmetry')

    Returns:
        Environment class

    Raises:
        ValueError: If environment name is not registered
    """
    _populate_registries()  # Lazy initialization
    if name not in ENVIRONMENT_REGISTRY:
        available = ', '.join(ENVIRONMENT_REGISTRY.keys())
        raise ValueError(
            f"Unknown environment: {name}. "
            f"Available environments: {available}"
        )
    return ENVIRONMENT_REGISTRY[name]


def _populate_registries():
    """
    Populate registries with available algorithms and environments.
    Called lazily on first use to avoid circular imports.
    """
    if ALGORITHM_REGISTRY and ENVIRONMENT_REGISTRY:
        return  # Already populated

    from tictactoe_mcts.algos.minimax import Minimax
    from tictactoe_mcts.algos.random_player import RandomPlayer
    from tictactoe_mcts.algos.mcts.tree_search import MCTS, ParallelMCTS
    ALGORITHM_REGISTRY['Minimax'] = Minimax
    ALGORITHM_REGISTRY['MCTS'] = MCTS
    ALGORITHM_REGISTRY['ParallelMCTS'] = ParallelMCTS
    ALGORITHM_REGISTRY['Random'] = RandomPlayer

    from tictactoe_mcts.envs.tictactoe.tictactoe_env import TicTacToe
    from tictactoe_mcts.envs.tictactoe.tictactoe_symmetry_env import TicTacToe_with_symmetry
    ENVIRONMENT_REGISTRY['TicTacToe'] = TicTacToe
    ENVIRONMENT_REGISTRY['TicTacToe_with_symmetry'] = TicTacToe_with_symmetry


def list_algorithms():
    """List all registered algorithms."""
    _populate_registries()  # Lazy initialization
    return list(ALGORITHM_REGISTRY.keys())


def list_environments():
    """List all registered environments."""
    _populate_registries()  # Lazy initialization
    return list(ENVIRONMENT_REGISTRY.keys())
