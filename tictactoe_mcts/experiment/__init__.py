"""
Experiment module for running AI-vs-AI games.

Usage:
    from tictactoe_mcts.experiment import ExperimentRunner, run_experiment, run_match

    config = {
        'environment': 'TicTacToe_with_symmetry',
        'player_x': 'MCTS',
        'player_o': 'Minimax',
        'num_searches': 5000,
    }

    # Option 1: Use the runner class
    game_result = ExperimentRunner(config).run()

    # Option 2: Use the convenience functions
    game_result = run_experiment(config)
    tally = run_match(config, num_games=10)
"""

from tictactoe_mcts.experiment.runner import ExperimentRunner, run_experiment, run_match, evaluate
from tictactoe_mcts.experiment.config import get_base_config, get_mcts_config, get_minimax_config
from tictactoe_mcts.experiment.registry import (
    get_algorithm_class,
    get_environment_class,
    list_algorithms,
    list_environments,
    ALGORITHM_REGISTRY,
    ENVIRONMENT_REGISTRY
)

__all__ = [
    # Main experiment classes and functions
    'ExperimentRunner',
    'run_experiment',
    'run_match',
    'evaluate',

    # Config presets
    'get_base_config',
    'get_mcts_config',
    'get_minimax_config',

    # Registry functions
    'get_algorithm_class',
    'get_environment_class',
    'list_algorithms',
    'list_environments',
    'ALGORITHM_REGISTRY',
    'ENVIRONMENT_REGISTRY',
]
