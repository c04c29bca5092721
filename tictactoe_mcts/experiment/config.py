"""
Configuration presets for tic-tac-toe experiments.

Configs are plain dicts shared by the environment and both players;
per-player overrides go under 'player_x_args' / 'player_o_args'.
"""


def get_base_config():
    """Get base configuration common to all experiments."""
    return {
        'process_bar': False,
        'display_state': False,
        'logging_mode': True,
        'table_dir': None,   # No CSV table unless set
        'figure_dir': None,  # Defaults to ./figures when display_state is on
        'anti': False,
    }


def get_mcts_config(num_searches=100000, random_seed=0):
    """
    Get MCTS-vs-MCTS configuration.

    Args:
        num_searches (int): Trials per move
        random_seed (int): Random seed for reproducibility

    Returns:
        dict: MCTS configuration parameters
    """
    config = get_base_config()
    config.update({
        'environment': 'TicTacToe_with_symmetry',
        'player_x': 'MCTS',
        'player_o': 'MCTS',
        'num_searches': num_searches,
        'C': 2.0,
        'simulation_policy': 'biased',
        'reuse_tree': True,
        'num_workers': 1,
        'random_seed': random_seed,
    })
    return config


def get_minimax_config(random_seed=0):
    """Get Minimax-vs-Minimax configuration."""
    config = get_base_config()
    config.update({
        'environment': 'TicTacToe',
        'player_x': 'Minimax',
        'player_o': 'Minimax',
        'random_seed': random_seed,
    })
    return config
