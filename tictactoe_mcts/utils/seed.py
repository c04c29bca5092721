"""Random seed management and numba warmup for reproducibility."""
import numpy as np
import random
from numba import config, njit

# Set threading layer once at module import (not per-call)
config.THREADING_LAYER = 'safe'


@njit(cache=True)
def _seed_numba(seed):
    # numba keeps its own generator; it can only be seeded from jitted code
    np.random.seed(seed)


def set_seeds(seed: int, worker_id: int = 0) -> int:
    """
    Set random seeds for Python, NumPy and numba.

    Args:
        seed: Base random seed
        worker_id: Worker ID for deterministic per-worker seeding (default 0)

    Returns:
        effective_seed: The actual seed used (seed + worker_id * 10000)
    """
    effective_seed = seed + worker_id * 10000
    np.random.seed(effective_seed)
    random.seed(effective_seed)
    _seed_numba(effective_seed)
    return effective_seed


def warmup_numba():
    """
    Compile the board, symmetry and rollout kernels.
    Uses a finished board so no random numbers are consumed.
    """
    # Import here to avoid circular dependencies
    from tictactoe_mcts.envs.tictactoe.board import (
        board_from_rows, game_result_nb, legal_moves_nb, winning_or_blocking_move_nb,
    )
    from tictactoe_mcts.envs.tictactoe.symmetry import boards_equivalent_nb, transform_board_nb
    from tictactoe_mcts.algos.mcts.simulation import simulate_nb

    dummy_state = board_from_rows(["XOX", "XOO", "OXX"])
    game_result_nb(dummy_state, False)
    legal_moves_nb(dummy_state)
    winning_or_blocking_move_nb(dummy_state, True)
    boards_equivalent_nb(dummy_state, transform_board_nb(dummy_state, 1))
    simulate_nb(dummy_state.copy(), True)
