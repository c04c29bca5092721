import numpy as np
from numba import njit

from tictactoe_mcts.envs.tictactoe.board import (
    DRAW,
    EMPTY,
    IN_PROGRESS,
    O,
    X,
    GameResult,
    game_result_nb,
    legal_moves_nb,
    winning_or_blocking_move_nb,
)

SIMULATION_POLICIES = ('biased', 'random')


@njit(cache=True, nogil=True)
def _safe_random_move_nb(state, moves, mark):
    """
    Random move that does not complete a line for mark (the losing move in
    anti play). Falls back to any legal move when every move completes one.
    """
    n = moves.shape[0]
    safe = np.empty(n, np.int64)
    k = 0
    for idx in range(n):
        r = moves[idx, 0]
        c = moves[idx, 1]
        state[r, c] = mark
        code = game_result_nb(state, False)
        state[r, c] = EMPTY
        if code == IN_PROGRESS or code == DRAW:
            safe[k] = idx
            k += 1
    if k > 0:
        pick = safe[np.random.randint(0, k)]
    else:
        pick = np.random.randint(0, n)
    return moves[pick, 0], moves[pick, 1]


@njit(cache=True, nogil=True)
def _simulate_nb_core(state, x_turn, anti, biased):
    """
    Play moves on state until the game ends and return the result code.

    With biased=True, normal play takes a winning or blocking move whenever
    one exists and anti play avoids completing its own line; otherwise moves
    are uniform over the empty cells.

    Note: This function uses numba's random number generator, seeded through
    utils.seed.set_seeds.
    """
    turn = x_turn
    code = game_result_nb(state, anti)
    while code == IN_PROGRESS:
        moves = legal_moves_nb(state)
        mark = X if turn else O
        r = -1
        c = -1
        if biased and not anti:
            r, c = winning_or_blocking_move_nb(state, turn)
        if r == -1:
            if biased and anti:
                r, c = _safe_random_move_nb(state, moves, mark)
            else:
                k = np.random.randint(0, moves.shape[0])
                r = moves[k, 0]
                c = moves[k, 1]
        state[r, c] = mark
        turn = not turn
        code = game_result_nb(state, anti)
    return code


def simulate_nb(state, x_turn, anti=False, policy='biased'):
    """
    Wrapper for a rollout from state with x_turn to move.

    Args:
        state: Board to play out (will be modified, pass a copy)
        x_turn: True if X moves first in the rollout
        anti: Anti variant scoring
        policy: 'biased' or 'random'

    Returns:
        GameResult: Terminal result of the rollout
    """
    if policy not in SIMULATION_POLICIES:
        raise ValueError(
            f"Unknown simulation policy: {policy}. "
            f"Available policies: {', '.join(SIMULATION_POLICIES)}"
        )
    return GameResult(int(_simulate_nb_core(state, x_turn, anti, policy == 'biased')))
