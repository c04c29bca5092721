"""
Exhaustive minimax search.

The state space of 3x3 tic-tac-toe is small enough (at most 9! move
sequences) that every continuation is searched: no pruning and no
transposition table. Among equally valued moves the choice is uniform at
random, drawn from the ``random`` module.
"""

import random
from typing import NamedTuple, Optional

from tictactoe_mcts.algos.base import MoveSelector
from tictactoe_mcts.envs.tictactoe.board import (
    EMPTY,
    IN_PROGRESS,
    O,
    X,
    copy_board,
    game_result_nb,
    legal_moves,
    legal_moves_nb,
)
from tictactoe_mcts.exceptions import InvariantViolationError, TerminalBoardError


class SearchResult(NamedTuple):
    value: int             # +1 forced X win, -1 forced O win, 0 draw
    row: Optional[int]
    col: Optional[int]


def _minimax_value(board, x_turn, anti):
    """Game-theoretic value of board. Mutates board while searching but restores it."""
    code = game_result_nb(board, anti)
    if code != IN_PROGRESS:
        return int(code)

    mark = X if x_turn else O
    best = -2 if x_turn else 2
    for r, c in legal_moves_nb(board):
        board[r, c] = mark
        try:
            value = _minimax_value(board, not x_turn, anti)
        finally:
            board[r, c] = EMPTY
        if (x_turn and value > best) or (not x_turn and value < best):
            best = value
    return best


def best_move(board, x_turn, anti=False):
    """
    Search every legal continuation and return the value of the position
    together with a move achieving it. X maximizes, O minimizes.

    A terminal board returns its value with row and col set to None.
    The caller's board is left unchanged.
    """
    work = copy_board(board)
    code = game_result_nb(work, anti)
    if code != IN_PROGRESS:
        return SearchResult(int(code), None, None)

    mark = X if x_turn else O
    best_value = None
    ties = []
    for r, c in legal_moves(work):
        work[r, c] = mark
        try:
            value = _minimax_value(work, not x_turn, anti)
        finally:
            work[r, c] = EMPTY

        if best_value is None or (x_turn and value > best_value) or (not x_turn and value < best_value):
            best_value = value
            ties = [(r, c)]
        elif value == best_value:
            ties.append((r, c))

    if not ties:
        raise InvariantViolationError("Board is not terminal but has no legal moves")

    row, col = random.choice(ties)
    return SearchResult(best_value, row, col)


def minimax_best_move(board, x_turn, anti=False):
    """Optimal (row, col) for the player to move. Fails on finished games."""
    res = best_move(board, x_turn, anti)
    if res.row is None:
        raise TerminalBoardError("Cannot search a board whose game is already over")
    return res.row, res.col


class Minimax(MoveSelector):
    """Full-depth search; has no iteration budget and keeps no state between moves."""

    def __init__(self, game, args=None):
        super().__init__(game, args)
        self.last_value = None

    def select_move(self, state, x_turn):
        res = best_move(state, x_turn, self.game.anti)
        if res.row is None:
            raise TerminalBoardError("Cannot search a board whose game is already over")
        self.last_value = res.value
        return res.row, res.col
