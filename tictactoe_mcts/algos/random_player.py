"""
Uniform random move selector.

Intended for baselines and smoke tests rather than competitive play.
"""

import random

from tictactoe_mcts.algos.base import MoveSelector
from tictactoe_mcts.exceptions import InvariantViolationError, TerminalBoardError


class RandomPlayer(MoveSelector):
    """Selects uniformly among the legal moves."""

    def select_move(self, state, x_turn):
        if self.game.is_terminal(state):
            raise TerminalBoardError("Cannot pick a move on a finished game")
        valid_moves = self.game.get_valid_moves(state)
        if not valid_moves:
            raise InvariantViolationError("Board is not terminal but has no legal moves")
        return random.choice(valid_moves)
