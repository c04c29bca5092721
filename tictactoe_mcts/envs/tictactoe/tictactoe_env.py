"""
Tic-tac-toe environment base class.

This module provides the game API consumed by the search algorithms:
initial state, move application, legal moves, terminal results and child
generation for tree expansion. The anti variant is selected with
``args['anti']``.
"""

import datetime

from tictactoe_mcts.envs.tictactoe.board import (
    BOARD_SIZE,
    is_terminal,
    legal_moves,
    new_board,
    place,
    result,
    winning_or_blocking_move,
)
from tictactoe_mcts.envs.tictactoe.visualization import display_state
from tictactoe_mcts.envs.tictactoe.logging import record_to_table


class TicTacToe:
    """
    Base tic-tac-toe environment.
    Compatible with MCTS-based algorithms and minimax.
    """

    def __init__(self, args=None):
        self.args = {} if args is None else args
        self.row_count = BOARD_SIZE
        self.column_count = BOARD_SIZE
        self.anti = bool(self.args.get('anti', False))

        # Create session name with timestamp and variant
        timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
        variant = 'anti' if self.anti else 'classic'
        self.session_name = f"{timestamp}_{variant}"

    def get_initial_state(self):
        return new_board()

    def get_next_state(self, state, action, x_turn):
        """Place the mover's mark at action = (row, col). Note the original state is modified."""
        row, col = action
        return place(state, row, col, x_turn)

    def get_valid_moves(self, state):
        return legal_moves(state)

    def get_result(self, state):
        return result(state, self.anti)

    def is_terminal(self, state):
        return is_terminal(state)

    def get_winning_or_blocking_move(self, state, x_turn):
        return winning_or_blocking_move(state, x_turn)

    def get_child_states(self, state, x_turn):
        """Every (action, child_state) pair reachable in one move, row-major."""
        children = []
        for action in self.get_valid_moves(state):
            child_state = self.get_next_state(state.copy(), action, x_turn)
            children.append((action, child_state))
        return children

    def display_state(self, state, action_prob=None, algorithm=None):
        """Save the board (and optional visit shares) as a matplotlib figure."""
        return display_state(self, state, action_prob, algorithm)

    def record_to_table(self, game_result, num_moves, start_time, end_time, time_used):
        """Record game results to a CSV table."""
        return record_to_table(self, game_result, num_moves, start_time, end_time, time_used)
