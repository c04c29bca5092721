"""
Move selector capability shared by every search algorithm.
"""

from abc import ABC, abstractmethod


class MoveSelector(ABC):
    """
    Abstract base class for algorithms that pick a move for the player to
    move. The external driver owns the authoritative board: it asks for a
    move with ``select_move`` and reports every move actually played (by
    either side) through ``notify_move``.
    """

    def __init__(self, game, args=None):
        self.game = game
        self.args = {} if args is None else args

    @abstractmethod
    def select_move(self, state, x_turn):
        """
        Select a move for the current state.

        Args:
            state: Current board (not modified)
            x_turn: True if X is to move

        Returns:
            (row, col) of the chosen cell
        """

    def notify_move(self, action):
        """Hook for algorithms that keep state between moves."""
