"""
Error types raised by the tic-tac-toe search engine.
"""


class TicTacToeError(Exception):
    """Base class for engine errors."""


class InvalidCoordinateError(TicTacToeError, ValueError):
    """A requested cell is outside the grid or already occupied."""

    def __init__(self, row, col, reason):
        self.row = row
        self.col = col
        self.reason = reason
        super().__init__(f"Invalid move ({row}, {col}): {reason}")


class TerminalBoardError(TicTacToeError, RuntimeError):
    """A search was requested on a board whose game is already over."""


class InvariantViolationError(TicTacToeError, AssertionError):
    """Internal state contradicts the rules (e.g. a live board with no moves)."""
