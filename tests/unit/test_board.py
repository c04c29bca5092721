"""Unit tests for the board model and terminal detection."""
import os
import sys
import numpy as np
import pytest

# Ensure the package is importable
ROOT = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
sys.path.append(ROOT)

from tictactoe_mcts.envs.tictactoe.board import (
    EMPTY,
    X,
    O,
    GameResult,
    board_from_rows,
    board_to_string,
    is_terminal,
    legal_moves,
    new_board,
    place,
    result,
    turn_from_board,
    validate_move,
    win_possible,
    winning_or_blocking_move,
)
from tictactoe_mcts.exceptions import InvalidCoordinateError


def _reachable_states():
    """Every board reachable by alternating legal play from the empty board."""
    seen = {}
    stack = [(new_board(), True)]
    while stack:
        board, x_turn = stack.pop()
        key = board.tobytes()
        if key in seen:
            continue
        seen[key] = board
        if is_terminal(board):
            continue
        for r, c in legal_moves(board):
            child = board.copy()
            child[r, c] = X if x_turn else O
            stack.append((child, not x_turn))
    return list(seen.values())


def _has_complete_line(board):
    lines = [board[i, :] for i in range(3)] + [board[:, j] for j in range(3)]
    lines += [np.diag(board), np.diag(np.fliplr(board))]
    return any(line[0] != EMPTY and np.all(line == line[0]) for line in lines)


class TestResult:
    """Tests for result() line scanning."""

    def test_empty_board_in_progress(self):
        assert result(new_board()) == GameResult.IN_PROGRESS
        assert not is_terminal(new_board())

    def test_row_win(self):
        board = board_from_rows(["XXX", "OO ", "   "])
        assert result(board) == GameResult.X_WINS
        assert is_terminal(board)

    def test_column_win(self):
        board = board_from_rows(["XO ", "XOX", " O "])
        assert result(board) == GameResult.O_WINS

    def test_main_diagonal_win(self):
        board = board_from_rows(["X O", " XO", "  X"])
        assert result(board) == GameResult.X_WINS

    def test_anti_diagonal_win(self):
        board = board_from_rows(["X O", "XO ", "O  "])
        assert result(board) == GameResult.O_WINS

    def test_full_board_without_line_is_draw(self):
        board = board_from_rows(["XOX", "XOO", "OXX"])
        assert result(board) == GameResult.DRAW
        assert is_terminal(board)

    def test_anti_variant_flips_winner(self):
        """Completing a line loses in anti tic-tac-toe."""
        board = board_from_rows(["XXX", "OO ", "   "])
        assert result(board, anti=True) == GameResult.O_WINS
        board = board_from_rows(["XO ", "XOX", " O "])
        assert result(board, anti=True) == GameResult.X_WINS

    def test_anti_variant_draw_unchanged(self):
        board = board_from_rows(["XOX", "XOO", "OXX"])
        assert result(board, anti=True) == GameResult.DRAW

    def test_malformed_board_returns_first_line(self):
        """Two complete lines: rows are scanned first, top to bottom."""
        board = board_from_rows(["XXX", "OOO", "   "])
        assert result(board) == GameResult.X_WINS

    def test_terminal_values_are_signed(self):
        assert int(GameResult.X_WINS) == 1
        assert int(GameResult.O_WINS) == -1
        assert int(GameResult.DRAW) == 0

    def test_result_over_all_reachable_states(self):
        """InProgress iff an empty cell remains and no line is complete."""
        states = _reachable_states()
        assert len(states) == 5478
        for board in states:
            res = result(board)
            assert res in (GameResult.X_WINS, GameResult.O_WINS,
                           GameResult.DRAW, GameResult.IN_PROGRESS)
            has_empty = bool(np.any(board == EMPTY))
            expected_in_progress = has_empty and not _has_complete_line(board)
            assert (res == GameResult.IN_PROGRESS) == expected_in_progress


class TestLegalMoves:
    """Tests for move generation and placement."""

    def test_empty_board_row_major(self):
        moves = legal_moves(new_board())
        assert len(moves) == 9
        assert moves[0] == (0, 0)
        assert moves[1] == (0, 1)
        assert moves[-1] == (2, 2)

    def test_occupied_cells_excluded(self):
        board = board_from_rows(["X  ", " O ", "   "])
        moves = legal_moves(board)
        assert (0, 0) not in moves
        assert (1, 1) not in moves
        assert len(moves) == 7
        assert moves == sorted(moves)

    def test_full_board_has_no_moves(self):
        assert legal_moves(board_from_rows(["XOX", "XOO", "OXX"])) == []

    def test_place_mutates_and_returns(self):
        board = new_board()
        out = place(board, 1, 2, True)
        assert out is board
        assert board[1, 2] == X
        place(board, 0, 0, False)
        assert board[0, 0] == O

    def test_place_occupied_raises(self):
        board = board_from_rows(["X  ", "   ", "   "])
        with pytest.raises(InvalidCoordinateError):
            place(board, 0, 0, False)

    @pytest.mark.parametrize("row,col", [(-1, 0), (3, 0), (0, 3), (5, 5)])
    def test_validate_out_of_grid(self, row, col):
        with pytest.raises(InvalidCoordinateError) as excinfo:
            validate_move(new_board(), row, col)
        assert excinfo.value.row == row
        assert excinfo.value.col == col

    def test_invalid_coordinate_is_value_error(self):
        with pytest.raises(ValueError):
            validate_move(new_board(), 9, 9)


class TestWinningOrBlockingMove:
    """Tests for forced-move detection."""

    def test_winning_completion(self):
        board = board_from_rows(["XX ", "OO ", "   "])
        assert winning_or_blocking_move(board, True) == (0, 2)

    def test_own_win_preferred_over_block(self):
        board = board_from_rows(["XX ", "OO ", "   "])
        assert winning_or_blocking_move(board, False) == (1, 2)

    def test_block_when_no_win(self):
        board = board_from_rows(["XX ", "O  ", "   "])
        assert winning_or_blocking_move(board, False) == (0, 2)

    def test_gap_in_line(self):
        board = board_from_rows(["X X", "O  ", "O  "])
        assert winning_or_blocking_move(board, True) == (0, 1)

    def test_none_when_nothing_forced(self):
        assert winning_or_blocking_move(new_board(), True) is None
        board = board_from_rows(["X  ", " O ", "   "])
        assert winning_or_blocking_move(board, True) is None

    def test_does_not_modify_board(self):
        board = board_from_rows(["XX ", "OO ", "   "])
        before = board.copy()
        winning_or_blocking_move(board, True)
        assert np.array_equal(board, before)


class TestHelpers:
    """Tests for parsing, rendering and turn helpers."""

    def test_board_from_rows_values(self):
        board = board_from_rows(["X.O", "-x ", "o  "])
        assert board.dtype == np.int8
        assert board[0, 0] == X
        assert board[0, 2] == O
        assert board[1, 1] == X
        assert board[2, 0] == O
        assert np.count_nonzero(board) == 4

    def test_board_from_rows_rejects_bad_input(self):
        with pytest.raises(ValueError):
            board_from_rows(["XQ ", "   ", "   "])
        with pytest.raises(ValueError):
            board_from_rows(["XX", "   ", "   "])

    def test_board_to_string(self):
        text = board_to_string(board_from_rows(["XO ", "   ", "  X"]))
        lines = text.split("\n")
        assert lines[0] == "   X|O| "
        assert lines[1] == "   -----"
        assert len(lines) == 5

    def test_turn_from_board(self):
        assert turn_from_board(new_board()) is True
        assert turn_from_board(board_from_rows(["X  ", "   ", "   "])) is False
        assert turn_from_board(board_from_rows(["X  ", " O ", "   "])) is True

    def test_win_possible(self):
        assert not win_possible(new_board())
        assert win_possible(board_from_rows(["XX ", "   ", "   "]))
        assert win_possible(board_from_rows(["XXX", "OO ", "   "]))
        assert not win_possible(board_from_rows(["XO ", "   ", "   "]))
