"""Unit tests for exhaustive minimax search."""
import os
import sys
import random
import numpy as np
import pytest

# Ensure the package is importable
ROOT = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
sys.path.append(ROOT)

from tictactoe_mcts.algos.minimax import Minimax, SearchResult, best_move, minimax_best_move
from tictactoe_mcts.envs.tictactoe.board import board_from_rows, new_board
from tictactoe_mcts.envs.tictactoe.tictactoe_env import TicTacToe
from tictactoe_mcts.exceptions import TerminalBoardError


class TestBestMove:
    """Tests for best_move and minimax_best_move."""

    def test_empty_board_is_a_draw(self):
        res = best_move(new_board(), True)
        assert res.value == 0
        assert res.row is not None and res.col is not None

    def test_takes_immediate_win(self):
        board = board_from_rows(["XX ", "OO ", "   "])
        assert best_move(board, True) == SearchResult(1, 0, 2)
        assert minimax_best_move(board, True) == (0, 2)

    def test_o_takes_immediate_win(self):
        board = board_from_rows(["XX ", "OO ", "X  "])
        assert best_move(board, False) == SearchResult(-1, 1, 2)

    def test_forced_block(self):
        board = board_from_rows(["XX ", " O ", "   "])
        assert best_move(board, False) == SearchResult(0, 0, 2)

    def test_board_not_modified(self):
        board = board_from_rows(["X  ", " O ", "   "])
        before = board.copy()
        best_move(board, True)
        assert np.array_equal(board, before)

    def test_terminal_board(self):
        board = board_from_rows(["XXX", "OO ", "   "])
        assert best_move(board, False) == SearchResult(1, None, None)
        with pytest.raises(TerminalBoardError):
            minimax_best_move(board, False)

    def test_full_board_draw_raises(self):
        with pytest.raises(TerminalBoardError):
            minimax_best_move(board_from_rows(["XOX", "XOO", "OXX"]), True)

    def test_anti_variant_changes_choice(self):
        """
        O to move with two empty cells: (2,2) forces X to complete the top
        row, (0,2) leads to a draw.
        """
        board = board_from_rows(["XX ", "OOX", "XO "])
        assert best_move(board, False) == SearchResult(0, 0, 2)
        assert best_move(board, False, anti=True) == SearchResult(-1, 2, 2)

    def test_anti_terminal_value(self):
        board = board_from_rows(["XXX", "OO ", "   "])
        assert best_move(board, False, anti=True).value == -1

    def test_ties_broken_among_optimal_moves(self):
        """Every corner reply to a center opening draws; the choice varies."""
        board = board_from_rows(["   ", " X ", "   "])
        random.seed(0)
        picks = {minimax_best_move(board, False) for _ in range(12)}
        assert picks <= {(0, 0), (0, 2), (2, 0), (2, 2)}
        assert len(picks) > 1


class TestMinimaxSelector:
    """Tests for the Minimax move selector."""

    def test_select_move_records_value(self):
        player = Minimax(TicTacToe())
        board = board_from_rows(["XX ", "OO ", "   "])
        assert player.select_move(board, True) == (0, 2)
        assert player.last_value == 1

    def test_select_move_anti(self):
        player = Minimax(TicTacToe({'anti': True}))
        board = board_from_rows(["XX ", "OOX", "XO "])
        assert player.select_move(board, False) == (2, 2)
        assert player.last_value == -1

    def test_select_move_on_terminal_raises(self):
        player = Minimax(TicTacToe())
        with pytest.raises(TerminalBoardError):
            player.select_move(board_from_rows(["XXX", "OO ", "   "]), False)
