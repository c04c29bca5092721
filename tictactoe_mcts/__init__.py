"""
Move-selection engine for tic-tac-toe and anti tic-tac-toe.

Two interchangeable strategies are provided: exhaustive minimax and Monte
Carlo Tree Search with symmetry-pruned expansion and tree reuse.

Usage:
    from tictactoe_mcts import new_board, minimax_best_move, mcts_new_root, mcts_choose_move

    board = new_board()
    row, col = minimax_best_move(board, x_turn=True)

    root = mcts_new_root(board, x_turn=True)
    row, col = mcts_choose_move(root, trial_budget=10000)
    root = mcts_re_root(root, (row, col))
"""

from tictactoe_mcts.envs.tictactoe.board import (
    Cell,
    GameResult,
    is_terminal,
    legal_moves,
    new_board,
    result,
    winning_or_blocking_move,
)
from tictactoe_mcts.envs.tictactoe.symmetry import boards_equivalent
from tictactoe_mcts.algos.minimax import best_move, minimax_best_move
from tictactoe_mcts.algos.mcts.tree_search import (
    choose_move,
    mcts_choose_move,
    mcts_new_root,
    mcts_re_root,
)
from tictactoe_mcts.exceptions import (
    InvalidCoordinateError,
    InvariantViolationError,
    TerminalBoardError,
    TicTacToeError,
)

__version__ = "0.1.0"

__all__ = [
    'Cell',
    'GameResult',
    'is_terminal',
    'legal_moves',
    'new_board',
    'result',
    'winning_or_blocking_move',
    'boards_equivalent',
    'best_move',
    'minimax_best_move',
    'choose_move',
    'mcts_choose_move',
    'mcts_new_root',
    'mcts_re_root',
    'InvalidCoordinateError',
    'InvariantViolationError',
    'TerminalBoardError',
    'TicTacToeError',
]
