"""
Tic-Tac-Toe Environment Package

Main Components:
- board.py: Board model, terminal detection and forced-move kernels
- symmetry.py: D4 symmetry group operations
- tictactoe_env.py: Base environment class
- tictactoe_symmetry_env.py: Environment with symmetry-deduplicated expansion
- visualization.py: Plotting functions
- logging.py: Result recording utilities
"""

from tictactoe_mcts.envs.tictactoe.board import (
    Cell,
    GameResult,
    board_from_rows,
    board_to_string,
    is_terminal,
    legal_moves,
    new_board,
    result,
    winning_or_blocking_move,
)
from tictactoe_mcts.envs.tictactoe.symmetry import boards_equivalent
from tictactoe_mcts.envs.tictactoe.tictactoe_env import TicTacToe
from tictactoe_mcts.envs.tictactoe.tictactoe_symmetry_env import TicTacToe_with_symmetry

__all__ = [
    'Cell',
    'GameResult',
    'board_from_rows',
    'board_to_string',
    'is_terminal',
    'legal_moves',
    'new_board',
    'result',
    'winning_or_blocking_move',
    'boards_equivalent',
    'TicTacToe',
    'TicTacToe_with_symmetry',
]
