"""
Environments Package

Currently includes tic-tac-toe and its anti variant (``args['anti']``).
"""

from tictactoe_mcts.envs.tictactoe import TicTacToe, TicTacToe_with_symmetry

__all__ = [
    'TicTacToe',
    'TicTacToe_with_symmetry',
]
