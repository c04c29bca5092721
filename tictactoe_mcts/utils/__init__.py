"""Shared utilities for tictactoe_mcts."""
from .seed import set_seeds, warmup_numba

__all__ = ['set_seeds', 'warmup_numba']
