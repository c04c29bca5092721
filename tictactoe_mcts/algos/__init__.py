from tictactoe_mcts.algos.base import MoveSelector
from tictactoe_mcts.algos.minimax import Minimax, SearchResult, best_move, minimax_best_move
from tictactoe_mcts.algos.random_player import RandomPlayer
from tictactoe_mcts.algos.mcts import MCTS, ParallelMCTS

__all__ = [
    'MoveSelector',
    'Minimax',
    'SearchResult',
    'best_move',
    'minimax_best_move',
    'RandomPlayer',
    'MCTS',
    'ParallelMCTS',
]
