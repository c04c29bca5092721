"""
MCTS Package for Tic-Tac-Toe

Main Components:
- utils.py: Upper-confidence potential
- simulation.py: Rollout kernels (biased and uniform random)
- node.py: Node lifecycle (expansion, simulation, backpropagation, selection)
- tree_search.py: MCTS, ParallelMCTS and the tree entry points
"""

from tictactoe_mcts.algos.mcts.node import Node
from tictactoe_mcts.algos.mcts.simulation import simulate_nb
from tictactoe_mcts.algos.mcts.tree_search import (
    MCTS,
    ParallelMCTS,
    choose_move,
    mcts_choose_move,
    mcts_new_root,
    mcts_re_root,
    run_trials,
)

__all__ = [
    'Node',
    'simulate_nb',
    'MCTS',
    'ParallelMCTS',
    'choose_move',
    'mcts_choose_move',
    'mcts_new_root',
    'mcts_re_root',
    'run_trials',
]
