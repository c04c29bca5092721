"""
Tic-tac-toe environment with D4 symmetry support.

Children produced by one expansion are collapsed when they are equal up to
rotation or reflection, which shrinks the MCTS branching factor without
changing what the search can conclude.
"""

from tictactoe_mcts.envs.tictactoe.tictactoe_env import TicTacToe
from tictactoe_mcts.envs.tictactoe.symmetry import dedupe_equivalent


class TicTacToe_with_symmetry(TicTacToe):
    """
    TicTacToe enhanced with symmetry-based child filtering.
    The first generated child of each equivalence class is kept.
    """

    def filter_child_states_by_symmetry(self, children):
        kept = dedupe_equivalent([child_state for _, child_state in children])
        return [children[k] for k in kept]

    def get_child_states(self, state, x_turn):
        children = super().get_child_states(state, x_turn)
        return self.filter_child_states_by_symmetry(children)
