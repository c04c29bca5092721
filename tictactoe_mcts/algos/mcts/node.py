import math
import random
import threading

import numpy as np

from tictactoe_mcts.algos.mcts.simulation import simulate_nb
from tictactoe_mcts.algos.mcts.utils import child_potential
from tictactoe_mcts.envs.tictactoe.board import GameResult
from tictactoe_mcts.exceptions import InvariantViolationError


class Node:
    """
    One board state reached by one move from its parent.

    The node owns a copy of its board and its children; ``parent`` is only
    followed upwards during backpropagation. ``wins`` and ``losses`` are
    counted for the player to move at this node.

    Lifecycle: unexpanded (no children) -> expanded (all successors created
    at once, possibly deduplicated by symmetry). Terminal nodes are never
    expanded.
    """

    def __init__(self, game, args, state, x_turn, parent=None, action_taken=None):
        self.game = game
        self.args = args
        self.state = state.copy()
        self.x_turn = x_turn
        self.parent = parent
        self.action_taken = action_taken

        self.children = []
        self.is_expanded = False
        self.wins = 0
        self.losses = 0
        self.visit_count = 0
        self.lock = threading.Lock()

        self.is_terminal = game.is_terminal(self.state)

    def expand(self):
        """Materialize every successor; a no-op if another trial got here first."""
        with self.lock:
            if self.is_expanded:
                return self.children
            children = [
                Node(self.game, self.args, child_state, not self.x_turn, self, action)
                for action, child_state in self.game.get_child_states(self.state, self.x_turn)
            ]
            if not children:
                raise InvariantViolationError(
                    f"Non-terminal board has no successors:\n{self.state}"
                )
            self.children = children
            self.is_expanded = True
        return self.children

    def select(self):
        best_child = None
        best_ucb = -np.inf
        log_N = math.log(max(1, self.visit_count))

        for child in self.children:
            ucb = self.get_ucb(child, log_N)
            if ucb > best_ucb:
                best_child = child
                best_ucb = ucb

        return best_child

    def get_ucb(self, child, log_N=None):
        if log_N is None:
            log_N = math.log(max(1, self.visit_count))
        return child_potential(child.wins, child.losses, child.visit_count,
                               log_N, self.args.get('C', 2.0))

    def simulate(self):
        tmp = self.state.copy()
        return simulate_nb(tmp, self.x_turn, self.game.anti,
                           self.args.get('simulation_policy', 'biased'))

    def backpropagate(self, result):
        with self.lock:
            if (result == GameResult.X_WINS and self.x_turn) or \
                    (result == GameResult.O_WINS and not self.x_turn):
                self.wins += 1
            elif result != GameResult.DRAW:
                self.losses += 1
            self.visit_count += 1
        if self.parent is not None:
            self.parent.backpropagate(result)

    def select_and_update(self):
        """
        Run one trial from this node: descend through fully visited nodes by
        potential, then either score a terminal board or simulate from a
        random unvisited child, and backpropagate the outcome to the root.
        """
        node = self
        while True:
            if node.is_terminal:
                node.backpropagate(node.game.get_result(node.state))
                return

            if not node.is_expanded:
                node.expand()

            unexplored = [child for child in node.children if child.visit_count == 0]
            if unexplored:
                child = random.choice(unexplored)
                child.backpropagate(child.simulate())
                return

            node = node.select()
