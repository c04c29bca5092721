import numpy as np
from tqdm import tqdm, trange
from concurrent.futures import ThreadPoolExecutor

from tictactoe_mcts.algos.base import MoveSelector
from tictactoe_mcts.algos.mcts.node import Node
from tictactoe_mcts.envs.tictactoe.board import validate_move
from tictactoe_mcts.envs.tictactoe.tictactoe_symmetry_env import TicTacToe_with_symmetry
from tictactoe_mcts.exceptions import TerminalBoardError
from tictactoe_mcts.utils.seed import set_seeds

DEFAULT_ARGS = {
    'num_searches': 100000,
    'C': 2.0,
    'simulation_policy': 'biased',
    'reuse_tree': True,
}


def mcts_new_root(board, x_turn, game=None, args=None):
    """Fresh search tree for board with x_turn to move."""
    args = dict(DEFAULT_ARGS) if args is None else args
    game = TicTacToe_with_symmetry(args) if game is None else game
    return Node(game, args, board, x_turn)


def mcts_re_root(root, move):
    """
    Tree for the position after move is played from root.

    If root already has a child for move, that child is promoted (its parent
    link is cut so the rest of the old tree can be released). Otherwise, e.g.
    when symmetry pruning kept an equivalent sibling instead, a fresh root
    is built.
    """
    if root.is_terminal:
        raise TerminalBoardError("No move can follow a finished game")
    move = (int(move[0]), int(move[1]))
    validate_move(root.state, *move)

    for child in root.children:
        if child.action_taken == move:
            child.parent = None
            return child

    state = root.game.get_next_state(root.state.copy(), move, root.x_turn)
    return Node(root.game, root.args, state, not root.x_turn)


def run_trials(root, num_trials, process_bar=False):
    search_iterator = trange(num_trials) if process_bar else range(num_trials)
    for _ in search_iterator:
        root.select_and_update()
    return root


def choose_move(root):
    """Move of the most-visited child; the first one wins ties."""
    if root.is_terminal:
        raise TerminalBoardError("Cannot choose a move on a finished game")
    if not root.children:
        raise ValueError("Root has not been searched yet; run some trials first")

    best_child = None
    most_trials = -1
    for child in root.children:
        if child.visit_count > most_trials:
            most_trials = child.visit_count
            best_child = child
    return best_child.action_taken


def mcts_choose_move(root, trial_budget):
    """Run trial_budget trials from root, then pick the most-visited move."""
    if root.is_terminal:
        raise TerminalBoardError("Cannot search a board whose game is already over")
    run_trials(root, trial_budget)
    return choose_move(root)


class MCTS(MoveSelector):
    """
    Monte Carlo Tree Search with tree reuse between moves.

    args:
        num_searches: trials per move
        C: exploration constant of the potential function
        simulation_policy: 'biased' or 'random' rollouts
        reuse_tree: re-root on played moves instead of rebuilding
        process_bar: show a tqdm bar while searching
    """

    def __init__(self, game, args=None):
        super().__init__(game, dict(DEFAULT_ARGS) if args is None else args)
        self.root = None
        self.last_action_probs = None

    def new_root(self, state, x_turn):
        self.root = Node(self.game, self.args, state, x_turn)
        return self.root

    def re_root(self, action):
        if self.root is None:
            return None
        self.root = mcts_re_root(self.root, action)
        return self.root

    def _run_trials(self, root, num_searches):
        run_trials(root, num_searches, self.args.get('process_bar', False))

    def search(self, state, x_turn):
        # Reuse the current tree only if it describes this exact position
        if (self.root is None or self.root.x_turn != x_turn
                or not np.array_equal(self.root.state, state)):
            self.new_root(state, x_turn)
        if self.root.is_terminal:
            raise TerminalBoardError("Cannot search a board whose game is already over")

        self._run_trials(self.root, self.args.get('num_searches', DEFAULT_ARGS['num_searches']))
        self.last_action_probs = self.get_action_probs(self.root)
        return self.last_action_probs

    def get_action_probs(self, root):
        """Share of root visits spent on each cell, as a board-shaped array."""
        action_probs = np.zeros((self.game.row_count, self.game.column_count))
        for child in root.children:
            action_probs[child.action_taken] = child.visit_count
        total = np.sum(action_probs)
        if total > 0:
            action_probs /= total
        return action_probs

    def choose_move(self):
        return choose_move(self.root)

    def select_move(self, state, x_turn):
        self.search(state, x_turn)
        return self.choose_move()

    def notify_move(self, action):
        if self.root is None:
            return
        if self.args.get('reuse_tree', True) and not self.root.is_terminal:
            self.root = mcts_re_root(self.root, action)
        else:
            self.root = None


class ParallelMCTS(MCTS):
    """
    MCTS whose trials run concurrently on a thread pool. Expansion and every
    counter update take the node's lock; rollouts run in numba without the GIL.
    """

    def __init__(self, game, args=None):
        super().__init__(game, args)
        self.num_workers = self.args.get('num_workers', 4)

    def _run_trials(self, root, num_searches):
        sims_per_worker = num_searches // self.num_workers
        remainder = num_searches % self.num_workers

        def worker(n_sims, worker_id=0):
            # Set deterministic seed for this worker thread
            if 'random_seed' in self.args:
                set_seeds(self.args['random_seed'], worker_id)
            for _ in range(n_sims):
                root.select_and_update()
                if bar is not None:
                    bar.update(1)

        # One bar shared by all workers
        bar = tqdm(total=num_searches) if self.args.get('process_bar', False) else None
        try:
            with ThreadPoolExecutor(max_workers=self.num_workers) as pool:
                futures = [pool.submit(worker, sims_per_worker, worker_id)
                           for worker_id in range(self.num_workers)]
                if remainder:
                    futures.append(pool.submit(worker, remainder, self.num_workers))
                for fut in futures:
                    fut.result()
        finally:
            if bar is not None:
                bar.close()
