"""
Experiment runner for AI-vs-AI games.

The runner is the automated stand-in for the interactive driver: it owns the
authoritative board and turn, asks the selector whose turn it is for a move,
applies that move itself, and tells both selectors what was played so that
tree-reusing algorithms can re-root.
"""

import argparse
import time
from collections import Counter
from typing import Dict, Any

from tqdm import trange

from tictactoe_mcts.envs.tictactoe.board import board_to_string
from tictactoe_mcts.experiment.config import get_base_config
from tictactoe_mcts.experiment.registry import get_algorithm_class, get_environment_class
from tictactoe_mcts.utils.seed import set_seeds, warmup_numba


class ExperimentRunner:
    """
    Plays one game between the configured players.

    Example:
        config = {
            'environment': 'TicTacToe_with_symmetry',
            'player_x': 'MCTS',
            'player_o': 'Minimax',
            'num_searches': 5000,
            'random_seed': 0,
        }
        runner = ExperimentRunner(config)
        game_result = runner.run()
    """

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize experiment runner.

        Args:
            config: Configuration dictionary containing:
                - environment: Environment name (e.g., 'TicTacToe')
                - player_x / player_o: Algorithm names (e.g., 'MCTS', 'Minimax')
                - player_x_args / player_o_args: Optional per-player overrides
                - Other algorithm/environment specific parameters
        """
        self.config = config
        self.env = None
        self.players = None
        self.history = []

    def _build_player(self, key):
        name = self.config.get(key, 'MCTS')
        args = {**self.config, **self.config.get(f'{key}_args', {}), 'algorithm': name}
        algo_class = get_algorithm_class(name)
        return algo_class(self.env, args=args)

    def setup(self):
        """Set up the environment and both players based on configuration."""
        if 'random_seed' in self.config:
            set_seeds(self.config['random_seed'])
        # Compile kernels; draws no random numbers
        warmup_numba()

        env_class = get_environment_class(self.config.get('environment', 'TicTacToe_with_symmetry'))
        self.env = env_class(args=self.config)

        # Keyed by x_turn
        self.players = {
            True: self._build_player('player_x'),
            False: self._build_player('player_o'),
        }

    def run(self):
        """
        Run the game to completion.

        Returns:
            GameResult of the final board
        """
        if self.env is None or self.players is None:
            self.setup()

        display = self.config.get('display_state', False)
        start = time.time()
        state = self.env.get_initial_state()
        x_turn = True
        self.history = []

        while not self.env.is_terminal(state):
            player = self.players[x_turn]
            action = player.select_move(state.copy(), x_turn)

            if display:
                print("---------------------------")
                print(f"{'X' if x_turn else 'O'} plays {action}")
                self.env.display_state(state, getattr(player, 'last_action_probs', None),
                                       player.args.get('algorithm'))

            state = self.env.get_next_state(state, action, x_turn)
            self.history.append(action)
            for p in self.players.values():
                p.notify_move(action)
            x_turn = not x_turn

            if display:
                print(board_to_string(state))

        game_result = self.env.get_result(state)
        end = time.time()

        if self.config.get('logging_mode', False):
            print("*******************************************************************")
            print(f"Game over after {len(self.history)} moves: {game_result.name}")
            print(board_to_string(state))
            print(f"Time: {end - start:.6f} sec")

        if self.config.get('table_dir'):
            self.env.record_to_table(
                game_result=game_result,
                num_moves=len(self.history),
                start_time=start,
                end_time=end,
                time_used=end - start
            )

        return game_result


def run_experiment(config: Dict[str, Any]):
    """
    Run a single game with the given configuration.

    This is a convenience function that creates and runs an ExperimentRunner.
    """
    runner = ExperimentRunner(config)
    return runner.run()


# Backward compatibility alias
evaluate = run_experiment


def run_match(config: Dict[str, Any], num_games: int) -> Counter:
    """
    Play num_games games and tally results by GameResult name.
    Game i is seeded with random_seed + i when a seed is configured.
    """
    tally = Counter()
    games = trange(num_games) if config.get('process_bar', False) else range(num_games)
    for i in games:
        game_config = dict(config)
        if 'random_seed' in config:
            game_config['random_seed'] = config['random_seed'] + i
        tally[run_experiment(game_config).name] += 1
    return tally


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play tic-tac-toe matches between search algorithms.")
    parser.add_argument('--player-x', default='MCTS', help="Algorithm playing X")
    parser.add_argument('--player-o', default='Minimax', help="Algorithm playing O")
    parser.add_argument('--games', type=int, default=1, help="Number of games to play")
    parser.add_argument('--num-searches', type=int, default=100000, help="MCTS trials per move")
    parser.add_argument('--C', type=float, default=2.0, help="MCTS exploration constant")
    parser.add_argument('--simulation-policy', choices=['biased', 'random'], default='biased')
    parser.add_argument('--no-reuse-tree', action='store_true', help="Rebuild the MCTS tree every move")
    parser.add_argument('--num-workers', type=int, default=4, help="Threads for ParallelMCTS")
    parser.add_argument('--environment', default='TicTacToe_with_symmetry')
    parser.add_argument('--anti', action='store_true', help="Play anti tic-tac-toe")
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--table-dir', default=None, help="Append results to a CSV table here")
    parser.add_argument('--figure-dir', default=None)
    parser.add_argument('--display-state', action='store_true')
    parser.add_argument('--process-bar', action='store_true')
    args = parser.parse_args(argv)

    config = get_base_config()
    config.update({
        'environment': args.environment,
        'player_x': args.player_x,
        'player_o': args.player_o,
        'num_searches': args.num_searches,
        'C': args.C,
        'simulation_policy': args.simulation_policy,
        'reuse_tree': not args.no_reuse_tree,
        'num_workers': args.num_workers,
        'anti': args.anti,
        'table_dir': args.table_dir,
        'figure_dir': args.figure_dir,
        'display_state': args.display_state,
        'process_bar': args.process_bar,
        'logging_mode': args.games == 1,
    })
    if args.seed is not None:
        config['random_seed'] = args.seed

    tally = run_match(config, args.games)
    print(f"{args.player_x} (X) vs {args.player_o} (O) over {args.games} games:")
    for name in ('X_WINS', 'O_WINS', 'DRAW'):
        print(f"  {name}: {tally.get(name, 0)}")
    return tally


if __name__ == "__main__":
    main()
