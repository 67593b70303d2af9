"""
Experiment runner for algorithm evaluation.

This module plays full games between two registered algorithms based on
configuration, and records the results.
"""

import time
from typing import Any, Dict

import pandas as pd
from tqdm import tqdm

from tictactoe_mcts.envs.tictactoe import Player
from tictactoe_mcts.experiment.registry import get_algorithm_class, get_environment_class


class ExperimentRunner:
    """
    Experiment runner that plays one game between two algorithms.

    On each turn the side to move first fills the board's suggestion slot,
    then plays a uniformly chosen move from it.

    Example:
        config = {
            'environment': 'TicTacToe',
            'player_o': 'MCTS',
            'player_x': 'Exhaustive',
            'num_searches': 20000,
            ...
        }
        runner = ExperimentRunner(config)
        game_end = runner.run()
    """

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize experiment runner.

        Args:
            config: Configuration dictionary containing:
                - environment: Environment name (e.g., 'TicTacToe')
                - player_o / player_x: Algorithm names (e.g., 'MCTS', 'Exhaustive', 'Random')
                - Other algorithm/environment specific parameters
        """
        self.config = config
        self.env = None
        self.players = None
        self.rng = None
        self.final_state = None

    def setup(self):
        """Set up the environment and both players based on configuration."""
        # Import utilities here to avoid circular imports
        from tictactoe_mcts.utils.seed import RandomSource, set_seeds, warmup_numba

        seed = self.config.get('random_seed')
        if seed is not None:
            set_seeds(seed)
        warmup_numba()
        self.rng = RandomSource(seed)

        env_class = get_environment_class(self.config.get('environment', 'TicTacToe'))
        self.env = env_class(args=self.config)

        self.players = {}
        for player, key in ((Player.O, 'player_o'), (Player.X, 'player_x')):
            algo_class = get_algorithm_class(self.config.get(key, 'MCTS'))
            self.players[player] = algo_class(
                self.env, args=self.config, rng=self.rng.spawn(int(player) + 1)
            )

    def generate_computer_moves(self, state):
        """Fill the suggestion slot for the side to move."""
        algorithm = self.players[state.next_turn]
        moves = self.env.set_best_moves(state, algorithm.search(state))

        if self.config.get('display_state', False):
            self.env.display_state(state, getattr(algorithm, 'last_action_probs', None))
        return moves

    def run(self):
        """
        Play the game to the end.

        Returns:
            GameEnd of the finished game
        """
        if self.env is None or self.players is None:
            self.setup()

        start = time.time()
        state = self.env.get_initial_state()
        verbose = self.config.get('logging_mode', True)

        while True:
            if self.config.get('display_state', False):
                print("---------------------------")
                print(f"Move {state.history_next_index}, {state.next_turn.name} to move")
                print(state)

            if self.env.is_terminal(state):
                end = time.time()
                if verbose:
                    print("*******************************************************************")
                    print(f"Game finished: {state.game_end.name} after {state.history_next_index} moves")
                    print(state)
                    print(f"Time: {end - start:.6f} sec")

                if self.config.get('record_results', True):
                    self.env.record_to_table(
                        game_end=state.game_end,
                        num_moves=state.history_next_index,
                        start_time=start,
                        end_time=end,
                        time_used=end - start
                    )
                break

            if not state.ai_best_moves:
                self.generate_computer_moves(state)
            state.play_computer_move(self.rng)

        self.final_state = state
        return state.game_end


def run_experiment(config: Dict[str, Any]):
    """
    Run a single game with the given configuration.

    This is a convenience function that creates and runs an ExperimentRunner.
    """
    runner = ExperimentRunner(config)
    return runner.run()


def run_match(config: Dict[str, Any], num_games: int) -> pd.DataFrame:
    """
    Play `num_games` games, seeding game i with random_seed + i.

    Returns:
        DataFrame with one row per game (game, random_seed, game_end, num_moves)
    """
    base_seed = config.get('random_seed', 0)
    rows = []
    games = range(num_games)
    if config.get('process_bar', False):
        games = tqdm(games, desc="Games")

    for game in games:
        game_config = {**config, 'random_seed': base_seed + game}
        runner = ExperimentRunner(game_config)
        game_end = runner.run()
        rows.append({
            'game': game,
            'random_seed': game_config['random_seed'],
            'game_end': game_end.name,
            'num_moves': runner.final_state.history_next_index,
        })

    results = pd.DataFrame(rows, columns=['game', 'random_seed', 'game_end', 'num_moves'])
    if config.get('logging_mode', True):
        print(results['game_end'].value_counts().to_string())
    return results


# Backward compatibility alias
evaluate = run_experiment
