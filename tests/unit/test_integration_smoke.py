"""Smoke tests for the experiment layer: registry, full games and result recording."""
import os
import sys
import numpy as np
import pandas as pd
import pytest

# Ensure the package is importable
ROOT = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
sys.path.append(ROOT)

from tictactoe_mcts.experiment import (
    ExperimentRunner,
    evaluate,
    get_algorithm_class,
    get_environment_class,
    get_mcts_config,
    list_algorithms,
    list_environments,
    run_experiment,
    run_match,
)
from tictactoe_mcts.algos import MCTS, ExhaustiveSearch
from tictactoe_mcts.envs import Board, Coordinate, GameEnd, TicTacToe
from tictactoe_mcts.utils import RandomSource, set_seeds


def small_config(tmp_path, opponent='Random', num_searches=2000, **extra):
    config = get_mcts_config(num_searches=num_searches, random_seed=0, opponent=opponent)
    config.update({
        'logging_mode': False,
        'table_dir': str(tmp_path / 'results'),
        'figure_dir': str(tmp_path / 'figures'),
        'web_viz_dir': str(tmp_path / 'web'),
    })
    config.update(extra)
    return config


class TestRegistry:
    """Tests for algorithm/environment lookup."""

    def test_builtins_listed(self):
        assert {'MCTS', 'Exhaustive', 'Random'} <= set(list_algorithms())
        assert 'TicTacToe' in list_environments()

    def test_lookup(self):
        assert get_algorithm_class('MCTS') is MCTS
        assert get_algorithm_class('Exhaustive') is ExhaustiveSearch
        assert get_environment_class('TicTacToe') is TicTacToe

    def test_builtins_are_the_whole_registry(self):
        assert list_algorithms() == ['MCTS', 'Exhaustive', 'Random']
        assert list_environments() == ['TicTacToe']

    def test_unknown_names_rejected(self):
        with pytest.raises(ValueError):
            get_algorithm_class('AlphaZero')
        with pytest.raises(ValueError):
            get_environment_class('Chess')


class TestExperimentRunner:
    """Full games between registered players."""

    def test_mcts_vs_random_records_results(self, tmp_path):
        config = small_config(tmp_path)
        game_end = run_experiment(config)

        assert game_end in (GameEnd.DRAW, GameEnd.O_WIN, GameEnd.X_WIN)
        csv_file = tmp_path / 'results' / 'experiment_results.csv'
        assert csv_file.exists()

        run_experiment(config)
        table = pd.read_csv(csv_file)
        assert len(table) == 2
        assert {'game_end', 'num_moves', 'time_used', 'num_searches'} <= set(table.columns)

    def test_new_columns_widen_table(self, tmp_path):
        run_experiment(small_config(tmp_path))
        run_experiment(small_config(tmp_path, note='second'))

        table = pd.read_csv(tmp_path / 'results' / 'experiment_results.csv')
        assert len(table) == 2
        assert 'note' in table.columns

    def test_mcts_never_beats_exhaustive(self, tmp_path):
        runner = ExperimentRunner(small_config(tmp_path, opponent='Exhaustive', record_results=False))
        game_end = runner.run()

        assert game_end in (GameEnd.DRAW, GameEnd.X_WIN)
        assert runner.final_state.is_over()

    def test_exhaustive_self_play_draws(self, tmp_path):
        config = small_config(tmp_path, player_o='Exhaustive', player_x='Exhaustive', record_results=False)

        assert run_experiment(config) == GameEnd.DRAW

    def test_generate_computer_moves_fills_slot(self, tmp_path):
        runner = ExperimentRunner(small_config(tmp_path, player_o='Exhaustive'))
        runner.setup()
        state = Board.from_string("OO./XX./...")
        moves = runner.generate_computer_moves(state)

        assert moves == [Coordinate(0, 2)]
        assert state.ai_best_moves == moves

    def test_evaluate_alias(self):
        assert evaluate is run_experiment

    def test_display_state_writes_png(self, tmp_path):
        config = small_config(tmp_path, num_searches=200, display_state=True, record_results=False)
        run_experiment(config)

        pngs = [f for _, _, files in os.walk(tmp_path / 'figures') for f in files if f.endswith('.png')]
        assert len(pngs) >= 5


class TestRunMatch:
    """Tests for multi-game matches."""

    def test_one_row_per_game(self, tmp_path):
        config = small_config(tmp_path, num_searches=500, record_results=False)
        results = run_match(config, num_games=3)

        assert isinstance(results, pd.DataFrame)
        assert len(results) == 3
        assert list(results['random_seed']) == [0, 1, 2]
        assert set(results['game_end']) <= {'DRAW', 'O_WIN', 'X_WIN'}
        assert all(5 <= n <= 9 for n in results['num_moves'])


class TestSeeding:
    """Tests for seed helpers."""

    def test_set_seeds_returns_effective_seed(self):
        assert set_seeds(3) == 3
        assert set_seeds(3, worker_id=2) == 20003

    def test_random_source_reproducible(self):
        a, b = RandomSource(5), RandomSource(5)

        assert [a.uniform_int(0, 9) for _ in range(20)] == [b.uniform_int(0, 9) for _ in range(20)]
        assert np.array_equal(a.uniforms(9), b.uniforms(9))

    def test_spawn_is_deterministic(self):
        assert RandomSource(1).spawn(2).seed == 20001

    def test_choice_on_empty_sequence(self):
        with pytest.raises(ValueError):
            RandomSource(0).choice([])

    def test_display_state_directly(self, tmp_path):
        env = TicTacToe(args={'figure_dir': str(tmp_path)})
        path = env.display_state(Board.from_string("OOO/XX./..."), np.full(9, 1 / 9))

        assert os.path.exists(path)
