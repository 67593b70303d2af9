"""Unit tests for the tic-tac-toe rules engine."""
import os
import sys
import numpy as np
import pytest

# Ensure the package is importable
ROOT = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
sys.path.append(ROOT)

from tictactoe_mcts.envs import Board, Cell, Coordinate, GameEnd, IllegalMoveError, Player
from tictactoe_mcts.utils import RandomSource

# O and X alternate; no line is ever completed
DRAW_SEQUENCE = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]


def play_all(board, moves):
    for r, c in moves:
        board.play_move(Coordinate(r, c))
    return board


class TestCoordinate:
    """Tests for Coordinate helpers."""

    def test_index_round_trip_corners(self):
        assert Coordinate(0, 0).index == 0
        assert Coordinate(2, 2).index == 8
        assert Coordinate.from_index(5) == Coordinate(1, 2)

    def test_is_valid(self):
        assert Coordinate(2, 0).is_valid()
        assert not Coordinate(3, 3).is_valid()


class TestBoardBasics:
    """Tests for move application and game end detection."""

    def test_initial_state(self):
        """New board is empty with O to move."""
        board = Board()

        assert board.cells.shape == (3, 3)
        assert board.cells.dtype == np.uint8
        assert np.sum(board.cells) == 0
        assert board.next_turn == Player.O
        assert board.game_end == GameEnd.NONE
        assert len(board.empty_cells()) == 9

    def test_play_move_alternates_players(self):
        board = Board()
        board.play_move(Coordinate(1, 1))
        board.play_move(Coordinate(0, 0))

        assert board.get_cell(Coordinate(1, 1)) == Cell.O
        assert board.get_cell(Coordinate(0, 0)) == Cell.X
        assert board.next_turn == Player.O
        assert board.history == [Coordinate(1, 1), Coordinate(0, 0)]
        assert board.history_next_index == 2

    def test_occupied_cell_rejected(self):
        board = Board()
        board.play_move(Coordinate(1, 1))

        with pytest.raises(IllegalMoveError):
            board.play_move(Coordinate(1, 1))
        assert board.next_turn == Player.X

    def test_off_board_rejected(self):
        with pytest.raises(IllegalMoveError):
            Board().play_move(Coordinate(3, 0))

    def test_row_win_detected(self):
        """O completing the top row ends the game."""
        board = play_all(Board(), [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])

        assert board.game_end == GameEnd.O_WIN
        assert board.is_over()
        assert board.win_cells == [Coordinate(0, 0), Coordinate(0, 1), Coordinate(0, 2)]

    def test_no_move_after_game_end(self):
        board = play_all(Board(), [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])

        with pytest.raises(IllegalMoveError):
            board.play_move(Coordinate(2, 2))

    def test_diagonal_win_for_x(self):
        board = play_all(Board(), [(0, 1), (0, 0), (0, 2), (1, 1), (1, 0), (2, 2)])

        assert board.game_end == GameEnd.X_WIN
        assert set(board.win_cells) == {Coordinate(0, 0), Coordinate(1, 1), Coordinate(2, 2)}

    def test_draw_detected(self):
        board = play_all(Board(), DRAW_SEQUENCE)

        assert board.game_end == GameEnd.DRAW
        assert board.win_cells == []
        assert board.empty_cells() == []


class TestUndoRedo:
    """Tests for history handling."""

    def test_undo_restores_position(self):
        board = play_all(Board(), [(0, 0), (1, 1)])
        board.undo()

        assert board.get_cell(Coordinate(1, 1)) == Cell.EMPTY
        assert board.next_turn == Player.X
        assert board.can_redo()

    def test_undo_clears_game_end(self):
        board = play_all(Board(), [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
        board.undo()

        assert board.game_end == GameEnd.NONE
        assert board.next_turn == Player.O

    def test_redo_replays_move(self):
        board = play_all(Board(), [(0, 0), (1, 1)])
        before = board.copy()
        board.undo()
        board.redo()

        assert board == before
        assert not board.can_redo()

    def test_new_move_discards_redo_tail(self):
        board = play_all(Board(), [(0, 0), (1, 1)])
        board.undo()
        board.play_move(Coordinate(2, 2))

        assert board.history == [Coordinate(0, 0), Coordinate(2, 2)]
        assert not board.can_redo()

    def test_undo_on_empty_board_raises(self):
        with pytest.raises(IllegalMoveError):
            Board().undo()


class TestSuggestionSlot:
    """The suggested moves are cleared whenever the position changes."""

    def test_cleared_by_move(self):
        board = Board()
        board.ai_best_moves = [Coordinate(1, 1)]
        board.play_move(Coordinate(0, 0))

        assert board.ai_best_moves == []

    def test_cleared_by_undo(self):
        board = play_all(Board(), [(0, 0)])
        board.ai_best_moves = [Coordinate(1, 1)]
        board.undo()

        assert board.ai_best_moves == []

    def test_play_computer_move_uses_slot(self):
        board = Board()
        board.ai_best_moves = [Coordinate(2, 0)]
        played = board.play_computer_move(RandomSource(0))

        assert played == Coordinate(2, 0)
        assert board.get_cell(Coordinate(2, 0)) == Cell.O

    def test_play_computer_move_without_suggestions(self):
        with pytest.raises(IllegalMoveError):
            Board().play_computer_move(RandomSource(0))


class TestSnapshots:
    """Tests for copy/restore/equality."""

    def test_copy_is_independent(self):
        board = play_all(Board(), [(0, 0)])
        clone = board.copy()
        clone.play_move(Coordinate(1, 1))

        assert board.get_cell(Coordinate(1, 1)) == Cell.EMPTY
        assert board.history == [Coordinate(0, 0)]
        assert board != clone

    def test_restore_in_place(self):
        snapshot = play_all(Board(), [(0, 0), (1, 1)])
        board = snapshot.copy()
        cells_id = id(board.cells)
        play_all(board, [(2, 2), (0, 2)])
        board.restore(snapshot)

        assert board == snapshot
        assert id(board.cells) == cells_id

    def test_equality_ignores_suggestions(self):
        board = Board()
        other = Board()
        other.ai_best_moves = [Coordinate(0, 0)]

        assert board == other


class TestFromString:
    """Tests for building positions from text."""

    def test_side_to_move(self):
        board = Board.from_string("OO./XX./...")

        assert board.next_turn == Player.O
        assert board.game_end == GameEnd.NONE
        assert board.history_next_index == 4
        assert str(board) == "OO.\nXX.\n..."

    def test_finished_position(self):
        board = Board.from_string("OXO OXX XOO")

        assert board.game_end == GameEnd.DRAW

    def test_history_can_be_undone(self):
        board = Board.from_string("O../.X./...")
        board.undo()
        board.undo()

        assert np.sum(board.cells) == 0
        assert board.next_turn == Player.O
        assert board.can_redo()
        board.redo()
        assert board.get_cell(Coordinate(0, 0)) == Cell.O

    def test_unreachable_counts_rejected(self):
        with pytest.raises(ValueError):
            Board.from_string("XX./.../...")

    def test_bad_shape_rejected(self):
        with pytest.raises(ValueError):
            Board.from_string("OO/XX")
