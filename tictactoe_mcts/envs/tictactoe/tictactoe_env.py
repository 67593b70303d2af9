"""
Tic-tac-toe environment class.

This module exposes the board rules through the flat-action API that the
search algorithms use (actions are cell indices 0-8, row-major).
"""

import numpy as np
import datetime

from tictactoe_mcts.envs.tictactoe.board import Board, Coordinate, GameEnd
from tictactoe_mcts.envs.tictactoe.kernels import get_empty_cells_nb
from tictactoe_mcts.envs.tictactoe.rewards import get_score
from tictactoe_mcts.envs.tictactoe.visualization import display_state
from tictactoe_mcts.envs.tictactoe.logging import record_to_table


class TicTacToe:
    """
    Tic-tac-toe environment.
    Compatible with MCTS-based algorithms.
    """

    def __init__(self, args=None):
        self.row_count = 3
        self.column_count = 3
        self.action_size = self.row_count * self.column_count
        self.args = args if args is not None else {}

        # Create session name with timestamp
        timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
        self.session_name = f"{timestamp}_tictactoe"

    def state_to_key(self, state):
        """Convert state to a hashable key (cells plus side to move)."""
        return tuple(state.cells.flatten()) + (int(state.next_turn),)

    def get_initial_state(self):
        return Board()

    def get_next_state(self, state, action):
        """Apply `action` in place and return the same board."""
        state.play_move(Coordinate.from_index(action))
        return state

    def undo(self, state):
        state.undo()
        return state

    def is_terminal(self, state):
        return state.game_end != GameEnd.NONE

    def get_game_end(self, state):
        return state.game_end

    def get_valid_moves(self, state):
        """uint8 mask over the 9 cells; all zero once the game is over."""
        if state.game_end != GameEnd.NONE:
            return np.zeros(self.action_size, np.uint8)
        return get_empty_cells_nb(state.cells)

    def get_valid_actions(self, state):
        return [int(a) for a in np.flatnonzero(self.get_valid_moves(state))]

    def get_value_and_terminated(self, state, perspective):
        """
        Return the value of the position for `perspective` and whether it is terminal.
        Non-terminal positions are valued 0.0.
        """
        if state.game_end == GameEnd.NONE:
            return 0.0, False
        return get_score(perspective, state.game_end), True

    def set_best_moves(self, state, actions):
        """Store `actions` as coordinates in the board's suggestion slot."""
        state.ai_best_moves = [Coordinate.from_index(a) for a in actions]
        return list(state.ai_best_moves)

    def clone_state(self, state):
        return state.copy()

    def restore_state(self, state, snapshot):
        state.restore(snapshot)
        return state

    def display_state(self, state, action_prob=None):
        """Save the board configuration (and visit shares) using matplotlib."""
        return display_state(self, state, action_prob)

    def record_to_table(self, game_end, num_moves, start_time, end_time, time_used):
        """Record game results to a CSV table."""
        return record_to_table(self, game_end, num_moves, start_time, end_time, time_used)
