from tictactoe_mcts.envs.tictactoe import GameEnd, Player


def _win_for(player):
    return GameEnd.O_WIN if player == Player.O else GameEnd.X_WIN


class ExhaustiveSearch:
    """
    Full game-tree search.

    Every child is scored by its outcome under perfect play; the best moves
    are the winning ones, else the drawing ones, else all of them.
    Outcomes are memoised per position.
    """

    def __init__(self, game, args=None, rng=None):
        self.game = game
        self.args = args if args is not None else {}
        self.rng = rng
        self._outcomes = {}

    def get_outcome(self, state):
        """Outcome of `state` when both sides play perfectly."""
        if self.game.is_terminal(state):
            return self.game.get_game_end(state)

        key = self.game.state_to_key(state)
        if key not in self._outcomes:
            outcomes = [outcome for _, outcome in self.get_child_outcomes(state)]
            win = _win_for(state.next_turn)
            if win in outcomes:
                result = win
            elif GameEnd.DRAW in outcomes:
                result = GameEnd.DRAW
            else:
                result = outcomes[0]
            self._outcomes[key] = result
        return self._outcomes[key]

    def get_child_outcomes(self, state):
        """(action, outcome) for every legal move; `state` is restored afterwards."""
        results = []
        for action in self.game.get_valid_actions(state):
            self.game.get_next_state(state, action)
            results.append((action, self.get_outcome(state)))
            self.game.undo(state)
        return results

    def search(self, state):
        if self.game.is_terminal(state):
            return []

        working = self.game.clone_state(state)
        child_outcomes = self.get_child_outcomes(working)

        win = _win_for(state.next_turn)
        for wanted in (win, GameEnd.DRAW):
            actions = [action for action, outcome in child_outcomes if outcome == wanted]
            if actions:
                return actions
        return [action for action, _ in child_outcomes]
