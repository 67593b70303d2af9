class RandomPlay:
    """Baseline player: every empty cell is an equally good move."""

    def __init__(self, game, args=None, rng=None):
        self.game = game
        self.args = args if args is not None else {}
        self.rng = rng

    def search(self, state):
        return self.game.get_valid_actions(state)
