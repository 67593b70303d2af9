import math
from tqdm import trange

from tictactoe_mcts.algos.mcts.node import Node
from tictactoe_mcts.algos.mcts.policies import action_probs, best_moves
from tictactoe_mcts.algos.mcts.simulation import simulate_nb
from tictactoe_mcts.envs.tictactoe import TicTacToe
from tictactoe_mcts.utils.seed import RandomSource


class SearchInvariantError(RuntimeError):
    """The tree and the rules engine disagree about the position."""


class MCTS:
    DEFAULT_ARGS = {
        'num_searches': 100_000,
        'C': math.sqrt(2),
        'final_tie_break': 'none',
        'strict': False,
        'process_bar': False,
        'tree_visualization': False,
    }

    def __init__(self, game, args=None, rng=None):
        self.game = game
        self.args = {**self.DEFAULT_ARGS, **(args or {})}
        if self.args['num_searches'] < 1:
            raise ValueError(f"num_searches must be positive, got {self.args['num_searches']}")
        self.rng = rng if rng is not None else RandomSource(self.args.get('random_seed'))
        self.snapshots = []  # Tree snapshots written by tree_visualization
        self.last_action_probs = None

    def _select(self, state, root):
        """
        Walk down from `root`, playing each chosen move on `state`, and return
        the node the next rollout should start from.
        """
        node = root
        C = self.args['C']

        while True:
            if self.game.is_terminal(state):
                return node

            if not node.is_expanded():
                actions = self.game.get_valid_actions(state)
                if not actions:
                    raise SearchInvariantError(
                        f"No legal moves in a position marked as running:\n{state}"
                    )
                node.expand(actions)
                # UCT needs visits, so a fresh subtree starts at random
                child = node.random_child(self.rng)
                self.game.get_next_state(state, child.action_taken)
                return child

            child = node.random_unvisited_child(self.rng)
            if child is not None:
                self.game.get_next_state(state, child.action_taken)
                return child

            node = node.select(self.rng, C)
            self.game.get_next_state(state, node.action_taken)

    def build_tree(self, state):
        """
        Run the full iteration budget from `state` and return the root.

        `state` is only read; selection and rollouts work on a copy that is
        restored from `state` after every iteration. Returns None for a
        finished game.
        """
        if self.game.is_terminal(state):
            return None

        root = Node(state.next_turn)
        working = self.game.clone_state(state)

        if self.args.get('process_bar', False):
            search_iterator = trange(self.args['num_searches'], desc="MCTS", leave=False)
        else:
            search_iterator = range(self.args['num_searches'])

        for _ in search_iterator:
            node = self._select(working, root)
            game_end = simulate_nb(working, self.rng)
            node.backpropagate(game_end)
            self.game.restore_state(working, state)

        return root

    def search(self, state):
        """
        Return the actions of the most visited root children.

        Ties are all returned. A finished game gives an empty list.
        """
        try:
            root = self.build_tree(state)
        except SearchInvariantError as e:
            if self.args.get('strict', False):
                raise
            print(f"Warning: search aborted: {e}")
            return []

        if root is None:
            self.last_action_probs = None
            return []

        self.last_action_probs = action_probs(root, self.game.action_size)

        if self.args.get('tree_visualization', False):
            # Import here to avoid loading pyvis unless it is used
            from tictactoe_mcts.algos.mcts.visualization import tree_visualization
            snapshot_name = f"Move {state.history_next_index}: {state.next_turn.name} to move"
            tree_visualization(self, root, snapshot_name)

        return best_moves(root, self.args['final_tie_break'])


def compute_best_moves(state, args=None, rng=None):
    """
    Search `state` and store the suggested moves in `state.ai_best_moves`.

    Returns the suggested coordinates. A finished game returns an empty list
    and leaves the slot as it is.
    """
    game = TicTacToe(args)
    if game.is_terminal(state):
        return []
    mcts = MCTS(game, args=args, rng=rng)
    return game.set_best_moves(state, mcts.search(state))
