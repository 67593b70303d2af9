import math

from tictactoe_mcts.algos.mcts.policies import random_child, select_child_with_highest_value
from tictactoe_mcts.envs.tictactoe.rewards import get_score


class Node:
    """
    One position in the search tree.

    `perspective` is the player to move at this node. `value_sum` accumulates
    outcomes scored for the parent's player, i.e. how good the move into this
    node was for whoever chose it. `parent` is a plain back-reference used for
    reading the parent's visits and for walking up during backpropagation;
    children are owned through the `children` list only.
    """

    __slots__ = ('parent', 'action_taken', 'perspective', 'children', 'visit_count', 'value_sum')

    def __init__(self, perspective, parent=None, action_taken=None):
        self.parent = parent
        self.action_taken = action_taken
        self.perspective = perspective

        self.children = []
        self.visit_count = 0
        self.value_sum = 0.0

    def is_expanded(self):
        return len(self.children) > 0

    def expand(self, actions):
        """Create one child per legal action, all at once."""
        child_perspective = self.perspective.other()
        self.children = [Node(child_perspective, self, action) for action in actions]
        return self.children

    def random_child(self, rng):
        return random_child(self, rng)

    def random_unvisited_child(self, rng):
        return random_child(self, rng, lambda child: child.visit_count == 0)

    def get_ucb(self, child, C, log_N=None):
        """UCT score of `child`; the child must have been visited."""
        if log_N is None:
            log_N = math.log(self.visit_count)
        q_value = child.value_sum / child.visit_count
        exploration_value = C * math.sqrt(log_N / child.visit_count)
        return q_value + exploration_value

    def select(self, rng, C):
        """Child with the highest UCT score, uniformly random among exact ties."""
        log_N = math.log(self.visit_count)
        return select_child_with_highest_value(
            self, lambda child: self.get_ucb(child, C, log_N), rng
        )

    def backpropagate(self, game_end):
        node = self
        while node is not None:
            node.visit_count += 1
            if node.parent is not None:
                node.value_sum += get_score(node.parent.perspective, game_end)
            node = node.parent

    def average_value(self):
        return self.value_sum / self.visit_count if self.visit_count > 0 else 0.0

    def iter_subtree(self):
        """Depth-first iteration over this node and all of its descendants."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def __repr__(self):
        return (f"Node(action={self.action_taken}, perspective={self.perspective.name}, "
                f"visits={self.visit_count}, value={self.value_sum:.1f}, children={len(self.children)})")
