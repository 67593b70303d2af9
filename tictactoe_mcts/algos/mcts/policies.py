"""
Policies for picking children out of a search node.

The same highest-value helpers serve UCT selection during the search and
best-move extraction at the end of it; they differ only in the key and in
how ties are resolved.
"""

import numpy as np


def random_child(node, rng, predicate=None):
    """Uniformly random child satisfying `predicate`, or None if there is none."""
    candidates = node.children if predicate is None else [c for c in node.children if predicate(c)]
    if not candidates:
        return None
    return candidates[rng.uniform_int(0, len(candidates))]


def children_with_highest_value(node, key):
    """All children whose `key` equals the maximum, in child order."""
    best = []
    best_value = None
    for child in node.children:
        value = key(child)
        if best_value is None or value > best_value:
            best = [child]
            best_value = value
        elif value == best_value:
            best.append(child)
    return best


def select_child_with_highest_value(node, key, rng=None):
    """
    Child with the maximum `key`.

    Ties are broken uniformly at random when `rng` is given; without `rng`
    a tie yields None so the caller can decide what to do with it.
    """
    best = children_with_highest_value(node, key)
    if not best:
        return None
    if len(best) == 1:
        return best[0]
    if rng is None:
        return None
    return best[rng.uniform_int(0, len(best))]


def visit_count_key(node):
    return node.visit_count


def visit_then_score_key(node):
    # Lexicographic: visits first, accumulated score breaks equal visits
    return (node.visit_count, node.value_sum)


FINAL_TIE_BREAKS = {
    'none': visit_count_key,
    'score': visit_then_score_key,
}


def best_children(root, tie_break='none'):
    """
    Root children ranked best by visit count.

    With tie_break='none' every child sharing the maximum visit count is
    returned; 'score' narrows equal visit counts to the highest value_sum.
    """
    if tie_break not in FINAL_TIE_BREAKS:
        raise ValueError(
            f"Unknown tie break: {tie_break}. "
            f"Available: {', '.join(FINAL_TIE_BREAKS)}"
        )
    return children_with_highest_value(root, FINAL_TIE_BREAKS[tie_break])


def best_moves(root, tie_break='none'):
    """Actions of the best root children; empty if the root was never expanded."""
    return [child.action_taken for child in best_children(root, tie_break)]


def best_move(root, rng, tie_break='none'):
    """One best action, picked uniformly among the tied ones."""
    children = best_children(root, tie_break)
    if not children:
        return None
    return children[rng.uniform_int(0, len(children))].action_taken


def action_probs(root, action_size=9):
    """Visit-count distribution over actions at the root."""
    probs = np.zeros(action_size)
    for child in root.children:
        probs[child.action_taken] = child.visit_count
    total = np.sum(probs)
    if total > 0:
        probs /= total
    return probs
