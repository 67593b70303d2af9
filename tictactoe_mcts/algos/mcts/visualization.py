import os
import datetime
from pyvis.network import Network

from tictactoe_mcts.envs.tictactoe.board import Coordinate


def _get_node_label(node, C):
    """
    Generate a label for a node showing its statistics.
    """
    if node.action_taken is None:
        label = "root"
    else:
        coord = Coordinate.from_index(node.action_taken)
        label = f"({coord.row}, {coord.col})"
    label += f"\nVisits: {node.visit_count}\n"
    label += f"Value Sum: {node.value_sum:.1f}\n"
    label += f"Avg Value: {node.average_value():.3f}"

    if node.parent is not None and node.visit_count > 0 and node.parent.visit_count > 0:
        label += f"\nUCB: {node.parent.get_ucb(node, C):.3f}"

    return label


def _node_color(node):
    if node.parent is None:
        return "#9C27B0"  # Purple for the root
    if node.is_expanded():
        return "#2196F3"  # Blue for expanded
    if node.visit_count == 0:
        return "#9E9E9E"  # Grey for never visited
    return "#FF9800"  # Orange for leaves


def tree_visualization(mcts_instance, root, snapshot_name="MCTS Tree"):
    """
    Export the top of the search tree as an interactive HTML graph (pyvis).

    Only nodes down to args['tree_visualization_depth'] (default 2) are drawn;
    the file is written to args['web_viz_dir'] and recorded in
    mcts_instance.snapshots.
    """
    args = mcts_instance.args
    max_depth = args.get('tree_visualization_depth', 2)
    C = args['C']

    net = Network(height="700px", width="100%", bgcolor="#222222", font_color="white", directed=True)

    node_ids = {}
    stack = [(root, 0)]
    while stack:
        node, level = stack.pop()
        current_id = f"node_{len(node_ids)}"
        node_ids[id(node)] = current_id

        net.add_node(
            current_id,
            label=_get_node_label(node, C),
            level=level,
            color=_node_color(node),
            shape="box",
            title=f"Perspective: {node.perspective.name}\nChildren: {len(node.children)}",
        )
        if node.parent is not None:
            net.add_edge(node_ids[id(node.parent)], current_id)

        if level < max_depth:
            for child in reversed(node.children):
                stack.append((child, level + 1))

    net.set_options("""
    var options = {
        "layout": {
            "hierarchical": {
                "enabled": true,
                "direction": "UD",
                "sortMethod": "directed",
                "levelSeparation": 150,
                "nodeSpacing": 120
            }
        },
        "physics": {"enabled": false}
    }
    """)

    web_viz_dir = args.get('web_viz_dir') or './web_visualization'
    os.makedirs(web_viz_dir, exist_ok=True)
    timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    filename = os.path.join(web_viz_dir, f"mcts_tree_{len(mcts_instance.snapshots)}_{timestamp}.html")

    with open(filename, 'w', encoding='utf-8') as f:
        f.write(net.generate_html())

    print(f"Tree visualization: {len(node_ids)} nodes saved to {filename}")

    snapshot_data = {
        'name': snapshot_name,
        'filename': filename,
        'step_number': len(mcts_instance.snapshots),
        'total_nodes': len(node_ids),
        'root_visits': root.visit_count,
    }
    mcts_instance.snapshots.append(snapshot_data)
    return snapshot_data
