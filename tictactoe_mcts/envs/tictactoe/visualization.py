"""
Visualization utilities for tic-tac-toe environments.
"""

import matplotlib.pyplot as plt
import os
import datetime

from tictactoe_mcts.envs.tictactoe.board import Cell, GameEnd


def display_state(env, state, action_prob=None):
    """
    Save the board as a PNG, with the search's visit distribution overlaid.

    Pieces are drawn as 'O'/'X' glyphs, cells on a winning line in green.
    If action_prob is provided (1D array of length 9), it is drawn as a heat map
    and the most visited cells are annotated in gold.
    """
    rows, cols = env.row_count, env.column_count

    # Create date-time folder once per instance
    if not hasattr(env, '_display_folder'):
        timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
        base_dir = env.args.get('figure_dir') or 'figures'
        env._display_folder = os.path.join(base_dir, f"{timestamp}_{env.session_name}")
        os.makedirs(env._display_folder, exist_ok=True)

    plt.figure(figsize=(6, 6))
    ax = plt.gca()

    if action_prob is not None:
        assert action_prob.shape[0] == rows * cols, \
            f"Expected length {rows * cols}, got {len(action_prob)}"
        action_prob_2d = action_prob.reshape((rows, cols))
        im = ax.imshow(
            action_prob_2d,
            cmap='Reds',
            alpha=0.6,
            extent=[-0.5, cols - 0.5, rows - 0.5, -0.5],
            vmin=0, vmax=action_prob.max() if action_prob.max() > 0 else 1e-5
        )
        plt.colorbar(im, label="Visit Share", shrink=0.8)

        max_val = action_prob_2d.max()
        for i in range(rows):
            for j in range(cols):
                val = action_prob_2d[i, j]
                if state.cells[i, j] != Cell.EMPTY:
                    continue
                is_max = max_val > 0 and val == max_val
                ax.text(
                    j, i + 0.35, f"{val:.2f}",
                    ha='center', va='center',
                    color='gold' if is_max else 'black',
                    weight='bold' if is_max else 'normal',
                    fontsize=10
                )

    win_cells = set(state.win_cells)
    for i in range(rows):
        for j in range(cols):
            cell = Cell(state.cells[i, j])
            if cell == Cell.EMPTY:
                continue
            color = 'green' if (i, j) in win_cells else 'navy'
            ax.text(j, i, cell.name, ha='center', va='center', color=color, fontsize=48, weight='bold')

    # draw grid lines
    for k in range(1, rows):
        ax.axhline(k - 0.5, color='gray', linewidth=2)
    for k in range(1, cols):
        ax.axvline(k - 0.5, color='gray', linewidth=2)
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_xlim(-0.5, cols - 0.5)
    ax.set_ylim(rows - 0.5, -0.5)
    ax.set_aspect('equal')

    num_moves = state.history_next_index
    algorithm = env.args.get('algorithm', 'MCTS')
    num_searches = env.args.get('num_searches', 'N/A')
    C = env.args.get('C', 'N/A')
    status = "in play" if state.game_end == GameEnd.NONE else state.game_end.name
    title = (f"Tic-tac-toe, move {num_moves}, {state.next_turn.name} to move ({status})\n"
             f"Algorithm: {algorithm}, Searches: {num_searches}, C: {C}")
    plt.title(title, fontsize=11, pad=12)
    plt.tight_layout()

    timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    filename = f"tictactoe_move{num_moves}_{algorithm}_{timestamp}.png"
    full_path = os.path.join(env._display_folder, filename)

    try:
        plt.savefig(full_path, format='png', dpi=100, bbox_inches='tight')
        print(f"Plot saved as: {full_path}")
    except OSError as e:
        print(f"Error saving plot: {e}")
    finally:
        plt.close()  # Close the figure to free memory

    return full_path
