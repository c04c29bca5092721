"""
Visualization utilities for tic-tac-toe environments.
"""

import os
import datetime

import numpy as np
import matplotlib.pyplot as plt

from tictactoe_mcts.envs.tictactoe.board import X, O


def display_state(env, state, action_prob=None, algorithm=None):
    """
    Save the current board as a matplotlib figure and return the file path.
    Row 0 is drawn at the top. If action_prob is provided (9 values or a 3x3
    array of visit shares) it is overlaid as a heatmap with the best cells
    annotated in gold. algorithm names the mover in the title and file name;
    it falls back to args["algorithm"].
    """
    rows, cols = env.row_count, env.column_count

    # Create date-time folder once per instance
    if not hasattr(env, '_display_folder'):
        timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
        base_dir = env.args.get('figure_dir') or 'figures'
        env._display_folder = os.path.join(base_dir, f"{timestamp}_{env.session_name}")
        os.makedirs(env._display_folder, exist_ok=True)

    fig, ax = plt.subplots(figsize=(6, 6))

    if action_prob is not None:
        action_prob_2d = np.asarray(action_prob, dtype=np.float64).reshape((rows, cols))
        max_val = action_prob_2d.max()
        im = ax.imshow(
            action_prob_2d,
            cmap='Reds',
            alpha=0.6,
            extent=[-0.5, cols - 0.5, rows - 0.5, -0.5],
            vmin=0, vmax=max_val if max_val > 0 else 1e-5
        )
        fig.colorbar(im, ax=ax, label="Visit Share", shrink=0.8)

        for i in range(rows):
            for j in range(cols):
                val = action_prob_2d[i, j]
                if val <= 0:
                    continue
                is_max = val == max_val
                ax.text(
                    j, i + 0.35, f"{val:.2f}",
                    ha='center', va='center',
                    color='gold' if is_max else 'black',
                    weight='bold' if is_max else 'normal',
                    fontsize=10
                )

    # plot marks
    for i in range(rows):
        for j in range(cols):
            if state[i, j] == X:
                ax.text(j, i, 'X', ha='center', va='center', fontsize=48, color='tab:blue')
            elif state[i, j] == O:
                ax.text(j, i, 'O', ha='center', va='center', fontsize=48, color='tab:red')

    # draw grid lines
    for k in range(1, cols):
        ax.axvline(k - 0.5, color='gray', linewidth=2)
    for k in range(1, rows):
        ax.axhline(k - 0.5, color='gray', linewidth=2)
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_xlim(-0.5, cols - 0.5)
    ax.set_ylim(rows - 0.5, -0.5)
    ax.set_aspect('equal')

    num_marks = int(np.count_nonzero(state))
    if algorithm is None:
        algorithm = env.args.get('algorithm', 'Unknown')
    num_searches = env.args.get('num_searches', 'N/A')
    C = env.args.get('C', 'N/A')
    variant = 'Anti Tic-Tac-Toe' if env.anti else 'Tic-Tac-Toe'
    ax.set_title(
        f"{variant}, Marks: {num_marks}\nAlgorithm: {algorithm}, Searches: {num_searches}, C: {C}",
        fontsize=11
    )
    fig.tight_layout()

    timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    filename = f"tictactoe_marks{num_marks}_{algorithm}_{timestamp}.png"
    full_path = os.path.join(env._display_folder, filename)

    try:
        fig.savefig(full_path, format='png', dpi=100, bbox_inches='tight')
        print(f"Plot saved as: {full_path}")
    finally:
        plt.close(fig)  # Close the figure to free memory
    return full_path
