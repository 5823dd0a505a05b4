"""
Utility functions for plotting training results.
"""

from __future__ import annotations

from typing import List

import numpy as np
import matplotlib.pyplot as plt


def plot_training_stats(
    values: np.ndarray,
    lengths: List[int],
    window: int = 10,
    save_path: str | None = None,
):
    """
    Plot the learned value grid and episode lengths with a moving average.

    Args:
        values: Value grid (size x size).
        lengths: Steps per episode.
        window: Window size for moving average.
        save_path: Optional path to save the plot.
    """
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    # Value heatmap
    ax = axes[0]
    grid = np.asarray(values, dtype=np.float64)
    im = ax.imshow(grid, cmap="viridis", origin="upper")
    size = grid.shape[0]
    if size <= 10:
        for r in range(size):
            for c in range(size):
                ax.text(c, r, f"{grid[r, c]:.2f}", ha="center", va="center", color="white", fontsize=8)
    ax.set_title("Learned Values")
    ax.set_xlabel("Column")
    ax.set_ylabel("Row")
    fig.colorbar(im, ax=ax)

    # Episode lengths
    ax = axes[1]
    ax.plot(lengths, alpha=0.3, color="green", label="Episode Length")
    if len(lengths) >= window:
        moving_avg = np.convolve(lengths, np.ones(window) / window, mode="valid")
        ax.plot(
            range(window - 1, len(lengths)),
            moving_avg,
            color="red",
            label=f"Moving Avg ({window})",
        )
    ax.set_xlabel("Episode")
    ax.set_ylabel("Steps")
    ax.set_title("Episode Lengths")
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150)
        print(f"Plot saved to {save_path}")
    else:
        plt.show()

    plt.close(fig)
