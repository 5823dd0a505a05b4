"""Text rendering helpers for GridWorld.

This file is the ONLY place that knows how grids are drawn on a console.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .constants import ACTION_ARROWS

VALUE_TABLE_HEADER = "Value table:"


def render_text(size: int, agent_pos: tuple[int, int]) -> str:
    goal_pos = (size - 1, size - 1)
    lines = []
    for r in range(size):
        row = ""
        for c in range(size):
            if (r, c) == agent_pos:
                row += " A"
            elif (r, c) == goal_pos:
                row += " G"
            else:
                row += " ."
        lines.append(row)
    return "\n".join(lines)


def format_value_table(values: np.ndarray, precision: int = 4, header: str = VALUE_TABLE_HEADER) -> str:
    """One header line, then one row-major line of space-separated values per grid row."""
    grid = np.asarray(values, dtype=np.float64)
    if grid.ndim == 1:
        side = int(round(np.sqrt(grid.size)))
        grid = grid.reshape(side, side)
    lines = [header]
    for row in grid:
        lines.append(" ".join(f"{v:.{precision}f}" for v in row))
    return "\n".join(lines)


def format_policy(policy: Sequence[int], size: int) -> str:
    """Greedy action per cell as arrows; the goal cell is drawn as G."""
    terminal = size * size - 1
    lines = []
    for r in range(size):
        cells = []
        for c in range(size):
            s = r * size + c
            cells.append("G" if s == terminal else ACTION_ARROWS[int(policy[s])])
        lines.append(" ".join(cells))
    return "\n".join(lines)
