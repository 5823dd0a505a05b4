"""Constants for the GridWorld navigation task."""

from __future__ import annotations

from typing import Dict, Tuple

# Actions
UP: int = 0
DOWN: int = 1
LEFT: int = 2
RIGHT: int = 3

# Scan order for argmax; ties go to the earliest entry.
ACTIONS: Tuple[int, ...] = (UP, DOWN, LEFT, RIGHT)
N_ACTIONS: int = len(ACTIONS)

# (d_row, d_col)
ACTION_DELTAS: Dict[int, Tuple[int, int]] = {
    UP: (-1, 0),
    DOWN: (1, 0),
    LEFT: (0, -1),
    RIGHT: (0, 1),
}

ACTION_NAMES: Dict[int, str] = {
    UP: "UP",
    DOWN: "DOWN",
    LEFT: "LEFT",
    RIGHT: "RIGHT",
}

ACTION_ARROWS: Dict[int, str] = {
    UP: "^",
    DOWN: "v",
    LEFT: "<",
    RIGHT: ">",
}

GOAL_REWARD: float = 1.0
STEP_REWARD: float = 0.0

METADATA = {
    "render_modes": ["ansi"],
    "render_fps": 10,
}
