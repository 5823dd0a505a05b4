"""GridWorld environment: constants, pure model, gym wrapper and text rendering."""

from .constants import UP, DOWN, LEFT, RIGHT, ACTIONS, ACTION_DELTAS
from .grid import GridModel
from .gridworld_env import GridWorldEnv
from .rendering import format_policy, format_value_table, render_text

__all__ = [
    "UP", "DOWN", "LEFT", "RIGHT", "ACTIONS", "ACTION_DELTAS",
    "GridModel", "GridWorldEnv",
    "format_policy", "format_value_table", "render_text",
]
