"""Deterministic grid model: state space, transitions and rewards.

States are integers in ``[0, size*size)`` encoding ``row * size + col``.
Moves off the edge are clamped, so every (state, action) pair has exactly one
successor. The goal is the bottom-right cell.
"""

from __future__ import annotations

from typing import Tuple

from .constants import ACTIONS, ACTION_DELTAS, GOAL_REWARD, STEP_REWARD


class GridModel:
    """Pure transition/reward model for a ``size x size`` grid."""

    def __init__(self, size: int = 5):
        self.size = int(size)
        if self.size <= 0:
            raise ValueError(f"grid size must be positive, got {size}")
        self.n_states = self.size * self.size
        self.terminal_state = self.n_states - 1

    def __repr__(self) -> str:
        return f"GridModel(size={self.size})"

    def to_coord(self, state: int) -> Tuple[int, int]:
        return divmod(int(state), self.size)

    def to_state(self, row: int, col: int) -> int:
        return int(row) * self.size + int(col)

    def is_valid_state(self, state: int) -> bool:
        return 0 <= int(state) < self.n_states

    def is_terminal(self, state: int) -> bool:
        return int(state) == self.terminal_state

    def transition(self, state: int, action: int) -> int:
        """Return the successor of ``state`` under ``action``.

        Each coordinate is clamped independently to ``[0, size-1]``.
        """
        row, col = self.to_coord(state)
        d_row, d_col = ACTION_DELTAS[int(action)]
        last = self.size - 1
        row = min(max(row + d_row, 0), last)
        col = min(max(col + d_col, 0), last)
        return row * self.size + col

    def reward(self, next_state: int) -> float:
        """1.0 for stepping into the goal, 0.0 anywhere else."""
        return GOAL_REWARD if int(next_state) == self.terminal_state else STEP_REWARD

    def neighbors(self, state: int) -> Tuple[int, ...]:
        """Successor states for each action, in action order."""
        return tuple(self.transition(state, a) for a in ACTIONS)

    def manhattan_to_goal(self, state: int) -> int:
        row, col = self.to_coord(state)
        last = self.size - 1
        return (last - row) + (last - col)
