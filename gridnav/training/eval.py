"""Greedy evaluation.

Kept apart from training so it can run on any trained table without touching
it: no updates, no exploration, no randomness.
"""

from __future__ import annotations

from typing import List

import numpy as np

from ..environment.grid import GridModel


def greedy_path(table, model: GridModel, start: int, max_steps: int | None = None) -> List[int]:
    """States visited by following `best_action` from `start`.

    Stops at the goal or after `max_steps` moves (default 4 * n_states).
    """
    if max_steps is None:
        max_steps = 4 * model.n_states
    path = [int(start)]
    state = int(start)
    for _ in range(int(max_steps)):
        if model.is_terminal(state):
            break
        state = model.transition(state, table.best_action(state))
        path.append(state)
    return path


def evaluate(table, model: GridModel, max_steps: int | None = None) -> dict:
    """Greedy rollout from every non-goal state.

    Returns a dictionary so callers can print whatever they care about.
    """
    steps_list: list[int] = []
    n_starts = 0

    for start in range(model.n_states):
        if model.is_terminal(start):
            continue
        n_starts += 1
        path = greedy_path(table, model, start, max_steps)
        if model.is_terminal(path[-1]):
            steps_list.append(len(path) - 1)

    return {
        "success_rate": len(steps_list) / max(1, n_starts),
        "avg_steps": float(np.mean(steps_list)) if steps_list else 0.0,
        "min_steps": int(min(steps_list)) if steps_list else 0,
        "max_steps": int(max(steps_list)) if steps_list else 0,
        "n_starts": n_starts,
    }
