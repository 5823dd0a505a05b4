"""Epsilon-greedy exploration with exponential decay."""

from __future__ import annotations

import numpy as np

from ..environment.constants import N_ACTIONS


class EpsilonGreedyPolicy:
    """
    With probability epsilon pick a uniformly random action, otherwise the
    table's greedy action. `decay()` multiplies epsilon by a fixed factor;
    there is no floor.
    """

    def __init__(self, table, rng: np.random.Generator, epsilon: float = 0.1, decay_factor: float = 0.99):
        self.table = table
        self.rng = rng
        self.epsilon = float(epsilon)
        self.initial_epsilon = float(epsilon)
        self.decay_factor = float(decay_factor)
        self.decay_count = 0

    def choose_action(self, state: int) -> int:
        if self.rng.random() < self.epsilon:
            # Explore: random action
            return int(self.rng.integers(N_ACTIONS))
        # Exploit: greedy action from the table
        return self.table.best_action(state)

    def decay(self) -> float:
        """Decay the exploration rate; call once per finished episode."""
        self.epsilon *= self.decay_factor
        self.decay_count += 1
        return self.epsilon
