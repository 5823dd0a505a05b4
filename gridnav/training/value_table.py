"""
Tabular Value Storage
=====================
Two tables sharing one interface (`best_action`, `max_next_value`, `update`).

StateValueTable (default) keeps ONE value per grid cell. The action only
decides which neighbouring cell is read; it is never part of the key:

    V(s) = V(s) + alpha * [reward + gamma * max_a V(T(s', a)) - V(s)]

where T is the grid transition and s' the observed next state. Note the
lookahead reads the neighbours of s', i.e. one step past s'.

StateActionValueTable is the textbook Q-learning table keyed by
(state, action):

    Q(s, a) = Q(s, a) + alpha * [reward + gamma * max(Q(s', a')) - Q(s, a)]
"""

from __future__ import annotations

import numpy as np

from ..environment.constants import ACTIONS, N_ACTIONS
from ..environment.grid import GridModel


class StateValueTable:
    """One scalar per state, zero-initialised."""

    def __init__(self, model: GridModel, alpha: float = 0.5, gamma: float = 0.9):
        self.model = model
        self.alpha = float(alpha)
        self.gamma = float(gamma)
        self.values = np.zeros(model.n_states, dtype=np.float64)
        # Successor of each state under each action, in action order.
        self._successors = [model.neighbors(s) for s in range(model.n_states)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.model.size}, alpha={self.alpha}, gamma={self.gamma})"

    def reset(self) -> None:
        self.values.fill(0.0)

    def value(self, state: int) -> float:
        return float(self.values[state])

    def _scan(self, state: int) -> tuple[int, float]:
        # Strict '>' keeps the first action that reaches the max.
        best_action = ACTIONS[0]
        best_value = self.values[self._successors[state][0]]
        for action in ACTIONS[1:]:
            v = self.values[self._successors[state][action]]
            if v > best_value:
                best_action = action
                best_value = v
        return best_action, float(best_value)

    def best_action(self, state: int) -> int:
        """Action whose successor cell holds the highest value (earliest wins ties)."""
        return self._scan(state)[0]

    def max_next_value(self, state: int) -> float:
        """Highest value among the cells reachable from ``state`` in one move."""
        return self._scan(state)[1]

    def update(self, state: int, action: int, reward: float, next_state: int) -> float:
        """Move V(state) toward the one-step target.

        ``action`` is accepted for interface parity only.

        Returns:
            The absolute change of the stored value.
        """
        current = self.values[state]
        target = reward + self.gamma * self.max_next_value(next_state)
        new = current + self.alpha * (target - current)
        self.values[state] = new
        return float(abs(new - current))

    def as_grid(self) -> np.ndarray:
        return self.values.reshape(self.model.size, self.model.size).copy()

    def greedy_policy(self) -> np.ndarray:
        return np.array([self.best_action(s) for s in range(self.model.n_states)], dtype=np.int64)


class StateActionValueTable:
    """Q-table keyed by (state, action), zero-initialised."""

    def __init__(self, model: GridModel, alpha: float = 0.5, gamma: float = 0.9):
        self.model = model
        self.alpha = float(alpha)
        self.gamma = float(gamma)
        self.values = np.zeros((model.n_states, N_ACTIONS), dtype=np.float64)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.model.size}, alpha={self.alpha}, gamma={self.gamma})"

    def reset(self) -> None:
        self.values.fill(0.0)

    def value(self, state: int) -> float:
        return float(np.max(self.values[state]))

    def best_action(self, state: int) -> int:
        # argmax returns the first index on ties
        return int(np.argmax(self.values[state]))

    def max_next_value(self, state: int) -> float:
        return float(np.max(self.values[state]))

    def update(self, state: int, action: int, reward: float, next_state: int) -> float:
        current = self.values[state, action]
        target = reward + self.gamma * self.max_next_value(next_state)
        new = current + self.alpha * (target - current)
        self.values[state, action] = new
        return float(abs(new - current))

    def as_grid(self) -> np.ndarray:
        return self.values.max(axis=1).reshape(self.model.size, self.model.size)

    def greedy_policy(self) -> np.ndarray:
        return np.argmax(self.values, axis=1).astype(np.int64)


def make_value_table(model: GridModel, kind: str = "state", alpha: float = 0.5, gamma: float = 0.9):
    """Build the table named by ``kind`` ("state" or "state_action")."""
    if kind == "state":
        return StateValueTable(model, alpha=alpha, gamma=gamma)
    if kind == "state_action":
        return StateActionValueTable(model, alpha=alpha, gamma=gamma)
    raise ValueError(f"Unknown value table kind: {kind!r}")
