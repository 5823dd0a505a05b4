"""GridWorld Gymnasium environment (core dynamics only)."""

from __future__ import annotations

from typing import Any, Dict

import gymnasium as gym
from gymnasium import spaces

from .constants import UP, DOWN, LEFT, RIGHT, ACTION_DELTAS, N_ACTIONS, METADATA
from .grid import GridModel
from .rendering import render_text


class GridWorldEnv(gym.Env):
    # constants
    UP = UP
    DOWN = DOWN
    LEFT = LEFT
    RIGHT = RIGHT
    ACTION_DELTAS = ACTION_DELTAS

    metadata = METADATA

    def __init__(
        self,
        size: int = 5,
        max_steps: int | None = None,
        render_mode: str | None = None,
    ):
        self.model = GridModel(size)
        self.size = self.model.size
        # None means episodes only end at the goal
        self.max_steps = None if max_steps is None else int(max_steps)
        self.render_mode = render_mode

        # Episode state
        self.steps: int = 0
        self.state: int | None = None

        self.action_space = spaces.Discrete(N_ACTIONS)
        self.observation_space = spaces.Discrete(self.model.n_states)

    @property
    def terminal_state(self) -> int:
        return self.model.terminal_state

    """
    Reset the environment to a start state.

    options["start_state"] pins the start cell; otherwise it is drawn
    uniformly (the goal included) from the env's own RNG.

    Returns:
        observation: the start state
        info: Dict with additional information
    """
    def reset(self, seed: int | None = None, options: dict | None = None
    ) -> tuple[int, Dict[str, Any]]:

        super().reset(seed=seed)

        start = None if options is None else options.get("start_state")
        if start is None:
            start = int(self.np_random.integers(self.model.n_states))
        elif not self.model.is_valid_state(start):
            raise ValueError(f"Invalid start state: {start}")

        self.state = int(start)
        self.steps = 0
        return self.state, self._get_info()

    def _get_info(self) -> Dict[str, Any]:
        assert self.state is not None
        return {
            "steps": int(self.steps),
            "coord": self.model.to_coord(self.state),
            "dist_to_goal": self.model.manhattan_to_goal(self.state),
        }

    def step(self, action: int) -> tuple[int, float, bool, bool, Dict[str, Any]]:
        assert self.state is not None, "Call reset() before step()"
        if not self.action_space.contains(int(action)):
            raise ValueError(f"Invalid action: {action}")

        self.steps += 1
        self.state = self.model.transition(self.state, action)

        reward = self.model.reward(self.state)
        terminated = self.model.is_terminal(self.state)
        truncated = (
            not terminated
            and self.max_steps is not None
            and self.steps >= self.max_steps
        )

        return self.state, reward, terminated, truncated, self._get_info()

    def render(self) -> str | None:
        assert self.state is not None
        if self.render_mode == "ansi":
            return render_text(self.size, self.model.to_coord(self.state))
        return None
