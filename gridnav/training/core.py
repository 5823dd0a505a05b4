"""Core episodic training loop.

Each episode:
    1) sample a start state uniformly from the shared RNG (the goal included,
       in which case the episode has zero transitions)
    2) act epsilon-greedily, step the env, update the table, until the goal
    3) decay epsilon once

There is no early stopping and, unless `max_steps_per_episode` is set, no step
cap: an episode lasts until the random walk reaches the goal.
"""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import numpy as np

from ..config import TrainingConfig
from ..environment.gridworld_env import GridWorldEnv
from .policy import EpsilonGreedyPolicy
from .value_table import make_value_table


@dataclass
class EpisodeStats:
    """Summary of one finished episode."""

    episode: int
    start_state: int
    steps: int
    total_reward: float
    epsilon: float
    reached_goal: bool


@dataclass
class TrainResult:
    table: object
    epsilon: float
    episodes: List[EpisodeStats] = field(default_factory=list)
    elapsed: float = 0.0

    @property
    def n_episodes(self) -> int:
        return len(self.episodes)

    @property
    def total_steps(self) -> int:
        return sum(ep.steps for ep in self.episodes)

    @property
    def success_rate(self) -> float:
        if not self.episodes:
            return 0.0
        return sum(ep.reached_goal for ep in self.episodes) / len(self.episodes)

    @property
    def avg_steps(self) -> float:
        return float(np.mean([ep.steps for ep in self.episodes])) if self.episodes else 0.0


def run_episode(
    env: GridWorldEnv,
    table,
    policy: EpsilonGreedyPolicy,
    rng: np.random.Generator,
    episode: int = 0,
) -> EpisodeStats:
    """Play one episode from a uniformly sampled start, updating `table` online."""
    start = int(rng.integers(env.model.n_states))
    state, _ = env.reset(options={"start_state": start})

    eps = policy.epsilon
    steps = 0
    total_reward = 0.0
    reached_goal = env.model.is_terminal(state)
    done = reached_goal

    while not done:
        action = policy.choose_action(state)
        next_state, reward, terminated, truncated, _ = env.step(action)
        table.update(state, action, reward, next_state)

        state = next_state
        steps += 1
        total_reward += reward
        reached_goal = terminated
        done = terminated or truncated

    return EpisodeStats(
        episode=episode,
        start_state=start,
        steps=steps,
        total_reward=total_reward,
        epsilon=eps,
        reached_goal=reached_goal,
    )


def train(
    config: TrainingConfig,
    rng: Optional[np.random.Generator] = None,
    on_episode: Optional[Callable[[EpisodeStats], None]] = None,
) -> TrainResult:
    """Train a value table for `config.episodes` episodes.

    Args:
        config: Validated training parameters.
        rng: Shared random generator. Built from `config.seed` when omitted.
        on_episode: Called with each episode's stats after epsilon decays.

    Returns:
        TrainResult with the trained table, final epsilon and episode history.
    """
    if rng is None:
        rng = np.random.default_rng(config.seed)

    env = GridWorldEnv(size=config.grid_size, max_steps=config.max_steps_per_episode)
    table = make_value_table(env.model, config.value_table, alpha=config.alpha, gamma=config.gamma)
    policy = EpsilonGreedyPolicy(table, rng, epsilon=config.epsilon, decay_factor=config.decay_factor)

    history: List[EpisodeStats] = []
    recent_steps = deque(maxlen=100)
    recent_successes = deque(maxlen=100)
    log_interval = int(config.log_interval)

    start_time = time.time()

    for ep in range(1, int(config.episodes) + 1):
        stats = run_episode(env, table, policy, rng, episode=ep)
        policy.decay()

        history.append(stats)
        recent_steps.append(stats.steps)
        recent_successes.append(1.0 if stats.reached_goal else 0.0)

        if on_episode is not None:
            on_episode(stats)

        # --- Logging ----------------------------------------------------------
        if log_interval > 0 and ep % log_interval == 0:
            print(
                f"  Ep {ep:>5d}/{config.episodes} │ "
                f"Steps={float(np.mean(recent_steps)):>9.1f} │ "
                f"Succ={float(np.mean(recent_successes)) * 100.0:>5.1f}% │ "
                f"ε={policy.epsilon:.4f}"
            )

    env.close()

    return TrainResult(
        table=table,
        epsilon=policy.epsilon,
        episodes=history,
        elapsed=float(time.time() - start_time),
    )
