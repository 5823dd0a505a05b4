"""
Configuration for GridWorld Value Learning
==========================================

The dicts below hold the defaults. `TrainingConfig` is the validated,
immutable object the agent is built from; an invalid value raises
`ConfigError` before any training starts.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, replace
from typing import Any, Dict, Optional

# Environment Configuration
ENV_CONFIG = {
    "grid_size": 5,                # 5x5 grid, goal in the bottom-right cell
    "max_steps": None,             # Step cap per episode (None = run until goal)
}

# Agent Hyperparameters
AGENT_CONFIG = {
    "learning_rate": 0.5,          # Alpha: learning rate
    "discount_factor": 0.9,        # Gamma: discount factor
    "epsilon": 0.1,                # Initial exploration rate
    "epsilon_decay": 0.99,         # Epsilon multiplier after each episode
    "value_table": "state",        # "state" (one value per cell) or "state_action"
}

# Training Configuration
TRAIN_CONFIG = {
    "n_episodes": 100,             # Total training episodes
    "log_interval": 0,             # Print stats every N episodes (0 = silent)
    "seed": None,                  # Seed for the shared RNG
}

VALUE_TABLE_KINDS = ("state", "state_action")


class ConfigError(ValueError):
    """Raised when a training parameter is out of range."""


def _check_unit_interval(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ConfigError(f"{name} must be in [0, 1], got {value}")


@dataclass(frozen=True)
class TrainingConfig:
    alpha: float = AGENT_CONFIG["learning_rate"]
    gamma: float = AGENT_CONFIG["discount_factor"]
    epsilon: float = AGENT_CONFIG["epsilon"]
    decay_factor: float = AGENT_CONFIG["epsilon_decay"]
    grid_size: int = ENV_CONFIG["grid_size"]
    episodes: int = TRAIN_CONFIG["n_episodes"]
    max_steps_per_episode: Optional[int] = ENV_CONFIG["max_steps"]
    value_table: str = AGENT_CONFIG["value_table"]
    seed: Optional[int] = TRAIN_CONFIG["seed"]
    log_interval: int = TRAIN_CONFIG["log_interval"]

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if self.grid_size <= 0:
            raise ConfigError(f"grid_size must be positive, got {self.grid_size}")
        if self.episodes < 0:
            raise ConfigError(f"episodes must be >= 0, got {self.episodes}")
        _check_unit_interval("alpha", self.alpha)
        _check_unit_interval("gamma", self.gamma)
        _check_unit_interval("epsilon", self.epsilon)
        _check_unit_interval("decay_factor", self.decay_factor)
        if self.max_steps_per_episode is not None and self.max_steps_per_episode <= 0:
            raise ConfigError(
                f"max_steps_per_episode must be positive or None, got {self.max_steps_per_episode}"
            )
        if self.value_table not in VALUE_TABLE_KINDS:
            raise ConfigError(
                f"value_table must be one of {VALUE_TABLE_KINDS}, got {self.value_table!r}"
            )
        if self.log_interval < 0:
            raise ConfigError(f"log_interval must be >= 0, got {self.log_interval}")

    @property
    def n_states(self) -> int:
        return self.grid_size * self.grid_size

    @property
    def terminal_state(self) -> int:
        return self.n_states - 1

    def with_overrides(self, **overrides: Any) -> "TrainingConfig":
        """Copy with the non-None overrides applied (re-validated)."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
