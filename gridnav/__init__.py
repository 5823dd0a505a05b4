"""
GridWorld Value Learning
========================
A tabular agent that learns, by trial and error, a value estimate guiding it
to the bottom-right goal of a deterministic N x N grid.

This package provides:
- GridModel / GridWorldEnv: the navigation task (pure model + Gymnasium env)
- StateValueTable / StateActionValueTable: value storage and update rule
- EpsilonGreedyPolicy: exploration with per-episode decay
- train(): the episodic training loop

Usage:
    from gridnav import TrainingConfig, train

    result = train(TrainingConfig(grid_size=3, seed=0))
    print(result.table.as_grid())
"""

__version__ = "1.0.0"

from .config import ConfigError, TrainingConfig
from .environment import GridModel, GridWorldEnv
from .training import (
    EpsilonGreedyPolicy,
    StateActionValueTable,
    StateValueTable,
    TrainResult,
    evaluate,
    train,
)

__all__ = [
    "ConfigError", "TrainingConfig",
    "GridModel", "GridWorldEnv",
    "EpsilonGreedyPolicy", "StateValueTable", "StateActionValueTable",
    "TrainResult", "evaluate", "train",
]
