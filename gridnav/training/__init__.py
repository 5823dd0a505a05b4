"""Learning side: value tables, exploration policy, training loop, evaluation."""

from .value_table import StateValueTable, StateActionValueTable, make_value_table
from .policy import EpsilonGreedyPolicy
from .core import EpisodeStats, TrainResult, run_episode, train
from .eval import evaluate, greedy_path

__all__ = [
    "StateValueTable", "StateActionValueTable", "make_value_table",
    "EpsilonGreedyPolicy",
    "EpisodeStats", "TrainResult", "run_episode", "train",
    "evaluate", "greedy_path",
]
