from __future__ import annotations

import numpy as np

from gridnav.environment.grid import GridModel
from gridnav.training.eval import evaluate, greedy_path
from gridnav.training.value_table import StateValueTable


def _distance_shaped_table(size: int) -> StateValueTable:
    model = GridModel(size)
    table = StateValueTable(model)
    for s in range(model.n_states):
        table.values[s] = 0.9 ** model.manhattan_to_goal(s)
    return table


def test_greedy_path_reaches_goal():
    table = _distance_shaped_table(3)
    path = greedy_path(table, table.model, 0)
    # DOWN wins ties against RIGHT
    assert path == [0, 3, 6, 7, 8]


def test_evaluate_on_shaped_table():
    table = _distance_shaped_table(4)
    ev = evaluate(table, table.model)
    assert ev["n_starts"] == 15
    assert ev["success_rate"] == 1.0
    assert ev["min_steps"] == 1
    assert ev["max_steps"] == 6


def test_evaluate_zero_table_never_succeeds():
    model = GridModel(3)
    table = StateValueTable(model)
    ev = evaluate(table, model, max_steps=10)
    assert ev["success_rate"] == 0.0
    assert ev["avg_steps"] == 0.0
    assert greedy_path(table, model, 4, max_steps=3) == [4, 1, 1, 1]


def test_evaluate_does_not_mutate():
    table = _distance_shaped_table(3)
    before = table.values.copy()
    evaluate(table, table.model)
    assert np.array_equal(before, table.values)
