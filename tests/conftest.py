from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from gridnav.environment.grid import GridModel
from gridnav.training.value_table import StateValueTable


def pytest_addoption(parser):
    parser.addoption("--runslow", action="store_true", default=False, help="run slow tests")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--runslow"):
        return
    skip_slow = pytest.mark.skip(reason="needs --runslow")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def rng():
    return np.random.default_rng(0)


@pytest.fixture
def model():
    return GridModel(5)


@pytest.fixture
def table(model):
    return StateValueTable(model, alpha=0.5, gamma=0.9)
