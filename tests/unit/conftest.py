import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def normal_table(rng):
    cov = np.array([[1.0, 0.6, 0.0], [0.6, 1.0, 0.3], [0.0, 0.3, 1.0]])
    samples = rng.multivariate_normal(np.zeros(3), cov, size=2000)
    return {"a": samples[:, 0], "b": samples[:, 1], "c": samples[:, 2]}


@pytest.fixture
def peaked_grid():
    grid = np.zeros((5, 5))
    grid[1:4, 1:4] = 1
    grid[2, 2] = 10
    return np.arange(5.0), np.arange(5.0), grid
