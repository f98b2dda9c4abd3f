"""Fixtures for the entire test suite."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest


@pytest.fixture()
def rng() -> np.random.Generator:
    """Return a seeded random generator."""
    return np.random.default_rng(2015)


@pytest.fixture()
def correlated_data(rng: np.random.Generator) -> np.ndarray:
    """Return 300 correlated 3-D points with non-zero means and different scales."""
    mixing = np.array([[2.0, 0.5, 0.0], [0.3, 1.0, 0.0], [0.1, -0.4, 0.2]])
    return rng.standard_normal((300, 3)) @ mixing + np.array([5.0, -3.0, 100.0])


@pytest.fixture()
def varying_epsilon(correlated_data: np.ndarray, rng: np.random.Generator) -> np.ndarray:
    """Return per-point tolerances between 0.2 and 0.8."""
    return rng.uniform(0.2, 0.8, size=correlated_data.shape[0])
