"""Shared fixtures for visualization tests."""

import matplotlib
import pytest

matplotlib.use("Agg")  # Use non-interactive backend for testing

import matplotlib.pyplot as plt

from adacs.simulation import reconstruct_momentum


@pytest.fixture
def small_momentum(small_series, scubed_constants):
    return reconstruct_momentum(small_series, scubed_constants)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")
