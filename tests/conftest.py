"""Shared pytest fixtures for test suite."""

from math import pi

import numpy as np
import pytest

from adacs.config import PhysicalConstants
from adacs.simulation import TimeSeries


@pytest.fixture
def scubed_constants():
    """Baseline S-CUBED constants."""
    return PhysicalConstants.scubed()


@pytest.fixture
def worked_example_constants():
    """Constants whose body rate is exactly 1e-4 rad/s about x."""
    return PhysicalConstants(
        orbital_period_s=2 * pi / 1e-4,
        spin_inertia_I=2e-3,
        transverse_inertia_J=1e-3,
        body_inertias=(0.032, 0.021, 0.046),
    )


@pytest.fixture
def quiet_constants():
    """Constants with no disturbance torque and wheels at rest."""
    return PhysicalConstants(
        disturbance_torques=(0.0, 0.0, 0.0),
        initial_wheel_rates=(0.0, 0.0, 0.0),
    )


@pytest.fixture
def small_series():
    """Five-sample wheel rate series spanning two days."""
    time = np.linspace(0.0, 2 * 86400.0, 5)
    rates = np.array(
        [
            [0.0, 0.0, 0.0],
            [3.0, 4.0, 0.0],
            [1.0, -2.0, 2.0],
            [0.5, 0.25, -0.75],
            [-1.0, 0.0, 0.0],
        ]
    )
    return TimeSeries(time=time, wheel_rates=rates)
