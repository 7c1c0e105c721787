"""Tests for adacs.simulation.driver."""

from unittest.mock import Mock

import numpy as np
import pytest

from adacs.common import InvalidConstant, SimulationError
from adacs.config import PhysicalConstants
from adacs.simulation import RigidBodyWheelSimulator, TimeSeries, run_simulation


@pytest.fixture
def mock_simulator():
    sim = Mock()
    sim.simulate.return_value = TimeSeries(
        time=np.array([0.0, 1.0, 2.0]), wheel_rates=np.zeros((3, 3))
    )
    return sim


def test_passes_initial_conditions_to_simulator(scubed_constants, mock_simulator):
    series = run_simulation(scubed_constants, simulator=mock_simulator)
    assert len(series) == 3
    args = mock_simulator.simulate.call_args.args
    assert args[0] is scubed_constants
    assert args[1] == (0.0, 0.0, 0.0)
    assert args[2] == scubed_constants.body_rate
    assert args[3] == (0.0, 0.0, 0.0)
    assert args[4] == scubed_constants.orbital_period_s
    assert args[5:] == (1, 1)


def test_runtime_and_decimation_pass_through(scubed_constants, mock_simulator):
    run_simulation(
        scubed_constants,
        simulator=mock_simulator,
        runtime_s=3600.0,
        clock_decimation=4,
        vector_decimation=4,
    )
    args = mock_simulator.simulate.call_args.args
    assert args[4] == 3600.0
    assert args[5:] == (4, 4)


@pytest.mark.parametrize(
    "overrides",
    [{"spin_inertia_I": 0.0}, {"transverse_inertia_J": -1e-3}],
)
def test_invalid_constants_fail_before_simulation(overrides, mock_simulator):
    constants = PhysicalConstants(**overrides)
    with pytest.raises(InvalidConstant):
        run_simulation(constants, simulator=mock_simulator)
    mock_simulator.simulate.assert_not_called()


def test_simulator_errors_propagate(scubed_constants):
    sim = Mock()
    sim.simulate.side_effect = SimulationError("did not converge")
    with pytest.raises(SimulationError, match="did not converge"):
        run_simulation(scubed_constants, simulator=sim)
    assert sim.simulate.call_count == 1


def test_missing_output_is_simulation_error(scubed_constants):
    sim = Mock()
    sim.simulate.return_value = None
    with pytest.raises(SimulationError):
        run_simulation(scubed_constants, simulator=sim)


def test_quiet_run_keeps_wheels_at_rest(quiet_constants):
    series = run_simulation(
        quiet_constants, simulator=RigidBodyWheelSimulator(n_samples=50)
    )
    assert len(series) == 50
    assert np.max(np.abs(series.wheel_rates)) < 1e-12
