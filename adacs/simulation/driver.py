from __future__ import annotations

import logging

from ..common import SimulationError
from ..config import DAY_SECONDS, PhysicalConstants
from .timeseries import TimeSeries
from .wheel_dynamics import RigidBodyWheelSimulator, WheelRateSimulator

logger = logging.getLogger(__name__)


def run_simulation(
    constants: PhysicalConstants,
    simulator: WheelRateSimulator | None = None,
    runtime_s: float | None = None,
    clock_decimation: int = 1,
    vector_decimation: int = 1,
) -> TimeSeries:
    """Run the wheel dynamics simulation for one orbital period.

    Constants are validated before the simulator is touched. The body rate is
    one revolution about x per orbit with zero angular acceleration.

    Args:
        constants: Physical constants for the run.
        simulator: Wheel-rate simulator; defaults to RigidBodyWheelSimulator.
        runtime_s: Simulation runtime (s). Defaults to the orbital period.
        clock_decimation: Keep every n-th output timestamp.
        vector_decimation: Keep every n-th output wheel-rate sample.

    Returns:
        TimeSeries of the three wheel spin rates.

    Raises:
        InvalidConstant: If a constant is physically invalid.
        SimulationError: If the simulator fails or returns no samples.
    """
    constants.validate_physical()
    if simulator is None:
        simulator = RigidBodyWheelSimulator()
    runtime = constants.orbital_period_s if runtime_s is None else float(runtime_s)

    logger.info(
        "Running wheel simulation: runtime=%.1f days body_rate=%s torques=%s",
        runtime / DAY_SECONDS,
        constants.body_rate,
        constants.disturbance_torques,
    )
    series = simulator.simulate(
        constants,
        constants.initial_wheel_rates,
        constants.body_rate,
        constants.body_acceleration,
        runtime,
        clock_decimation,
        vector_decimation,
    )
    if series is None or len(series) == 0:
        raise SimulationError("Simulation returned no samples")
    logger.info("Simulation produced %d samples", len(series))
    return series
