"""Rigid-body wheel dynamics simulation.

The vehicle body follows a prescribed angular velocity; the three momentum
wheels absorb the disturbance torques and the gyroscopic coupling needed to
hold that rate. Integrating the wheel equations over the run yields the wheel
spin-rate history consumed by the momentum reconstruction.

Equations of motion (body frame, one wheel per principal axis):
    I * dw_wheel/dt = M - J_tot @ alpha - omega x (J_tot @ omega + I * w_wheel)
"""

from __future__ import annotations

import logging
import operator
from typing import Protocol

import numpy as np
from scipy.integrate import solve_ivp

from ..common import SimulationError
from ..config import PhysicalConstants
from .inertia import total_inertia_tensor
from .timeseries import TimeSeries

logger = logging.getLogger(__name__)

Vector3 = tuple[float, float, float]


class WheelRateSimulator(Protocol):
    """Anything that can produce a wheel-rate time series from initial conditions."""

    def simulate(
        self,
        constants: PhysicalConstants,
        initial_wheel_rates: Vector3,
        body_rate: Vector3,
        body_acceleration: Vector3,
        runtime_s: float,
        clock_decimation: int = 1,
        vector_decimation: int = 1,
    ) -> TimeSeries: ...


def wheel_rate_derivative(
    wheel_rates: np.ndarray,
    spin_inertia: float,
    total_inertia: np.ndarray,
    body_rate: np.ndarray,
    body_acceleration: np.ndarray,
    torque: np.ndarray,
) -> np.ndarray:
    """Time derivative of the wheel spin rates (rad/s^2).

    Args:
        wheel_rates: Current wheel spin rates (rad/s), shape (3,).
        spin_inertia: Wheel inertia about its spin axis (kg*m^2).
        total_inertia: 3x3 inertia of body plus wheels (kg*m^2).
        body_rate: Body angular velocity (rad/s).
        body_acceleration: Body angular acceleration (rad/s^2).
        torque: External disturbance torque in body frame (N*m).
    """
    h_total = total_inertia @ body_rate + spin_inertia * wheel_rates
    gyro = np.cross(body_rate, h_total)
    return (torque - total_inertia @ body_acceleration - gyro) / spin_inertia


class RigidBodyWheelSimulator:
    """Integrates the wheel equations with ``scipy.integrate.solve_ivp``.

    The solution is sampled at ``n_samples`` evenly spaced times over the run
    and then decimated: every ``clock_decimation``-th timestamp and every
    ``vector_decimation``-th wheel-rate sample is kept.
    """

    def __init__(
        self,
        n_samples: int = 10000,
        rtol: float = 1e-9,
        atol: float = 1e-12,
        method: str = "RK45",
        max_step: float | None = None,
    ) -> None:
        self.n_samples = int(n_samples)
        self.rtol = rtol
        self.atol = atol
        self.method = method
        self.max_step = max_step

    def simulate(
        self,
        constants: PhysicalConstants,
        initial_wheel_rates: Vector3,
        body_rate: Vector3,
        body_acceleration: Vector3,
        runtime_s: float,
        clock_decimation: int = 1,
        vector_decimation: int = 1,
    ) -> TimeSeries:
        if runtime_s <= 0:
            raise SimulationError(f"Runtime must be positive, got {runtime_s}")
        if self.n_samples < 2:
            raise SimulationError("At least two output samples are required")
        try:
            clock_decimation = operator.index(clock_decimation)
            vector_decimation = operator.index(vector_decimation)
        except TypeError:
            raise SimulationError(
                f"Decimation factors must be integers, got "
                f"{clock_decimation!r} and {vector_decimation!r}"
            ) from None
        if clock_decimation < 1 or vector_decimation < 1:
            raise SimulationError("Decimation factors must be >= 1")

        spin_inertia = float(constants.spin_inertia_I)
        total_inertia = total_inertia_tensor(constants)
        omega = np.array(body_rate, dtype=float)
        alpha = np.array(body_acceleration, dtype=float)
        torque = np.array(constants.disturbance_torques, dtype=float)
        y0 = np.array(initial_wheel_rates, dtype=float)

        def rhs(_t: float, y: np.ndarray) -> np.ndarray:
            return wheel_rate_derivative(
                y, spin_inertia, total_inertia, omega, alpha, torque
            )

        t_eval = np.linspace(0.0, float(runtime_s), self.n_samples)
        logger.debug(
            "solve_ivp: method=%s runtime=%.6g s samples=%d rtol=%g atol=%g",
            self.method,
            runtime_s,
            self.n_samples,
            self.rtol,
            self.atol,
        )
        sol = solve_ivp(
            rhs,
            (0.0, float(runtime_s)),
            y0,
            method=self.method,
            t_eval=t_eval,
            rtol=self.rtol,
            atol=self.atol,
            max_step=np.inf if self.max_step is None else self.max_step,
        )
        if not sol.success:
            raise SimulationError(f"Wheel dynamics did not converge: {sol.message}")
        if sol.t.size == 0:
            raise SimulationError("Simulation returned no samples")
        logger.debug("solve_ivp finished: nfev=%d samples=%d", sol.nfev, sol.t.size)

        time = sol.t[::clock_decimation]
        rates = sol.y.T[::vector_decimation]
        return TimeSeries(time=time, wheel_rates=rates)
