"""Angular momentum reconstruction from simulated wheel rates.

For every sample the vehicle angular momentum is

    H = (I_body + sum_k I_wk @ w_rel_k) @ omega + sum_k I_wk @ w_rel_k

where ``w_rel_k`` is wheel k's spin rate placed on its own principal axis and
``omega`` is the body rate. The wheel terms are vectors, so the bracketed sum
adds a column vector to every column of ``I_body`` before multiplying by
``omega``. Optionally the secular solar-pressure impulse (0, 0, M_SRP * t) is
added to H.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from ..common import DimensionMismatch
from ..config import PhysicalConstants
from .inertia import body_inertia_tensor, wheel_inertia_tensors
from .timeseries import AngularMomentumSeries, TimeSeries

logger = logging.getLogger(__name__)


def relative_rate_vectors(wheel_rates: Sequence[float]) -> np.ndarray:
    """Place each wheel rate on its own axis; row k is ``w_rel_k``."""
    rates = np.asarray(wheel_rates, dtype=float)
    if rates.shape != (3,):
        raise DimensionMismatch(f"Expected three wheel rates, got shape {rates.shape}")
    return np.diag(rates)


def composite_inertia(
    body_tensor: np.ndarray, wheel_terms: np.ndarray
) -> np.ndarray:
    """I_body with the summed wheel momentum vector added to every column."""
    return body_tensor + wheel_terms[..., :, np.newaxis]


def momentum_at(
    wheel_rates: Sequence[float],
    body_rate: Sequence[float],
    body_tensor: np.ndarray,
    wheel_tensors: np.ndarray,
) -> np.ndarray:
    """Angular momentum (N*m*s) for a single sample.

    Args:
        wheel_rates: Spin rates of wheels 1-3 (rad/s).
        body_rate: Body angular velocity (rad/s).
        body_tensor: 3x3 body inertia tensor.
        wheel_tensors: (3, 3, 3) stack of wheel inertia tensors.

    Returns:
        H as a length-3 array.
    """
    w_rel = relative_rate_vectors(wheel_rates)
    omega = np.asarray(body_rate, dtype=float)
    h_wheels = np.zeros(3, dtype=float)
    for k in range(3):
        h_wheels = h_wheels + wheel_tensors[k] @ w_rel[k]
    return composite_inertia(body_tensor, h_wheels) @ omega + h_wheels


def wheel_rate_magnitude(series: TimeSeries) -> np.ndarray:
    """RMS wheel speed sqrt(w1^2 + w2^2 + w3^2) for every sample (rad/s)."""
    rates = np.asarray(series.wheel_rates, dtype=float)
    return np.sqrt(np.sum(rates**2, axis=1))


class MomentumReconstructor:
    """Maps wheel-rate time series to total vehicle angular momentum.

    Constants are validated and the inertia tensors built once, when the
    reconstructor is created.
    """

    def __init__(self, constants: PhysicalConstants) -> None:
        constants.validate_physical()
        self.constants = constants
        self.body_tensor = body_inertia_tensor(constants)
        self.wheel_tensors = wheel_inertia_tensors(constants)
        self.body_rate = np.array(constants.body_rate, dtype=float)
        # Column k of wheel k's tensor: I_wk @ w_rel_k == rate_k * column
        self._wheel_columns = np.stack(
            [self.wheel_tensors[k][:, k] for k in range(3)], axis=1
        )

    def wheel_momentum(self, wheel_rates: np.ndarray) -> np.ndarray:
        """sum_k I_wk @ w_rel_k for each row of an (N, 3) rate array."""
        return wheel_rates @ self._wheel_columns.T

    def reconstruct(
        self, series: TimeSeries, include_srp: bool = False
    ) -> AngularMomentumSeries:
        """Compute H(t) for every sample of ``series``.

        Args:
            series: Wheel rate time series.
            include_srp: Add the accumulated solar-pressure impulse on z.

        Returns:
            AngularMomentumSeries aligned with ``series``.

        Raises:
            DimensionMismatch: If the wheel rates are not shaped (N, 3).
        """
        rates = np.asarray(series.wheel_rates, dtype=float)
        time = np.asarray(series.time, dtype=float)
        if rates.ndim != 2 or rates.shape[1] != 3:
            raise DimensionMismatch(
                f"wheel_rates must have shape (N, 3), got {rates.shape}"
            )
        if rates.shape[0] != time.size:
            raise DimensionMismatch(
                f"{rates.shape[0]} wheel rate samples for {time.size} timestamps"
            )

        h_wheels = self.wheel_momentum(rates)
        composite = composite_inertia(self.body_tensor, h_wheels)
        H = composite @ self.body_rate + h_wheels
        if include_srp:
            H[:, 2] += self.constants.srp_torque * time

        logger.debug(
            "Reconstructed %d momentum samples (srp=%s), max |H|=%.3e",
            len(H),
            include_srp,
            float(np.max(np.linalg.norm(H, axis=1))) if len(H) else 0.0,
        )
        return AngularMomentumSeries(time=time, H=H)

    def rms(self, series: TimeSeries) -> np.ndarray:
        return wheel_rate_magnitude(series)


def reconstruct_momentum(
    series: TimeSeries, constants: PhysicalConstants, include_srp: bool = False
) -> AngularMomentumSeries:
    """Convenience wrapper around MomentumReconstructor.reconstruct."""
    return MomentumReconstructor(constants).reconstruct(series, include_srp=include_srp)
