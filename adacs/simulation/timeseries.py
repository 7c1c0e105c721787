"""Time-ordered wheel rate and angular momentum series."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

from ..common import DimensionMismatch, SimulationError
from ..config import DAY_SECONDS, RPM_CONVERSION


def _check_time_axis(time: np.ndarray) -> None:
    if time.ndim != 1:
        raise DimensionMismatch(f"time must be one-dimensional, got shape {time.shape}")
    if time.size == 0:
        raise SimulationError("Simulation returned no samples")
    if time.size > 1 and not np.all(np.diff(time) > 0):
        raise SimulationError("Sample times must be strictly increasing")


@dataclass(frozen=True)
class TimeSeries:
    """Wheel spin rates (rad/s) sampled at strictly increasing times (s).

    Attributes:
        time: Sample times, shape (N,).
        wheel_rates: Relative spin rate of wheels 1-3, shape (N, 3).
    """

    time: np.ndarray
    wheel_rates: np.ndarray

    def __post_init__(self) -> None:
        time = np.array(self.time, dtype=float)
        rates = np.array(self.wheel_rates, dtype=float)
        _check_time_axis(time)
        if rates.ndim != 2 or rates.shape[1] != 3:
            raise DimensionMismatch(
                f"wheel_rates must have shape (N, 3), got {rates.shape}"
            )
        if rates.shape[0] != time.size:
            raise DimensionMismatch(
                f"{rates.shape[0]} wheel rate samples for {time.size} timestamps"
            )
        time.flags.writeable = False
        rates.flags.writeable = False
        object.__setattr__(self, "time", time)
        object.__setattr__(self, "wheel_rates", rates)

    @classmethod
    def from_samples(cls, samples: Iterable[Sequence[float]]) -> TimeSeries:
        """Build a series from ``(time, omega1, omega2, omega3)`` tuples."""
        rows = []
        for i, sample in enumerate(samples):
            try:
                n_values = len(sample)
            except TypeError:
                raise DimensionMismatch(
                    f"Sample {i} is not a (t, w1, w2, w3) tuple: {sample!r}"
                ) from None
            if n_values != 4:
                raise DimensionMismatch(
                    f"Sample {i} has {n_values} values, expected (t, w1, w2, w3)"
                )
            rows.append([float(v) for v in sample])
        if not rows:
            raise SimulationError("Simulation returned no samples")
        arr = np.array(rows, dtype=float)
        return cls(time=arr[:, 0], wheel_rates=arr[:, 1:])

    def __len__(self) -> int:
        return int(self.time.size)

    @property
    def omega_1(self) -> np.ndarray:
        return self.wheel_rates[:, 0]

    @property
    def omega_2(self) -> np.ndarray:
        return self.wheel_rates[:, 1]

    @property
    def omega_3(self) -> np.ndarray:
        return self.wheel_rates[:, 2]

    @property
    def days(self) -> np.ndarray:
        """Sample times converted to days."""
        return self.time / DAY_SECONDS

    def wheel_rates_rpm(self) -> np.ndarray:
        """Wheel rates converted from rad/s to RPM, shape (N, 3)."""
        return self.wheel_rates * RPM_CONVERSION


@dataclass(frozen=True)
class AngularMomentumSeries:
    """Total vehicle angular momentum H(t) (N*m*s), aligned with a TimeSeries."""

    time: np.ndarray
    H: np.ndarray

    def __post_init__(self) -> None:
        time = np.array(self.time, dtype=float)
        H = np.array(self.H, dtype=float)
        _check_time_axis(time)
        if H.shape != (time.size, 3):
            raise DimensionMismatch(
                f"H must have shape ({time.size}, 3), got {H.shape}"
            )
        time.flags.writeable = False
        H.flags.writeable = False
        object.__setattr__(self, "time", time)
        object.__setattr__(self, "H", H)

    def __len__(self) -> int:
        return int(self.time.size)

    @property
    def hx(self) -> np.ndarray:
        return self.H[:, 0]

    @property
    def hy(self) -> np.ndarray:
        return self.H[:, 1]

    @property
    def hz(self) -> np.ndarray:
        return self.H[:, 2]

    @property
    def days(self) -> np.ndarray:
        return self.time / DAY_SECONDS
