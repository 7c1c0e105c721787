from __future__ import annotations

from math import isfinite, pi

from pydantic import BaseModel, ConfigDict

from ..common import InvalidConstant
from .constants import EHO_PERIOD_S


class PhysicalConstants(BaseModel):
    """
    Physical and orbital constants for a momentum-wheel analysis run.

    Coordinate system: z is the longitudinal (sun-pointing) axis, y is tangent
    to the orbital path and x completes the set. Wheel 1 spins about x,
    wheel 2 about y and wheel 3 about z.
    """

    model_config = ConfigDict(frozen=True)

    orbital_period_s: float = EHO_PERIOD_S  # s - simulation runtime
    orbit_altitude_km: float = 550.0  # km
    earth_radius_km: float = 6378.0  # km
    mu_earth: float = 398601.2  # km^3/s^2
    # Solar pressure disturbance torques (Mgx, Mgy, Mgz) in N*m
    disturbance_torques: tuple[float, float, float] = (1e-11, 1e-11, 1e-11)
    srp_torque: float = 1e-4  # N*m - solar sailing pressure
    spin_inertia_I: float = 2e-3  # kg*m^2 - wheel inertia about its spin axis
    transverse_inertia_J: float = 1e-3  # kg*m^2 - wheel inertia about either other axis
    # Body principal inertias (A, B, C) in kg*m^2
    body_inertias: tuple[float, float, float] = (0.032, 0.021, 0.046)
    initial_wheel_rates: tuple[float, float, float] = (0.0, 0.0, 0.0)  # rad/s

    @classmethod
    def scubed(cls) -> PhysicalConstants:
        """Baseline S-CUBED constants."""
        return cls()

    @property
    def earth_orbit_period_s(self) -> float:
        """Keplerian period of the reference low Earth orbit (s)."""
        radius = self.orbit_altitude_km + self.earth_radius_km
        return 2 * pi * self.mu_earth ** (-0.5) * radius**1.5

    @property
    def total_inertias(self) -> tuple[float, float, float]:
        """Principal inertias of body plus all three wheels (J_I, J_II, J_III)."""
        wheels = self.spin_inertia_I + 2 * self.transverse_inertia_J
        a, b, c = self.body_inertias
        return (a + wheels, b + wheels, c + wheels)

    @property
    def body_rate(self) -> tuple[float, float, float]:
        """Body angular velocity (rad/s): one revolution about x per orbit."""
        return (2 * pi / self.orbital_period_s, 0.0, 0.0)

    @property
    def body_acceleration(self) -> tuple[float, float, float]:
        """Body angular acceleration (rad/s^2); the body rate is held constant."""
        return (0.0, 0.0, 0.0)

    def validate_physical(self) -> None:
        """Reject constants that make the dynamics meaningless.

        Raises:
            InvalidConstant: If an inertia or the orbital period is not
                strictly positive, or any value is not finite.
        """
        positive = {
            "spin_inertia_I": self.spin_inertia_I,
            "transverse_inertia_J": self.transverse_inertia_J,
            "orbital_period_s": self.orbital_period_s,
        }
        for axis, value in zip("ABC", self.body_inertias):
            positive[f"body_inertias.{axis}"] = value
        for name, value in positive.items():
            if not isfinite(value) or value <= 0:
                raise InvalidConstant(f"{name} must be positive and finite, got {value!r}")

        finite = {
            "orbit_altitude_km": self.orbit_altitude_km,
            "earth_radius_km": self.earth_radius_km,
            "mu_earth": self.mu_earth,
            "srp_torque": self.srp_torque,
        }
        for i, value in enumerate(self.disturbance_torques):
            finite[f"disturbance_torques[{i}]"] = value
        for i, value in enumerate(self.initial_wheel_rates):
            finite[f"initial_wheel_rates[{i}]"] = value
        for name, value in finite.items():
            if not isfinite(value):
                raise InvalidConstant(f"{name} must be finite, got {value!r}")

