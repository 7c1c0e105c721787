"""Momentum-wheel attitude control analysis for small satellites."""

from .common import AdacsError, DimensionMismatch, InvalidConstant, SimulationError
from .config import PhysicalConstants, VisualizationConfig
from .simulation import (
    AngularMomentumSeries,
    MomentumReconstructor,
    RigidBodyWheelSimulator,
    TimeSeries,
    reconstruct_momentum,
    run_simulation,
    wheel_rate_magnitude,
)

__all__ = [
    "AdacsError",
    "AngularMomentumSeries",
    "DimensionMismatch",
    "InvalidConstant",
    "MomentumReconstructor",
    "PhysicalConstants",
    "RigidBodyWheelSimulator",
    "SimulationError",
    "TimeSeries",
    "VisualizationConfig",
    "reconstruct_momentum",
    "run_simulation",
    "wheel_rate_magnitude",
]
