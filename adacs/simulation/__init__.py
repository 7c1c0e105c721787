from .driver import run_simulation
from .inertia import (
    body_inertia_tensor,
    total_inertia_tensor,
    wheel_inertia_tensor,
    wheel_inertia_tensors,
)
from .momentum import (
    MomentumReconstructor,
    momentum_at,
    reconstruct_momentum,
    wheel_rate_magnitude,
)
from .timeseries import AngularMomentumSeries, TimeSeries
from .wheel_dynamics import (
    RigidBodyWheelSimulator,
    WheelRateSimulator,
    wheel_rate_derivative,
)

__all__ = [
    "AngularMomentumSeries",
    "MomentumReconstructor",
    "RigidBodyWheelSimulator",
    "TimeSeries",
    "WheelRateSimulator",
    "body_inertia_tensor",
    "momentum_at",
    "reconstruct_momentum",
    "run_simulation",
    "total_inertia_tensor",
    "wheel_inertia_tensor",
    "wheel_inertia_tensors",
    "wheel_rate_derivative",
    "wheel_rate_magnitude",
]
