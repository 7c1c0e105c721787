from .exceptions import AdacsError, DimensionMismatch, InvalidConstant, SimulationError

__all__ = [
    "AdacsError",
    "DimensionMismatch",
    "InvalidConstant",
    "SimulationError",
]
