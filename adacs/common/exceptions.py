"""Error types raised by the simulation and momentum reconstruction."""


class AdacsError(Exception):
    """Base class for all analysis errors."""


class SimulationError(AdacsError, RuntimeError):
    """The wheel dynamics simulation failed or produced no usable samples."""


class InvalidConstant(AdacsError, ValueError):
    """A physical constant is outside its physically meaningful range."""


class DimensionMismatch(AdacsError, ValueError):
    """A sample or array does not have the expected shape."""
