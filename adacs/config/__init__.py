from .constants import DAY_SECONDS, EHO_PERIOD_S, RPM_CONVERSION
from .physical import PhysicalConstants
from .visualization import VisualizationConfig

__all__ = [
    "PhysicalConstants",
    "VisualizationConfig",
    "DAY_SECONDS",
    "EHO_PERIOD_S",
    "RPM_CONVERSION",
]
