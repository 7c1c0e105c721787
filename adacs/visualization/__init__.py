"""Visualization utilities for momentum-wheel analysis runs."""

from .wheel_momentum import plot_adacs_summary, plot_angular_momentum, plot_wheel_speeds

__all__ = [
    "plot_adacs_summary",
    "plot_angular_momentum",
    "plot_wheel_speeds",
]
