"""Wheel speed and angular momentum plots for a momentum-wheel analysis run."""

import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.font_manager import FontProperties

from ..config.constants import RPM_CONVERSION
from ..config.visualization import VisualizationConfig
from ..simulation.momentum import wheel_rate_magnitude
from ..simulation.timeseries import AngularMomentumSeries, TimeSeries


def _style_axes(ax: Axes, config: VisualizationConfig) -> None:
    ax.tick_params(axis="both", which="major", labelsize=config.tick_font_size)
    if config.show_grid:
        ax.grid(True, alpha=0.3)


def plot_wheel_speeds(
    series: TimeSeries,
    rms: np.ndarray | None = None,
    figsize: tuple[float, float] = (10, 6),
    config: VisualizationConfig | None = None,
) -> tuple[Figure, Axes]:
    """Plot the three wheel angular velocities and their RMS magnitude.

    Args:
        series: Wheel rate time series (rad/s).
        rms: Precomputed RMS magnitude (rad/s). Computed from ``series`` if None.
        figsize: Tuple of (width, height) for the figure size. Default: (10, 6)
        config: VisualizationConfig object. If None, uses defaults.

    Returns:
        tuple: (fig, ax) - The matplotlib figure and axes.

    Example:
        >>> series = run_simulation(PhysicalConstants.scubed())
        >>> fig, ax = plot_wheel_speeds(series)
        >>> plt.show()
    """
    import matplotlib.pyplot as plt

    if not isinstance(config, VisualizationConfig):
        config = VisualizationConfig()
    title_prop = FontProperties(
        family=config.font_family, size=config.title_font_size, weight="bold"
    )

    days = series.days
    rpm = series.wheel_rates_rpm()
    if rms is None:
        rms = wheel_rate_magnitude(series)
    rms_rpm = np.asarray(rms, dtype=float) * RPM_CONVERSION

    fig, ax = plt.subplots(figsize=figsize)
    ax.plot(days, rpm[:, 0], label=r"$\omega_1$")
    ax.plot(days, rpm[:, 1], label=r"$\omega_2$")
    ax.plot(days, rpm[:, 2], label=r"$\omega_3$")
    ax.plot(days, rms_rpm, config.rms_linestyle, label=r"$\omega_{RMS}$")
    ax.set_xlabel("Time [days]", fontsize=config.label_font_size)
    ax.set_ylabel(r"Angular Velocity, $\omega$ [RPM]", fontsize=config.label_font_size)
    ax.set_title("Momentum Wheel Angular Velocity of S-CUBED", fontproperties=title_prop)
    ax.legend(fontsize=config.legend_font_size)
    if days[-1] > 0:
        ax.set_xlim(0, float(days[-1]))
    _style_axes(ax, config)
    fig.tight_layout()
    return fig, ax


def plot_angular_momentum(
    momentum: AngularMomentumSeries,
    figsize: tuple[float, float] = (10, 6),
    config: VisualizationConfig | None = None,
) -> tuple[Figure, Axes]:
    """Plot the H_x, H_y and H_z components of the vehicle angular momentum."""
    import matplotlib.pyplot as plt

    if not isinstance(config, VisualizationConfig):
        config = VisualizationConfig()
    title_prop = FontProperties(
        family=config.font_family, size=config.title_font_size, weight="bold"
    )

    days = momentum.days
    fig, ax = plt.subplots(figsize=figsize)
    ax.plot(days, momentum.hx, label=r"$H_x$")
    ax.plot(days, momentum.hy, label=r"$H_y$")
    ax.plot(days, momentum.hz, label=r"$H_z$")
    ax.set_xlabel("Time [days]", fontsize=config.label_font_size)
    ax.set_ylabel("Angular Momentum, H [Nms]", fontsize=config.label_font_size)
    ax.set_title("Angular Momentum of S-CUBED", fontproperties=title_prop)
    ax.legend(fontsize=config.legend_font_size)
    if days[-1] > 0:
        ax.set_xlim(0, float(days[-1]))
    _style_axes(ax, config)
    fig.tight_layout()
    return fig, ax


def plot_adacs_summary(
    series: TimeSeries,
    momentum: AngularMomentumSeries,
    config: VisualizationConfig | None = None,
) -> tuple[Figure, Figure]:
    """Produce both diagnostic figures for one analysis run."""
    fig_speed, _ = plot_wheel_speeds(series, config=config)
    fig_momentum, _ = plot_angular_momentum(momentum, config=config)
    return fig_speed, fig_momentum
