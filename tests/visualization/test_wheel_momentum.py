"""Unit tests for adacs.visualization.wheel_momentum module."""

from math import pi

import numpy as np

from adacs.config import VisualizationConfig
from adacs.simulation import wheel_rate_magnitude
from adacs.visualization import (
    plot_adacs_summary,
    plot_angular_momentum,
    plot_wheel_speeds,
)


class TestPlotWheelSpeeds:
    def test_returns_figure_and_axes(self, small_series):
        fig, ax = plot_wheel_speeds(small_series)
        assert fig is not None
        assert ax.get_title() == "Momentum Wheel Angular Velocity of S-CUBED"
        assert ax.get_xlabel() == "Time [days]"

    def test_lines_are_rpm_against_days(self, small_series):
        fig, ax = plot_wheel_speeds(small_series)
        lines = ax.get_lines()
        assert len(lines) == 4
        np.testing.assert_allclose(lines[0].get_xdata(), small_series.days)
        np.testing.assert_allclose(
            lines[1].get_ydata(), small_series.omega_2 * 60 / (2 * pi)
        )

    def test_rms_line_is_dashed(self, small_series):
        fig, ax = plot_wheel_speeds(small_series)
        rms_line = ax.get_lines()[3]
        assert rms_line.get_linestyle() == "--"
        np.testing.assert_allclose(
            rms_line.get_ydata(), wheel_rate_magnitude(small_series) * 60 / (2 * pi)
        )

    def test_legend_and_xlim(self, small_series):
        fig, ax = plot_wheel_speeds(small_series)
        labels = [t.get_text() for t in ax.get_legend().get_texts()]
        assert labels == [r"$\omega_1$", r"$\omega_2$", r"$\omega_3$", r"$\omega_{RMS}$"]
        assert ax.get_xlim() == (0.0, 2.0)

    def test_custom_figsize(self, small_series):
        fig, ax = plot_wheel_speeds(small_series, figsize=(12, 4))
        assert fig.get_size_inches()[0] == 12
        assert fig.get_size_inches()[1] == 4

    def test_custom_config(self, small_series):
        config = VisualizationConfig(show_grid=False, rms_linestyle=":")
        fig, ax = plot_wheel_speeds(small_series, config=config)
        assert ax.get_lines()[3].get_linestyle() == ":"
        assert not any(line.get_visible() for line in ax.xaxis.get_gridlines())

    def test_grid_on_by_default(self, small_series):
        fig, ax = plot_wheel_speeds(small_series)
        assert all(line.get_visible() for line in ax.xaxis.get_gridlines())


class TestPlotAngularMomentum:
    def test_three_components(self, small_momentum):
        fig, ax = plot_angular_momentum(small_momentum)
        lines = ax.get_lines()
        assert len(lines) == 3
        np.testing.assert_allclose(lines[0].get_ydata(), small_momentum.hx)
        np.testing.assert_allclose(lines[2].get_ydata(), small_momentum.hz)
        assert ax.get_title() == "Angular Momentum of S-CUBED"
        assert ax.get_ylabel() == "Angular Momentum, H [Nms]"


def test_summary_returns_two_figures(small_series, small_momentum):
    fig_speed, fig_momentum = plot_adacs_summary(small_series, small_momentum)
    assert fig_speed is not fig_momentum
    assert fig_speed.axes[0].get_title().startswith("Momentum Wheel")
    assert fig_momentum.axes[0].get_title().startswith("Angular Momentum")
