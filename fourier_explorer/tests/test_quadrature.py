"""Tests for trapezoidal quadrature, window partitioning and coefficient formatting."""

from __future__ import annotations

import math

import numpy as np
import pytest

from fourier_explorer.analysis.quadrature import (
    format_coefficient,
    integrate,
    integrate_product,
    partition_by_period,
    partition_by_window,
)
from fourier_explorer.analysis.waveforms import composite_signal, time_grid
from fourier_explorer.errors import EmptySeries, InvalidPeriod
from fourier_explorer.models.series import SampleSeries

PI = math.pi


# -----------------------------------------------------------------------
# integrate
# -----------------------------------------------------------------------


def test_integrate_empty_and_single_sample_is_zero() -> None:
    assert integrate([], 2 * PI) == 0.0
    assert integrate([3.5], 2 * PI) == 0.0
    # No pairs to sum, so the period is never used
    assert integrate([], 0.0) == 0.0


def test_integrate_strict_raises_on_empty() -> None:
    with pytest.raises(EmptySeries):
        integrate([], 2 * PI, strict=True)
    with pytest.raises(EmptySeries):
        integrate([1.0], 2 * PI, strict=True)


def test_integrate_constant_uses_open_ended_sum() -> None:
    """n samples, dt = T/n, n-1 trapezoids, no wrap segment."""
    v = 3.0
    for n in (2, 10, 801):
        got = integrate(np.full(n, v), 2 * PI)
        assert got == pytest.approx(2 * v * (n - 1) / n, rel=1e-12)


def test_integrate_constant_tends_to_2v() -> None:
    v = -1.25
    got = integrate(np.full(200_001, v), 4 * PI)
    assert got == pytest.approx(2 * v, rel=1e-5)


def test_integrate_does_not_depend_on_period_scale() -> None:
    s = np.sin(np.linspace(0.0, 1.0, 50)) + 0.3
    assert integrate(s, 1.0) == pytest.approx(integrate(s, 123.4), rel=1e-12)


@pytest.mark.parametrize("period", [0.0, -1.0, float("nan")])
def test_integrate_rejects_bad_period(period: float) -> None:
    with pytest.raises(InvalidPeriod):
        integrate([1.0, 2.0], period)


def test_integrate_product_recovers_cosine_coefficient() -> None:
    T = 2 * PI
    t = time_grid(T, 800)
    a1 = integrate_product(composite_signal(t) * np.cos(t), T)
    b1 = integrate_product(composite_signal(t) * np.sin(t), T)
    # 801 samples with dt = T/801: biased low by a factor 800/801
    assert a1 == pytest.approx(800.0 / 801.0, abs=1e-6)
    assert abs(b1) < 1e-9


def test_integrate_product_rejects_nan() -> None:
    with pytest.raises(ValueError):
        integrate_product([1.0, float("nan"), 2.0], 2 * PI)


# -----------------------------------------------------------------------
# partition_by_window
# -----------------------------------------------------------------------


def _line_series() -> SampleSeries:
    t = np.linspace(-5.0, 5.0, 11)
    return SampleSeries(t=t, y=2.0 * t + 1.0, name="line")


def test_partition_preserves_length_and_exclusivity() -> None:
    s = _line_series()
    part = partition_by_window(s, -2.0, 2.0)

    assert len(part.inside) == len(part.outside) == len(s)
    inside_ok = np.isfinite(part.inside)
    outside_ok = np.isfinite(part.outside)
    assert np.all(inside_ok ^ outside_ok)
    np.testing.assert_array_equal(part.inside[inside_ok], s.y[inside_ok])
    np.testing.assert_array_equal(part.outside[outside_ok], s.y[outside_ok])


def test_partition_window_is_inclusive() -> None:
    part = partition_by_window(_line_series(), -2.0, 2.0)
    np.testing.assert_array_equal(part.t[part.mask], [-2.0, -1.0, 0.0, 1.0, 2.0])
    assert part.n_inside == 5
    assert part.window == (-2.0, 2.0)


def test_partition_accepts_pairs() -> None:
    pairs = [(-1.0, 10.0), (0.0, 20.0), (1.5, 30.0)]
    part = partition_by_window(pairs, -1.0, 1.0)
    assert part.mask.tolist() == [True, True, False]
    assert np.isnan(part.inside[2])
    assert part.outside[2] == 30.0
    assert part.labels() == ["-1.00", "0.00", "1.50"]


def test_partition_nan_sample_side_comes_from_mask() -> None:
    part = partition_by_window([(0.0, float("nan")), (5.0, 1.0)], -1.0, 1.0)
    assert part.mask.tolist() == [True, False]
    # a NaN value looks like the "no data" marker on both sides
    assert np.isnan(part.inside[0]) and np.isnan(part.outside[0])
    assert part.outside[1] == 1.0


def test_partition_empty_series() -> None:
    part = partition_by_window([], -1.0, 1.0)
    assert len(part) == 0
    assert part.inside.size == 0 and part.outside.size == 0


def test_partition_rejects_empty_window() -> None:
    with pytest.raises(InvalidPeriod):
        partition_by_window(_line_series(), 1.0, 1.0)
    with pytest.raises(InvalidPeriod):
        partition_by_window(_line_series(), 2.0, -2.0)


def test_partition_by_period_is_centred() -> None:
    part = partition_by_period(_line_series(), 4.0)
    assert part.window == (-2.0, 2.0)
    with pytest.raises(InvalidPeriod):
        partition_by_period(_line_series(), 0.0)


def test_partition_frame_columns() -> None:
    df = partition_by_window(_line_series(), -2.0, 2.0).to_frame()
    assert list(df.columns) == ["t", "inside", "outside", "in_window"]
    assert int(df["in_window"].sum()) == 5


# -----------------------------------------------------------------------
# format_coefficient
# -----------------------------------------------------------------------


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.0003, "0"),
        (-0.0009, "0"),
        (0.0, "0"),
        (0.706, "0.707"),
        (0.715, "0.707"),
        (-0.71, "-0.707"),
        (2.4, "2"),
        (2.5, "3"),
        (-2.5, "-2"),
        (-0.4, "0"),
        (0.9987, "1"),
        (-1.2, "-1"),
    ],
)
def test_format_coefficient(value: float, expected: str) -> None:
    assert format_coefficient(value) == expected


@pytest.mark.parametrize("value", [float("nan"), float("inf"), -float("inf")])
def test_format_coefficient_rejects_non_finite(value: float) -> None:
    with pytest.raises(ValueError, match="finite"):
        format_coefficient(value)
