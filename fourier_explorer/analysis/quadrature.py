"""Trapezoidal quadrature of sampled products and display-window partitioning.

Normalisation: coefficient ``= (2/T) * integral over one orthogonal period``.

The trapezoidal sum is open-ended: with ``n`` samples it uses ``dt = T/n`` and the
``n-1`` consecutive pairs, without the wrap segment from the last sample back to
the first. Displayed coefficient values are formatted around exactly this
discretisation, so the sum is kept as is.
"""

from __future__ import annotations

import math
from typing import Sequence, Union

import numpy as np

from fourier_explorer.errors import EmptySeries, InvalidPeriod
from fourier_explorer.models.series import SeriesLike, WindowPartition, as_series


ArrayLike = Union[Sequence[float], np.ndarray]

ZERO_THRESHOLD = 0.001
HALF_SQRT2_LITERAL = 0.707
HALF_SQRT2_TOLERANCE = 0.01


def check_period(period: float) -> float:
    T = float(period)
    if not math.isfinite(T) or T <= 0:
        raise InvalidPeriod(f"period must be finite and > 0, got {period!r}")
    return T


def integrate(samples: ArrayLike, period: float, *, strict: bool = False) -> float:
    """Normalised trapezoidal integral of ``samples`` over one ``period``.

    Parameters
    ----------
    samples:
        Evenly spaced values of the product signal over the window.
    period:
        Window length ``T``.
    strict:
        If True, raise :class:`EmptySeries` instead of returning 0 when there are
        fewer than two samples.

    Returns
    -------
    float
        ``(2/T) * sum((s[i] + s[i+1]) * dt / 2)`` with ``dt = T/len(samples)``.
    """
    s = np.asarray(samples, dtype=np.float64).ravel()
    if s.size < 2:
        if strict:
            raise EmptySeries(f"need at least two samples to integrate, got {s.size}")
        return 0.0

    T = check_period(period)
    dt = T / float(s.size)
    integral = float(np.sum((s[:-1] + s[1:]) * dt / 2.0))
    return (2.0 / T) * integral


def integrate_product(samples: ArrayLike, period: float) -> float:
    """Fourier-style coefficient of a sampled signal-times-basis product.

    Same as :func:`integrate`, but non-finite samples are rejected so NaN never
    propagates into a displayed coefficient.
    """
    s = np.asarray(samples, dtype=np.float64).ravel()
    if s.size and not np.all(np.isfinite(s)):
        bad = np.where(~np.isfinite(s))[0]
        raise ValueError(f"product samples contain non-finite values at indices {bad[:20].tolist()}")
    return integrate(s, period)


def partition_by_window(samples: SeriesLike, window_start: float, window_end: float) -> WindowPartition:
    """Split ``samples`` into inside / outside ``[window_start, window_end]`` (inclusive).

    Both output arrays have the input length. Where a sample is inside, ``outside``
    holds NaN and vice versa.
    """
    lo = float(window_start)
    hi = float(window_end)
    if not (math.isfinite(lo) and math.isfinite(hi)) or hi <= lo:
        raise InvalidPeriod(f"window must satisfy start < end, got [{window_start!r}, {window_end!r}]")

    series = as_series(samples)
    t = series.t
    y = series.y
    mask = (t >= lo) & (t <= hi)

    inside = np.where(mask, y, np.nan)
    outside = np.where(mask, np.nan, y)
    return WindowPartition(t=t, inside=inside, outside=outside, mask=mask, window=(lo, hi))


def partition_by_period(samples: SeriesLike, period: float) -> WindowPartition:
    """Partition by the centred window ``[-T/2, T/2]``."""
    T = check_period(period)
    return partition_by_window(samples, -T / 2.0, T / 2.0)


def format_coefficient(value: float) -> str:
    """Display rounding of a coefficient.

    - ``|v| < 0.001`` -> ``"0"``
    - ``|v|`` within 0.01 of 0.707 -> ``"0.707"`` / ``"-0.707"`` (the cos(3t + pi/4)
      component projects to exactly sqrt(2)/2 on both bases)
    - otherwise the nearest integer, halves rounded up

    Non-finite values raise ``ValueError``.
    """
    v = float(value)
    if not math.isfinite(v):
        raise ValueError(f"coefficient must be finite, got {value!r}")
    if abs(v) < ZERO_THRESHOLD:
        return "0"
    if abs(abs(v) - HALF_SQRT2_LITERAL) < HALF_SQRT2_TOLERANCE:
        return "-0.707" if v < 0 else "0.707"
    return str(int(math.floor(v + 0.5)))
