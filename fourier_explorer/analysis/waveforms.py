"""Signal definitions and sampling.

Two signals are used by the visualizers:

- the fixed composite ``f(t) = cos(t) + sin(2t) + cos(3t + pi/4)`` probed by the
  integral visualizer, and
- the phase-shifted cosine ``cos(t + phi)`` decomposed into ``cos(phi)cos(t)`` and
  ``-sin(phi)sin(t)`` by the phase-shift visualizer.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Literal, Tuple

import numpy as np

from fourier_explorer.analysis.quadrature import check_period
from fourier_explorer.models.series import SampleSeries


Basis = Literal["cos", "sin"]

COMPOSITE_FREQUENCIES: Tuple[float, ...] = (1.0, 2.0, 3.0)
COMPOSITE_PHASE = math.pi / 4
COMPOSITE_PERIODS: Tuple[float, ...] = tuple(2.0 * math.pi / f for f in COMPOSITE_FREQUENCIES)

DEFAULT_POINTS = 800


def composite_signal(t: np.ndarray) -> np.ndarray:
    t = np.asarray(t, dtype=np.float64)
    return np.cos(t) + np.sin(2.0 * t) + np.cos(3.0 * t + COMPOSITE_PHASE)


def basis_function(omega: float, basis: Basis) -> Callable[[np.ndarray], np.ndarray]:
    if basis == "cos":
        return lambda t: np.cos(omega * np.asarray(t, dtype=np.float64))
    if basis == "sin":
        return lambda t: np.sin(omega * np.asarray(t, dtype=np.float64))
    raise ValueError(f"basis must be 'cos' or 'sin', got {basis!r}")


def time_grid(period: float, n_points: int = DEFAULT_POINTS) -> np.ndarray:
    """``n_points + 1`` evenly spaced times over ``[-T/2, T/2]`` (both ends included)."""
    T = check_period(period)
    n_points = int(n_points)
    if n_points < 1:
        raise ValueError(f"n_points must be >= 1, got {n_points}")
    return np.linspace(-T / 2.0, T / 2.0, n_points + 1)


def sample(func: Callable[[np.ndarray], np.ndarray], period: float, n_points: int = DEFAULT_POINTS,
           *, name: str = "") -> SampleSeries:
    t = time_grid(period, n_points)
    return SampleSeries(t=t, y=func(t), name=name)


def product_series(t: np.ndarray, omega: float, basis: Basis) -> SampleSeries:
    """Samples of ``f(t) * basis(omega t)`` on the given grid."""
    t = np.asarray(t, dtype=np.float64)
    y = composite_signal(t) * basis_function(omega, basis)(t)
    return SampleSeries(t=t, y=y, name=f"f*{basis}")


# --------------------------------------------------------------------------------------
# Phase-shift decomposition
# --------------------------------------------------------------------------------------

@dataclass(frozen=True)
class PhaseShiftWaveforms:
    """``cos(t + phi) = cos(phi)cos(t) - sin(phi)sin(t)`` sampled on ``t``."""

    t: np.ndarray
    shifted_cosine: np.ndarray
    cosine_part: np.ndarray
    sine_part: np.ndarray

    @property
    def decomposed_sum(self) -> np.ndarray:
        return self.cosine_part + self.sine_part


def phase_shift_waveforms(t: np.ndarray, phase_shift: float) -> PhaseShiftWaveforms:
    t = np.asarray(t, dtype=np.float64)
    phi = float(phase_shift)
    return PhaseShiftWaveforms(
        t=t,
        shifted_cosine=np.cos(t + phi),
        cosine_part=math.cos(phi) * np.cos(t),
        sine_part=-math.sin(phi) * np.sin(t),
    )


def complex_components(phase_shift: float) -> Tuple[float, float]:
    """Real and imaginary part of ``exp(i phi)``."""
    return math.cos(phase_shift), math.sin(phase_shift)


def unit_circle_points(resolution: int = 50) -> np.ndarray:
    """Points on the unit circle every ``pi/resolution``, shape ``(n, 2)``."""
    angles = np.arange(2 * int(resolution) + 1) * (math.pi / int(resolution))
    return np.column_stack([np.cos(angles), np.sin(angles)])


def linspace_labels(start: float, end: float, count: int) -> np.ndarray:
    """``count`` evenly spaced labels from ``start`` to ``end`` inclusive."""
    count = int(count)
    if count < 2:
        raise ValueError(f"count must be >= 2, got {count}")
    return np.linspace(float(start), float(end), count)
