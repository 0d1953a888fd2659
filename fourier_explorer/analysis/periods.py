"""Periodicity resolution for products of commensurate sinusoids.

All periods handled here are multiples of pi. Each period is divided by pi,
approximated by a small rational number and the least common multiple is taken
on the rationals, so repeated LCM steps never accumulate floating-point drift.

Functions
---------
rationalize
    Rational approximation of a pi-normalised period (shortcuts, then continued fractions).
continued_fraction
    Best convergent with a bounded denominator.
lcm_of_periods
    Least common period of a set of periods (float, seconds-equivalent).
resolve_period
    Orthogonal period of the composite components and one analysis frequency.
max_period_over_range
    Largest orthogonal period over an inclusive frequency scan (stable display window).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Iterable, Sequence

import numpy as np

from fourier_explorer.errors import InvalidFrequency, InvalidPeriod


DEFAULT_TOLERANCE = 1e-10
MAX_DENOMINATOR = 100

# Continued fractions stop once the fractional remainder is this small.
_CF_REMAINDER_EPS = 1e-10


@dataclass(frozen=True)
class RationalApproximation:
    """Reduced ``numerator/denominator`` pair, ``denominator > 0``."""

    numerator: int
    denominator: int

    def __post_init__(self) -> None:
        num = int(self.numerator)
        den = int(self.denominator)
        if den == 0:
            raise ZeroDivisionError("RationalApproximation denominator must be non-zero")
        if den < 0:
            num, den = -num, -den
        g = math.gcd(num, den)
        if g > 1:
            num //= g
            den //= g
        object.__setattr__(self, "numerator", num)
        object.__setattr__(self, "denominator", den)

    @property
    def value(self) -> float:
        return self.numerator / self.denominator

    def as_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)


@dataclass(frozen=True)
class Period:
    """Strictly positive period stored as an exact rational multiple of pi."""

    pi_multiple: Fraction

    def __post_init__(self) -> None:
        m = Fraction(self.pi_multiple)
        if m <= 0:
            raise InvalidPeriod(f"period must be > 0, got {m}*pi")
        object.__setattr__(self, "pi_multiple", m)

    @property
    def value(self) -> float:
        return float(self.pi_multiple) * math.pi

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        m = self.pi_multiple
        if m.denominator == 1:
            return "π" if m.numerator == 1 else f"{m.numerator}π"
        return f"{m.numerator}π/{m.denominator}"


# --------------------------------------------------------------------------------------
# Integer helpers
# --------------------------------------------------------------------------------------

def gcd_int(a: float, b: float) -> int:
    """Euclidean GCD on inputs rounded to the nearest integer."""
    a = abs(int(round(a)))
    b = abs(int(round(b)))
    while b:
        a, b = b, a % b
    return a


def lcm_int(a: float, b: float) -> int:
    a = abs(int(round(a)))
    b = abs(int(round(b)))
    g = gcd_int(a, b)
    if g == 0:
        return 0
    return a * b // g


# --------------------------------------------------------------------------------------
# Rational approximation
# --------------------------------------------------------------------------------------

def continued_fraction(x: float, max_denominator: int = MAX_DENOMINATOR) -> RationalApproximation:
    """Continued-fraction approximation of ``x`` with denominator ``<= max_denominator``.

    Returns the last convergent found before the next one would exceed the bound,
    or before the fractional remainder drops below ``1e-10``.
    """
    if not math.isfinite(x):
        raise ValueError(f"cannot rationalize non-finite value {x!r}")

    a = math.floor(x)
    p0, p1 = 1, a
    q0, q1 = 0, 1
    frac = x - a

    while frac > _CF_REMAINDER_EPS and q1 < max_denominator:
        frac = 1.0 / frac
        a = math.floor(frac)
        p2 = a * p1 + p0
        q2 = a * q1 + q0
        if q2 > max_denominator:
            break
        p0, p1 = p1, p2
        q0, q1 = q1, q2
        frac -= a

    return RationalApproximation(p1, q1)


def rationalize(
    x: float,
    tolerance: float = DEFAULT_TOLERANCE,
    *,
    max_denominator: int = MAX_DENOMINATOR,
) -> RationalApproximation:
    """Rational approximation of a pi-normalised period ``x = T/pi``.

    Resolution order (first match wins):

    1. exact composite periods: ``2 -> 2/1``, ``1 -> 1/1``, ``2/3 -> 2/3``;
    2. analysis periods ``x = 2/w``: ``w`` integer gives ``2/w``, ``w`` half-integer
       gives ``4/(2w)``;
    3. continued-fraction expansion bounded by ``max_denominator``.

    The order fixes the result for the frequencies where components become
    discoverable (1, 2, 3) and for the half-integers in between.
    """
    if abs(x - 2.0) < tolerance:
        return RationalApproximation(2, 1)
    if abs(x - 1.0) < tolerance:
        return RationalApproximation(1, 1)
    if abs(x - 2.0 / 3.0) < tolerance:
        return RationalApproximation(2, 3)

    if x > 0:
        omega = 2.0 / x
        if abs(omega - round(omega)) < tolerance:
            return RationalApproximation(2, int(round(omega)))
        doubled = omega * 2.0
        if abs(doubled - round(doubled)) < tolerance:
            return RationalApproximation(4, int(round(doubled)))

    return continued_fraction(x, max_denominator)


# --------------------------------------------------------------------------------------
# Least common periods
# --------------------------------------------------------------------------------------

def lcm_of_rationals(rationals: Sequence[RationalApproximation]) -> Fraction:
    """LCM of fractions ``a_i/b_i`` as ``LCM(a_i) / GCD(b_i)``."""
    if not rationals:
        raise ValueError("lcm_of_rationals needs at least one value")
    num = rationals[0].numerator
    den = rationals[0].denominator
    for r in rationals[1:]:
        num = lcm_int(num, r.numerator)
        den = gcd_int(den, r.denominator)
    return Fraction(num, den)


def _check_periods(periods: Iterable[float]) -> list[float]:
    out = [float(p) for p in periods]
    if not out:
        raise ValueError("at least one period is required")
    for p in out:
        if not math.isfinite(p) or p <= 0:
            raise InvalidPeriod(f"periods must be finite and > 0, got {p!r}")
    return out


def lcm_period(periods: Iterable[float], tolerance: float = DEFAULT_TOLERANCE) -> Period:
    """Exact least common period of ``periods`` as a :class:`Period`."""
    ps = _check_periods(periods)
    rationals = [rationalize(p / math.pi, tolerance) for p in ps]
    return Period(lcm_of_rationals(rationals))


def lcm_of_periods(periods: Iterable[float], tolerance: float = DEFAULT_TOLERANCE) -> float:
    """Least common period of ``periods`` (same units as the input)."""
    return lcm_period(periods, tolerance).value


def analysis_period(analysis_frequency: float) -> float:
    """Period ``2*pi/w`` of the analysis sinusoid."""
    w = float(analysis_frequency)
    if not math.isfinite(w) or w <= 0:
        raise InvalidFrequency(f"analysis frequency must be finite and > 0, got {analysis_frequency!r}")
    return 2.0 * math.pi / w


def resolve_period(component_periods: Sequence[float], analysis_frequency: float) -> float:
    """Orthogonal period for the composite components and analysis frequency ``w``.

    This is the smallest window that is an integer multiple of every component
    period and of ``2*pi/w``, i.e. the window over which ``f(t) * cos(w t)`` and
    ``f(t) * sin(w t)`` are exactly periodic.
    """
    return lcm_of_periods(list(component_periods) + [analysis_period(analysis_frequency)])


def composite_period(component_periods: Sequence[float]) -> float:
    """Period of the composite signal alone."""
    return lcm_of_periods(component_periods)


def frequency_grid(omega_min: float, omega_max: float, omega_step: float) -> np.ndarray:
    """Inclusive scan ``omega_min, omega_min + step, ..., <= omega_max``.

    Points are generated by index, so the endpoint is not lost to accumulated
    rounding of repeated additions.
    """
    if not (math.isfinite(omega_step) and omega_step > 0):
        raise ValueError(f"omega_step must be > 0, got {omega_step!r}")
    if omega_max < omega_min:
        raise ValueError(f"omega_max ({omega_max}) must be >= omega_min ({omega_min})")
    n = int(math.floor((omega_max - omega_min) / omega_step + 1e-9)) + 1
    return omega_min + omega_step * np.arange(n, dtype=float)


def max_period_over_range(
    component_periods: Sequence[float],
    omega_min: float,
    omega_max: float,
    omega_step: float,
) -> float:
    """Largest orthogonal period over the inclusive frequency scan."""
    if not (math.isfinite(omega_min) and omega_min > 0):
        raise InvalidFrequency(f"omega_min must be > 0, got {omega_min!r}")
    components = list(component_periods)
    best = 0.0
    for w in frequency_grid(omega_min, omega_max, omega_step):
        best = max(best, resolve_period(components, float(w)))
    return best
