"""Numeric core of the visualizers.

Design principle:
  - ``periods`` resolves the orthogonal period for an analysis frequency.
  - ``waveforms`` samples signals on a given window (no period logic).
  - ``quadrature`` integrates samples over the resolved period and partitions
    display series by window.

None of these modules keep state between calls.
"""

from .periods import (
    Period,
    RationalApproximation,
    lcm_of_periods,
    max_period_over_range,
    rationalize,
    resolve_period,
)
from .quadrature import format_coefficient, integrate, integrate_product, partition_by_window

__all__ = [
    "Period",
    "RationalApproximation",
    "rationalize",
    "lcm_of_periods",
    "resolve_period",
    "max_period_over_range",
    "integrate",
    "integrate_product",
    "partition_by_window",
    "format_coefficient",
]
