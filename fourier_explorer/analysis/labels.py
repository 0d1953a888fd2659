"""Text labels for pi-multiple axes and phase values."""

from __future__ import annotations

import math
from typing import Iterable, List, Optional

_TICK_TOL = 0.01

_NAMED_TICKS = (
    (0.25, "π/4"),
    (0.5, "π/2"),
    (0.75, "3π/4"),
    (1.0, "π"),
    (1.5, "3π/2"),
    (2.0, "2π"),
)


def format_pi_labels(values: Iterable[float]) -> List[str]:
    """Label each value as a multiple of pi with two decimals."""
    out = []
    for v in values:
        multiple = f"{v / math.pi:.2f}"
        m = float(multiple)
        if m == 0:
            out.append("0")
        elif m == 1:
            out.append("π")
        elif m == -1:
            out.append("-π")
        else:
            out.append(f"{multiple}π")
    return out


def format_phase_shift(phase_shift: float) -> str:
    return f"{phase_shift / math.pi:.3f}π"


def _simplify_pi_fraction(ratio: float) -> Optional[str]:
    for den in range(2, 9):
        num = int(round(ratio * den))
        if abs(ratio - num / den) < _TICK_TOL:
            if num == 0:
                return "0"
            if num == den:
                return "π"
            if num == -den:
                return "-π"
            if num == 1:
                return f"π/{den}"
            if num == -1:
                return f"-π/{den}"
            return f"{num}π/{den}"
    return None


def format_pi_tick(value: float) -> str:
    """Axis tick label for a time value, as a readable multiple of pi."""
    if abs(value) < _TICK_TOL:
        return "0"

    ratio = value / math.pi
    for target, label in _NAMED_TICKS:
        if abs(ratio - target) < _TICK_TOL:
            return label
        if abs(ratio + target) < _TICK_TOL:
            return f"-{label}"

    rounded = int(round(ratio))
    if abs(ratio - rounded) < _TICK_TOL:
        if rounded == 0:
            return "0"
        if rounded == 1:
            return "π"
        if rounded == -1:
            return "-π"
        return f"{rounded}π"

    fraction = _simplify_pi_fraction(ratio)
    if fraction:
        return fraction
    return f"{ratio:.2f}π"
