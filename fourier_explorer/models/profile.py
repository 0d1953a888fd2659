"""Visualizer profiles -- bundle every parameter that affects a visualizer.

A profile groups the configuration of one visualizer into a frozen dataclass.
It can be:

- Constructed with defaults and overridden field-by-field via ``dataclasses.replace()``
- Serialized to/from a dict for JSON provenance
- Validated as a whole with :meth:`validate` (all problems reported at once)
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List, Type, Union

from matplotlib.colors import is_color_like

from fourier_explorer.errors import ConfigError


def _default_integral_colors() -> Dict[str, str]:
    return {"composite": "orange", "cosine": "tab:blue", "sine": "tab:green", "integral": "black"}


def _default_legend_visible() -> Dict[str, bool]:
    return {"shifted_cosine": True, "cosine_part": False, "sine_part": False, "complex_plane": False}


@dataclass(frozen=True)
class IntegralProfile:
    """Frozen configuration of the integral visualizer.

    Fields
    ------
    omega_min, omega_max, omega_step : float
        Slider range of the analysis angular frequency. The display window is sized
        once from the largest orthogonal period over this inclusive range.
    initial_omega : float
        Slider start value.
    n_points : int
        Number of intervals of both sampling grids (``n_points + 1`` samples).
    discovery_tolerance : float
        Distance to a component frequency that counts as a discovery.
    colors : dict
        Matplotlib colors per chart role.
    """

    omega_min: float = 0.5
    omega_max: float = 3.0
    omega_step: float = 0.1
    initial_omega: float = 1.0
    n_points: int = 800
    discovery_tolerance: float = 0.05
    colors: Dict[str, str] = field(default_factory=_default_integral_colors)

    def problems(self) -> List[str]:
        errs: List[str] = []
        if not (math.isfinite(self.omega_min) and self.omega_min > 0):
            errs.append(f"omega_min must be > 0, got {self.omega_min}")
        if not (math.isfinite(self.omega_max) and self.omega_max >= self.omega_min):
            errs.append(f"omega_max must be >= omega_min, got {self.omega_max}")
        if not (math.isfinite(self.omega_step) and self.omega_step > 0):
            errs.append(f"omega_step must be > 0, got {self.omega_step}")
        if not (self.omega_min <= self.initial_omega <= self.omega_max):
            errs.append(
                f"initial_omega must lie in [{self.omega_min}, {self.omega_max}], got {self.initial_omega}"
            )
        if not (10 <= int(self.n_points) <= 10000):
            errs.append(f"n_points must be in [10, 10000], got {self.n_points}")
        if not (0 < self.discovery_tolerance < 0.5):
            errs.append(f"discovery_tolerance must be in (0, 0.5), got {self.discovery_tolerance}")
        missing = set(_default_integral_colors()) - set(self.colors)
        if missing:
            errs.append(f"colors is missing roles: {sorted(missing)}")
        bad = sorted(role for role, color in self.colors.items() if not is_color_like(color))
        if bad:
            errs.append(f"colors has invalid matplotlib colors for: {bad}")
        return errs

    def validate(self) -> "IntegralProfile":
        errs = self.problems()
        if errs:
            raise ConfigError("invalid IntegralProfile: " + "; ".join(errs))
        return self

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "IntegralProfile":
        return cls(**_merge_known(cls, d))


@dataclass(frozen=True)
class PhaseShiftProfile:
    """Frozen configuration of the phase-shift visualizer.

    The time axis spans ``[time_start, time_end]`` with ``points`` labels; the phase
    slider covers ``[0, 2*pi]`` in steps of ``phase_step``.
    """

    time_start: float = -math.pi
    time_end: float = math.pi
    points: int = 100
    initial_phase: float = math.pi / 4
    phase_step: float = math.pi / 100
    legend_visible: Dict[str, bool] = field(default_factory=_default_legend_visible)
    show_decomposed_sum: bool = True

    def problems(self) -> List[str]:
        errs: List[str] = []
        if not (self.time_end > self.time_start):
            errs.append(f"time_end must be > time_start, got [{self.time_start}, {self.time_end}]")
        if not (10 <= int(self.points) <= 10000):
            errs.append(f"points must be in [10, 10000], got {self.points}")
        if not (0.0 <= self.initial_phase <= 2.0 * math.pi):
            errs.append(f"initial_phase must be in [0, 2π], got {self.initial_phase}")
        if not (0.001 <= self.phase_step <= math.pi):
            errs.append(f"phase_step must be in [0.001, π], got {self.phase_step}")
        unknown = set(self.legend_visible) - set(_default_legend_visible())
        if unknown:
            errs.append(f"legend_visible has unknown charts: {sorted(unknown)}")
        return errs

    def validate(self) -> "PhaseShiftProfile":
        errs = self.problems()
        if errs:
            raise ConfigError("invalid PhaseShiftProfile: " + "; ".join(errs))
        return self

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "PhaseShiftProfile":
        return cls(**_merge_known(cls, d))


Profile = Union[IntegralProfile, PhaseShiftProfile]

PROFILE_TYPES: Dict[str, Type[Any]] = {
    "integral": IntegralProfile,
    "phase-shift": PhaseShiftProfile,
}


def _merge_known(cls: Type[Any], d: Dict[str, Any]) -> Dict[str, Any]:
    """Defaults of ``cls`` updated by ``d``; nested dicts are merged key by key."""
    known = {f.name for f in fields(cls)}
    unknown = set(d) - known
    if unknown:
        raise ConfigError(f"unknown {cls.__name__} fields: {sorted(unknown)}")

    base = asdict(cls())
    for key, value in d.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            merged = dict(base[key])
            merged.update(value)
            base[key] = merged
        else:
            base[key] = value
    return base


def profile_from_dict(kind: str, overrides: Dict[str, Any] | None = None) -> Profile:
    """Build and validate the profile of visualizer ``kind`` from default + overrides."""
    try:
        cls = PROFILE_TYPES[kind]
    except KeyError:
        raise KeyError(f"Unknown visualizer kind {kind!r}. Available: {sorted(PROFILE_TYPES)}") from None
    return cls.from_dict(dict(overrides or {})).validate()
