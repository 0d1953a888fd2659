"""Registry of available visualizers.

A visualizer is any object following :class:`Visualizer`: it exposes a ``widget``,
can ``render()`` itself, and reacts to ``on_parameter_change(value)`` from its
slider. Variants share no base class.

``VISUALIZERS`` is process-global: :func:`register_visualizer` mutates it (and
``PROFILE_TYPES``) for every caller in the interpreter. Code that needs an
isolated set of panels should build them directly from their classes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Protocol, Type

import ipywidgets as w

from fourier_explorer.models.profile import PROFILE_TYPES, profile_from_dict

from .integral_panel import IntegralVisualizer
from .phase_shift_panel import PhaseShiftVisualizer


class Visualizer(Protocol):
    widget: w.Widget

    def render(self) -> None: ...

    def on_parameter_change(self, value: float) -> None: ...

    def close(self) -> None: ...


@dataclass(frozen=True)
class VisualizerInfo:
    kind: str
    name: str
    description: str
    factory: Callable[[Any], Visualizer]


VISUALIZERS: Dict[str, VisualizerInfo] = {
    "integral": VisualizerInfo(
        kind="integral",
        name="Integral Visualizer",
        description="How integrating f(t)·cos(ωt) and f(t)·sin(ωt) over one orthogonal period "
                    "extracts the cosine and sine components of a composite signal",
        factory=IntegralVisualizer,
    ),
    "phase-shift": VisualizerInfo(
        kind="phase-shift",
        name="Phase Shift Visualizer",
        description="Decomposition of a phase-shifted cosine into cosine and sine components",
        factory=PhaseShiftVisualizer,
    ),
}


def available_visualizers() -> List[str]:
    return list(VISUALIZERS)


def visualizer_info() -> Dict[str, Dict[str, str]]:
    return {k: {"name": v.name, "description": v.description} for k, v in VISUALIZERS.items()}


def create_visualizer(kind: str, **overrides: Any) -> Visualizer:
    """Create a visualizer of ``kind`` with profile overrides, e.g.
    ``create_visualizer("integral", omega_max=4.0)``.
    """
    if kind not in VISUALIZERS:
        raise KeyError(f"Unknown visualizer type {kind!r}. Available types: {', '.join(available_visualizers())}")
    profile = profile_from_dict(kind, overrides)
    return VISUALIZERS[kind].factory(profile)


def register_visualizer(
    kind: str,
    factory: Callable[[Any], Visualizer],
    profile_type: Type[Any],
    *,
    name: str,
    description: str = "",
    overwrite: bool = False,
) -> VisualizerInfo:
    """Add a visualizer kind to the process-wide registry.

    Affects every later :func:`create_visualizer` and :func:`profile_from_dict` call
    in this interpreter. Refuses to replace an existing kind unless ``overwrite``.
    """
    if kind in VISUALIZERS and not overwrite:
        raise ValueError(f"Visualizer type {kind!r} is already registered (pass overwrite=True to replace it)")
    info = VisualizerInfo(kind=kind, name=name, description=description, factory=factory)
    VISUALIZERS[kind] = info
    PROFILE_TYPES[kind] = profile_type
    return info
