from __future__ import annotations

from typing import Dict, Optional, Sequence

import ipywidgets as w

from .registry import VISUALIZERS, Visualizer, available_visualizers, create_visualizer


def build_visualizers(
    kinds: Optional[Sequence[str]] = None,
    overrides: Optional[Dict[str, dict]] = None,
) -> Dict[str, Visualizer]:
    """Create and render one visualizer per kind (default: all registered)."""
    kinds = list(kinds) if kinds is not None else available_visualizers()
    overrides = overrides or {}
    out: Dict[str, Visualizer] = {}
    for kind in kinds:
        viz = create_visualizer(kind, **overrides.get(kind, {}))
        viz.render()
        out[kind] = viz
    return out


def build_gui(
    kinds: Optional[Sequence[str]] = None,
    overrides: Optional[Dict[str, dict]] = None,
) -> w.Tab:
    """
    Tabbed notebook GUI, one tab per visualizer.

        from fourier_explorer.gui.app import build_gui
        build_gui()

    ``overrides`` maps a visualizer kind to profile field overrides, e.g.
    ``{"integral": {"initial_omega": 2.0}}``.
    """
    vizs = build_visualizers(kinds, overrides)
    tab = w.Tab(children=[v.widget for v in vizs.values()])
    for i, kind in enumerate(vizs):
        tab.set_title(i, VISUALIZERS[kind].name)
    return tab
