"""Headless smoke tests for the visualizer panels.

These tests run without a display (Agg backend, see conftest.py) and verify that:
1. panels build valid ipywidgets with an Output widget for plots
2. parameter changes recompute, redraw and update titles
3. invalid parameters are logged instead of raised
"""

from __future__ import annotations

import dataclasses
import math

import ipywidgets as w
import matplotlib.pyplot as plt
import pytest

from fourier_explorer.gui.app import build_gui, build_visualizers
from fourier_explorer.gui.integral_panel import IntegralVisualizer, build_integral_panel, coefficient_title
from fourier_explorer.gui.log_view import HtmlLog
from fourier_explorer.gui.phase_shift_panel import PhaseShiftVisualizer, build_phase_shift_panel, phase_titles
from fourier_explorer.gui.registry import (
    VISUALIZERS,
    available_visualizers,
    create_visualizer,
    register_visualizer,
    visualizer_info,
)
from fourier_explorer.models.profile import IntegralProfile


def find_widget(widget, cls):
    if isinstance(widget, cls):
        return widget
    if hasattr(widget, "children"):
        for child in widget.children:
            result = find_widget(child, cls)
            if result is not None:
                return result
    return None


# -----------------------------------------------------------------------
# Integral visualizer
# -----------------------------------------------------------------------


def test_integral_panel_contains_output_and_slider() -> None:
    panel = build_integral_panel()
    assert isinstance(panel, w.Widget)
    assert find_widget(panel, w.Output) is not None
    slider = find_widget(panel, w.FloatSlider)
    assert slider is not None
    assert slider.min == 0.5 and slider.max == 3.0


def test_integral_render_draws_three_axes() -> None:
    viz = IntegralVisualizer()
    viz.render()
    assert viz.state.n_renders == 1
    assert len(viz.state.fig.axes) == 3
    assert viz.state.snapshot.omega == 1.0
    assert "= 1" in viz.cos_title.value
    assert "cosine" in viz.badges.value


def test_integral_parameter_change_updates_state() -> None:
    viz = IntegralVisualizer()
    viz.on_parameter_change(3.0)
    snap = viz.state.snapshot
    assert snap.cosine_label == "0.707"
    assert snap.sine_label == "-0.707"
    assert viz.slider.value == pytest.approx(3.0)
    assert "cosine" in viz.badges.value and "sine" in viz.badges.value
    assert "0.707cos(3t)" in viz.formula.value
    assert any("Discovery" in msg for _lvl, msg, _n in viz.log.entries)


def test_integral_slider_drives_recompute() -> None:
    viz = IntegralVisualizer()
    viz.render()
    viz.slider.value = 2.0
    assert viz.state.omega == pytest.approx(2.0)
    assert viz.state.n_renders == 2
    assert viz.state.snapshot.sine_label == "1"


def test_integral_invalid_frequency_is_logged() -> None:
    viz = IntegralVisualizer()
    viz.render()
    before = viz.state.snapshot
    viz.on_parameter_change(0.0)
    assert viz.state.snapshot is before
    assert viz.state.n_renders == 1
    levels = [lvl for lvl, _msg, _n in viz.log.entries]
    assert "error" in levels


def test_integral_draw_failure_is_logged() -> None:
    viz = IntegralVisualizer()
    viz.render()
    viz.profile = dataclasses.replace(viz.profile, colors={**viz.profile.colors, "cosine": "not-a-color"})

    viz.on_parameter_change(2.0)

    assert viz.state.n_renders == 1
    level, msg, _n = viz.log.entries[-1]
    assert level == "error"
    assert msg.startswith("ERROR: redraw")
    viz.close()


def test_integral_close_releases_figure() -> None:
    viz = IntegralVisualizer()
    viz.render()
    num = viz.state.fig.number
    assert plt.fignum_exists(num)

    viz.close()
    assert viz.state.fig is None
    assert not plt.fignum_exists(num)
    viz.close()


def test_coefficient_title() -> None:
    assert coefficient_title("cos", 1.0, "1") == "(2/T) ∫ f(t)·cos(1.0t) dt = 1"


# -----------------------------------------------------------------------
# Phase-shift visualizer
# -----------------------------------------------------------------------


def test_phase_shift_render_and_change() -> None:
    viz = PhaseShiftVisualizer()
    viz.render()
    assert len(viz.state.fig.axes) == 4
    assert viz.value_label.value == "0.250π"

    viz.on_parameter_change(math.pi / 2)
    assert viz.value_label.value == "0.500π"
    assert viz.state.n_renders == 2


def test_phase_shift_panel_contains_output_and_slider() -> None:
    panel = build_phase_shift_panel()
    assert isinstance(panel, w.Widget)
    assert find_widget(panel, w.Output) is not None
    slider = find_widget(panel, w.FloatSlider)
    assert slider.min == 0.0
    assert slider.max == pytest.approx(2 * math.pi)


def test_phase_shift_draw_failure_is_logged(monkeypatch) -> None:
    viz = PhaseShiftVisualizer()
    viz.render()

    def boom() -> None:
        raise RuntimeError("backend gone")

    monkeypatch.setattr(viz, "_draw", boom)
    viz.on_parameter_change(1.0)

    assert viz.state.n_renders == 1
    level, msg, _n = viz.log.entries[-1]
    assert level == "error"
    assert "backend gone" in msg
    viz.close()
    assert viz.state.fig is None


def test_phase_shift_rejects_out_of_range() -> None:
    viz = PhaseShiftVisualizer()
    viz.render()
    viz.on_parameter_change(10.0)
    assert viz.state.n_renders == 1
    assert viz.log.entries[-1][0] == "error"


def test_phase_titles() -> None:
    t = phase_titles(math.pi / 2)
    assert t["shifted_cosine"] == "cos(t + 0.500π)"
    assert t["cosine_part"] == "0.000cos(t)"
    assert t["sine_part"] == "1.000sin(t)"


# -----------------------------------------------------------------------
# Registry / app
# -----------------------------------------------------------------------


def test_registry_lists_both_visualizers() -> None:
    assert set(available_visualizers()) >= {"integral", "phase-shift"}
    info = visualizer_info()
    assert info["integral"]["name"] == "Integral Visualizer"


def test_create_visualizer_applies_overrides() -> None:
    viz = create_visualizer("integral", initial_omega=2.0)
    assert isinstance(viz, IntegralVisualizer)
    assert viz.state.omega == 2.0
    with pytest.raises(KeyError, match="Available types"):
        create_visualizer("spectrogram")


def test_register_visualizer_refuses_duplicates() -> None:
    with pytest.raises(ValueError):
        register_visualizer("integral", IntegralVisualizer, IntegralProfile, name="dup")


def test_create_visualizer_rejects_bad_color() -> None:
    with pytest.raises(ValueError, match="colors"):
        create_visualizer("integral", colors={"cosine": "not-a-color"})
    assert VISUALIZERS["integral"].name == "Integral Visualizer"


def test_build_gui_returns_tab_widget() -> None:
    gui = build_gui()
    assert isinstance(gui, w.Tab)
    assert len(gui.children) == 2


def test_build_visualizers_with_overrides() -> None:
    vizs = build_visualizers(["integral"], {"integral": {"initial_omega": 3.0}})
    assert list(vizs) == ["integral"]
    assert vizs["integral"].state.snapshot.cosine_label == "0.707"


# -----------------------------------------------------------------------
# Log view
# -----------------------------------------------------------------------


def test_html_log_coalesces_and_bounds() -> None:
    log = HtmlLog(max_entries=3)
    log.info("a")
    log.info("a")
    log.warning("<b>")
    assert log.entries[0] == ("info", "a", 2)
    assert "(x2)" in log.widget.value
    assert "&lt;b&gt;" in log.widget.value

    for i in range(5):
        log.error(f"e{i}")
    assert len(log.entries) == 3
    assert log.entries[-1] == ("error", "e4", 1)

    log.clear()
    assert log.entries == []
    assert "Log is empty" in log.widget.value
