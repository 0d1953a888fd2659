"""
Phase-shift visualizer -- cos(t + phi) = cos(phi)cos(t) - sin(phi)sin(t).

Four plots: the shifted cosine (with the re-summed decomposition dashed on top),
its cosine part, its sine part, and exp(i phi) on the unit circle.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional

import ipywidgets as w
import matplotlib.pyplot as plt
from matplotlib.ticker import FuncFormatter, MultipleLocator
from IPython.display import display

from fourier_explorer.analysis.labels import format_phase_shift, format_pi_tick
from fourier_explorer.analysis.waveforms import (
    PhaseShiftWaveforms,
    complex_components,
    linspace_labels,
    phase_shift_waveforms,
    unit_circle_points,
)
from fourier_explorer.models.profile import PhaseShiftProfile

from .log_view import HtmlLog


@dataclass
class PhaseShiftState:
    phase: float
    waveforms: Optional[PhaseShiftWaveforms] = None
    fig: Any = None
    n_renders: int = 0


def phase_titles(phase: float) -> dict[str, str]:
    """Chart titles for one phase value.

    The sine title shows ``sin(phi)`` rather than ``-sin(phi)`` so it reads together
    with the minus sign of the identity.
    """
    return {
        "shifted_cosine": f"cos(t + {format_phase_shift(phase)})",
        "cosine_part": f"{math.cos(phase):.3f}cos(t)",
        "sine_part": f"{math.sin(phase):.3f}sin(t)",
    }


class PhaseShiftVisualizer:
    kind = "phase-shift"

    def __init__(self, profile: Optional[PhaseShiftProfile] = None) -> None:
        self.profile = (profile or PhaseShiftProfile()).validate()
        self.state = PhaseShiftState(phase=float(self.profile.initial_phase))
        self.t = linspace_labels(self.profile.time_start, self.profile.time_end, self.profile.points)
        self.log = HtmlLog(title="Log", height_px=100)

        self.slider = w.FloatSlider(
            value=self.state.phase,
            min=0.0,
            max=2.0 * math.pi,
            step=self.profile.phase_step,
            description="φ",
            readout=False,
            continuous_update=True,
            layout=w.Layout(width="480px"),
        )
        self.value_label = w.HTML()
        self.out = w.Output(layout=w.Layout(border="1px solid #ddd", padding="4px"))
        self.slider.observe(lambda change: self.on_parameter_change(float(change["new"])), names="value")

        self.widget = w.VBox([w.HBox([self.slider, self.value_label]), self.out, self.log.panel])

    def on_parameter_change(self, value: float) -> None:
        phase = float(value)
        if not (math.isfinite(phase) and 0.0 <= phase <= 2.0 * math.pi + self.profile.phase_step):
            self.log.error(f"ERROR: phase shift {value!r} outside [0, 2π]")
            return
        try:
            self.state.phase = phase
            self.state.waveforms = phase_shift_waveforms(self.t, phase)
            self.value_label.value = format_phase_shift(phase)
            self._draw()
        except Exception as exc:
            self.log.exception(f"redraw at φ={phase:.3f} failed", exc)

    def render(self) -> None:
        self.on_parameter_change(self.state.phase)

    def close(self) -> None:
        """Release the current figure."""
        if self.state.fig is not None:
            plt.close(self.state.fig)
            self.state.fig = None

    def _draw(self) -> None:
        if self.state.fig is not None:
            plt.close(self.state.fig)

        wf = self.state.waveforms
        titles = phase_titles(self.state.phase)
        legend = self.profile.legend_visible

        fig, axes = plt.subplots(2, 2, figsize=(10, 7))
        self.state.fig = fig
        ax_shift, ax_cos, ax_sin, ax_plane = axes.ravel()

        ax_shift.plot(wf.t, wf.shifted_cosine, color="orange", label="phase-shifted cosine")
        if self.profile.show_decomposed_sum:
            ax_shift.plot(wf.t, wf.decomposed_sum, color="red", linewidth=4, linestyle="--", alpha=0.6,
                          label="decomposed sum")
        ax_shift.set_title(titles["shifted_cosine"])
        ax_cos.plot(wf.t, wf.cosine_part, color="tab:blue", label="non-phase-shifted cosine")
        ax_cos.set_title(titles["cosine_part"])
        ax_sin.plot(wf.t, wf.sine_part, color="tab:green", label="sine wave")
        ax_sin.set_title(titles["sine_part"])

        span = self.profile.time_end - self.profile.time_start
        for key, ax in (("shifted_cosine", ax_shift), ("cosine_part", ax_cos), ("sine_part", ax_sin)):
            ax.set_xlim(self.profile.time_start, self.profile.time_end)
            ax.set_ylim(-1.1, 1.1)
            ax.xaxis.set_major_locator(MultipleLocator(span / 8.0))
            ax.xaxis.set_major_formatter(FuncFormatter(lambda v, _pos: format_pi_tick(v)))
            ax.grid(True, color="#f0f0f0")
            if legend.get(key, False):
                ax.legend(loc="upper right", fontsize="small")

        circle = unit_circle_points()
        re, im = complex_components(self.state.phase)
        ax_plane.plot(circle[:, 0], circle[:, 1], color="gray", alpha=0.5)
        ax_plane.plot([0.0, re], [0.0, im], color="orange", linewidth=2, label="exp(iφ)")
        ax_plane.plot([re, re], [0.0, im], color="tab:green", linestyle=":")
        ax_plane.plot([0.0, re], [0.0, 0.0], color="tab:blue", linewidth=2)
        ax_plane.set_aspect("equal")
        ax_plane.set_xlim(-1.2, 1.2)
        ax_plane.set_ylim(-1.2, 1.2)
        ax_plane.set_title("complex plane")
        if legend.get("complex_plane", False):
            ax_plane.legend(loc="upper right", fontsize="small")

        fig.tight_layout()
        self.state.n_renders += 1

        with self.out:
            self.out.clear_output(wait=True)
            display(fig)


def build_phase_shift_panel(profile: Optional[PhaseShiftProfile] = None) -> w.Widget:
    viz = PhaseShiftVisualizer(profile)
    viz.render()
    return viz.widget
