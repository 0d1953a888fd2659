"""
Integral visualizer -- how integration extracts Fourier coefficients.

Layout:
- w slider and the formula of f(t) with the components discovered so far
- three plots sharing one fixed time axis:
    composite f(t) (one composite period highlighted),
    f(t)cos(wt) and f(t)sin(wt) (integration window filled, rest faded,
    coefficient as a dashed line)
- discovery badges and the panel log

The time axis is sized once from the widest orthogonal period over the slider
range, so it stays put while the slider moves.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np
import ipywidgets as w
import matplotlib.pyplot as plt
from matplotlib.ticker import FuncFormatter, MultipleLocator
from IPython.display import display

from fourier_explorer.analysis.integral import IntegralVisualizerModel
from fourier_explorer.analysis.labels import format_pi_tick
from fourier_explorer.models.profile import IntegralProfile
from fourier_explorer.models.results import IntegralSnapshot

from .log_view import HtmlLog


_BADGE_STYLE = (
    "display:inline-block; margin-right:6px; padding:2px 8px; border-radius:10px; "
    "color:#fff; background:{bg}; font-weight:bold;"
)
_BADGE_COLORS = {"cosine": "#007bff", "sine": "#28a745"}


@dataclass
class IntegralState:
    omega: float
    snapshot: Optional[IntegralSnapshot] = None
    fig: Any = None
    n_renders: int = 0
    syncing: bool = False


def _style_time_axis(ax, period: float, max_amp: float) -> None:
    ax.set_xlim(-period / 2.0, period / 2.0)
    ax.xaxis.set_major_locator(MultipleLocator(period / 8.0))
    ax.xaxis.set_major_formatter(FuncFormatter(lambda v, _pos: format_pi_tick(v)))
    ax.set_ylim(-max_amp * 1.1, max_amp * 1.1)
    ax.grid(True, color="#f0f0f0")
    ax.axhline(0.0, color="#999999", linewidth=0.8)


def _plot_product(ax, snap: IntegralSnapshot, key: str, coefficient: float, color: str, integral_color: str) -> None:
    part = snap.partitions[key]
    t = part.t
    ax.plot(t, part.inside, color=color, linewidth=2, label="product (integration period)")
    ax.fill_between(t, part.inside, 0.0, where=part.mask, color=color, alpha=0.4, linewidth=0)
    ax.plot(t, part.outside, color=color, linewidth=1, alpha=0.3, label="product (outside period)")
    ax.fill_between(t, part.outside, 0.0, where=~part.mask, color=color, alpha=0.1, linewidth=0)
    ax.axhline(coefficient, color=integral_color, linewidth=2.5, linestyle="--", label="integration result")


def coefficient_title(basis: str, omega: float, label: str) -> str:
    return f"(2/T) ∫ f(t)·{basis}({omega:.1f}t) dt = {label}"


class IntegralVisualizer:
    """ipywidgets panel around :class:`IntegralVisualizerModel`."""

    kind = "integral"

    def __init__(self, profile: Optional[IntegralProfile] = None) -> None:
        self.model = IntegralVisualizerModel(profile)
        self.profile = self.model.profile
        self.state = IntegralState(omega=float(self.profile.initial_omega))
        self.log = HtmlLog(title="Log", height_px=140)
        self._max_amp = self.model.max_amplitude()

        self.slider = w.FloatSlider(
            value=self.state.omega,
            min=self.profile.omega_min,
            max=self.profile.omega_max,
            step=self.profile.omega_step,
            description="ω",
            readout_format=".1f",
            continuous_update=True,
            layout=w.Layout(width="480px"),
        )
        self.formula = w.HTML()
        self.cos_title = w.HTML()
        self.sin_title = w.HTML()
        self.badges = w.HTML()
        self.out = w.Output(layout=w.Layout(border="1px solid #ddd", padding="4px"))

        self.slider.observe(self._on_slider, names="value")

        self.widget = w.VBox(
            [
                w.HBox([self.slider, self.badges]),
                self.formula,
                self.cos_title,
                self.sin_title,
                self.out,
                self.log.panel,
            ]
        )

        self.log.info(
            f"display window fixed to {self.model.display_period / np.pi:.2f}π "
            f"(ω scan {self.profile.omega_min}..{self.profile.omega_max} step {self.profile.omega_step})"
        )

    # -------------------------
    # Protocol
    # -------------------------
    def on_parameter_change(self, value: float) -> None:
        """Recompute and redraw for a new analysis frequency."""
        try:
            snap = self.model.snapshot(value)
        except ValueError as exc:
            self.log.exception(f"ω={value!r} rejected", exc)
            return

        try:
            self.state.omega = snap.omega
            self.state.snapshot = snap
            if self.slider.value != snap.omega and self.profile.omega_min <= snap.omega <= self.profile.omega_max:
                self.state.syncing = True
                try:
                    self.slider.value = snap.omega
                finally:
                    self.state.syncing = False

            for msg in snap.warnings:
                self.log.warning(f"WARNING: {msg}")
            self._update_text(snap)
            self._draw(snap)
        except Exception as exc:
            self.log.exception(f"redraw at ω={snap.omega:.2f} failed", exc)

    def render(self) -> None:
        self.on_parameter_change(self.state.omega)

    def close(self) -> None:
        """Release the current figure."""
        if self.state.fig is not None:
            plt.close(self.state.fig)
            self.state.fig = None

    # -------------------------
    # Internals
    # -------------------------
    def _on_slider(self, change) -> None:
        if self.state.syncing:
            return
        self.on_parameter_change(float(change["new"]))

    def _update_text(self, snap: IntegralSnapshot) -> None:
        self.formula.value = (
            f"<span style='font-size:1.2em; color:#ff7f00;'>{html.escape(snap.formula)}</span>"
        )
        self.cos_title.value = html.escape(coefficient_title("cos", snap.omega, snap.cosine_label))
        self.sin_title.value = html.escape(coefficient_title("sin", snap.omega, snap.sine_label))

        chips = []
        for basis in ("cosine", "sine"):
            if basis in snap.discoveries:
                chips.append(
                    f"<span style='{_BADGE_STYLE.format(bg=_BADGE_COLORS[basis])}'>"
                    f"{basis}: ω = {snap.omega:.1f}</span>"
                )
                self.log.info(f"Discovery: ω = {snap.omega:.1f} matches a {basis} component of f(t)")
        self.badges.value = "".join(chips)

    def _draw(self, snap: IntegralSnapshot) -> None:
        if self.state.fig is not None:
            plt.close(self.state.fig)

        colors = self.profile.colors
        fig, axes = plt.subplots(3, 1, figsize=(10, 8), sharex=True)
        self.state.fig = fig
        ax_f, ax_c, ax_s = axes

        comp = snap.partitions["composite"]
        ax_f.plot(comp.t, comp.inside, color=colors["composite"], linewidth=3, label="single composite period")
        ax_f.plot(comp.t, comp.outside, color=colors["composite"], linewidth=1, alpha=0.3, label="extended view")
        ax_f.set_title(r"$f(t) = \cos(t) + \sin(2t) + \cos(3t + \frac{\pi}{4})$")

        _plot_product(ax_c, snap, "cosine", snap.cosine_coefficient, colors["cosine"], colors["integral"])
        ax_c.set_title(coefficient_title("cos", snap.omega, snap.cosine_label))
        _plot_product(ax_s, snap, "sine", snap.sine_coefficient, colors["sine"], colors["integral"])
        ax_s.set_title(coefficient_title("sin", snap.omega, snap.sine_label))
        ax_s.set_xlabel("t")

        for ax in axes:
            _style_time_axis(ax, snap.display_period, self._max_amp)
        ax_f.legend(loc="upper right", fontsize="small")

        fig.tight_layout()
        self.state.n_renders += 1

        with self.out:
            self.out.clear_output(wait=True)
            display(fig)


def build_integral_panel(profile: Optional[IntegralProfile] = None) -> w.Widget:
    viz = IntegralVisualizer(profile)
    viz.render()
    return viz.widget
