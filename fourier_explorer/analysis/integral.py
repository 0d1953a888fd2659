"""One full recompute of the integral visualizer, independent of any widget.

Dependency order: period resolution -> sampling -> quadrature.
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from fourier_explorer.analysis.discovery import find_discoveries, formula_text
from fourier_explorer.analysis.periods import (
    analysis_period,
    composite_period,
    max_period_over_range,
    resolve_period,
)
from fourier_explorer.analysis.quadrature import (
    format_coefficient,
    integrate_product,
    partition_by_period,
)
from fourier_explorer.analysis.waveforms import (
    COMPOSITE_PERIODS,
    composite_signal,
    product_series,
    time_grid,
)
from fourier_explorer.models.profile import IntegralProfile
from fourier_explorer.models.results import IntegralSnapshot
from fourier_explorer.models.series import SampleSeries


class IntegralVisualizerModel:
    """Numeric side of the integral visualizer.

    The display period is fixed at construction (largest orthogonal period over the
    profile's slider range) so the x axis never moves while the slider does. Every
    call to :meth:`snapshot` recomputes everything else from scratch.
    """

    def __init__(self, profile: Optional[IntegralProfile] = None,
                 component_periods: Sequence[float] = COMPOSITE_PERIODS) -> None:
        self.profile = (profile or IntegralProfile()).validate()
        self.component_periods = tuple(float(p) for p in component_periods)
        self.display_period = max_period_over_range(
            self.component_periods,
            self.profile.omega_min,
            self.profile.omega_max,
            self.profile.omega_step,
        )
        self.composite_period = composite_period(self.component_periods)
        self.display_t = time_grid(self.display_period, self.profile.n_points)

    @property
    def time_range(self) -> tuple[float, float]:
        return -self.display_period / 2.0, self.display_period / 2.0

    def integration_period(self, omega: float) -> float:
        return resolve_period(self.component_periods, omega)

    def snapshot(self, omega: float) -> IntegralSnapshot:
        omega = float(omega)
        analysis_period(omega)  # rejects w <= 0 before anything is sampled

        T = self.integration_period(omega)
        warnings = []
        if T > self.display_period:
            warnings.append(
                f"integration period {T:.4f} exceeds display window {self.display_period:.4f} "
                f"(omega={omega} outside the slider range)"
            )

        t_disp = self.display_t
        composite = SampleSeries(t=t_disp, y=composite_signal(t_disp), name="composite")
        cos_disp = product_series(t_disp, omega, "cos")
        sin_disp = product_series(t_disp, omega, "sin")

        t_int = time_grid(T, self.profile.n_points)
        cos_int = product_series(t_int, omega, "cos")
        sin_int = product_series(t_int, omega, "sin")

        a = integrate_product(cos_int.y, T)
        b = integrate_product(sin_int.y, T)

        partitions = {
            "composite": partition_by_period(composite, self.composite_period),
            "cosine": partition_by_period(cos_disp, T),
            "sine": partition_by_period(sin_disp, T),
        }

        return IntegralSnapshot(
            omega=omega,
            integration_period=T,
            display_period=self.display_period,
            composite_period=self.composite_period,
            composite=composite,
            cosine_product=cos_disp,
            sine_product=sin_disp,
            integration_cosine=cos_int,
            integration_sine=sin_int,
            cosine_coefficient=a,
            sine_coefficient=b,
            cosine_label=format_coefficient(a),
            sine_label=format_coefficient(b),
            partitions=partitions,
            discoveries=find_discoveries(omega, self.profile.discovery_tolerance),
            formula=formula_text(omega),
            warnings=tuple(warnings),
        )

    def max_amplitude(self) -> float:
        """Peak ``|f(t)|`` on the display grid (y-axis scaling)."""
        return float(np.max(np.abs(composite_signal(self.display_t))))
