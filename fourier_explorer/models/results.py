from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Tuple

import pandas as pd

from .series import SampleSeries, WindowPartition


@dataclass(frozen=True)
class IntegralSnapshot:
    """Everything one recompute of the integral visualizer produces.

    Attributes
    ----------
    omega:
        Analysis angular frequency.
    integration_period, display_period, composite_period:
        Orthogonal period for ``omega``; fixed display window; period of the composite alone.
    composite, cosine_product, sine_product:
        Series on the *display* grid.
    integration_cosine, integration_sine:
        Product series on the *integration* grid (sized to ``integration_period``).
    cosine_coefficient, sine_coefficient:
        ``(2/T) * integral`` of the respective product.
    partitions:
        Display-grid partitions keyed by ``"composite"``, ``"cosine"``, ``"sine"``.
    discoveries:
        Bases with a matching component at ``omega``.
    formula:
        Formula text with the terms revealed so far.
    warnings:
        Non-fatal conditions met while computing (e.g. empty series).
    """

    omega: float
    integration_period: float
    display_period: float
    composite_period: float

    composite: SampleSeries
    cosine_product: SampleSeries
    sine_product: SampleSeries
    integration_cosine: SampleSeries
    integration_sine: SampleSeries

    cosine_coefficient: float
    sine_coefficient: float
    cosine_label: str
    sine_label: str

    partitions: Dict[str, WindowPartition]
    discoveries: FrozenSet[str] = frozenset()
    formula: str = ""
    warnings: Tuple[str, ...] = ()

    def summary(self) -> Dict[str, object]:
        return {
            "omega": self.omega,
            "integration_period": self.integration_period,
            "display_period": self.display_period,
            "cosine_coefficient": self.cosine_coefficient,
            "sine_coefficient": self.sine_coefficient,
            "cosine_label": self.cosine_label,
            "sine_label": self.sine_label,
            "discoveries": sorted(self.discoveries),
        }

    def display_frame(self) -> pd.DataFrame:
        """Display-grid table: composite and both products with their window flags."""
        return pd.DataFrame(
            {
                "t": self.composite.t,
                "composite": self.composite.y,
                "cos_product": self.cosine_product.y,
                "sin_product": self.sine_product.y,
                "in_composite_period": self.partitions["composite"].mask,
                "in_integration_period": self.partitions["cosine"].mask,
            }
        )
