from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple, Union

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class SampleSeries:
    """
    Uniformly spaced samples ``(t, y)`` of one continuous function.

    Notes
    - Display and integration series are built on *different* time grids and must
      never be mixed: the display grid is fixed per visualizer, the integration grid
      follows the resolved period of the current analysis frequency.
    - ``t`` and ``y`` are always 1D float64 arrays of equal length.
    """
    t: np.ndarray
    y: np.ndarray
    name: str = ""

    def __post_init__(self) -> None:
        t = np.asarray(self.t, dtype=np.float64)
        y = np.asarray(self.y, dtype=np.float64)
        if t.ndim != 1 or y.ndim != 1:
            raise ValueError(f"SampleSeries expects 1D arrays, got t{t.shape} y{y.shape}")
        if t.size != y.size:
            raise ValueError(f"SampleSeries length mismatch: len(t)={t.size}, len(y)={y.size}")
        object.__setattr__(self, "t", t)
        object.__setattr__(self, "y", y)

    def __len__(self) -> int:
        return int(self.t.size)

    @property
    def span(self) -> float:
        if self.t.size < 2:
            return 0.0
        return float(self.t[-1] - self.t[0])

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[float, float]], *, name: str = "") -> "SampleSeries":
        rows = [(float(t), float(y)) for t, y in pairs]
        if not rows:
            return cls(t=np.empty(0), y=np.empty(0), name=name)
        arr = np.asarray(rows, dtype=np.float64)
        return cls(t=arr[:, 0], y=arr[:, 1], name=name)

    def to_frame(self) -> pd.DataFrame:
        col = self.name or "y"
        return pd.DataFrame({"t": self.t, col: self.y})


SeriesLike = Union[SampleSeries, Iterable[Tuple[float, float]]]


def as_series(samples: SeriesLike) -> SampleSeries:
    """Accept a SampleSeries or any iterable of ``(t, y)`` pairs."""
    if isinstance(samples, SampleSeries):
        return samples
    return SampleSeries.from_pairs(samples)


@dataclass(frozen=True)
class WindowPartition:
    """Split of a series into samples inside / outside an analysis window.

    Attributes
    ----------
    t:
        Time vector of the partitioned series (unchanged).
    inside, outside:
        Arrays of the same length as ``t``. At every index exactly one of them holds
        the sampled value, the other holds ``NaN`` (the "no data" marker). Plotting
        both with matplotlib therefore gives two overlapping partial lines without
        any index reflow. A sample whose value is itself NaN is indistinguishable
        from the marker; use ``mask`` to tell which side an index belongs to.
    mask:
        Boolean array, True where the sample lies inside the window.
    window:
        ``(start, end)`` of the window, inclusive on both ends.
    """

    t: np.ndarray
    inside: np.ndarray
    outside: np.ndarray
    mask: np.ndarray
    window: Tuple[float, float]

    def __len__(self) -> int:
        return int(self.t.size)

    @property
    def n_inside(self) -> int:
        return int(np.count_nonzero(self.mask))

    def labels(self) -> list[str]:
        """Time labels rounded to two decimals, one per sample."""
        return [f"{x:.2f}" for x in self.t]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {"t": self.t, "inside": self.inside, "outside": self.outside, "in_window": self.mask}
        )
