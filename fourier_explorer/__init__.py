"""Fourier Explorer -- interactive notebook tooling for teaching signal decomposition.

The integral visualizer probes the fixed composite signal

    f(t) = cos(t) + sin(2t) + cos(3t + pi/4)

with a sinusoid of adjustable angular frequency w and shows how integrating the
product over one orthogonal period extracts the Fourier coefficients.

Key principles:
- Exact periods: periods are handled as rational multiples of pi, so the
  integration window is the true least common period of all sinusoids involved
- Two time grids: a fixed display grid and a per-frequency integration grid,
  never mixed
- Pure core: period resolution and quadrature are stateless functions

Main subpackages:
- analysis: Period resolution, quadrature, sampling, discovery, labels
- models: Data models (SampleSeries, WindowPartition, profiles, IntegralSnapshot)
- gui: Interactive ipywidgets visualizers
"""

from .analysis.periods import resolve_period
from .analysis.quadrature import integrate_product

__all__ = ["resolve_period", "integrate_product"]
