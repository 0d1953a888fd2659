"""GUI package - interactive ipywidgets interface.

This package provides the Jupyter notebook GUI with one tab per visualizer:
1. Integral: w slider, composite signal, cosine/sine products and coefficients
2. Phase shift: decomposition of cos(t + phi) into cosine and sine parts

Entry point:
    from fourier_explorer.gui.app import build_gui
    gui = build_gui()

Design principles:
- Visualizers are independent classes sharing a small protocol, not a hierarchy
- All widget state lives in per-visualizer state objects, never in module globals
- Errors are reported in the panel log, never raised into the widget event loop
"""
