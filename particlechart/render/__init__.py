# particlechart/render/__init__.py
"""
Plotly adapter: turns Traces plus a ViewConfig into a figure and hands it
to a ChartSurface (in-memory figure or standalone HTML file).
"""

from .plotly_adapter import build_layout, build_config, build_figure
from .surface import ChartSurface, FigureSurface, HtmlFileSurface


__all__ = [
    "build_layout",
    "build_config",
    "build_figure",
    "ChartSurface",
    "FigureSurface",
    "HtmlFileSurface",
]
