# particlechart/render/plotly_adapter.py
from __future__ import annotations

from typing import Any, Sequence

import plotly.graph_objects as go

from particlechart import settings
from particlechart.core import Trace, ViewConfig


def build_layout(
    title: str | None,
    view: ViewConfig,
    *,
    x_label: str = settings.X_LABEL,
    y_label: str = settings.Y_LABEL,
) -> dict[str, Any]:
    """Layout for the time-series chart: axis titles, axis type, legend below the plot."""
    return {
        "title": {"text": title or settings.DEFAULT_TITLE},
        "colorway": list(settings.COLORWAY),
        "hovermode": "x unified",
        "xaxis": {
            "title": {"text": x_label},
            "showspikes": True,
            "spikemode": "across",
        },
        "yaxis": {"title": {"text": y_label}, "type": view.scale},
        "margin": {"l": 64, "r": 16, "t": 52, "b": 84},
        "legend": {"orientation": "h", "y": -0.25},
        "paper_bgcolor": "#fff",
        "plot_bgcolor": "#fff",
        "height": settings.CHART_HEIGHT,
    }


def build_config() -> dict[str, Any]:
    """Interactivity flags: responsive sizing, scroll zoom, no logo."""
    return {
        "responsive": True,
        "displaylogo": False,
        "scrollZoom": True,
        "modeBarButtonsToAdd": ["toImage", "select2d", "lasso2d"],
    }


def build_figure(traces: Sequence[Trace], layout: dict[str, Any]) -> go.Figure:
    """Plotly figure for `traces`. An empty trace list gives an empty chart."""
    return go.Figure(data=[t.to_plotly() for t in traces], layout=layout)
