# particlechart/render/surface.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol, Sequence, runtime_checkable

import plotly.graph_objects as go

from particlechart.core import Trace

from .plotly_adapter import build_figure

logger = logging.getLogger(__name__)


@runtime_checkable
class ChartSurface(Protocol):
    """Something that draws a chart. Submissions are fire-and-forget."""

    def draw(
        self,
        traces: Sequence[Trace],
        layout: dict[str, Any],
        config: dict[str, Any],
    ) -> None: ...


@dataclass(slots=True)
class FigureSurface:
    """Keeps the most recent figure in memory; each draw replaces the last one."""

    figure: go.Figure | None = field(default=None, repr=False)
    config: dict[str, Any] = field(default_factory=dict, repr=False)
    draws: int = 0

    def draw(
        self,
        traces: Sequence[Trace],
        layout: dict[str, Any],
        config: dict[str, Any],
    ) -> None:
        self.figure = build_figure(traces, layout)
        self.config = dict(config)
        self.draws += 1


@dataclass(slots=True)
class HtmlFileSurface:
    """Writes each chart to a standalone HTML file (overwriting the previous one)."""

    path: Path
    include_plotlyjs: str | bool = "cdn"

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    def draw(
        self,
        traces: Sequence[Trace],
        layout: dict[str, Any],
        config: dict[str, Any],
    ) -> None:
        fig = build_figure(traces, layout)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fig.write_html(str(self.path), config=config, include_plotlyjs=self.include_plotlyjs)
        logger.info("Wrote chart with %d traces to %s", len(traces), self.path)
