# particlechart/session.py
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from particlechart import settings
from particlechart.core import (
    Dataset,
    LoadError,
    ParseError,
    SelectionState,
    Trace,
    ViewConfig,
    build_traces,
)
from particlechart.io.load import load_dataset
from particlechart.render import ChartSurface, build_config, build_layout

logger = logging.getLogger(__name__)


class ChartSession:
    """
    Owner of all mutable chart state for one page.

    Holds the loaded Dataset plus the SelectionState and ViewConfig the
    user edits. Every setter funnels into on_parameters_changed(), which
    reruns the whole pipeline and redraws. Single-threaded; nothing is
    cached between redraws.
    """

    def __init__(
        self,
        surface: ChartSurface,
        *,
        view: ViewConfig | None = None,
        default_active: int | None = settings.DEFAULT_ACTIVE_COUNT,
        x_label: str = settings.X_LABEL,
        y_label: str = settings.Y_LABEL,
    ) -> None:
        self.surface = surface
        self.view = view or ViewConfig()
        self.default_active = default_active
        self.x_label = x_label
        self.y_label = y_label

        self.dataset: Dataset | None = None
        self.selection = SelectionState()
        self.title: str | None = None
        self.message: str | None = None
        self.traces: list[Trace] = []

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load(
        self,
        source: str | Path,
        *,
        title: str | None = None,
        raise_errors: bool = False,
    ) -> bool:
        """Load a dataset and draw it. Returns False (and sets `message`) on failure.

        A failed load leaves the previous dataset and chart untouched.
        """
        try:
            dataset = load_dataset(source, title=title)
        except (LoadError, ParseError) as e:
            logger.warning("Could not show %s: %s", source, e)
            self.message = str(e)
            if raise_errors:
                raise
            return False
        self.show(dataset)
        return True

    def show(self, dataset: Dataset) -> None:
        """Make `dataset` current: reset the selection to its default and draw."""
        self.dataset = dataset
        self.title = dataset.meta.title or settings.DEFAULT_TITLE
        self.selection = SelectionState.initial(
            dataset.series_columns, default_active=self.default_active
        )
        self.message = None
        self.on_parameters_changed()

    # ------------------------------------------------------------------
    # Parameter changes
    # ------------------------------------------------------------------
    def set_active(self, name: str, on: bool = True) -> None:
        self.selection = self.selection.set_active(name, on)
        self.on_parameters_changed()

    def toggle(self, name: str) -> None:
        self.selection = self.selection.toggle(name)
        self.on_parameters_changed()

    def select_all(self) -> None:
        self.selection = self.selection.select_all()
        self.on_parameters_changed()

    def select_none(self) -> None:
        self.selection = self.selection.select_none()
        self.on_parameters_changed()

    def set_scale(self, scale: str) -> None:
        self.view = self.view.with_scale(scale)
        self.on_parameters_changed()

    def set_decimate_step(self, step: int) -> None:
        self.view = self.view.with_decimate_step(step)
        self.on_parameters_changed()

    def set_smooth_window(self, window: int) -> None:
        self.view = self.view.with_smooth_window(window)
        self.on_parameters_changed()

    def set_range(
        self,
        start: str | datetime | None = None,
        end: str | datetime | None = None,
    ) -> None:
        self.view = self.view.with_range(start, end)
        self.on_parameters_changed()

    def quick_range(self, days: float | str) -> None:
        """Preset windows: "full" spans the whole dataset, a number is the last N days."""
        if self.dataset is None:
            return
        if days == "full":
            start, end = self.dataset.t_start, self.dataset.t_end
            if start is not None and end is not None and start > end:
                start, end = end, start
            self.view = self.view.with_range(start, end)
        else:
            self.view = self.view.with_last_days(self.dataset.t_end, float(days))
        self.on_parameters_changed()

    def visible_labels(self, query: str | None) -> tuple[str, ...]:
        return self.selection.filter_by_search(query)

    # ------------------------------------------------------------------
    # Redraw
    # ------------------------------------------------------------------
    def on_parameters_changed(self) -> list[Trace]:
        """Rerun the full pipeline and submit the result, even when it is empty."""
        if self.dataset is None:
            return []
        self.traces = build_traces(self.dataset, self.selection, self.view)
        layout = build_layout(
            self.title, self.view, x_label=self.x_label, y_label=self.y_label
        )
        logger.debug(
            "Drawing %d traces (step=%d, window=%d, scale=%s)",
            len(self.traces), self.view.decimate_step, self.view.smooth_window, self.view.scale,
        )
        self.surface.draw(self.traces, layout, build_config())
        return self.traces
