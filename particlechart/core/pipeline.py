# particlechart/core/pipeline.py
from __future__ import annotations

from .dataset import Dataset
from .selection import SelectionState
from .trace import Trace
from .transforms import apply_mask, decimate, range_mask, smooth
from .view import ViewConfig


def build_traces(dataset: Dataset, selection: SelectionState, view: ViewConfig) -> list[Trace]:
    """
    Run the transform pipeline for every active series.

    Per series: numeric coercion -> range mask -> decimate -> smooth.
    Traces come out in the dataset's series order, whatever order they were
    switched on in. Active names the dataset does not have are skipped.
    No active series gives an empty list.
    """
    names = [name for name in dataset.series_columns if name in selection.active]
    if not names:
        return []

    times = dataset.time_points()
    mask = range_mask(times, view.range_start, view.range_end)
    x = decimate(apply_mask(times, mask), view.decimate_step)

    traces: list[Trace] = []
    for name in names:
        y = apply_mask(dataset.numeric(name), mask)
        y = decimate(y, view.decimate_step)
        y = smooth(y, view.smooth_window)
        traces.append(Trace(name=name, x=x, y=y))
    return traces
