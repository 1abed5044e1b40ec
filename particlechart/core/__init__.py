# particlechart/core/__init__.py
"""
Core domain objects for particlechart.

This module defines the rendering-agnostic data model and the transform
pipeline:
- Dataset: immutable rows of string cells, first column = time
- SelectionState: which series are switched on
- ViewConfig: scale, decimation step, smoothing window, date range
- Trace: one transformed series, ready for a chart
- build_traces: Dataset + SelectionState + ViewConfig -> list[Trace]

The core layer is independent from I/O and from the charting library.
"""

from .cells import TimePoint, normalize_time, to_number, is_instant
from .dataset import Dataset, Row, NumericSeries
from .metadata import DatasetMeta
from .selection import SelectionState
from .view import ViewConfig, SCALES, parse_instant
from .trace import Trace
from .transforms import range_mask, apply_mask, decimate, smooth
from .pipeline import build_traces
from .exceptions import (
    CoreError,
    LoadError,
    ParseError,
    InvalidDataset,
    InvalidViewConfig,
    InvalidTrace,
    SeriesNotFound,
)


__all__ = [
    # cells
    "TimePoint",
    "normalize_time",
    "to_number",
    "is_instant",

    # domain objects
    "Dataset",
    "Row",
    "NumericSeries",
    "DatasetMeta",
    "SelectionState",
    "ViewConfig",
    "SCALES",
    "parse_instant",
    "Trace",

    # transforms
    "range_mask",
    "apply_mask",
    "decimate",
    "smooth",
    "build_traces",

    # exceptions
    "CoreError",
    "LoadError",
    "ParseError",
    "InvalidDataset",
    "InvalidViewConfig",
    "InvalidTrace",
    "SeriesNotFound",
]
