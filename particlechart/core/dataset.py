# particlechart/core/dataset.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Iterator, Mapping, Sequence

from .cells import TimePoint, normalize_time, to_number
from .exceptions import InvalidDataset, SeriesNotFound
from .metadata import DatasetMeta

Row = Mapping[str, str]
NumericSeries = tuple[float | None, ...]  # aligned 1:1 with rows


@dataclass(frozen=True, slots=True)
class Dataset:
    """
    Dataset = ordered rows of raw string cells sharing one header.

    Column contract:
    - columns[0] is the time axis, whatever it is called
    - columns[1:] are the series, in header order

    Design goals:
    - dict-like access by series: ds["PM2.5"] -> numeric values
    - immutable once loaded: all view state lives outside the Dataset
    - cells stay strings; coercion happens on access
    """
    columns: Sequence[str]
    rows: Sequence[Row] = field(default_factory=tuple, repr=False)
    meta: DatasetMeta = field(default_factory=DatasetMeta, repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.columns, str) or not isinstance(self.columns, Iterable):
            raise InvalidDataset("Dataset.columns must be a sequence of names.")
        columns = tuple(self.columns)
        if not columns:
            raise InvalidDataset("Dataset needs at least a time column.")
        for name in columns:
            if not isinstance(name, str) or not name.strip():
                raise InvalidDataset("Dataset.columns must be non-empty strings.")
        if len(set(columns)) != len(columns):
            raise InvalidDataset(f"Dataset.columns must be unique, got {list(columns)}.")
        if not isinstance(self.meta, DatasetMeta):
            raise InvalidDataset("Dataset.meta must be a DatasetMeta instance.")

        expected = set(columns)
        normalized: list[dict[str, str]] = []
        for i, row in enumerate(self.rows):
            if not isinstance(row, Mapping):
                raise InvalidDataset(f"Row {i} must be a mapping.")
            if set(row.keys()) != expected:
                raise InvalidDataset(
                    f"Row {i} columns {sorted(row.keys())} do not match header {list(columns)}."
                )
            normalized.append({name: row[name] for name in columns})

        object.__setattr__(self, "columns", columns)
        object.__setattr__(self, "rows", tuple(normalized))

    # ---- column model ----
    @property
    def time_column(self) -> str:
        return self.columns[0]

    @property
    def series_columns(self) -> tuple[str, ...]:
        return tuple(self.columns[1:])

    @property
    def n(self) -> int:
        return len(self.rows)

    # ---- dict-like API over series ----
    def __len__(self) -> int:
        return len(self.series_columns)

    def __iter__(self) -> Iterator[str]:
        return iter(self.series_columns)

    def __contains__(self, name: object) -> bool:
        return name in self.series_columns

    def keys(self) -> Iterable[str]:
        return self.series_columns

    def __getitem__(self, name: str) -> NumericSeries:
        return self.numeric(name)

    # ---- derived arrays ----
    def time_points(self) -> tuple[TimePoint, ...]:
        col = self.time_column
        return tuple(normalize_time(row[col]) for row in self.rows)

    def numeric(self, name: str) -> NumericSeries:
        if name not in self.series_columns:
            raise SeriesNotFound(name)
        return tuple(to_number(row[name]) for row in self.rows)

    # ---- derived time bounds ----
    @property
    def t_start(self) -> datetime | None:
        """First parseable instant in row order."""
        for t in self.time_points():
            if isinstance(t, datetime):
                return t
        return None

    @property
    def t_end(self) -> datetime | None:
        """Last parseable instant in row order."""
        for t in reversed(self.time_points()):
            if isinstance(t, datetime):
                return t
        return None
