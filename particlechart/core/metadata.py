# particlechart/core/metadata.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .exceptions import InvalidDataset


@dataclass(frozen=True, slots=True)
class DatasetMeta:
    """
    Metadata attached to a Dataset.

    - title: human-friendly name shown as the chart title
    - source: where the text came from (URL or file path)
    - cohort: monitoring cohort from the manifest (small, large, ...)
    - attrs: arbitrary additional fields
    """
    title: str | None = None
    source: str | None = None
    cohort: str | None = None
    attrs: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if self.attrs is None:
            object.__setattr__(self, "attrs", {})
        elif not isinstance(self.attrs, dict):
            raise InvalidDataset("DatasetMeta.attrs must be a dict.")
