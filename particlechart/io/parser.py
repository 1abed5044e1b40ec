"""
CSV parsing for particle-counter exports.

Turns raw text into a ``Dataset`` of string cells. Handles:

- UTF-8 BOM markers
- Blank rows (skipped entirely)
- Short rows (missing trailing cells read as ``""``)
- Long rows (surplus cells dropped)
- An unnamed first column (still the time axis)

No type inference happens here: time and numeric coercion are applied
later, per cell, by the core pipeline.
"""

from __future__ import annotations

import csv
import io
import logging

from particlechart import settings
from particlechart.core import Dataset, DatasetMeta, InvalidDataset, ParseError

logger = logging.getLogger(__name__)


def _is_blank(row: dict[str, str]) -> bool:
    return all(not (v or "").strip() for v in row.values())


def parse(text: str, *, meta: DatasetMeta | None = None, delimiter: str = ",") -> Dataset:
    """Parse delimited text (first row = header) into a Dataset.

    Raises
    ------
    ParseError
        If the text is empty, has no header, or holds zero data rows.
    """
    if text is None or not text.strip():
        raise ParseError("Source text is empty.")
    if text.startswith("\ufeff"):
        text = text[1:]

    reader = csv.reader(io.StringIO(text), delimiter=delimiter)
    try:
        header = next(reader, None)
    except csv.Error as e:
        raise ParseError(f"Malformed header row: {e}") from e
    if not header or not any(name.strip() for name in header):
        raise ParseError("Source text has no header row.")
    # the first column is the time axis even when unnamed (index column of
    # a pandas export); later unnamed columns, e.g. from a trailing
    # delimiter, carry no series
    keyed = [(header[0].strip() or settings.X_LABEL, 0)]
    keyed += [(name.strip(), i) for i, name in enumerate(header) if i and name.strip()]
    columns = [col for col, _ in keyed]

    rows: list[dict[str, str]] = []
    skipped = 0
    try:
        for cells in reader:
            # short rows read as "", surplus cells are dropped
            row = {col: (cells[i] if i < len(cells) else "") for col, i in keyed}
            if _is_blank(row):
                skipped += 1
                continue
            rows.append(row)
    except csv.Error as e:
        raise ParseError(f"Malformed delimited text: {e}") from e

    if not rows:
        raise ParseError("CSV appears empty: no data rows after the header.")

    logger.debug(
        "Parsed %d rows x %d columns (%d blank rows skipped)",
        len(rows), len(columns), skipped,
    )
    try:
        return Dataset(columns=columns, rows=rows, meta=meta or DatasetMeta())
    except InvalidDataset as e:  # duplicate header names
        raise ParseError(str(e)) from e
