# particlechart/core/cells.py
from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Union

from particlechart import settings

TimePoint = Union[datetime, str]


def as_naive_utc(dt: datetime) -> datetime:
    # Aware and naive datetimes cannot be compared; keep everything naive.
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def normalize_time(raw: str | None, *, formats: tuple[str, ...] | None = None) -> TimePoint:
    """
    Normalize a time cell to an instant, or keep it as a string.

    - "2021-01-02 03:04" is read as "2021-01-02T03:04"
    - ISO-8601 is tried first, then `formats` (default: settings.FALLBACK_TIME_FORMATS)
    - unparseable input comes back trimmed, never None and never raising

    A returned string is unordered: range filters let it through.
    """
    text = "" if raw is None else str(raw).strip()
    if not text:
        return text

    candidate = text
    if " " in candidate and "T" not in candidate:
        candidate = candidate.replace(" ", "T", 1)

    try:
        return as_naive_utc(datetime.fromisoformat(candidate))
    except ValueError:
        pass

    for fmt in settings.FALLBACK_TIME_FORMATS if formats is None else formats:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return text


def is_instant(value: object) -> bool:
    return isinstance(value, datetime)


def to_number(raw: str | None) -> float | None:
    """Parse a numeric cell ("1,234.5" -> 1234.5). Empty or malformed cells give None."""
    if raw is None:
        return None
    text = str(raw).strip().replace(",", "")
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value
