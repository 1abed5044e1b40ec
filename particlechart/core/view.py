# particlechart/core/view.py
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta

from .cells import as_naive_utc, normalize_time
from .exceptions import InvalidViewConfig

SCALES = ("linear", "log")


def parse_instant(value: str | datetime | None) -> datetime | None:
    """Turn a user-entered bound into an instant; empty input means no bound."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return as_naive_utc(value)
    t = normalize_time(value)
    if t == "":
        return None
    if not isinstance(t, datetime):
        raise InvalidViewConfig(f"Cannot read {value!r} as a date/time.")
    return t


@dataclass(frozen=True, slots=True)
class ViewConfig:
    """User-controlled view parameters. Bounds are inclusive."""
    scale: str = "linear"
    decimate_step: int = 1
    smooth_window: int = 1
    range_start: datetime | None = None
    range_end: datetime | None = None

    def __post_init__(self) -> None:
        if self.scale not in SCALES:
            raise InvalidViewConfig(f"scale must be one of {SCALES}, got {self.scale!r}")
        for name in ("decimate_step", "smooth_window"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise InvalidViewConfig(f"{name} must be an integer >= 1, got {value!r}")
        for name in ("range_start", "range_end"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, datetime):
                raise InvalidViewConfig(f"{name} must be a datetime or None.")
            if value is not None and value.tzinfo is not None:
                raise InvalidViewConfig(f"{name} must be a naive datetime.")
        if (
            self.range_start is not None
            and self.range_end is not None
            and self.range_start > self.range_end
        ):
            raise InvalidViewConfig("range_start must not be after range_end.")

    @property
    def has_range(self) -> bool:
        return self.range_start is not None or self.range_end is not None

    def with_scale(self, scale: str) -> "ViewConfig":
        return replace(self, scale=scale)

    def with_decimate_step(self, step: int) -> "ViewConfig":
        return replace(self, decimate_step=step)

    def with_smooth_window(self, window: int) -> "ViewConfig":
        return replace(self, smooth_window=window)

    def with_range(
        self,
        start: str | datetime | None = None,
        end: str | datetime | None = None,
    ) -> "ViewConfig":
        return replace(self, range_start=parse_instant(start), range_end=parse_instant(end))

    def with_last_days(self, end: datetime | None, days: float) -> "ViewConfig":
        """Window covering `days` days up to `end`; no end instant clears the range."""
        if end is None:
            return replace(self, range_start=None, range_end=None)
        return replace(self, range_start=end - timedelta(days=days), range_end=end)
