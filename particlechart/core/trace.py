# particlechart/core/trace.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .cells import TimePoint
from .exceptions import InvalidTrace


@dataclass(frozen=True, slots=True)
class Trace:
    """One active series after the full transform: x and y always align."""

    name: str
    x: tuple[TimePoint, ...] = field(default=(), repr=False)
    y: tuple[float | None, ...] = field(default=(), repr=False)

    def __post_init__(self) -> None:
        x = tuple(self.x)
        y = tuple(self.y)
        if len(x) != len(y):
            raise InvalidTrace(
                f"Trace '{self.name}': x and y must have same length, got {len(x)} vs {len(y)}"
            )
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    @property
    def n(self) -> int:
        return len(self.x)

    def to_plotly(self) -> dict[str, Any]:
        """Plotly scatter trace as a dict; gaps (None) stay gaps."""
        return {
            "type": "scatter",
            "mode": "lines",
            "name": self.name,
            "x": list(self.x),
            "y": list(self.y),
            "connectgaps": False,
            "line": {"width": 2},
            "hovertemplate": f"<b>{self.name}</b><br>%{{x}}<br>%{{y}}<extra></extra>",
        }
