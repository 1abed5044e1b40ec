# particlechart/core/selection.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from particlechart import settings

from .exceptions import SeriesNotFound


@dataclass(frozen=True, slots=True)
class SelectionState:
    """
    Which series are switched on.

    `available` keeps the dataset's series order; `active` is an unordered
    subset of it. Mutators return a new SelectionState.
    """
    available: tuple[str, ...] = ()
    active: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        available = tuple(self.available)
        active = frozenset(self.active)
        unknown = active.difference(available)
        if unknown:
            raise SeriesNotFound(sorted(unknown)[0])
        object.__setattr__(self, "available", available)
        object.__setattr__(self, "active", active)

    @classmethod
    def initial(
        cls,
        series: Iterable[str],
        default_active: int | None = settings.DEFAULT_ACTIVE_COUNT,
    ) -> "SelectionState":
        """First `default_active` series switched on; None switches on all of them."""
        available = tuple(series)
        chosen = available if default_active is None else available[: max(0, default_active)]
        return cls(available=available, active=frozenset(chosen))

    def is_active(self, name: str) -> bool:
        return name in self.active

    def active_in_order(self) -> tuple[str, ...]:
        return tuple(name for name in self.available if name in self.active)

    # ---- mutations ----
    def set_active(self, name: str, on: bool = True) -> "SelectionState":
        if name not in self.available:
            raise SeriesNotFound(name)
        active = set(self.active)
        if on:
            active.add(name)
        else:
            active.discard(name)
        return SelectionState(available=self.available, active=frozenset(active))

    def toggle(self, name: str) -> "SelectionState":
        return self.set_active(name, not self.is_active(name))

    def select_all(self) -> "SelectionState":
        return SelectionState(available=self.available, active=frozenset(self.available))

    def select_none(self) -> "SelectionState":
        return SelectionState(available=self.available)

    # ---- label visibility ----
    def filter_by_search(self, query: str | None) -> tuple[str, ...]:
        """
        Labels whose text contains `query` (case-insensitive), in series order.

        Only affects which labels are listed; the active set is untouched.
        """
        q = (query or "").lower()
        if not q:
            return self.available
        return tuple(name for name in self.available if q in name.lower())
