# particlechart/core/transforms.py
from __future__ import annotations

from datetime import datetime
from typing import Sequence, TypeVar

import numpy as np

T = TypeVar("T")


def range_mask(
    times: Sequence[object],
    start: datetime | None = None,
    end: datetime | None = None,
) -> np.ndarray:
    """
    Boolean mask over `times` for the inclusive window [start, end].

    Instants are compared against whichever bounds are set. Anything that
    is not an instant (unparseable time strings) always passes.
    """
    mask = np.ones(len(times), dtype=bool)
    if start is None and end is None:
        return mask

    for i, t in enumerate(times):
        if not isinstance(t, datetime):
            continue
        if start is not None and t < start:
            mask[i] = False
        elif end is not None and t > end:
            mask[i] = False
    return mask


def apply_mask(values: Sequence[T], mask: np.ndarray) -> tuple[T, ...]:
    if len(values) != mask.size:
        raise ValueError(
            f"mask and values must have same length, got {mask.size} vs {len(values)}"
        )
    return tuple(v for v, keep in zip(values, mask) if keep)


def decimate(values: Sequence[T], step: int) -> Sequence[T]:
    """
    Keep every `step`-th element, starting at index 0.

    step <= 1 returns `values` unchanged. Output length is ceil(n / step);
    the container kind (tuple, list, ndarray) is preserved by slicing.
    """
    if step is None or step <= 1:
        return values
    return values[::step]


def smooth(values: Sequence[float | None], window: int) -> Sequence[float | None]:
    """
    Trailing moving average over the last `window` points, null-aware.

    Element i is the mean of the non-null values in [max(0, i-window+1) .. i];
    the divisor is how many of them are present, so the first points average
    over a shorter window. A window holding only nulls yields None.
    window <= 1 returns `values` unchanged.
    """
    if window is None or window <= 1:
        return values
    n = len(values)
    if n == 0:
        return ()

    arr = np.array([np.nan if v is None else float(v) for v in values], dtype=float)
    present = ~np.isnan(arr)

    # prefix sums with a leading zero: window sum = cs[i+1] - cs[lo]
    cs = np.concatenate(([0.0], np.cumsum(np.where(present, arr, 0.0))))
    cc = np.concatenate(([0], np.cumsum(present, dtype=np.int64)))
    lo = np.maximum(0, np.arange(n) - min(window, n) + 1)
    sums = cs[1:] - cs[lo]
    counts = cc[1:] - cc[lo]

    return tuple(float(s / c) if c else None for s, c in zip(sums, counts))
