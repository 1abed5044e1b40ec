# particlechart/core/exceptions.py
from __future__ import annotations


class CoreError(Exception):
    """Base error for all particlechart exceptions."""


# ---- Structural failures (abort the render, shown to the user) ----
class LoadError(CoreError):
    """Raised when a source is unreachable, unreadable or answers with a non-success status."""


class ParseError(CoreError, ValueError):
    """Raised when a source yields no header or zero data rows."""


# ---- Validation / construction errors ----
class InvalidDataset(CoreError):
    """Raised when a Dataset / DatasetMeta is constructed with invalid inputs."""


class InvalidViewConfig(CoreError, ValueError):
    """Raised when a ViewConfig is constructed with invalid inputs."""


class InvalidTrace(CoreError):
    """Raised when a Trace is constructed with misaligned arrays."""


# ---- Lookup errors (also behave like KeyError for dict-like APIs) ----
class SeriesNotFound(CoreError, KeyError):
    """Raised when a requested series name is not present."""
