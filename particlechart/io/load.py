from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import requests

from particlechart import settings
from particlechart.core import Dataset, DatasetMeta, LoadError
from particlechart.io.parser import parse

logger = logging.getLogger(__name__)


def is_url(source: str) -> bool:
    return str(source).lower().startswith(("http://", "https://"))


def load_text(source: str | Path, *, timeout: float | None = None) -> str:
    """Fetch raw text from an http(s) URL or read it from a local file.

    Raises
    ------
    LoadError
        If the source cannot be reached or read, or answers with a
        non-success status.
    """
    source = str(source)
    if is_url(source):
        try:
            response = requests.get(
                source,
                timeout=settings.REQUEST_TIMEOUT if timeout is None else timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning("Failed to load %s: %s", source, e)
            raise LoadError(f"Failed to load {source}: {e}") from e
        logger.debug("Fetched %d bytes from %s", len(response.content), source)
        return response.text

    path = Path(source)
    try:
        # utf-8-sig drops a leading BOM from spreadsheet exports
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to read %s: %s", path, e)
        raise LoadError(f"Failed to load {source}: {e}") from e
    logger.debug("Read %d characters from %s", len(text), path)
    return text


def load_dataset(
    source: str | Path,
    *,
    title: str | None = None,
    cohort: str | None = None,
    timeout: float | None = None,
) -> Dataset:
    """Load and parse one dataset. Raises LoadError or ParseError."""
    text = load_text(source, timeout=timeout)
    meta = DatasetMeta(title=title, source=str(source), cohort=cohort)
    ds = parse(text, meta=meta)
    logger.debug(
        "Loaded %s: %d rows, series=%s", source, ds.n, list(ds.series_columns)
    )
    return ds


async def aload_dataset(
    source: str | Path,
    *,
    title: str | None = None,
    cohort: str | None = None,
    timeout: float | None = None,
) -> Dataset:
    """Same as load_dataset, without blocking the running event loop.

    There is no cancellation: when several loads overlap, whichever
    finishes last is the one a caller sees last.
    """
    return await asyncio.to_thread(
        load_dataset, source, title=title, cohort=cohort, timeout=timeout
    )
