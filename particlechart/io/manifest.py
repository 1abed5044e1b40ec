from __future__ import annotations

import json
import logging
import posixpath
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, Mapping

from particlechart import settings
from particlechart.core import ParseError
from particlechart.io.load import is_url, load_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ManifestEntry:
    """One dataset offered by a manifest."""
    title: str
    path: str
    cohort: str | None = None

    def __post_init__(self) -> None:
        for name in ("title", "path"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ParseError(f"Manifest entry `{name}` must be a non-empty string.")


@dataclass(frozen=True, slots=True)
class Manifest:
    """
    Catalog of datasets: {"datasets": [{"title", "path", "cohort"?}]}.

    Only `title` and `path` matter to the pipeline; `cohort` is carried
    along for display.
    """
    datasets: tuple[ManifestEntry, ...] = field(default_factory=tuple)
    source: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "datasets", tuple(self.datasets))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, source: str | None = None) -> "Manifest":
        if not isinstance(data, Mapping) or not isinstance(data.get("datasets"), list):
            raise ParseError("Manifest must be an object with a `datasets` list.")
        entries = []
        for i, item in enumerate(data["datasets"]):
            if not isinstance(item, Mapping):
                raise ParseError(f"Manifest entry {i} must be an object.")
            entries.append(
                ManifestEntry(
                    title=item.get("title"),
                    path=_resolve(item.get("path"), source),
                    cohort=item.get("cohort"),
                )
            )
        return cls(datasets=tuple(entries), source=source)

    def __len__(self) -> int:
        return len(self.datasets)

    def __iter__(self) -> Iterator[ManifestEntry]:
        return iter(self.datasets)

    def pairs(self) -> list[tuple[str, str]]:
        return [(d.title, d.path) for d in self.datasets]

    def titles(self) -> list[str]:
        return [d.title for d in self.datasets]

    def find(self, path: str) -> ManifestEntry | None:
        for d in self.datasets:
            if d.path == path:
                return d
        return None

    def first(self) -> ManifestEntry | None:
        return self.datasets[0] if self.datasets else None


def _resolve(path: Any, manifest_source: str | None) -> Any:
    """Resolve a relative dataset path against the manifest's own location."""
    if not isinstance(path, str) or not path.strip() or manifest_source is None:
        return path
    if is_url(path) or Path(path).is_absolute():
        return path
    if is_url(manifest_source):
        base, _, _ = manifest_source.rpartition("/")
        return posixpath.join(base, path)
    return str(Path(manifest_source).parent / path)


def load_manifest(source: str | Path, *, timeout: float | None = None) -> Manifest:
    """Load a manifest JSON document. Raises LoadError or ParseError."""
    source = str(source)
    text = load_text(source, timeout=timeout)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Manifest {source} is not valid JSON: {e}") from e
    manifest = Manifest.from_dict(data, source=source)
    logger.debug("Manifest %s lists %d datasets", source, len(manifest))
    return manifest


def manifest_path_for(kind: str, root: str | Path = ".") -> str:
    """Location of a cohort manifest (small / large) under a data root."""
    if kind not in settings.COHORTS:
        raise ValueError(f"kind must be one of {settings.COHORTS}, got {kind!r}")
    relative = settings.MANIFEST_TEMPLATE.format(kind=kind)
    root = str(root)
    if is_url(root):
        return posixpath.join(root.rstrip("/") + "/", relative)
    return str(Path(root) / relative)
