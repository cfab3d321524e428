# src/manifest/accumulator.py — v1
"""Build original -> revisioned path mappings from renamed records.

The manifest key is the directory of the revisioned location joined with the
original basename, so keys are relative to the output tree rather than to
where the asset originally lived.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from assetrev.core.models import FileRecord, Manifest
from assetrev.core.paths import basename_posix, dirname_posix, join_posix, rel_path

logger = logging.getLogger(__name__)


def manifest_entry(record: FileRecord) -> tuple[str, str] | None:
    """Return ``(original_file, revisioned_file)`` for a renamed record."""
    if not record.is_revisioned or record.original_path is None:
        return None

    revisioned_file = rel_path(record.base, record.path)
    original_file = join_posix(
        dirname_posix(revisioned_file), basename_posix(record.original_path)
    )
    return original_file, revisioned_file


def add_to_manifest(record: FileRecord, manifest: Manifest) -> bool:
    """Record ``record`` in ``manifest``; later writes for a key win.

    Returns False for records without renaming metadata, which are ignored.
    """
    entry = manifest_entry(record)
    if entry is None:
        return False
    original_file, revisioned_file = entry
    manifest[original_file] = revisioned_file
    logger.debug("Manifest entry %s -> %s", original_file, revisioned_file)
    return True


class ManifestAccumulator:
    """Caller-owned manifest collected across one or more pipeline runs.

    Not thread-safe. Runs that share an accumulator must be serialized by the
    caller, or use one accumulator per run.
    """

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        self._entries: Manifest = dict(entries or {})

    def add(self, record: FileRecord) -> bool:
        return add_to_manifest(record, self._entries)

    def update(self, entries: Mapping[str, str]) -> None:
        self._entries.update(entries)

    def replace(self, entries: Mapping[str, Any]) -> None:
        """Swap in ``entries``, e.g. a merged manifest that may hold non-string values."""
        self._entries = dict(entries)

    def clear(self) -> None:
        self._entries.clear()

    @property
    def entries(self) -> Manifest:
        """Copy of the accumulated mapping in insertion order."""
        return dict(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
