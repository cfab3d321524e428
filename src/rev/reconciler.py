# src/rev/reconciler.py — v1
"""Sourcemap reconciliation — buffer maps, rename assets, resolve at flush.

Sourcemaps are held back while assets are renamed. At end of stream each map
is matched to the asset it describes and takes that asset's hash, so the map
stays reachable as ``<revisioned asset filename>.map``. Maps without a known
asset are hashed on their own contents.

States: collecting -> resolving -> done.
"""

from __future__ import annotations

import json
import logging
from typing import Literal

from assetrev.core.errors import RevisionError, StreamingNotSupportedError
from assetrev.core.models import FileRecord, PathMapping
from assetrev.core.paths import (
    basename_posix,
    insert_hash,
    normalize_key,
    resolve_against,
    strip_suffix,
)
from assetrev.rev.renamer import DEFAULT_HASH_LENGTH, mark_revisioned, rename

logger = logging.getLogger(__name__)

SOURCEMAP_SUFFIX = ".map"

ReconcilerState = Literal["collecting", "resolving", "done"]


def is_sourcemap(record: FileRecord) -> bool:
    return record.path.endswith(SOURCEMAP_SUFFIX)


def parse_sourcemap_lenient(data: bytes) -> str | None:
    """Return the ``file`` field of a sourcemap, or None if unusable."""
    try:
        parsed = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as exc:
        logger.debug("Unparseable sourcemap, deriving reference from name: %s", exc)
        return None
    if not isinstance(parsed, dict):
        return None
    reference = parsed.get("file")
    if not isinstance(reference, str) or not reference:
        return None
    return reference


def extract_reference(record: FileRecord) -> str:
    """Asset reference declared by a sourcemap record.

    Falls back to the map's own filename without ``.map``.
    """
    reference = None
    if record.is_buffered:
        reference = parse_sourcemap_lenient(record.data)
    if reference is None:
        reference = strip_suffix(basename_posix(record.path), SOURCEMAP_SUFFIX)
    return reference


class SourcemapReconciler:
    """Buffer-then-flush state machine for one revision run.

    The path mapping and the sourcemap buffer are private to the instance;
    create one reconciler per pipeline invocation.
    """

    def __init__(self, hash_length: int = DEFAULT_HASH_LENGTH) -> None:
        self._hash_length = hash_length
        self._state: ReconcilerState = "collecting"
        self._sourcemaps: list[FileRecord] = []
        self._path_mapping: PathMapping = {}

    @property
    def state(self) -> ReconcilerState:
        return self._state

    @property
    def path_mapping(self) -> PathMapping:
        return dict(self._path_mapping)

    @property
    def pending(self) -> int:
        """Number of buffered sourcemaps."""
        return len(self._sourcemaps)

    def collect(self, record: FileRecord) -> FileRecord | None:
        """Handle one incoming record.

        Returns the renamed record, or None when a sourcemap was buffered.
        """
        if self._state != "collecting":
            raise RevisionError(
                f"Cannot collect records while {self._state}", stage="rev"
            )
        if record.is_stream:
            raise StreamingNotSupportedError(stage="rev")

        if is_sourcemap(record):
            self._sourcemaps.append(record)
            logger.debug("Buffered sourcemap %s", record.path)
            return None

        old_path = record.path
        rename(record, self._hash_length)
        self._path_mapping[normalize_key(old_path)] = record.content_hash or ""
        return record

    def resolve(self) -> list[FileRecord]:
        """Rename all buffered sourcemaps and return them in arrival order."""
        if self._state != "collecting":
            raise RevisionError(f"Already {self._state}", stage="rev")
        self._state = "resolving"

        resolved: list[FileRecord] = []
        for record in self._sourcemaps:
            self._resolve_one(record)
            resolved.append(record)

        logger.info(
            "Resolved %d sourcemaps against %d renamed assets",
            len(resolved), len(self._path_mapping),
        )
        self._sourcemaps = []
        self._path_mapping = {}
        self._state = "done"
        return resolved

    def lookup(self, record: FileRecord, reference: str) -> str | None:
        """Hash of the asset ``reference`` points at, if renamed in this run."""
        for key in (normalize_key(reference), resolve_against(record.path, reference)):
            content_hash = self._path_mapping.get(key)
            if content_hash is not None:
                return content_hash
        return None

    def _resolve_one(self, record: FileRecord) -> None:
        reference = extract_reference(record)
        content_hash = self.lookup(record, reference)

        if content_hash is None:
            logger.debug("No renamed asset for %s, hashing map itself", record.path)
            rename(record, self._hash_length)
            return

        mark_revisioned(record, content_hash)
        asset_path = strip_suffix(record.path, SOURCEMAP_SUFFIX)
        record.path = insert_hash(asset_path, content_hash) + SOURCEMAP_SUFFIX
        logger.debug("Renamed %s -> %s (shared hash)", record.original_path, record.path)
