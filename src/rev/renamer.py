# src/rev/renamer.py — v1
"""Content-hash renaming of a single file record.

``app.min.js`` becomes ``app-<hash>.min.js``: the hash goes right after the
name segment before the first dot, ahead of any dotted suffix.
"""

from __future__ import annotations

import hashlib
import logging

from assetrev.core.errors import RevisionError, StreamingNotSupportedError
from assetrev.core.models import BufferedContents, FileRecord
from assetrev.core.paths import insert_hash

logger = logging.getLogger(__name__)

DEFAULT_HASH_LENGTH = 10


def compute_revision_hash(data: bytes, length: int = DEFAULT_HASH_LENGTH) -> str:
    """Short hex digest of ``data``.

    MD5 is used for its speed and stable output only; collisions do not
    affect correctness.
    """
    return hashlib.md5(data).hexdigest()[:length]  # noqa: S324


def revision_path(path: str, content_hash: str) -> str:
    """Return ``path`` with ``content_hash`` embedded in its filename."""
    return insert_hash(path, content_hash)


def rename(record: FileRecord, hash_length: int = DEFAULT_HASH_LENGTH) -> None:
    """Rename ``record`` in place after its contents.

    Records ``original_path``, ``original_base`` and ``content_hash`` before
    rewriting ``path``.

    Raises:
        StreamingNotSupportedError: If the contents are streamed.
        RevisionError: If the record has no contents to hash.
    """
    if record.is_stream:
        raise StreamingNotSupportedError(stage="rev")
    if not isinstance(record.contents, BufferedContents):
        raise RevisionError(f"No contents to hash: {record.path}", stage="rev")

    content_hash = compute_revision_hash(record.contents.data, hash_length)
    mark_revisioned(record, content_hash)
    record.path = revision_path(record.path, content_hash)

    logger.debug("Renamed %s -> %s", record.original_path, record.path)


def mark_revisioned(record: FileRecord, content_hash: str) -> None:
    """Save the pre-rename location and the hash on the record."""
    record.original_path = record.path
    record.original_base = record.base
    record.content_hash = content_hash
