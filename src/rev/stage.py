# src/rev/stage.py — v1
"""Revision stage — renames assets and their sourcemaps.

Usage:
    stage = RevisionStage()
    out = stage.push(record)      # renamed asset, or [] for a buffered map
    out += await stage.flush()    # resolved sourcemaps
"""

from __future__ import annotations

import logging

from assetrev.core.errors import StreamingNotSupportedError
from assetrev.core.models import FileRecord
from assetrev.pipeline.base_stage import BaseStage
from assetrev.rev.reconciler import SourcemapReconciler
from assetrev.rev.renamer import DEFAULT_HASH_LENGTH

logger = logging.getLogger(__name__)


class RevisionStage(BaseStage):
    """Content-hash every buffered record passing through."""

    def __init__(self, hash_length: int = DEFAULT_HASH_LENGTH) -> None:
        self._reconciler = SourcemapReconciler(hash_length=hash_length)
        self._renamed = 0

    @property
    def name(self) -> str:
        return "rev"

    @property
    def reconciler(self) -> SourcemapReconciler:
        return self._reconciler

    def push(self, record: FileRecord) -> list[FileRecord]:
        if record.is_null:
            return [record]
        if record.is_stream:
            raise StreamingNotSupportedError(stage=self.name)

        renamed = self._reconciler.collect(record)
        if renamed is None:
            return []
        self._renamed += 1
        return [renamed]

    async def flush(self) -> list[FileRecord]:
        sourcemaps = self._reconciler.resolve()
        logger.info(
            "Revisioned %d assets and %d sourcemaps",
            self._renamed, len(sourcemaps),
        )
        return sourcemaps
