# src/pipeline/base_stage.py — v1
"""Abstract pipeline stage interface.

The host pipeline pushes records one at a time, then flushes once. ``push``
is synchronous in-memory work; ``flush`` may await storage.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from assetrev.core.models import FileRecord


class BaseStage(ABC):
    """Unified interface for record transform stages."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Stage identifier used in errors and log context."""

    @abstractmethod
    def push(self, record: FileRecord) -> list[FileRecord]:
        """Process one record and return the records to pass downstream."""

    async def flush(self) -> list[FileRecord]:
        """Handle end of stream and return any held-back records."""
        return []
