# src/core/errors.py — v1
"""Error taxonomy for revisioning and manifest stages.

Usage errors are raised per record. Load errors are raised from a stage flush.
Recoverable parse errors never surface: they are absorbed by the lenient
parsing helpers in rev.reconciler and manifest.merger.
"""

from __future__ import annotations


class RevisionError(Exception):
    """Base error raised by a pipeline stage."""

    def __init__(self, message: str, stage: str = "assetrev") -> None:
        super().__init__(message)
        self.stage = stage
        self.message = message

    def __str__(self) -> str:
        return f"{self.stage}: {self.message}"


class StreamingNotSupportedError(RevisionError):
    """Raised when a record carries streamed instead of buffered contents."""

    def __init__(self, stage: str = "assetrev") -> None:
        super().__init__("Streaming not supported", stage=stage)


class ManifestLoadError(RevisionError):
    """Raised when an existing manifest exists but cannot be read."""
