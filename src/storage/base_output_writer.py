# src/storage/base_output_writer.py — v1
"""Abstract storage interface for manifests and revisioned output."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseOutputWriter(ABC):
    """Unified interface for storage backends."""

    @abstractmethod
    async def write(self, path: str, content: bytes | str) -> None:
        """Write content to the given path, creating parents."""

    @abstractmethod
    async def read(self, path: str) -> bytes:
        """Read content from the given path.

        Raises:
            FileNotFoundError: If nothing exists at ``path``.
            OSError: For any other read failure.
        """

    @abstractmethod
    async def exists(self, path: str) -> bool:
        """Check if path exists."""
