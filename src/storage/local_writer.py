# src/storage/local_writer.py — v1
"""Local filesystem storage backend (default)."""

from __future__ import annotations

from pathlib import Path

from assetrev.storage.base_output_writer import BaseOutputWriter


class LocalWriter(BaseOutputWriter):
    """Read and write files on the local filesystem."""

    def __init__(self, base_path: str | Path | None = None) -> None:
        """Initialize with optional base path.

        Args:
            base_path: Root directory for relative paths. If None, paths are
                used as given.
        """
        self._base = Path(base_path) if base_path else None

    def _resolve(self, path: str) -> Path:
        """Resolve a path relative to base_path.

        Raises:
            ValueError: If base_path is set and ``path`` is absolute or
                escapes it.
        """
        if self._base is None:
            return Path(path)
        if Path(path).is_absolute():
            raise ValueError(f"Absolute path not allowed under {self._base}: {path}")
        target = self._base / path
        if not target.resolve().is_relative_to(self._base.resolve()):
            raise ValueError(f"Path escapes {self._base}: {path}")
        return target

    async def write(self, path: str, content: bytes | str) -> None:
        p = self._resolve(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            p.write_bytes(content)
        else:
            p.write_text(content, encoding="utf-8")

    async def read(self, path: str) -> bytes:
        p = self._resolve(path)
        if p.is_dir():
            raise IsADirectoryError(f"Is a directory: {p}")
        return p.read_bytes()

    async def exists(self, path: str) -> bool:
        return self._resolve(path).exists()
