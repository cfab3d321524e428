# tests/unit/storage/test_local_writer.py — v1
"""Tests for storage/local_writer.py."""

from __future__ import annotations

import pytest

from assetrev.storage.local_writer import LocalWriter


class TestLocalWriter:
    @pytest.mark.asyncio
    async def test_write_creates_parents(self, tmp_path):
        writer = LocalWriter(tmp_path)
        await writer.write("css/a-1.css", b"body{}")
        assert (tmp_path / "css" / "a-1.css").read_bytes() == b"body{}"

    @pytest.mark.asyncio
    async def test_write_text(self, tmp_path):
        writer = LocalWriter(tmp_path)
        await writer.write("m.json", "{}")
        assert await writer.read("m.json") == b"{}"

    @pytest.mark.asyncio
    async def test_read_missing_raises_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            await LocalWriter(tmp_path).read("missing.json")

    @pytest.mark.asyncio
    async def test_read_directory_raises_os_error(self, tmp_path):
        (tmp_path / "dir").mkdir()
        with pytest.raises(IsADirectoryError):
            await LocalWriter(tmp_path).read("dir")

    @pytest.mark.asyncio
    async def test_exists_without_base(self, tmp_path):
        target = tmp_path / "a.txt"
        target.write_text("x")
        writer = LocalWriter()
        assert await writer.exists(str(target))
        assert not await writer.exists(str(tmp_path / "b.txt"))

    @pytest.mark.asyncio
    async def test_absolute_path_rejected_under_base(self, tmp_path):
        writer = LocalWriter(tmp_path / "dist")
        with pytest.raises(ValueError, match="Absolute path"):
            await writer.write(str(tmp_path / "src" / "a.css"), b"x")
        with pytest.raises(ValueError, match="Absolute path"):
            await writer.read(str(tmp_path / "src" / "a.css"))
        assert not (tmp_path / "src").exists()

    @pytest.mark.asyncio
    async def test_escaping_path_rejected(self, tmp_path):
        writer = LocalWriter(tmp_path / "dist")
        with pytest.raises(ValueError, match="escapes"):
            await writer.write("../a.css", b"x")
        assert not (tmp_path / "a.css").exists()
