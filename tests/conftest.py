# tests/conftest.py — v1
"""Shared test fixtures for all unit and integration tests.

Provides record factories and sample asset batches. File I/O only ever
touches pytest's tmp_path.
"""

from __future__ import annotations

import json
from collections.abc import Callable

import pytest

from assetrev.core.models import FileRecord, NullContents, StreamedContents
from assetrev.logging.context import clear_context


@pytest.fixture(autouse=True)
def _reset_log_context():
    clear_context()
    yield
    clear_context()


# === FIXTURES: Record factories ===


@pytest.fixture
def make_record() -> Callable[..., FileRecord]:
    """Factory for buffered records rooted at /src by default."""

    def _make(path: str, data: bytes | str = b"", base: str = "/src") -> FileRecord:
        if isinstance(data, str):
            data = data.encode("utf-8")
        return FileRecord.from_bytes(path, data, base=base)

    return _make


@pytest.fixture
def null_record() -> FileRecord:
    return FileRecord(path="/src/assets", base="/src", contents=NullContents())


@pytest.fixture
def stream_record() -> FileRecord:
    return FileRecord(
        path="/src/big.js", base="/src", contents=StreamedContents(stream=iter([b"x"]))
    )


@pytest.fixture
def sourcemap_bytes() -> Callable[[str], bytes]:
    """Minimal v3 sourcemap whose ``file`` field points at ``target``."""

    def _make(target: str) -> bytes:
        return json.dumps(
            {"version": 3, "file": target, "sources": ["app.ts"], "mappings": "AAAA"}
        ).encode("utf-8")

    return _make


# === FIXTURES: Sample batches ===


@pytest.fixture
def asset_batch(make_record, sourcemap_bytes) -> list[FileRecord]:
    """CSS + JS asset with its sourcemap, the map arriving before the asset."""
    return [
        make_record("/src/css/site.css", "body{color:red}"),
        make_record("/src/js/app.js.map", sourcemap_bytes("app.js")),
        make_record("/src/js/app.js", "console.log(1)"),
    ]
