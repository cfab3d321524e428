# tests/unit/rev/test_unit_stage.py — v1
"""Tests for rev/stage.py — host-facing revision stage."""

from __future__ import annotations

import pytest

from assetrev.core.errors import StreamingNotSupportedError
from assetrev.rev.stage import RevisionStage


class TestRevisionStage:
    def test_name(self):
        assert RevisionStage().name == "rev"

    def test_null_passes_through_untouched(self, null_record):
        stage = RevisionStage()
        assert stage.push(null_record) == [null_record]
        assert null_record.path == "/src/assets"
        assert null_record.original_path is None

    def test_stream_rejected(self, stream_record):
        with pytest.raises(StreamingNotSupportedError) as exc_info:
            RevisionStage().push(stream_record)
        assert exc_info.value.stage == "rev"

    def test_asset_emitted_immediately(self, make_record):
        stage = RevisionStage()
        [out] = stage.push(make_record("/src/a.css", "x"))
        assert out.path == "/src/a-9dd4e46126.css"

    def test_sourcemap_held_until_flush(self, make_record, sourcemap_bytes):
        stage = RevisionStage()
        assert stage.push(make_record("/src/app.js.map", sourcemap_bytes("app.js"))) == []
        assert stage.reconciler.pending == 1

    @pytest.mark.asyncio
    async def test_flush_emits_sourcemaps(self, asset_batch):
        stage = RevisionStage()
        emitted = []
        for record in asset_batch:
            emitted.extend(stage.push(record))
        emitted.extend(await stage.flush())

        paths = [r.path for r in emitted]
        app = next(r for r in emitted if r.original_path == "/src/js/app.js")
        assert len(paths) == 3
        assert paths[-1] == app.path + ".map"

    @pytest.mark.asyncio
    async def test_hash_length_setting(self, make_record):
        stage = RevisionStage(hash_length=6)
        [out] = stage.push(make_record("/src/a.css", "x"))
        assert out.content_hash == "9dd4e4"
        assert await stage.flush() == []
