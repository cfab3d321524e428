# tests/unit/pipeline/test_unit_runner.py — v1
"""Tests for pipeline/runner.py — push/flush ordering across stages."""

from __future__ import annotations

import pytest

from assetrev.core.models import FileRecord
from assetrev.logging.context import get_context
from assetrev.pipeline.base_stage import BaseStage
from assetrev.pipeline.runner import run_pipeline


class _Recorder(BaseStage):
    """Passes records through, remembering what it saw."""

    def __init__(self, label: str, hold: bool = False) -> None:
        self.label = label
        self.hold = hold
        self.seen: list[str] = []
        self.held: list[FileRecord] = []
        self.flushed = False

    @property
    def name(self) -> str:
        return self.label

    def push(self, record: FileRecord) -> list[FileRecord]:
        self.seen.append(record.path)
        if self.hold:
            self.held.append(record)
            return []
        return [record]

    async def flush(self) -> list[FileRecord]:
        self.flushed = True
        return self.held


class _Failing(BaseStage):
    @property
    def name(self) -> str:
        return "failing"

    def push(self, record: FileRecord) -> list[FileRecord]:
        assert get_context().stage == "failing"
        raise RuntimeError(f"boom {record.path}")


class TestRunPipeline:
    @pytest.mark.asyncio
    async def test_records_pass_through_all_stages(self, make_record):
        first, second = _Recorder("a"), _Recorder("b")
        out = await run_pipeline([make_record("/src/x"), make_record("/src/y")], [first, second])
        assert [r.path for r in out] == ["/src/x", "/src/y"]
        assert second.seen == ["/src/x", "/src/y"]
        assert first.flushed and second.flushed

    @pytest.mark.asyncio
    async def test_flushed_records_reach_downstream(self, make_record):
        holder, downstream = _Recorder("hold", hold=True), _Recorder("down")
        out = await run_pipeline([make_record("/src/x")], [holder, downstream])
        assert downstream.seen == ["/src/x"]
        assert [r.path for r in out] == ["/src/x"]

    @pytest.mark.asyncio
    async def test_errors_propagate(self, make_record):
        with pytest.raises(RuntimeError, match="boom /src/x"):
            await run_pipeline([make_record("/src/x")], [_Failing()])
        assert get_context().stage is None

    @pytest.mark.asyncio
    async def test_run_id_in_context(self, make_record):
        await run_pipeline([], [_Recorder("a")], run_id="run-1")
        assert get_context().run_id == "run-1"
