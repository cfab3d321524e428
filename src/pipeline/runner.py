# src/pipeline/runner.py — v1
"""Drive a record stream through a chain of stages.

Stands in for the host build pipeline: each record is pushed through every
stage in order, then stages are flushed front to back, with records released
by a flush pushed into the stages after it before those are flushed.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Sequence

from assetrev.core.models import FileRecord
from assetrev.logging.context import set_run_context, set_stage_context
from assetrev.pipeline.base_stage import BaseStage

logger = logging.getLogger(__name__)


def _push_through(
    records: list[FileRecord], stages: Sequence[BaseStage]
) -> list[FileRecord]:
    for stage in stages:
        out: list[FileRecord] = []
        for record in records:
            set_stage_context(stage.name, record.path)
            out.extend(stage.push(record))
        records = out
    return records


async def run_pipeline(
    records: Iterable[FileRecord],
    stages: Sequence[BaseStage],
    run_id: str | None = None,
) -> list[FileRecord]:
    """Run ``records`` through ``stages`` and return what leaves the last one.

    Errors raised by a stage propagate unchanged; nothing is retried.
    """
    run_id = run_id or uuid.uuid4().hex[:12]
    set_run_context(run_id)

    emitted: list[FileRecord] = []
    count = 0
    try:
        for record in records:
            count += 1
            emitted.extend(_push_through([record], stages))

        for idx, stage in enumerate(stages):
            set_stage_context(stage.name)
            flushed = await stage.flush()
            emitted.extend(_push_through(flushed, stages[idx + 1 :]))
    finally:
        set_stage_context(None)

    logger.info(
        "Pipeline %s: %d records in, %d records out", run_id, count, len(emitted),
    )
    return emitted
