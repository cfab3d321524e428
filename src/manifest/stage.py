# src/manifest/stage.py — v1
"""Manifest stages — collect renamed records and emit a manifest file.

ManifestStage builds a fresh manifest per run and emits it at flush.
ManifestObjectStage and ManifestMergeStage share a caller-owned accumulator
so several runs can contribute to one manifest:

    acc = ManifestAccumulator()
    await run_pipeline(css_records, [RevisionStage(), ManifestObjectStage(acc)])
    await run_pipeline(js_records, [RevisionStage(), ManifestObjectStage(acc)])
    await run_pipeline([existing_manifest], [ManifestMergeStage(acc)])
"""

from __future__ import annotations

import logging

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from assetrev.config.settings import Settings
from assetrev.core.errors import StreamingNotSupportedError
from assetrev.core.models import BufferedContents, FileRecord
from assetrev.manifest import merger
from assetrev.manifest.accumulator import ManifestAccumulator
from assetrev.manifest.transformers.base_transformer import ManifestCodec
from assetrev.manifest.transformers.json_transformer import JsonTransformer
from assetrev.pipeline.base_stage import BaseStage
from assetrev.storage.base_output_writer import BaseOutputWriter
from assetrev.storage.local_writer import LocalWriter

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST_PATH = "rev-manifest.json"


class ManifestOptions(BaseModel):
    """Options of the manifest stage."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    path: str = DEFAULT_MANIFEST_PATH
    merge: bool = False
    transformer: ManifestCodec = Field(default_factory=JsonTransformer)
    base: str = ""

    @field_validator("transformer", mode="plain")
    @classmethod
    def _check_codec(cls, value: Any) -> ManifestCodec:
        if not isinstance(value, ManifestCodec):
            raise ValueError(
                f"transformer must provide parse() and stringify(), got {type(value).__name__}"
            )
        return value

    @classmethod
    def from_settings(cls, settings: Settings) -> ManifestOptions:
        from assetrev.manifest.transformers.transformer_factory import (
            create_transformer,
        )

        return cls(
            path=str(settings.manifest_path),
            merge=settings.manifest_merge,
            transformer=create_transformer(settings),
        )


class ManifestStage(BaseStage):
    """Accumulate renamed records and emit the manifest at end of stream."""

    def __init__(
        self,
        options: ManifestOptions | str | None = None,
        writer: BaseOutputWriter | None = None,
    ) -> None:
        if options is None:
            options = ManifestOptions()
        elif isinstance(options, str):
            options = ManifestOptions(path=options)
        self._options = options
        self._writer = writer or LocalWriter()
        self._accumulator = ManifestAccumulator()

    @property
    def name(self) -> str:
        return "manifest"

    @property
    def options(self) -> ManifestOptions:
        return self._options

    def push(self, record: FileRecord) -> list[FileRecord]:
        self._accumulator.add(record)
        return []

    async def flush(self) -> list[FileRecord]:
        if len(self._accumulator) == 0:
            logger.info("Nothing to manifest, skipping %s", self._options.path)
            return []

        existing = await merger.load_existing(self._writer, self._options.path)
        data = merger.resolve(
            existing,
            self._accumulator.entries,
            merge=self._options.merge,
            transformer=self._options.transformer,
        )
        if data is None:
            return []

        logger.info(
            "Writing manifest %s with %d new entries (merge=%s)",
            self._options.path, len(self._accumulator), self._options.merge,
        )
        return [
            FileRecord.from_bytes(self._options.path, data, base=self._options.base)
        ]


class ManifestObjectStage(BaseStage):
    """Add renamed records to a shared accumulator without emitting them."""

    def __init__(self, accumulator: ManifestAccumulator) -> None:
        self._accumulator = accumulator

    @property
    def name(self) -> str:
        return "manifest-object"

    def push(self, record: FileRecord) -> list[FileRecord]:
        self._accumulator.add(record)
        return []


class ManifestMergeStage(BaseStage):
    """Fold accumulated entries into each incoming manifest record.

    The merged mapping is written back to the accumulator and becomes the
    record's new, key-sorted contents.
    """

    def __init__(
        self,
        accumulator: ManifestAccumulator,
        transformer: ManifestCodec | None = None,
    ) -> None:
        self._accumulator = accumulator
        self._transformer = transformer or JsonTransformer()

    @property
    def name(self) -> str:
        return "manifest-merge"

    def push(self, record: FileRecord) -> list[FileRecord]:
        if record.is_stream:
            raise StreamingNotSupportedError(stage=self.name)

        old = {}
        if record.data:
            old = merger.parse_lenient(
                record.data.decode("utf-8", errors="replace"), self._transformer
            )
        merged = merger.merge_manifests(old, self._accumulator.entries)
        self._accumulator.replace(merged)
        record.contents = BufferedContents(
            data=merger.serialize_manifest(merged, self._transformer)
        )
        logger.info("Merged manifest %s (%d entries)", record.path, len(merged))
        return [record]
