# src/__init__.py — v1
"""assetrev: content-hash revisioning of static assets with manifest output.

Usage:
    from assetrev import FileRecord, ManifestStage, RevisionStage, run_pipeline
    out = await run_pipeline(records, [RevisionStage(), ManifestStage()])
"""

from assetrev.core.errors import (
    ManifestLoadError,
    RevisionError,
    StreamingNotSupportedError,
)
from assetrev.core.models import FileRecord
from assetrev.manifest.accumulator import ManifestAccumulator
from assetrev.manifest.stage import (
    ManifestMergeStage,
    ManifestObjectStage,
    ManifestOptions,
    ManifestStage,
)
from assetrev.pipeline.runner import run_pipeline
from assetrev.rev.stage import RevisionStage
from assetrev.version import __version__

__all__ = [
    "FileRecord",
    "ManifestAccumulator",
    "ManifestLoadError",
    "ManifestMergeStage",
    "ManifestObjectStage",
    "ManifestOptions",
    "ManifestStage",
    "RevisionError",
    "RevisionStage",
    "StreamingNotSupportedError",
    "__version__",
    "run_pipeline",
]
