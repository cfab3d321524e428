# src/manifest/merger.py — v1
"""Reconcile a new manifest with a previously persisted one.

Load-or-create: a missing manifest file is an empty starting point, any other
read failure is fatal. A malformed existing manifest is treated as empty so a
build still produces a fresh manifest. Output keys are always sorted.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from assetrev.core.errors import ManifestLoadError
from assetrev.manifest.transformers.base_transformer import ManifestCodec, codec_name
from assetrev.manifest.transformers.json_transformer import JsonTransformer
from assetrev.storage.base_output_writer import BaseOutputWriter

logger = logging.getLogger(__name__)

MANIFEST_INDENT = 2


async def load_existing(writer: BaseOutputWriter, path: str) -> bytes | None:
    """Read the persisted manifest, or None if there is none yet.

    Raises:
        ManifestLoadError: For any read failure other than not-found.
    """
    try:
        return await writer.read(path)
    except FileNotFoundError:
        logger.debug("No existing manifest at %s", path)
        return None
    except OSError as exc:
        raise ManifestLoadError(
            f"Cannot read manifest {path}: {exc}", stage="manifest"
        ) from exc


def parse_lenient(text: str, transformer: ManifestCodec) -> dict[str, Any]:
    """Parse an existing manifest, defaulting to empty on any parse error.

    Keys are coerced to str. Values are kept as parsed.
    """
    try:
        parsed = transformer.parse(text)
    except Exception as exc:  # codec errors vary by transformer
        logger.warning("Ignoring unparseable manifest (%s): %s", codec_name(transformer), exc)
        return {}
    if not isinstance(parsed, Mapping):
        if parsed is not None:
            logger.warning("Ignoring manifest that is not a mapping: %r", type(parsed))
        return {}
    return {str(k): v for k, v in parsed.items()}


def merge_manifests(existing: Mapping[str, Any], new: Mapping[str, str]) -> dict[str, Any]:
    """Shallow union; entries of ``new`` win on key conflicts."""
    merged = dict(existing)
    merged.update(new)
    return merged


def sort_manifest(manifest: Mapping[str, Any]) -> dict[str, Any]:
    return {key: manifest[key] for key in sorted(manifest)}


def serialize_manifest(
    manifest: Mapping[str, Any],
    transformer: ManifestCodec | None = None,
) -> bytes:
    """Key-sorted, pretty-printed UTF-8 bytes."""
    transformer = transformer or JsonTransformer()
    text = transformer.stringify(sort_manifest(manifest), indent=MANIFEST_INDENT)
    return text.encode("utf-8")


def resolve(
    existing: bytes | None,
    new: Mapping[str, str],
    merge: bool = False,
    transformer: ManifestCodec | None = None,
) -> bytes | None:
    """Final serialized manifest, or None when there is nothing to emit.

    Args:
        existing: Bytes of the persisted manifest, None if absent.
        new: Entries accumulated in this run.
        merge: Whether to fold ``new`` into the existing entries.
        transformer: Codec for parsing and output. Defaults to JSON.
    """
    transformer = transformer or JsonTransformer()
    manifest: dict[str, Any] = dict(new)

    if merge and existing:
        old = parse_lenient(existing.decode("utf-8", errors="replace"), transformer)
        manifest = merge_manifests(old, manifest)
        logger.debug("Merged %d new entries into %d existing", len(new), len(old))

    if not manifest:
        return None
    return serialize_manifest(manifest, transformer)
