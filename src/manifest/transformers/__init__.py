# src/manifest/transformers/__init__.py — v1
"""Pluggable manifest codecs."""

from assetrev.manifest.transformers.base_transformer import (
    BaseManifestTransformer,
    ManifestCodec,
)
from assetrev.manifest.transformers.json_transformer import JsonTransformer

__all__ = ["BaseManifestTransformer", "JsonTransformer", "ManifestCodec"]
