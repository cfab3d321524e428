# src/manifest/transformers/transformer_factory.py — v1
"""Factory for manifest transformer instantiation."""

from __future__ import annotations

import importlib

from assetrev.config.settings import Settings
from assetrev.manifest.transformers.base_transformer import BaseManifestTransformer

_TRANSFORMERS: dict[str, str] = {
    "json": "assetrev.manifest.transformers.json_transformer.JsonTransformer",
    "yaml": "assetrev.manifest.transformers.yaml_transformer.YamlTransformer",
}


class UnsupportedTransformerError(ValueError):
    """Raised when the requested manifest format has no transformer."""


def create_transformer(
    source: str | Settings | None = None,
) -> BaseManifestTransformer:
    """Instantiate a manifest transformer.

    Args:
        source: Format name, Settings (uses MANIFEST_FORMAT), or None for JSON.

    Raises:
        UnsupportedTransformerError: If the format is unknown.
    """
    if source is None:
        fmt = "json"
    elif isinstance(source, Settings):
        fmt = source.manifest_format
    else:
        fmt = source.lower()

    fqcn = _TRANSFORMERS.get(fmt)
    if fqcn is None:
        raise UnsupportedTransformerError(
            f"Unsupported manifest format: {fmt!r}. "
            f"Available: {', '.join(sorted(_TRANSFORMERS))}"
        )
    module_path, class_name = fqcn.rsplit(".", 1)
    cls = getattr(importlib.import_module(module_path), class_name)
    return cls()
