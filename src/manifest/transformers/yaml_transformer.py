# src/manifest/transformers/yaml_transformer.py — v1
"""YAML manifest codec for projects that keep manifests in YAML."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import yaml

from assetrev.manifest.transformers.base_transformer import BaseManifestTransformer


class YamlTransformer(BaseManifestTransformer):
    """Manifest codec backed by PyYAML safe load/dump."""

    @property
    def format_name(self) -> str:
        return "yaml"

    def parse(self, text: str) -> Any:
        return yaml.safe_load(text)

    def stringify(self, manifest: Mapping[str, Any], indent: int = 2) -> str:
        return yaml.safe_dump(
            dict(manifest),
            indent=indent,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )
