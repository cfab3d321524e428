# src/manifest/transformers/json_transformer.py — v1
"""JSON manifest codec (default).

Output matches the usual pretty-printed JSON manifest: two-space indentation,
non-ASCII kept as-is, no trailing newline.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from assetrev.manifest.transformers.base_transformer import BaseManifestTransformer


class JsonTransformer(BaseManifestTransformer):
    """Manifest codec backed by the json module."""

    @property
    def format_name(self) -> str:
        return "json"

    def parse(self, text: str) -> Any:
        return json.loads(text)

    def stringify(self, manifest: Mapping[str, Any], indent: int = 2) -> str:
        return json.dumps(dict(manifest), ensure_ascii=False, indent=indent)
