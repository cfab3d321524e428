# src/manifest/transformers/base_transformer.py — v1
"""Manifest codec interfaces.

Stages accept any object with ``parse``/``stringify`` (``ManifestCodec``).
Built-in codecs derive from ``BaseManifestTransformer``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ManifestCodec(Protocol):
    """Structural type of a manifest codec."""

    def parse(self, text: str) -> Any: ...

    def stringify(self, manifest: Mapping[str, Any], indent: int = 2) -> str: ...


def codec_name(codec: ManifestCodec) -> str:
    """``format_name`` when the codec has one, else its type name."""
    return getattr(codec, "format_name", None) or type(codec).__name__


class BaseManifestTransformer(ABC):
    """Parse and serialize a manifest mapping."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Codec identifier (e.g., 'json', 'yaml')."""

    @abstractmethod
    def parse(self, text: str) -> Any:
        """Parse serialized text. May return a non-mapping for odd input."""

    @abstractmethod
    def stringify(self, manifest: Mapping[str, Any], indent: int = 2) -> str:
        """Serialize ``manifest`` keeping its key order."""
