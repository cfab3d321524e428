# src/core/models.py — v1
"""Shared Pydantic domain models used across modules.

FileRecord is the unit handed over by the host pipeline. Its contents are a
tagged variant so the "streaming unsupported" branch is an explicit case
rather than a capability probe.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

# original relative path -> revisioned relative path
Manifest = dict[str, str]

# pre-rename path -> content hash, private to one revision run
PathMapping = dict[str, str]


# === CONTENTS VARIANT ===


class NullContents(BaseModel):
    """No payload (directories, placeholder records)."""

    kind: Literal["null"] = "null"


class BufferedContents(BaseModel):
    """Fully materialized byte payload."""

    kind: Literal["buffered"] = "buffered"
    data: bytes = b""


class StreamedContents(BaseModel):
    """Streamed payload. Accepted as input but rejected by every stage."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    kind: Literal["streamed"] = "streamed"
    stream: Any = None


FileContents = Annotated[
    Union[NullContents, BufferedContents, StreamedContents],
    Field(discriminator="kind"),
]


# === FILE RECORD ===


class FileRecord(BaseModel):
    """One asset flowing through the pipeline.

    ``original_path`` is set if and only if the record went through renaming;
    its absence means the record is not manifested.
    """

    path: str
    base: str = ""
    contents: FileContents = Field(default_factory=NullContents)

    # --- Set once renamed ---
    original_path: str | None = None
    original_base: str | None = None
    content_hash: str | None = None

    @classmethod
    def from_bytes(cls, path: str, data: bytes, base: str = "") -> FileRecord:
        """Build a record with buffered contents."""
        return cls(path=path, base=base, contents=BufferedContents(data=data))

    @property
    def is_null(self) -> bool:
        return isinstance(self.contents, NullContents)

    @property
    def is_stream(self) -> bool:
        return isinstance(self.contents, StreamedContents)

    @property
    def is_buffered(self) -> bool:
        return isinstance(self.contents, BufferedContents)

    @property
    def is_revisioned(self) -> bool:
        """True when the record carries renaming metadata."""
        return bool(self.path) and bool(self.original_path)

    @property
    def data(self) -> bytes:
        """Buffered bytes, or empty bytes for any other variant."""
        if isinstance(self.contents, BufferedContents):
            return self.contents.data
        return b""
