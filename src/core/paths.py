# src/core/paths.py — v1
"""Pure path helpers: relative paths, filename decomposition, slash handling.

Record paths are plain strings supplied by the host pipeline and may use
either separator, so these helpers work on strings instead of Path objects.
"""

from __future__ import annotations

import posixpath

REVISION_SEPARATOR = "-"


def to_posix(path: str) -> str:
    """Replace Windows separators with forward slashes."""
    return path.replace("\\", "/")


def normalize_key(path: str) -> str:
    """Slash-normalized, collapsed form used for path lookups."""
    return posixpath.normpath(to_posix(path))


def rel_path(base: str, file_path: str) -> str:
    """Return ``file_path`` relative to ``base`` with forward slashes.

    Paths outside ``base`` are returned unchanged apart from slash
    normalization.
    """
    if not file_path.startswith(base):
        return to_posix(file_path)

    new_path = to_posix(file_path[len(base):])
    if new_path.startswith("/"):
        return new_path[1:]
    return new_path


def split_dir(path: str) -> tuple[str, str]:
    """Split into (directory prefix including trailing separator, basename)."""
    idx = max(path.rfind("/"), path.rfind("\\"))
    return path[: idx + 1], path[idx + 1 :]


def split_filename(name: str) -> tuple[str, str]:
    """Split a basename at its first dot.

    Leading dots belong to the name, so ``.htaccess`` has no remainder.

    Examples:
        ``app.min.js`` -> (``app``, ``.min.js``)
        ``app`` -> (``app``, ``""``)
    """
    start = len(name) - len(name.lstrip("."))
    idx = name.find(".", start)
    if idx == -1:
        return name, ""
    return name[:idx], name[idx:]


def insert_hash(path: str, content_hash: str) -> str:
    """Insert ``-<hash>`` after the pre-dot segment of the basename."""
    head, name = split_dir(path)
    stem, rest = split_filename(name)
    return f"{head}{stem}{REVISION_SEPARATOR}{content_hash}{rest}"


def strip_suffix(path: str, suffix: str) -> str:
    if suffix and path.endswith(suffix):
        return path[: -len(suffix)]
    return path


def dirname_posix(path: str) -> str:
    return posixpath.dirname(to_posix(path))


def basename_posix(path: str) -> str:
    return posixpath.basename(to_posix(path))


def join_posix(directory: str, name: str) -> str:
    """Join and normalize; an empty directory yields ``name`` itself."""
    return posixpath.normpath(posixpath.join(to_posix(directory), to_posix(name)))


def resolve_against(path: str, reference: str) -> str:
    """Resolve ``reference`` relative to the directory holding ``path``."""
    return join_posix(dirname_posix(path), reference)
