"""Filesystem probe for paths relative to a repository root.

All checks are read-only stat calls. Absence is a normal ``False`` result,
and permission errors are treated the same way.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


def resolve_under(root: Path, rel: str) -> Path:
    """Join a relative path (which may contain separators) onto root."""
    return (root / rel).resolve()


def exists(root: Path, rel: str) -> bool:
    """Return True when ``rel`` exists under root as a file or directory."""
    try:
        return resolve_under(root, rel).exists()
    except OSError:
        return False


def is_directory(path: Path) -> bool:
    """Return True when path is an existing directory."""
    try:
        return path.is_dir()
    except OSError:
        return False


def find_forbidden(root: Path, forbidden: Iterable[str]) -> list[str]:
    """Return forbidden entries present under root, in input order."""
    return [item for item in forbidden if exists(root, item)]


def find_missing(root: Path, required: Iterable[str]) -> list[str]:
    """Return required entries absent from root, in input order."""
    return [item for item in required if not exists(root, item)]
