"""JSON and digest helpers for repo guard artifacts."""

from __future__ import annotations

import hashlib
import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path


def pretty_dumps(obj: Any) -> str:
    """Serialize for humans: 2-space indent, insertion order kept."""
    return json.dumps(obj, indent=2, ensure_ascii=False)


def write_json(path: Path, obj: Any) -> None:
    """Write indented JSON as UTF-8, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(pretty_dumps(obj), encoding="utf-8")


def sha256_bytes(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def sha256_file(path: Path) -> str:
    """Compute SHA-256 for file bytes."""
    digest = hashlib.sha256()
    with path.open("rb") as handle:
        while True:
            chunk = handle.read(65536)
            if not chunk:
                break
            digest.update(chunk)
    return digest.hexdigest()
