"""Repository-structure state snapshot."""

from __future__ import annotations

from pathlib import Path

from repoguard.artifacts.canonical_json import sha256_bytes
from repoguard.obs.run_artifacts import STATE_FILENAME, STATE_HASH_FILENAME
from repoguard.proofgate.types import ProofgateResult
from repoguard.utils.paths import is_directory

STATE_SNAPSHOT_WRITTEN = "STATE_SNAPSHOT_WRITTEN"
STATE_ROOT_INVALID = "STATE_ROOT_INVALID"


def collect_structure(root: Path, evidence_dir: Path) -> list[str]:
    """Return sorted POSIX relative paths of files under root.

    ``.git/`` and the evidence directory are excluded so the snapshot does
    not describe itself.
    """
    root = root.resolve()
    evidence_dir = evidence_dir.resolve()
    entries: list[str] = []

    for path in root.rglob("*"):
        if not path.is_file():
            continue
        if evidence_dir == path or evidence_dir in path.parents:
            continue
        rel = path.relative_to(root)
        if rel.parts[0] == ".git":
            continue
        entries.append(rel.as_posix())

    return sorted(entries)


def write_state_snapshot(root: Path, evidence_dir: Path) -> ProofgateResult:
    """Write the state snapshot and its uppercase SHA-256 digest.

    A root that is not a directory yields STATE_ROOT_INVALID (exit 2) and
    nothing is written.
    """
    if not is_directory(root):
        return ProofgateResult(status=STATE_ROOT_INVALID, exit_code=2)

    state = "".join(f"{entry}\n" for entry in collect_structure(root, evidence_dir)).encode("utf-8")

    evidence_dir.mkdir(parents=True, exist_ok=True)
    state_path = evidence_dir / STATE_FILENAME
    state_path.write_bytes(state)
    (evidence_dir / STATE_HASH_FILENAME).write_text(sha256_bytes(state).upper() + "\n", encoding="utf-8")

    return ProofgateResult(status=STATE_SNAPSHOT_WRITTEN, exit_code=0, path=state_path)
