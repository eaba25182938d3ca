"""Structural verifier: recomputes the state digest and records a verdict."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from repoguard.artifacts.canonical_json import sha256_file, write_json
from repoguard.evidence import iso_timestamp
from repoguard.obs.run_artifacts import STATE_FILENAME, STATE_HASH_FILENAME, VERDICT_FILENAME
from repoguard.proofgate.types import TOOL_NAME, ProofgateResult

STATE_EVIDENCE_MISSING = "STATE_EVIDENCE_MISSING"
STATE_HASH_MISSING = "STATE_HASH_MISSING"
STATE_HASH_MISMATCH = "STATE_HASH_MISMATCH"
VERIFY_PASS = "PROOFGATE_STRUCTURAL_VERIFY_PASS"


def verify_structural(evidence_dir: Path, now: datetime | None = None) -> ProofgateResult:
    """Compare the state snapshot against its stored hash.

    Missing inputs exit 1; a digest mismatch exits 2. On success the verdict
    document is written next to the snapshot.
    """
    state_path = evidence_dir / STATE_FILENAME
    hash_path = evidence_dir / STATE_HASH_FILENAME

    if not state_path.is_file():
        return ProofgateResult(status=STATE_EVIDENCE_MISSING, exit_code=1)
    if not hash_path.is_file():
        return ProofgateResult(status=STATE_HASH_MISSING, exit_code=1)

    expected = hash_path.read_text(encoding="utf-8").strip()
    actual = sha256_file(state_path).upper()

    if actual != expected.upper():
        return ProofgateResult(status=STATE_HASH_MISMATCH, exit_code=2)

    verdict = {
        "tool": TOOL_NAME,
        "guardType": "structural",
        "verdict": "PASS",
        "verifiedAt": iso_timestamp(now or datetime.now(UTC)),
        "artefact": STATE_FILENAME,
        "hash": actual,
    }
    verdict_path = evidence_dir / VERDICT_FILENAME
    write_json(verdict_path, verdict)

    return ProofgateResult(status=VERIFY_PASS, exit_code=0, path=verdict_path)
