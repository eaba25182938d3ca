"""Proofgate bundle manifest over the structural evidence."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from repoguard import __version__
from repoguard.artifacts.canonical_json import sha256_file, write_json
from repoguard.evidence import iso_timestamp
from repoguard.obs.run_artifacts import (
    BUNDLE_FILENAME,
    MANIFEST_FILENAME,
    STATE_FILENAME,
    STATE_HASH_FILENAME,
    VERDICT_FILENAME,
)
from repoguard.proofgate.types import TOOL_NAME, ProofgateResult

BUNDLE_EMITTED = "PROOFGATE_BUNDLE_EMITTED"
MISSING_ARTEFACT = "MISSING_ARTEFACT"

ARTEFACTS: dict[str, str] = {
    "state": STATE_FILENAME,
    "hash": STATE_HASH_FILENAME,
    "verdict": VERDICT_FILENAME,
}


def emit_bundle(evidence_dir: Path, now: datetime | None = None) -> ProofgateResult:
    """Write the bundle manifest once all three artefacts exist.

    The first missing artefact is reported as ``MISSING_ARTEFACT: <name>``.
    """
    for filename in ARTEFACTS.values():
        if not (evidence_dir / filename).is_file():
            return ProofgateResult(status=f"{MISSING_ARTEFACT}: {filename}", exit_code=1)

    bundle = {
        "tool": TOOL_NAME,
        "bundleType": "proofgate",
        "version": __version__,
        "emittedAt": iso_timestamp(now or datetime.now(UTC)),
        "manifest": MANIFEST_FILENAME,
        "artefacts": dict(ARTEFACTS),
        "digests": {
            key: sha256_file(evidence_dir / filename) for key, filename in ARTEFACTS.items()
        },
        "determinism": {
            "hash": "sha256",
            "scope": "repository-structure",
        },
    }
    bundle_path = evidence_dir / BUNDLE_FILENAME
    write_json(bundle_path, bundle)

    return ProofgateResult(status=BUNDLE_EMITTED, exit_code=0, path=bundle_path)
