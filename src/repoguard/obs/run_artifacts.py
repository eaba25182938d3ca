"""Fixed artifact names and evidence directory resolution."""

from __future__ import annotations

import os
from pathlib import Path

REPO_GUARD_EVIDENCE_DIR_ENV = "REPO_GUARD_EVIDENCE_DIR"
DEFAULT_EVIDENCE_DIRNAME = "evidence"

EVIDENCE_FILENAME = "repo-guard.evidence.json"
SUMMARY_FILENAME = "summary.md"

# Proofgate artefacts live directly in the evidence root, not in a run dir.
STATE_FILENAME = "wfsl.repo.state.txt"
STATE_HASH_FILENAME = "wfsl.repo.state.sha256"
VERDICT_FILENAME = "wfsl.repo.verdict.json"
BUNDLE_FILENAME = "wfsl.repo.proofgate.bundle.json"
MANIFEST_FILENAME = "proofgate.manifest.json"


def get_default_evidence_root(
    cli_evidence_root: Path | None = None,
    *,
    root: Path,
) -> Path:
    """Resolve the evidence root: CLI option, then environment, then <root>/evidence."""
    if cli_evidence_root is not None:
        return cli_evidence_root.expanduser().resolve()

    env_root = os.getenv(REPO_GUARD_EVIDENCE_DIR_ENV, "").strip()
    if env_root:
        return Path(env_root).expanduser().resolve()

    return (root.expanduser().resolve() / DEFAULT_EVIDENCE_DIRNAME).resolve()
