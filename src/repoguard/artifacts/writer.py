"""Evidence sink: persists one run's record as JSON plus a Markdown summary."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from repoguard.artifacts.canonical_json import write_json
from repoguard.obs.run_artifacts import EVIDENCE_FILENAME, SUMMARY_FILENAME
from repoguard.schemas import validate_data
from repoguard.types import Evidence


@dataclass(frozen=True)
class WrittenEvidence:
    """Paths written for one run."""

    run_dir: Path
    json_path: Path
    md_path: Path


def write_evidence(evidence_root: Path, evidence: Evidence) -> WrittenEvidence:
    """Write ``<evidence_root>/<run_id>/`` with the JSON record and summary.

    Raises:
        ValueError: If the record does not match the evidence schema
        OSError: If the run directory cannot be written
    """
    payload = evidence.to_dict()
    validate_data(payload, "evidence")

    run_dir = evidence_root / evidence.run_id
    run_dir.mkdir(parents=True, exist_ok=True)

    json_path = run_dir / EVIDENCE_FILENAME
    write_json(json_path, payload)

    md_path = run_dir / SUMMARY_FILENAME
    md_path.write_text(render_evidence_markdown(evidence), encoding="utf-8")

    return WrittenEvidence(run_dir=run_dir, json_path=json_path, md_path=md_path)


def render_evidence_markdown(evidence: Evidence) -> str:
    """Render the human-readable summary."""
    lines = [
        "# WFSL Repo Admission Guard Evidence",
        "",
        f"- Schema: `{evidence.schema}`",
        f"- Run ID: `{evidence.run_id}`",
        f"- Timestamp: `{evidence.timestamp}`",
        f"- Root: `{evidence.root}`",
        f"- Mode: `{evidence.mode.value}`",
        f"- Outcome: **{evidence.outcome.value}**",
        f"- Exit code: `{evidence.exit_code}`",
        "",
        "## Findings",
    ]

    if not evidence.findings:
        lines.append("- None")
        return "\n".join(lines)

    for finding in evidence.findings:
        lines.append(f"- **{finding.code.value}**: {finding.message}")
        for path in finding.paths or ():
            lines.append(f"  - Path: `{path}`")
        for item in finding.missing or ():
            lines.append(f"  - Missing: `{item}`")
        if finding.details:
            lines.append(f"  - Details: `{json.dumps(finding.details, separators=(',', ':'))}`")

    return "\n".join(lines)
