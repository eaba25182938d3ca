"""Tests for the evidence sink."""
import json
from datetime import UTC, datetime
from pathlib import Path

from repoguard.artifacts.writer import render_evidence_markdown, write_evidence
from repoguard.evidence import build_evidence
from repoguard.obs.run_artifacts import EVIDENCE_FILENAME, SUMMARY_FILENAME
from repoguard.types import Finding, FindingCode, Mode, Outcome

NOW = datetime(2026, 10, 19, 8, 30, 15, 250000, tzinfo=UTC)


def _refused(root: Path):
    findings = [
        Finding(
            code=FindingCode.FORBIDDEN_ARTIFACT_PRESENT,
            message="Repository contains forbidden artefacts that must not be committed.",
            paths=("node_modules",),
        ),
        Finding(
            code=FindingCode.REQUIRED_FILE_MISSING,
            message="Repository is missing required files.",
            missing=("LICENSE",),
        ),
        Finding(
            code=FindingCode.INVALID_RELEASE_SEQUENCE,
            message="Tags exist but repository has no commits.",
            details={"hasTags": True, "hasCommits": False},
        ),
    ]
    return build_evidence(root, Mode.REPO, Outcome.REFUSED, findings, 1, NOW)


def test_writes_run_directory(tmp_path: Path):
    evidence = _refused(tmp_path)

    written = write_evidence(tmp_path / "evidence", evidence)

    assert written.run_dir == tmp_path / "evidence" / "2026-10-19T08-30-15-250Z"
    assert written.json_path == written.run_dir / EVIDENCE_FILENAME
    assert written.md_path == written.run_dir / SUMMARY_FILENAME

    data = json.loads(written.json_path.read_text(encoding="utf-8"))
    assert data == evidence.to_dict()
    assert data["schema"] == "wfsl.repo-guard.v1"
    assert data["findings"][0] == {
        "code": "FORBIDDEN_ARTIFACT_PRESENT",
        "message": "Repository contains forbidden artefacts that must not be committed.",
        "paths": ["node_modules"],
    }


def test_json_is_indented(tmp_path: Path):
    written = write_evidence(tmp_path, _refused(tmp_path))

    text = written.json_path.read_text(encoding="utf-8")
    assert text.startswith('{\n  "schema": "wfsl.repo-guard.v1",\n  "run_id"')


def test_markdown_summary_lists_findings(tmp_path: Path):
    md = render_evidence_markdown(_refused(tmp_path))

    assert md.startswith("# WFSL Repo Admission Guard Evidence\n")
    assert "- Outcome: **REFUSED**" in md
    assert "- Exit code: `1`" in md
    assert "- **FORBIDDEN_ARTIFACT_PRESENT**: Repository contains forbidden artefacts" in md
    assert "  - Path: `node_modules`" in md
    assert "  - Missing: `LICENSE`" in md
    assert '  - Details: `{"hasTags":true,"hasCommits":false}`' in md


def test_markdown_without_findings(tmp_path: Path):
    evidence = build_evidence(tmp_path, Mode.REPO, Outcome.ADMITTED, [], 0, NOW)

    assert render_evidence_markdown(evidence).endswith("## Findings\n- None")
