"""Rule evaluator for the repo admission gate.

Validates the root, then runs every rule in a single pass and collects all
findings; no rule short-circuits another. Only an invalid root stops
evaluation early, with an ERROR outcome.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from repoguard.evidence import build_evidence
from repoguard.git.probe import is_git_repo, probe_git
from repoguard.rules import rules_for_mode
from repoguard.types import Evidence, Finding, FindingCode, Mode, Outcome, exit_code_for
from repoguard.utils.paths import find_forbidden, find_missing, is_directory

logger = logging.getLogger(__name__)

ADMITTED_FINDING = Finding(
    code=FindingCode.REPO_ADMITTED,
    message="Repository admitted. No violations detected in v1 ruleset.",
)


@dataclass(frozen=True)
class CheckResult:
    """Verdict plus evidence record for one check."""

    ok: bool
    evidence: Evidence


def _git_findings(root: Path, mode: Mode) -> list[Finding]:
    findings: list[Finding] = []

    if not is_git_repo(root):
        if mode is Mode.MARKETPLACE:
            findings.append(Finding(
                code=FindingCode.MARKETPLACE_CONTRACT_VIOLATION,
                message=(
                    "Marketplace mode expects a git repository (missing .git directory). "
                    "Initialise git and commit before publishing."
                ),
            ))
        return findings

    facts = probe_git(root)

    # Tags must not precede the first remote.
    if facts.has_tags and not facts.has_remote:
        findings.append(Finding(
            code=FindingCode.INVALID_RELEASE_SEQUENCE,
            message=(
                "Tags exist but no git remote is configured. Create the remote repository "
                "and add it before tagging or pushing tags."
            ),
            details={"hasTags": facts.has_tags, "hasRemote": facts.has_remote},
        ))

    # Tags must not precede the initial commit.
    if facts.has_tags and not facts.has_commits:
        findings.append(Finding(
            code=FindingCode.INVALID_RELEASE_SEQUENCE,
            message="Tags exist but repository has no commits. Create an initial commit before tagging.",
            details={"hasTags": facts.has_tags, "hasCommits": facts.has_commits},
        ))

    if mode is Mode.MARKETPLACE and facts.has_remote and not facts.has_upstream:
        findings.append(Finding(
            code=FindingCode.MARKETPLACE_CONTRACT_VIOLATION,
            message=(
                "Marketplace mode expects the current branch to track an upstream remote. "
                "Push with -u to set upstream."
            ),
            details={"hasRemote": facts.has_remote, "hasUpstream": facts.has_upstream},
        ))

    return findings


def evaluate_rules(root: Path, mode: Mode) -> list[Finding]:
    """Run the v1 ruleset against a validated root.

    Args:
        root: Resolved root directory (must exist and be a directory)
        mode: Check posture

    Returns:
        Rule-violation findings in evaluation order (empty when compliant)
    """
    rules = rules_for_mode(mode)
    findings: list[Finding] = []

    forbidden_hits = find_forbidden(root, rules.forbidden)
    if forbidden_hits:
        findings.append(Finding(
            code=FindingCode.FORBIDDEN_ARTIFACT_PRESENT,
            message="Repository contains forbidden artefacts that must not be committed.",
            paths=tuple(forbidden_hits),
        ))

    missing = find_missing(root, rules.required)
    if missing:
        findings.append(Finding(
            code=FindingCode.REQUIRED_FILE_MISSING,
            message="Repository is missing required files.",
            missing=tuple(missing),
        ))

    findings.extend(_git_findings(root, mode))
    return findings


def check_repo(root: Path, mode: Mode, *, now: datetime | None = None) -> CheckResult:
    """Evaluate a repository root and build its evidence record.

    Args:
        root: Directory to inspect; resolved to an absolute path
        mode: Check posture
        now: Invocation time (defaults to the current UTC time)

    Returns:
        CheckResult with ``ok`` and the immutable evidence record
    """
    now = now or datetime.now(UTC)
    resolved = root.expanduser().resolve()

    if not is_directory(resolved):
        logger.debug("Root %s does not exist or is not a directory", resolved)
        failure = Finding(
            code=FindingCode.CHECK_FAILED,
            message="Root path does not exist or is not a directory.",
            details={"root": str(resolved)},
        )
        evidence = build_evidence(
            resolved, mode, Outcome.ERROR, [failure], exit_code_for(Outcome.ERROR), now
        )
        return CheckResult(ok=False, evidence=evidence)

    findings = evaluate_rules(resolved, mode)
    outcome = Outcome.REFUSED if findings else Outcome.ADMITTED
    logger.debug("Check of %s in %s mode: %s (%d findings)", resolved, mode.value, outcome.value, len(findings))

    evidence = build_evidence(
        resolved,
        mode,
        outcome,
        findings or [ADMITTED_FINDING],
        exit_code_for(outcome),
        now,
    )
    return CheckResult(ok=evidence.ok, evidence=evidence)
