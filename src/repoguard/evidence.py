"""Evidence builder: wraps findings into the schema-tagged record."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime
from pathlib import Path

from repoguard.types import SCHEMA_ID, Evidence, Finding, Mode, Outcome, exit_code_for


def iso_timestamp(now: datetime) -> str:
    """Render UTC ISO-8601 with millisecond precision and a Z suffix."""
    return now.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def safe_run_id(now: datetime) -> str:
    """Derive a directory-safe run id from the timestamp.

    Two runs within the same millisecond get the same id and share a run
    directory.
    """
    return iso_timestamp(now).replace(":", "-").replace(".", "-")


def build_evidence(
    root: Path,
    mode: Mode,
    outcome: Outcome,
    findings: Iterable[Finding],
    exit_code: int,
    now: datetime,
) -> Evidence:
    """Assemble the evidence record. Pure; performs no I/O.

    Raises:
        ValueError: If exit_code disagrees with outcome
    """
    expected = exit_code_for(outcome)
    if exit_code != expected:
        raise ValueError(
            f"Exit code {exit_code} is inconsistent with outcome {outcome.value} (expected {expected})"
        )

    return Evidence(
        schema=SCHEMA_ID,
        run_id=safe_run_id(now),
        timestamp=iso_timestamp(now),
        root=str(root),
        mode=mode,
        outcome=outcome,
        exit_code=exit_code,
        findings=tuple(findings),
    )
