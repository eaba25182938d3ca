"""Repo guard types."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

SCHEMA_ID = "wfsl.repo-guard.v1"


class Mode(str, Enum):
    """Check posture selecting the rule set and git strictness."""

    REPO = "repo"
    MARKETPLACE = "marketplace"


class Outcome(str, Enum):
    """Verdict of one guard invocation."""

    ADMITTED = "ADMITTED"
    REFUSED = "REFUSED"
    ERROR = "ERROR"


class FindingCode(str, Enum):
    """Closed set of finding codes."""

    REPO_ADMITTED = "REPO_ADMITTED"
    FORBIDDEN_ARTIFACT_PRESENT = "FORBIDDEN_ARTIFACT_PRESENT"
    REQUIRED_FILE_MISSING = "REQUIRED_FILE_MISSING"
    INVALID_RELEASE_SEQUENCE = "INVALID_RELEASE_SEQUENCE"
    MARKETPLACE_CONTRACT_VIOLATION = "MARKETPLACE_CONTRACT_VIOLATION"
    CHECK_FAILED = "CHECK_FAILED"


EXIT_CODES: dict[Outcome, int] = {
    Outcome.ADMITTED: 0,
    Outcome.REFUSED: 1,
    Outcome.ERROR: 2,
}


def exit_code_for(outcome: Outcome) -> int:
    """Return the process exit code for an outcome."""
    return EXIT_CODES[outcome]


def parse_mode(raw: str | None) -> Mode:
    """Coerce user input to a Mode.

    Missing input selects ``repo``. Unrecognized values also fall back to
    ``repo`` rather than failing; the coercion is logged so it stays visible.
    """
    value = (raw or "").strip().lower()
    if not value:
        return Mode.REPO
    try:
        return Mode(value)
    except ValueError:
        logger.warning("Unrecognized mode %r, falling back to 'repo'", raw)
        return Mode.REPO


@dataclass(frozen=True)
class RuleSet:
    """Required and forbidden paths for one mode, relative to the root."""

    required: tuple[str, ...]
    forbidden: tuple[str, ...]


@dataclass(frozen=True)
class Finding:
    """Single rule violation or informational note."""

    code: FindingCode
    message: str
    paths: tuple[str, ...] | None = None
    missing: tuple[str, ...] | None = None
    details: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code.value, "message": self.message}
        if self.paths is not None:
            payload["paths"] = list(self.paths)
        if self.missing is not None:
            payload["missing"] = list(self.missing)
        if self.details is not None:
            payload["details"] = dict(self.details)
        return payload

    def render_lines(self) -> Iterator[str]:
        """Yield console lines describing this finding on its own."""
        yield f"- {self.code.value}: {self.message}"
        for path in self.paths or ():
            yield f"  - Path: {path}"
        for item in self.missing or ():
            yield f"  - Missing: {item}"


@dataclass(frozen=True)
class Evidence:
    """Immutable result record for one guard invocation."""

    schema: str
    run_id: str
    timestamp: str
    root: str
    mode: Mode
    outcome: Outcome
    exit_code: int
    findings: tuple[Finding, ...]

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.ADMITTED

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema": self.schema,
            "run_id": self.run_id,
            "timestamp": self.timestamp,
            "root": self.root,
            "mode": self.mode.value,
            "outcome": self.outcome.value,
            "exit_code": self.exit_code,
            "findings": [f.to_dict() for f in self.findings],
        }
