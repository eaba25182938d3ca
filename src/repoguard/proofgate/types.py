"""Proofgate types."""

from dataclasses import dataclass
from pathlib import Path

TOOL_NAME = "wfsl-repo-guard"


@dataclass(frozen=True)
class ProofgateResult:
    """Status token, exit code and written artefact (if any) of one step."""

    status: str
    exit_code: int
    path: Path | None = None

    @property
    def ok(self) -> bool:
        return self.exit_code == 0
