"""Command runner for git queries."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

GIT_NOT_FOUND_RETURNCODE = 127


@dataclass(frozen=True)
class ExecResult:
    """Result envelope for subprocess execution."""

    argv: tuple[str, ...]
    cwd: Path
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_git(args: list[str], *, repo_root: Path) -> ExecResult:
    """Run one git command rooted at repo_root.

    A missing git executable or an unusable working directory is reported as
    a failed result instead of an exception. No timeout is applied.
    """
    argv = ("git", *args)
    try:
        completed = subprocess.run(
            list(argv),
            cwd=repo_root,
            capture_output=True,
            text=True,
            stdin=subprocess.DEVNULL,
            check=False,
        )
    except OSError as exc:
        return ExecResult(
            argv=argv,
            cwd=repo_root,
            returncode=GIT_NOT_FOUND_RETURNCODE,
            stdout="",
            stderr=str(exc),
        )
    return ExecResult(
        argv=argv,
        cwd=repo_root,
        returncode=completed.returncode,
        stdout=completed.stdout,
        stderr=completed.stderr,
    )
