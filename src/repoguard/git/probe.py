"""Git probe: read-only facts about a working copy.

Every query is a separate git invocation. Any failure (git not installed,
not a working copy, no upstream, no commits yet) degrades to ``False``, so a
broken git binary is indistinguishable from an absent repository.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from repoguard.git.exec import run_git
from repoguard.utils.paths import is_directory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GitFacts:
    """Snapshot of the release-sequencing facts for one root."""

    has_tags: bool
    has_remote: bool
    has_commits: bool
    has_upstream: bool

    def to_dict(self) -> dict[str, bool]:
        return asdict(self)


def _query(root: Path, args: list[str]) -> str | None:
    """Run a git query, returning stdout or None on any failure."""
    result = run_git(args, repo_root=root)
    if not result.ok:
        logger.debug(
            "git %s failed in %s (%d): %s",
            " ".join(args),
            root,
            result.returncode,
            result.stderr.strip(),
        )
        return None
    return result.stdout


def is_git_repo(root: Path) -> bool:
    """True when ``.git`` is a directory directly under root (no upward walk)."""
    return is_directory(root / ".git")


def has_remote(root: Path) -> bool:
    out = _query(root, ["remote"])
    return bool(out and out.strip())


def has_tags(root: Path) -> bool:
    out = _query(root, ["tag"])
    return bool(out and out.strip())


def has_commits(root: Path) -> bool:
    """True when HEAD resolves to a commit."""
    return _query(root, ["rev-parse", "--verify", "HEAD"]) is not None


def has_upstream_tracking(root: Path) -> bool:
    """True when the current branch has a configured upstream ref."""
    return _query(root, ["rev-parse", "--abbrev-ref", "--symbolic-full-name", "@{u}"]) is not None


def probe_git(root: Path) -> GitFacts:
    """Collect all release-sequencing facts; each query runs independently."""
    facts = GitFacts(
        has_tags=has_tags(root),
        has_remote=has_remote(root),
        has_commits=has_commits(root),
        has_upstream=has_upstream_tracking(root),
    )
    logger.debug("git facts for %s: %s", root, facts)
    return facts
