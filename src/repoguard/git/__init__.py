"""Read-only git queries for repo guard."""

from repoguard.git.probe import (
    GitFacts,
    has_commits,
    has_remote,
    has_tags,
    has_upstream_tracking,
    is_git_repo,
    probe_git,
)

__all__ = [
    "GitFacts",
    "has_commits",
    "has_remote",
    "has_tags",
    "has_upstream_tracking",
    "is_git_repo",
    "probe_git",
]
