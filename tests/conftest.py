"""Pytest configuration and fixtures for repo guard tests."""
import shutil
import subprocess
from pathlib import Path

import pytest

REQUIRED_FILES = (".gitignore", "README.md", "LICENSE")


def pytest_configure(config):
    config.addinivalue_line("markers", "requires_git: test shells out to a real git executable")


def pytest_collection_modifyitems(config, items):
    """Skip real-git tests when git is not installed."""
    if shutil.which("git") is not None:
        return
    skip_git = pytest.mark.skip(reason="git executable not available")
    for item in items:
        if "requires_git" in item.keywords:
            item.add_marker(skip_git)


@pytest.fixture(autouse=True)
def isolated_git_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep user/system git config and the evidence env override out of tests."""
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(tmp_path / "gitconfig"))
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test User")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test User")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@example.com")
    monkeypatch.delenv("REPO_GUARD_EVIDENCE_DIR", raising=False)


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    """A directory holding every file the repo mode requires."""
    root = tmp_path / "repo"
    root.mkdir()
    for name in REQUIRED_FILES:
        (root / name).write_text(f"{name}\n", encoding="utf-8")
    return root


@pytest.fixture
def action_root(repo_root: Path) -> Path:
    """A directory holding every file the marketplace mode requires."""
    (repo_root / "action.yml").write_text("name: test-action\n", encoding="utf-8")
    return repo_root


@pytest.fixture
def published_action(tmp_path: Path, action_root: Path) -> Path:
    """Marketplace-compliant action: commits, tag, remote and upstream tracking."""
    remote = tmp_path / "origin.git"
    subprocess.run(["git", "init", "--bare", str(remote)], check=True, capture_output=True)

    def git(*args: str) -> None:
        subprocess.run(["git", *args], cwd=action_root, check=True, capture_output=True)

    git("init")
    git("add", ".")
    git("commit", "-m", "initial")
    git("branch", "-M", "main")
    git("remote", "add", "origin", str(remote))
    git("push", "-u", "origin", "main")
    git("tag", "v1.0.0")
    return action_root
