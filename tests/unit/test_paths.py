"""Tests for the filesystem probe."""
from pathlib import Path

from repoguard.utils.paths import exists, find_forbidden, find_missing, is_directory


def test_exists_handles_files_dirs_and_nested_paths(tmp_path: Path):
    (tmp_path / "dir" / "sub").mkdir(parents=True)
    (tmp_path / "file.txt").write_text("x")

    assert exists(tmp_path, "file.txt")
    assert exists(tmp_path, "dir")
    assert exists(tmp_path, "dir/sub")
    assert not exists(tmp_path, "nope")
    assert not exists(tmp_path, "dir/nope/deeper")


def test_is_directory(tmp_path: Path):
    (tmp_path / "file.txt").write_text("x")

    assert is_directory(tmp_path)
    assert not is_directory(tmp_path / "file.txt")
    assert not is_directory(tmp_path / "missing")


def test_find_forbidden_preserves_input_order(tmp_path: Path):
    (tmp_path / ".env").write_text("SECRET=1")
    (tmp_path / "node_modules").mkdir()

    hits = find_forbidden(tmp_path, ["node_modules", ".next", ".env"])
    assert hits == ["node_modules", ".env"]


def test_find_missing_preserves_input_order(tmp_path: Path):
    (tmp_path / "README.md").write_text("# x")

    missing = find_missing(tmp_path, [".gitignore", "README.md", "LICENSE"])
    assert missing == [".gitignore", "LICENSE"]


def test_find_missing_accepts_directory_for_required_entry(tmp_path: Path):
    (tmp_path / "LICENSE").mkdir()

    assert find_missing(tmp_path, ["LICENSE"]) == []
