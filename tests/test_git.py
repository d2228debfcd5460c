"""Tests for git working tree detection."""

import shutil
import subprocess
from unittest.mock import patch

import pytest

from localingest.git import is_git_root

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git executable not available")


def test_git_directory_is_enough(tmp_path):
    (tmp_path / ".git").mkdir()
    with patch("localingest.git.subprocess.run") as mock_run:
        assert is_git_root(tmp_path)
    mock_run.assert_not_called()


def test_falls_back_to_rev_parse(tmp_path):
    completed = subprocess.CompletedProcess(args=[], returncode=0)
    with patch("localingest.git.subprocess.run", return_value=completed) as mock_run:
        assert is_git_root(tmp_path)
    args, kwargs = mock_run.call_args
    assert args[0] == ["git", "rev-parse", "--show-toplevel"]
    assert kwargs["cwd"] == tmp_path


def test_rev_parse_failure(tmp_path):
    completed = subprocess.CompletedProcess(args=[], returncode=128)
    with patch("localingest.git.subprocess.run", return_value=completed):
        assert not is_git_root(tmp_path)


def test_missing_git_executable(tmp_path):
    with patch("localingest.git.subprocess.run", side_effect=FileNotFoundError("git")):
        assert not is_git_root(tmp_path)


def test_defaults_to_current_directory(tmp_path, monkeypatch):
    (tmp_path / ".git").mkdir()
    monkeypatch.chdir(tmp_path)
    assert is_git_root()


@requires_git
def test_subdirectory_of_real_repository(tmp_path):
    subprocess.run(["git", "init", "-q"], cwd=tmp_path, check=True)
    subdir = tmp_path / "subdir"
    subdir.mkdir()
    assert is_git_root(tmp_path)
    assert is_git_root(subdir)


@requires_git
def test_plain_directory_is_not_a_repository(tmp_path):
    # GIT_CEILING_DIRECTORIES stops git from finding a repository above tmp_path
    with patch.dict("os.environ", {"GIT_CEILING_DIRECTORIES": str(tmp_path.parent)}):
        assert not is_git_root(tmp_path)
