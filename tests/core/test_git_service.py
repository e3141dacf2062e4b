import subprocess
from unittest.mock import MagicMock, patch

import pytest
from git import Repo

from branchlint.core.errors import BranchNotFoundError
from branchlint.core.git_service import get_current_branch, normalize_branch_name


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("refs/heads/feature/login\n", "feature/login"),
        ("refs/heads/Feature/Login", "feature/login"),
        ("a1b2c3d\n", "a1b2c3d"),
        ("refs/heads/hotfix/x\nextra line\n", "hotfix/x"),
        ("", ""),
    ],
)
def test_normalize_branch_name(raw, expected):
    assert normalize_branch_name(raw) == expected


@patch("branchlint.core.git_service.subprocess.run")
def test_symbolic_ref_is_used_first(mock_run):
    mock_run.return_value = MagicMock(stdout="refs/heads/Release/2.0\n", returncode=0)

    assert get_current_branch() == "release/2.0"
    mock_run.assert_called_once()
    assert mock_run.call_args[0][0] == ["git", "symbolic-ref", "HEAD"]


@patch("branchlint.core.git_service.subprocess.run")
def test_falls_back_to_short_hash(mock_run):
    mock_run.side_effect = [
        subprocess.CalledProcessError(128, "git"),  # detached HEAD
        MagicMock(stdout="ABC1234\n", returncode=0),
    ]

    assert get_current_branch() == "abc1234"
    assert mock_run.call_args[0][0] == ["git", "rev-parse", "--short", "HEAD"]


@patch("branchlint.core.git_service.subprocess.run")
def test_raises_when_nothing_resolves(mock_run):
    mock_run.side_effect = subprocess.CalledProcessError(128, "git")

    with pytest.raises(BranchNotFoundError):
        get_current_branch()


@patch("branchlint.core.git_service.subprocess.run")
def test_raises_on_empty_output(mock_run):
    mock_run.return_value = MagicMock(stdout="\n", returncode=0)

    with pytest.raises(BranchNotFoundError):
        get_current_branch()


@patch("branchlint.core.git_service.subprocess.run", side_effect=FileNotFoundError("git"))
def test_raises_without_git(mock_run):
    with pytest.raises(BranchNotFoundError):
        get_current_branch()


def test_current_branch(git_repo: Repo, monkeypatch):
    git_repo.create_head("Feature/Login").checkout()
    monkeypatch.chdir(git_repo.working_dir)

    assert get_current_branch() == "feature/login"


def test_detached_head(git_repo: Repo, monkeypatch):
    git_repo.git.checkout(git_repo.head.commit.hexsha)
    monkeypatch.chdir(git_repo.working_dir)

    expected = git_repo.git.rev_parse("--short", "HEAD").lower()
    assert get_current_branch() == expected


def test_no_repository(tmp_path, monkeypatch):
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.parent))
    monkeypatch.chdir(tmp_path)

    with pytest.raises(BranchNotFoundError):
        get_current_branch()
