"""Tests for the Git metadata reader and its auxiliary queries."""
import os
import shutil
import subprocess

import pytest

from devops_dashboard.models import RepositoryStatus, RepositoryStatusError
from devops_dashboard.systems import vcs_reader
from devops_dashboard.systems.vcs_reader import (
    get_branches,
    get_recent_commits,
    read_repository_status,
)

FULL_HASH = "fedcba9876543210fedcba9876543210fedcba98"

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


@pytest.fixture
def fake_git(monkeypatch):
    """Replace run_git with a lookup table keyed by the argument tuple."""
    outputs = {}

    def run_git(args, repo_path=None, git_executable="git"):
        result = outputs[tuple(args)]
        if isinstance(result, Exception):
            raise result
        return result

    monkeypatch.setattr(vcs_reader, "run_git", run_git)
    return outputs


@pytest.fixture
def git_repo(tmp_path):
    """A real repository with three commits on 'main' and a 'feature' branch."""
    def git(*args):
        subprocess.run(
            ["git", "-c", "user.name=Test Author", "-c", "user.email=author@example.com", *args],
            cwd=tmp_path, check=True, capture_output=True,
        )

    git("init", "-b", "main")
    for number in range(3):
        (tmp_path / f"file{number}.txt").write_text(str(number))
        git("add", ".")
        git("commit", "-m", f"Commit number {number}")
    git("branch", "feature")
    return tmp_path


def _status_outputs(outputs):
    outputs[("rev-parse", "--abbrev-ref", "HEAD")] = "  develop \n"
    outputs[("rev-parse", "HEAD")] = FULL_HASH + "\n"
    outputs[("log", "-1", "--pretty=format:%an")] = "Grace Hopper\n"
    outputs[("log", "-1", "--pretty=format:%ad", "--date=iso")] = "2024-01-02 03:04:05 +0100"


def test_read_repository_status_success(fake_git):
    _status_outputs(fake_git)

    status = read_repository_status(repository_label="demo")

    assert isinstance(status, RepositoryStatus)
    assert status.branch == "develop"
    assert status.commit_hash == FULL_HASH[:8]
    assert len(status.commit_hash) == 8
    assert status.author_name == "Grace Hopper"
    assert status.last_commit_timestamp == "2024-01-02 03:04:05 +0100"
    assert status.repository_label == "demo"


def test_single_failed_query_fails_whole_read(fake_git):
    _status_outputs(fake_git)
    fake_git[("log", "-1", "--pretty=format:%an")] = subprocess.CalledProcessError(128, "git log")

    status = read_repository_status(fallback_author="someone")

    assert isinstance(status, RepositoryStatusError)
    assert status.error_kind == "Git information not available"
    assert status.fallback_author == "someone"
    assert status.to_dict() == {
        "error": "Git information not available",
        "message": "This might not be a Git repository or Git is not installed",
        "repository": "Elevate-labs",
        "author": "someone",
    }


def test_missing_git_executable_returns_fallback(tmp_path):
    status = read_repository_status(str(tmp_path), git_executable="no-such-git-binary")

    assert isinstance(status, RepositoryStatusError)
    assert status.error_kind


def test_get_branches_normalizes_names(fake_git):
    fake_git[("branch", "-a")] = (
        "  develop\n"
        "* main\n"
        "  remotes/origin/HEAD -> origin/main\n"
        "  remotes/origin/develop\n"
        "  remotes/origin/release\n"
        "\n"
    )

    assert get_branches() == ["develop", "main", "release"]


def test_get_branches_on_failure(fake_git):
    fake_git[("branch", "-a")] = FileNotFoundError("git")

    assert get_branches() == []


def test_get_recent_commits_limits_lines(fake_git):
    fake_git[("log", "--oneline", "-2")] = "a1 first\n\n  b2 second  \nc3 third\n"

    assert get_recent_commits(limit=2) == ["a1 first", "b2 second"]


def test_get_recent_commits_on_failure(fake_git):
    fake_git[("log", "--oneline", "-5")] = subprocess.CalledProcessError(128, "git log")

    assert get_recent_commits(limit=5) == []


def test_get_recent_commits_rejects_non_positive_limit():
    with pytest.raises(ValueError):
        get_recent_commits(limit=0)


@requires_git
def test_real_repository(git_repo):
    status = read_repository_status(str(git_repo))

    assert isinstance(status, RepositoryStatus)
    assert status.branch == "main"
    assert len(status.commit_hash) == 8
    assert status.author_name == "Test Author"

    commits = get_recent_commits(limit=5, repo_path=str(git_repo))
    assert len(commits) == 3
    assert commits[0].endswith("Commit number 2")

    assert sorted(get_branches(str(git_repo))) == ["feature", "main"]


@requires_git
@pytest.mark.skipif(os.name != "posix", reason="needs raw bytes in ref names")
def test_branch_name_with_invalid_utf8(git_repo):
    subprocess.run([b"git", b"checkout", b"-q", b"-b", b"b\xff"], cwd=git_repo, check=True, capture_output=True)

    status = read_repository_status(str(git_repo))
    assert isinstance(status, RepositoryStatus)
    assert status.branch.startswith("b")
    assert "\ufffd" in status.branch

    branches = get_branches(str(git_repo))
    assert "main" in branches
    assert "b\ufffd" in branches
