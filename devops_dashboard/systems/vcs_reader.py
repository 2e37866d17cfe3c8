# devops_dashboard/systems/vcs_reader.py
"""
Read-only queries against the local Git repository.

Every query shells out to the git executable and parses its line-oriented
output. Expected failures (git not installed, not a repository, query
error) never propagate: the status read degrades to a fallback record and
the list helpers degrade to an empty list.
"""
import logging
import subprocess
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, Union

from devops_dashboard.models import RepositoryStatus, RepositoryStatusError

logger = logging.getLogger(__name__)

COMMIT_HASH_LENGTH = 8
REMOTE_PREFIX = "remotes/origin/"
CURRENT_BRANCH_MARKER = "* "

GIT_UNAVAILABLE_ERROR = "Git information not available"
GIT_UNAVAILABLE_MESSAGE = "This might not be a Git repository or Git is not installed"

_STATUS_QUERIES = {
    "branch": ("rev-parse", "--abbrev-ref", "HEAD"),
    "commit": ("rev-parse", "HEAD"),
    "author": ("log", "-1", "--pretty=format:%an"),
    "date": ("log", "-1", "--pretty=format:%ad", "--date=iso"),
}

GIT_ERRORS = (OSError, subprocess.SubprocessError)


def run_git(args: Sequence[str], repo_path: Optional[str] = None, git_executable: str = "git") -> str:
    """
    Run a single git command and return its standard output.

    Raises:
        OSError: the git executable could not be started.
        subprocess.CalledProcessError: git exited with a non-zero status.
    """
    completed = subprocess.run(
        [git_executable, *args],
        cwd=repo_path,
        capture_output=True,
        text=True,
        errors="replace",
        check=True,
    )
    return completed.stdout


def read_repository_status(
    repo_path: Optional[str] = None,
    *,
    repository_label: str = "Elevate-labs",
    fallback_author: str = "tohidhanfi",
    git_executable: str = "git",
) -> Union[RepositoryStatus, RepositoryStatusError]:
    """
    Collect branch, HEAD hash, last author and last commit date.

    The four queries run concurrently and are joined; if any one of them
    fails the whole read returns a RepositoryStatusError instead.
    """
    try:
        with ThreadPoolExecutor(max_workers=len(_STATUS_QUERIES), thread_name_prefix="GitQuery") as executor:
            futures = {
                name: executor.submit(run_git, args, repo_path, git_executable)
                for name, args in _STATUS_QUERIES.items()
            }
            results = {name: future.result() for name, future in futures.items()}
    except GIT_ERRORS as e:
        logger.warning(f"Git status query failed in {repo_path or '.'}: {e}")
        return RepositoryStatusError(
            error_kind=GIT_UNAVAILABLE_ERROR,
            message=GIT_UNAVAILABLE_MESSAGE,
            repository_label=repository_label,
            fallback_author=fallback_author,
        )

    return RepositoryStatus(
        branch=results["branch"].strip(),
        commit_hash=results["commit"].strip()[:COMMIT_HASH_LENGTH],
        author_name=results["author"].strip(),
        last_commit_timestamp=results["date"].strip(),
        repository_label=repository_label,
    )


def _normalize_branch(line: str) -> Optional[str]:
    name = line.strip()
    if name.startswith(CURRENT_BRANCH_MARKER):
        name = name[len(CURRENT_BRANCH_MARKER):].strip()
    if not name or " -> " in name:
        return None
    if name.startswith(REMOTE_PREFIX):
        name = name[len(REMOTE_PREFIX):]
    return name


def get_branches(repo_path: Optional[str] = None, git_executable: str = "git") -> List[str]:
    """List local and origin branches by short name, each name once."""
    try:
        output = run_git(("branch", "-a"), repo_path, git_executable)
    except GIT_ERRORS as e:
        logger.warning(f"Could not list branches in {repo_path or '.'}: {e}")
        return []

    branches: List[str] = []
    for line in output.splitlines():
        name = _normalize_branch(line)
        if name and name not in branches:
            branches.append(name)
    return branches


def get_recent_commits(limit: int = 5, repo_path: Optional[str] = None, git_executable: str = "git") -> List[str]:
    """Return up to ``limit`` one-line commit summaries, newest first."""
    if limit < 1:
        raise ValueError(f"limit must be a positive integer, got {limit}")

    try:
        output = run_git(("log", "--oneline", f"-{limit}"), repo_path, git_executable)
    except GIT_ERRORS as e:
        logger.warning(f"Could not read commit log in {repo_path or '.'}: {e}")
        return []

    commits = [line.strip() for line in output.splitlines() if line.strip()]
    return commits[:limit]
