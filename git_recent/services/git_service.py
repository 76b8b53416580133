"""Git repository service for git-recent, backed by GitPython."""

import time
from typing import List, Optional

import git

from git_recent.exceptions import (
    BranchNotFoundError,
    CurrentBranchError,
    GitOperationError,
    RepositoryNotFoundError,
)
from git_recent.formatters import format_relative_age, format_upstream_status
from git_recent.models.branch import BranchSnapshot
from git_recent.utils.logging import get_logger

logger = get_logger(__name__)


def _git_error_message(error: Exception) -> str:
    """Prefer git's own stderr over GitPython's full command dump."""
    stderr = getattr(error, "stderr", None)
    if stderr:
        return stderr.strip().removeprefix("stderr:").strip().strip("'").strip()
    return str(error)


class GitService:
    """Lists, switches and deletes local branches of one repository."""

    def __init__(self, repo_path: str):
        """Open the repository.

        Args:
            repo_path: Path to the repository or any directory inside it

        Raises:
            RepositoryNotFoundError: if no repository can be opened at repo_path
        """
        try:
            repo = git.Repo(repo_path, search_parent_directories=True)
        except git.exc.NoSuchPathError:
            raise RepositoryNotFoundError(repo_path, "path does not exist")
        except git.exc.InvalidGitRepositoryError:
            raise RepositoryNotFoundError(repo_path)

        if repo.bare:
            raise RepositoryNotFoundError(repo_path, "bare repositories have no working tree")

        self.repo_path = repo.working_tree_dir
        repo.close()
        logger.debug(f"Opened repository at {self.repo_path}")

    def _get_repo(self) -> git.Repo:
        """Get a fresh git.Repo instance.

        GitPython repos are lightweight - they don't clone, just open the existing repo,
        and a fresh one never serves stale cached refs after a switch or delete.
        """
        return git.Repo(self.repo_path)

    @staticmethod
    def _current_branch_name(repo: git.Repo) -> Optional[str]:
        try:
            return repo.active_branch.name
        except TypeError:
            # Detached HEAD
            return None

    def get_upstream_status(self, repo: git.Repo, head: git.Head) -> Optional[str]:
        """Summarize ahead/behind counts against the branch's upstream.

        Returns None when the branch has no upstream, or the configured
        upstream ref no longer exists locally.
        """
        tracking = head.tracking_branch()
        if tracking is None or not tracking.is_valid():
            return None

        ahead = sum(1 for _ in repo.iter_commits(f"{tracking.path}..{head.path}"))
        behind = sum(1 for _ in repo.iter_commits(f"{head.path}..{tracking.path}"))
        return format_upstream_status(ahead, behind)

    def list_branches(self) -> List[BranchSnapshot]:
        """Enumerate local branches, most recently changed first.

        Branches with identical commit times keep the order git lists them in.

        Raises:
            GitOperationError: if the branches cannot be read
        """
        try:
            repo = self._get_repo()
            current = self._current_branch_name(repo)
            now = time.time()

            snapshots = []
            for head in repo.heads:
                committed_date = head.commit.committed_date
                snapshots.append(
                    BranchSnapshot(
                        name=head.name,
                        last_change_time=committed_date,
                        relative_age=format_relative_age(committed_date, now),
                        is_current=head.name == current,
                        upstream_status=self.get_upstream_status(repo, head),
                    )
                )
        except (git.exc.GitError, ValueError) as e:
            logger.error(f"Error listing branches: {e}")
            raise GitOperationError("list_branches", message=_git_error_message(e))

        logger.debug(f"Found {len(snapshots)} local branches")
        return sorted(snapshots, key=lambda s: s.last_change_time, reverse=True)

    def _get_head(self, repo: git.Repo, operation: str, branch_name: str) -> git.Head:
        try:
            return repo.heads[branch_name]
        except IndexError:
            raise BranchNotFoundError(operation, branch_name)

    def _open_for(self, operation: str, branch_name: str) -> git.Repo:
        """Reopen the repository for a branch operation.

        Raises:
            GitOperationError: if the repository has gone away or is unreadable
        """
        try:
            return self._get_repo()
        except git.exc.GitError as e:
            logger.error(f"Cannot open repository for {operation}: {e}")
            raise GitOperationError(operation, branch_name, _git_error_message(e))

    def switch(self, branch_name: str) -> None:
        """Check out a local branch.

        Raises:
            BranchNotFoundError: if the branch does not exist
            GitOperationError: if the repository cannot be read, or git refuses
                the checkout (e.g. local changes would be overwritten)
        """
        repo = self._open_for("switch_branch", branch_name)
        try:
            head = self._get_head(repo, "switch_branch", branch_name)
            logger.debug(f"Checking out {branch_name}")
            head.checkout()
        except (git.exc.GitError, ValueError) as e:
            logger.warning(f"Checkout of {branch_name} failed: {e}")
            raise GitOperationError("switch_branch", branch_name, _git_error_message(e))
        finally:
            repo.close()

    def delete(self, branch_name: str) -> None:
        """Delete a local branch, merged or not.

        Raises:
            BranchNotFoundError: if the branch does not exist
            CurrentBranchError: if the branch is checked out
            GitOperationError: if the repository cannot be read, or git refuses
                the deletion
        """
        repo = self._open_for("delete_branch", branch_name)
        try:
            self._get_head(repo, "delete_branch", branch_name)
            if self._current_branch_name(repo) == branch_name:
                raise CurrentBranchError(branch_name)

            logger.debug(f"Deleting local branch {branch_name}")
            repo.delete_head(branch_name, force=True)
        except (git.exc.GitError, ValueError) as e:
            logger.warning(f"Deleting {branch_name} failed: {e}")
            raise GitOperationError("delete_branch", branch_name, _git_error_message(e))
        finally:
            repo.close()
