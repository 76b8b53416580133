"""Custom exceptions for git-recent"""

from typing import Optional


class GitRecentError(Exception):
    """Base exception for all git-recent errors."""
    pass


class RepositoryNotFoundError(GitRecentError):
    """Exception raised when a path is not a usable git repository."""

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        self.message = message

        error_msg = f"'{path}' is not a git repository"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class GitOperationError(GitRecentError):
    """Exception raised for errors in Git operations."""

    def __init__(self, operation: str, branch: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.branch = branch
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if branch:
            error_msg += f" for branch '{branch}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class BranchNotFoundError(GitOperationError):
    """Exception raised when a branch is not found."""

    def __init__(self, operation: str, branch: str):
        super().__init__(operation, branch, "Branch not found")


class CurrentBranchError(GitOperationError):
    """Exception raised when attempting to delete the checked-out branch."""

    def __init__(self, branch: str):
        super().__init__("delete_branch", branch, "Branch is currently checked out")
