"""Custom exceptions for git-sync-keeper"""

from typing import Optional

import git


class GitSyncKeeperError(Exception):
    """Base exception for all git-sync-keeper errors."""
    pass


class GitOperationError(GitSyncKeeperError):
    """Exception raised when a git command cannot be run or exits non-zero."""

    def __init__(
        self,
        operation: str,
        message: Optional[str] = None,
        status: Optional[int] = None,
    ):
        self.operation = operation
        self.message = message
        self.status = status

        error_msg = f"Git operation '{operation}' failed"
        if status is not None:
            error_msg += f" (exit {status})"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)

    @classmethod
    def from_command_error(
        cls, operation: str, error: git.exc.CommandError
    ) -> "GitOperationError":
        """Build from a GitPython command error, keeping exit status and stderr."""
        stderr = (error.stderr or "").strip()
        # GitPython prefixes captured stderr with "stderr: '...'"
        if stderr.startswith("stderr:"):
            stderr = stderr[len("stderr:"):].strip().strip("'").strip()
        status = error.status if isinstance(error.status, int) else None
        return cls(operation, stderr or None, status)


class RevisionResolutionError(GitOperationError):
    """Exception raised when a revision or merge-base cannot be resolved."""

    def __init__(self, revision: str, message: Optional[str] = None, status: Optional[int] = None):
        self.revision = revision
        super().__init__(f"resolve '{revision}'", message, status)


class NotARepositoryError(GitOperationError):
    """Exception raised when a path holds a .git entry that is not a directory."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            "check_repository",
            f"'{path}' is not a valid git repository (.git is not a directory)",
        )


class NothingToCommitError(GitSyncKeeperError):
    """Exception raised when a strict commit finds no staged changes."""

    def __init__(self):
        super().__init__("No staged files to commit")
