"""Working-tree and repository operations"""

import os
import stat
from typing import Iterable, Optional, Union, TYPE_CHECKING

from git_sync_keeper.core.classifier import classify
from git_sync_keeper.core.commit_gate import check_commit_gate
from git_sync_keeper.exceptions import GitOperationError, NotARepositoryError
from git_sync_keeper.models.status import StatusSnapshot
from git_sync_keeper.services.git.commands import GitCommands
from git_sync_keeper.logging_config import get_logger

if TYPE_CHECKING:
    from git_sync_keeper.config import Config

logger = get_logger(__name__)


class GitOperations:
    """Service for status, staging, committing and pushing."""

    def __init__(self, commands: GitCommands, config: Union["Config", dict]):
        """Initialize the service.

        Args:
            commands: GitCommands runner bound to the repository
            config: Configuration dictionary or Config object
        """
        self.commands = commands
        self.config = config

    def get_status(self) -> StatusSnapshot:
        """Take a fresh snapshot of staged and unstaged changes.

        A failed status command is reported through ``snapshot.error``.
        """
        try:
            output = self.commands.get("status", "--porcelain")
        except GitOperationError as e:
            logger.warning(f"Could not read status: {e}")
            return classify("", error=e)
        return classify(output)

    def add(self, paths: Iterable[str]) -> int:
        """Stage paths; return git's exit code."""
        return self.commands.do("add", *paths)

    def commit(self, message: str, fail_if_nothing_to_commit: Optional[bool] = None) -> bool:
        """Commit staged changes.

        Args:
            message: Commit message
            fail_if_nothing_to_commit: Raise NothingToCommitError instead of
                skipping when nothing is staged (defaults to the config value)

        Returns:
            True if a commit was made, False if there was nothing to commit

        Raises:
            NothingToCommitError: nothing staged and strict mode requested
            GitOperationError: status could not be read or the commit failed
        """
        if fail_if_nothing_to_commit is None:
            fail_if_nothing_to_commit = self.config.get("fail_if_nothing_to_commit", False)

        snapshot = self.get_status()
        snapshot.raise_for_error()
        if not check_commit_gate(snapshot.ready, strict=fail_if_nothing_to_commit):
            logger.info("Nothing staged, skipping commit")
            return False

        if self.commands.do("commit", "-m", message) != 0:
            raise GitOperationError("commit", "Unable to commit")
        return True

    def push(self) -> None:
        """Push latest commits.

        Raises:
            GitOperationError: if the push fails
        """
        if self.commands.do("push") != 0:
            raise GitOperationError("push", "Unable to push commits")

    def ensure_repo_exist(self, path: str) -> None:
        """Make sure a local repository exists at path, creating it if needed.

        Raises:
            GitOperationError: if `git init` fails
            NotARepositoryError: if path/.git exists but is not a directory
        """
        git_dir = os.path.join(path, ".git")
        try:
            git_dir_stat = os.stat(git_dir)
        except FileNotFoundError:
            logger.info(f"Creating local repository {path}")
            runner = GitCommands(None, self.config, self.commands.console)
            if runner.do("init", os.path.abspath(path)) != 0:
                raise GitOperationError("init", f"Unable to create the local repository '{path}'")
            return
        if not stat.S_ISDIR(git_dir_stat.st_mode):
            raise NotARepositoryError(path)
