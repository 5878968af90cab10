"""Branch query service for git-sync-keeper."""

from typing import List, Optional, Union, TYPE_CHECKING

from git_sync_keeper.core.divergence import compare
from git_sync_keeper.exceptions import GitOperationError, RevisionResolutionError
from git_sync_keeper.models.branch import Divergence
from git_sync_keeper.logging_config import get_logger

if TYPE_CHECKING:
    from git_sync_keeper.config import Config
    from git_sync_keeper.services.git.commands import GitCommands

logger = get_logger(__name__)

SHORT_REFNAME_FORMAT = "--format=%(refname:short)"


def split_lines(output: str) -> List[str]:
    """Split command output into stripped, non-empty lines."""
    return [line.strip() for line in output.split("\n") if line.strip()]


class BranchQueries:
    """Service for querying branch information."""

    def __init__(self, commands: "GitCommands", config: Union["Config", dict]):
        """Initialize the branch queries service.

        Args:
            commands: GitCommands runner bound to the repository
            config: Configuration dictionary or Config object
        """
        self.commands = commands
        self.config = config
        self.default_branch = config.get("default_branch", "master")

        logger.debug("Branch queries service initialized")

    def branches(self) -> List[str]:
        """Get list of local branch names."""
        return split_lines(self.commands.get("branch", SHORT_REFNAME_FORMAT))

    def remote_branches(self) -> List[str]:
        """Get list of remote branches, formatted as <remote>/<branch>."""
        return split_lines(self.commands.get("branch", "-r", SHORT_REFNAME_FORMAT))

    def branch_exists(self, branch_name: str) -> bool:
        """Check if a local branch exists."""
        return branch_name in self.branches()

    def remote_branch_exists(self, remote_branch: str) -> bool:
        """Check if a remote branch is known locally.

        Args:
            remote_branch: Formatted as <remote>/<branch>
        """
        return remote_branch in self.remote_branches()

    def unborn_branch(self) -> Optional[str]:
        """Name of the branch HEAD points at when it has no commits yet.

        Returns None when HEAD resolves to a commit, is detached, or cannot
        be read. Falls back to the configured default branch if git reports
        an unborn HEAD without printing its name.
        """
        status, _, _ = self.commands.run("rev-parse", "--verify", "--quiet", "HEAD")
        if status == 0:
            return None
        # HEAD does not resolve; it is unborn only if it still points at a branch ref
        status, stdout, _ = self.commands.run("symbolic-ref", "--quiet", "--short", "HEAD")
        if status != 0:
            return None
        return stdout.strip() or self.default_branch

    def is_unborn(self) -> bool:
        """Check if HEAD names a branch that has no commits yet."""
        return self.unborn_branch() is not None

    def get_current_branch(self) -> str:
        """Get the current branch name.

        Returns the branch HEAD points at even before the first commit, and
        "HEAD" when HEAD is detached.

        Raises:
            GitOperationError: if HEAD cannot be read for any other reason
        """
        unborn = self.unborn_branch()
        if unborn is not None:
            logger.debug(f"No commits yet on {unborn}")
            return unborn
        return self.commands.get("rev-parse", "--abbrev-ref", "HEAD").strip()

    def resolve_revision(self, revision: str) -> str:
        """Resolve a revision to its full commit id.

        Raises:
            RevisionResolutionError: if git cannot resolve it
        """
        try:
            return self.commands.get("rev-parse", "--verify", revision).strip()
        except GitOperationError as e:
            raise RevisionResolutionError(revision, e.message, e.status) from e

    def merge_base(self, first: str, second: str) -> str:
        """Get the merge-base commit of two revisions.

        Raises:
            RevisionResolutionError: if the revisions share no history
        """
        try:
            return self.commands.get("merge-base", first, second).strip()
        except GitOperationError as e:
            raise RevisionResolutionError(
                f"merge-base {first} {second}", e.message, e.status
            ) from e

    def remote_status(self, remote_ref: str) -> Divergence:
        """Compare HEAD with a remote ref.

        Args:
            remote_ref: Remote branch, e.g. "origin/main"

        Raises:
            RevisionResolutionError: if HEAD, the remote ref or their merge-base
                cannot be resolved
        """
        local_rev = self.resolve_revision("HEAD")
        remote_rev = self.resolve_revision(remote_ref)
        base_rev = self.merge_base("HEAD", remote_ref)
        divergence = compare(local_rev, remote_rev, base_rev)
        logger.debug(f"HEAD vs {remote_ref}: {divergence.value}")
        return divergence
