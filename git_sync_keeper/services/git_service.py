"""Git service façade"""

from typing import Iterable, List, Optional, Union

from rich.console import Console

from git_sync_keeper.config import Config
from git_sync_keeper.models.branch import Divergence
from git_sync_keeper.models.status import StatusSnapshot
from git_sync_keeper.services.git import GitCommands, GitOperations, BranchQueries, RemoteService
from git_sync_keeper.logging_config import get_logger

logger = get_logger(__name__)


class GitService:
    """Single entry point for the git operations of one repository."""

    def __init__(
        self,
        repo_path: str,
        config: Union[Config, dict, None] = None,
        output: Optional[Console] = None,
    ):
        """Initialize the service.

        Args:
            repo_path: Path to the git repository (need not exist yet, see ensure_repo_exist)
            config: Configuration dict or Config object
            output: Console receiving echoed git commands
        """
        self.repo_path = repo_path
        if config is None:
            self.config = Config()
        elif isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config

        self.commands = GitCommands(repo_path, self.config, output)
        self.operations = GitOperations(self.commands, self.config)
        self.branch_queries = BranchQueries(self.commands, self.config)
        self.remotes_service = RemoteService(self.commands, self.config)
        logger.info(f"Git service initialized for {repo_path}")

    # Working tree

    def get_status(self) -> StatusSnapshot:
        return self.operations.get_status()

    def add(self, paths: Iterable[str]) -> int:
        return self.operations.add(paths)

    def commit(self, message: str, fail_if_nothing_to_commit: Optional[bool] = None) -> bool:
        return self.operations.commit(message, fail_if_nothing_to_commit)

    def push(self) -> None:
        self.operations.push()

    def ensure_repo_exist(self, path: Optional[str] = None) -> None:
        self.operations.ensure_repo_exist(path or self.repo_path)

    # Branches

    def branches(self) -> List[str]:
        return self.branch_queries.branches()

    def remote_branches(self) -> List[str]:
        return self.branch_queries.remote_branches()

    def branch_exists(self, branch_name: str) -> bool:
        return self.branch_queries.branch_exists(branch_name)

    def remote_branch_exists(self, remote_branch: str) -> bool:
        return self.branch_queries.remote_branch_exists(remote_branch)

    def get_current_branch(self) -> str:
        return self.branch_queries.get_current_branch()

    def is_unborn(self) -> bool:
        return self.branch_queries.is_unborn()

    def default_remote_ref(self) -> str:
        """Remote counterpart of the current branch: <remote_name>/<current branch>."""
        return f"{self.config.remote_name}/{self.get_current_branch()}"

    def remote_status(self, remote_ref: Optional[str] = None) -> Divergence:
        """Compare HEAD with remote_ref, by default the one from default_remote_ref()."""
        if remote_ref is None:
            remote_ref = self.default_remote_ref()
        return self.branch_queries.remote_status(remote_ref)

    # Remotes

    def remotes(self) -> List[str]:
        return self.remotes_service.remotes()

    def remote_exists(self, remote_name: Optional[str] = None) -> bool:
        return self.remotes_service.remote_exists(remote_name or self.config.remote_name)

    def remote_url(self, remote_name: Optional[str] = None) -> Optional[str]:
        return self.remotes_service.remote_url(remote_name or self.config.remote_name)

    def ensure_remote_is(self, remote_name: str, url: str) -> None:
        self.remotes_service.ensure_remote_is(remote_name, url)
