"""Git command runner"""

from typing import Optional, Tuple, Union, TYPE_CHECKING

import git
from rich.console import Console

from git_sync_keeper.exceptions import GitOperationError
from git_sync_keeper.logging_config import get_logger

if TYPE_CHECKING:
    from git_sync_keeper.config import Config

console = Console()
logger = get_logger(__name__)


class GitCommands:
    """Runs git subcommands and hands back their captured output.

    Three flavours, matching how callers consume results:

    - ``get``: quiet, returns stdout, raises GitOperationError on failure
    - ``run``: quiet, returns (status, stdout, stderr), never raises on exit code
    - ``do``: echoes the command and its output to the console, returns the exit code
    """

    def __init__(
        self,
        repo_path: Optional[str],
        config: Union["Config", dict],
        output: Optional[Console] = None,
    ):
        """Initialize the runner.

        Args:
            repo_path: Working directory for git, None for the process cwd
            config: Configuration dictionary or Config object
            output: Console receiving echoed commands (defaults to the module console)
        """
        self.repo_path = repo_path
        self.config = config
        self.timeout = config.get("command_timeout")
        self.echo = config.get("echo_commands", True)
        self.console = output or console
        self._git = git.Git(repo_path)

    def _execute(self, args: Tuple[str, ...], **kwargs):
        return self._git.execute(["git", *args], kill_after_timeout=self.timeout, **kwargs)

    def get(self, *args: str) -> str:
        """Run a git command and return its stdout.

        Raises:
            GitOperationError: if git is missing or exits non-zero
        """
        logger.debug(f"RUNNING: git {' '.join(args)}")
        try:
            return self._execute(args)
        except git.exc.CommandError as e:
            logger.debug(f"git {' '.join(args)} failed: {e}")
            raise GitOperationError.from_command_error(args[0], e) from e

    def run(self, *args: str) -> Tuple[int, str, str]:
        """Run a git command and return (status, stdout, stderr).

        Raises:
            GitOperationError: only if git itself cannot be started
        """
        logger.debug(f"RUNNING: git {' '.join(args)}")
        try:
            return self._execute(args, with_extended_output=True, with_exceptions=False)
        except git.exc.CommandError as e:
            raise GitOperationError.from_command_error(args[0], e) from e

    def do(self, *args: str) -> int:
        """Run a git command with its output displayed; return the exit code."""
        if self.echo:
            self.console.print(f"git {' '.join(args)}", style="cyan", markup=False, highlight=False)
        status, stdout, stderr = self.run(*args)
        if self.echo:
            if stdout:
                self.console.print(stdout, markup=False, highlight=False)
            if stderr:
                self.console.print(stderr, markup=False, highlight=False)
        if status != 0:
            logger.info(f"git {' '.join(args)} exited with {status}")
        return status
