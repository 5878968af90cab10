"""Remote management service for git-sync-keeper."""

import re
from typing import List, Optional, Union, TYPE_CHECKING

from git_sync_keeper.exceptions import GitOperationError
from git_sync_keeper.models.branch import RemoteInfo
from git_sync_keeper.services.git.branch_queries import split_lines
from git_sync_keeper.logging_config import get_logger

if TYPE_CHECKING:
    from git_sync_keeper.config import Config
    from git_sync_keeper.services.git.commands import GitCommands

logger = get_logger(__name__)

# "origin\tgit@github.com:org/repo.git (fetch)"
REMOTE_LINE_RE = re.compile(r"^\s*(\S+)\s+(.*?)\s+\((fetch|push)\)$")


def parse_remote_line(line: str) -> Optional[RemoteInfo]:
    """Parse one line of `git remote -v`, or return None if it does not match."""
    match = REMOTE_LINE_RE.match(line)
    if not match:
        return None
    return RemoteInfo(name=match.group(1), url=match.group(2), direction=match.group(3))


class RemoteService:
    """Service for reading and registering remotes."""

    def __init__(self, commands: "GitCommands", config: Union["Config", dict]):
        self.commands = commands
        self.config = config

    def remotes(self) -> List[str]:
        """Get list of remote names."""
        return split_lines(self.commands.get("remote"))

    def remote_exists(self, remote_name: str) -> bool:
        """Check if a remote is defined. A failed listing counts as not found."""
        try:
            return remote_name in self.remotes()
        except GitOperationError as e:
            logger.debug(f"Error listing remotes: {e}")
            return False

    def remote_infos(self) -> List[RemoteInfo]:
        """Get all fetch and push URLs of all remotes."""
        infos = []
        for line in split_lines(self.commands.get("remote", "-v")):
            info = parse_remote_line(line)
            if info is not None:
                infos.append(info)
        return infos

    def remote_url(self, remote_name: str) -> Optional[str]:
        """Get the URL of a remote, or None if it is not defined."""
        for info in self.remote_infos():
            if info.name == remote_name:
                return info.url
        return None

    def ensure_remote_is(self, remote_name: str, url: str) -> None:
        """Make sure a remote exists and points at url.

        Raises:
            GitOperationError: if adding or updating the remote fails
        """
        current_url = self.remote_url(remote_name)
        if current_url is None:
            logger.info(f"Adding remote {remote_name} -> {url}")
            if self.commands.do("remote", "add", remote_name, url) != 0:
                raise GitOperationError("remote add", f"Unable to add remote '{remote_name}'")
        elif current_url != url:
            logger.info(f"Updating remote {remote_name}: {current_url} -> {url}")
            if self.commands.do("remote", "set-url", remote_name, url) != 0:
                raise GitOperationError("remote set-url", f"Unable to update remote '{remote_name}'")
        else:
            logger.debug(f"Remote {remote_name} already points at {url}")
