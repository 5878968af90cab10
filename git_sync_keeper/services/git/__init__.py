"""Git-related services for git-sync-keeper."""

from .commands import GitCommands
from .operations import GitOperations
from .branch_queries import BranchQueries
from .remotes import RemoteService

__all__ = [
    "GitCommands",
    "GitOperations",
    "BranchQueries",
    "RemoteService",
]
