"""Services wrapping the git command line."""

from .git_service import GitService

__all__ = ["GitService"]
