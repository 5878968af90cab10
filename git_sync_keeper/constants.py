"""Shared constants for git-sync-keeper."""

from git_sync_keeper.models.branch import Divergence


# Short codes shown next to a branch to describe how it relates to its remote
DIVERGENCE_CODES = {
    Divergence.EQUAL: "=",
    Divergence.LOCAL_BEHIND: "-1",
    Divergence.LOCAL_AHEAD: "+1",
    Divergence.DIVERGED: "-1+1",
}

# What the user is expected to do about each relation
DIVERGENCE_HINTS = {
    Divergence.EQUAL: "up to date",
    Divergence.LOCAL_BEHIND: "pull needed",
    Divergence.LOCAL_AHEAD: "push needed",
    Divergence.DIVERGED: "merge or rebase needed",
}

# Human labels for porcelain change codes
CHANGE_KIND_LABELS = {
    "A": "added",
    "D": "deleted",
    "M": "modified",
    "?": "untracked",
}

# Rich color names used by the CLI
CLI_COLORS = {
    "ready": "green",
    "not_ready": "red",
    Divergence.EQUAL: "green",
    Divergence.LOCAL_BEHIND: "yellow",
    Divergence.LOCAL_AHEAD: "cyan",
    Divergence.DIVERGED: "red",
}

# Exit codes for the command-line interface
EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NOTHING_TO_COMMIT = 2
EXIT_INTERRUPTED = 130
