"""Decide whether a commit has anything to record."""

from git_sync_keeper.exceptions import NothingToCommitError
from git_sync_keeper.models.status import ChangeRecord


def check_commit_gate(ready: ChangeRecord, strict: bool = False) -> bool:
    """Return True if the ready record holds tracked changes.

    With nothing staged this returns False, or raises NothingToCommitError
    when ``strict`` is set.
    """
    if ready.count_tracked() > 0:
        return True
    if strict:
        raise NothingToCommitError()
    return False
