"""Local/remote divergence from three resolved revision ids."""

from git_sync_keeper.exceptions import RevisionResolutionError
from git_sync_keeper.models.branch import Divergence


def compare(local_rev: str, remote_rev: str, base_rev: str) -> Divergence:
    """Classify a local branch against its remote using their merge-base.

    Equality of revision ids stands in for ancestry: the merge-base is already
    computed by git.

    Raises:
        RevisionResolutionError: if any revision id is empty
    """
    revisions = {
        "local": local_rev.strip() if local_rev else "",
        "remote": remote_rev.strip() if remote_rev else "",
        "merge-base": base_rev.strip() if base_rev else "",
    }
    for label, rev in revisions.items():
        if not rev:
            raise RevisionResolutionError(label, "empty revision id")

    local, remote, base = revisions["local"], revisions["remote"], revisions["merge-base"]

    if local == remote:
        return Divergence.EQUAL
    if local == base:
        return Divergence.LOCAL_BEHIND
    if remote == base:
        return Divergence.LOCAL_AHEAD
    return Divergence.DIVERGED
