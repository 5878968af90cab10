"""Status and divergence formatting utilities."""

from git_sync_keeper.constants import CHANGE_KIND_LABELS, DIVERGENCE_CODES, DIVERGENCE_HINTS
from git_sync_keeper.models.branch import Divergence
from git_sync_keeper.models.status import ChangeKind, StatusSnapshot


def format_divergence(divergence: Divergence) -> str:
    """
    Format a divergence as its short code.

    Args:
        divergence: Divergence enum value

    Returns:
        One of "=", "+1", "-1", "-1+1"
    """
    return DIVERGENCE_CODES[divergence]


def format_divergence_hint(divergence: Divergence) -> str:
    """Describe what to do about a divergence, e.g. "push needed"."""
    return DIVERGENCE_HINTS[divergence]


def format_change_kind(kind: ChangeKind) -> str:
    return CHANGE_KIND_LABELS.get(kind.value, kind.value)


def format_snapshot_summary(snapshot: StatusSnapshot) -> str:
    """
    Summarize a snapshot in one line.

    Example:
        "2 ready (1 added, 1 modified), 1 not ready (1 untracked)"
    """
    if not snapshot.ok:
        return f"status unavailable: {snapshot.error}"
    if snapshot.is_clean:
        return "nothing to commit, working tree clean"

    parts = []
    for label, record in (("ready", snapshot.ready), ("not ready", snapshot.not_ready)):
        counts = ", ".join(
            f"{len(record.files(kind))} {format_change_kind(kind)}" for kind in record.kinds()
        )
        text = f"{len(record)} {label}"
        if counts:
            text += f" ({counts})"
        parts.append(text)
    return ", ".join(parts)
