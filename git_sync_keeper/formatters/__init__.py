"""Formatting utilities for git-sync-keeper."""

from .status import (
    format_divergence,
    format_divergence_hint,
    format_change_kind,
    format_snapshot_summary,
)

__all__ = [
    "format_divergence",
    "format_divergence_hint",
    "format_change_kind",
    "format_snapshot_summary",
]
