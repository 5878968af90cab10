"""Data models for git-sync-keeper."""

from .status import ChangeKind, ChangeRecord, StatusSnapshot, READY_KINDS, NOT_READY_KINDS
from .branch import Divergence, RemoteInfo

__all__ = [
    "ChangeKind",
    "ChangeRecord",
    "StatusSnapshot",
    "READY_KINDS",
    "NOT_READY_KINDS",
    "Divergence",
    "RemoteInfo",
]
