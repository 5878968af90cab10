"""
git-sync-keeper - status, divergence and remote bookkeeping over the git CLI
"""

from .__version__ import __version__
from .core import classify, compare, check_commit_gate
from .models import ChangeKind, ChangeRecord, StatusSnapshot, Divergence
from .services import GitService

__all__ = [
    "GitService",
    "classify",
    "compare",
    "check_commit_gate",
    "ChangeKind",
    "ChangeRecord",
    "StatusSnapshot",
    "Divergence",
    "__version__",
]
