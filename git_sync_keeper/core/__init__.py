"""Pure status and tracking-state derivation.

Nothing in this package runs git, logs, or prints: callers hand in captured
command output and get typed values back.
"""

from .classifier import classify, CLASSIFICATION_RULES
from .divergence import compare
from .commit_gate import check_commit_gate

__all__ = ["classify", "CLASSIFICATION_RULES", "compare", "check_commit_gate"]
