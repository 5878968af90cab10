"""Branch and remote models"""
from enum import Enum
from dataclasses import dataclass


class Divergence(Enum):
    """How a local branch relates to its remote counterpart."""
    EQUAL = "equal"
    LOCAL_AHEAD = "ahead"
    LOCAL_BEHIND = "behind"
    DIVERGED = "diverged"


@dataclass(frozen=True)
class RemoteInfo:
    """One entry of `git remote -v`."""
    name: str
    url: str
    direction: str  # "fetch" or "push"
