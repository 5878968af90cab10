"""Working-tree status models.

A status query produces one ``StatusSnapshot`` holding two ``ChangeRecord``
instances: the ready record (changes staged in the index) and the not-ready
record (working-tree changes and untracked files). Records are immutable once
built; a new snapshot is produced for every query.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, Iterator, Mapping, Optional, Tuple


class ChangeKind(str, Enum):
    """Single-character change codes of the porcelain status report."""
    ADDED = "A"
    DELETED = "D"
    MODIFIED = "M"
    UNTRACKED = "?"

    def __str__(self) -> str:
        return self.value


READY_KINDS: FrozenSet[ChangeKind] = frozenset(
    {ChangeKind.ADDED, ChangeKind.DELETED, ChangeKind.MODIFIED}
)
NOT_READY_KINDS: FrozenSet[ChangeKind] = READY_KINDS | {ChangeKind.UNTRACKED}


@dataclass(frozen=True)
class ChangeRecord:
    """Paths grouped by change kind, in the order they were reported."""

    allowed_kinds: FrozenSet[ChangeKind]
    entries: Mapping[ChangeKind, Tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self):
        """Validate kinds and path uniqueness, then freeze the entries."""
        entries = {ChangeKind(kind): tuple(paths) for kind, paths in self.entries.items()}
        seen = set()
        for kind, paths in entries.items():
            if kind not in self.allowed_kinds:
                raise ValueError(f"change kind '{kind}' is not allowed in this record")
            for path in paths:
                if path in seen:
                    raise ValueError(f"path '{path}' is listed under more than one kind")
                seen.add(path)
        object.__setattr__(self, "allowed_kinds", frozenset(self.allowed_kinds))
        object.__setattr__(self, "entries", MappingProxyType(entries))

    def __hash__(self) -> int:
        return hash((self.allowed_kinds, frozenset(self.entries.items())))

    @classmethod
    def empty(cls, allowed_kinds: FrozenSet[ChangeKind]) -> "ChangeRecord":
        return cls(allowed_kinds)

    def files(self, kind) -> Tuple[str, ...]:
        """Paths recorded under a kind; accepts a ChangeKind or its code."""
        return self.entries.get(ChangeKind(kind), ())

    def kinds(self) -> Tuple[ChangeKind, ...]:
        """Kinds present in the record, in first-seen order."""
        return tuple(kind for kind, paths in self.entries.items() if paths)

    def count_tracked(self) -> int:
        """Number of entries whose kind is not untracked."""
        return sum(
            len(paths) for kind, paths in self.entries.items()
            if kind is not ChangeKind.UNTRACKED
        )

    def is_empty(self) -> bool:
        return len(self) == 0

    def items(self) -> Iterator[Tuple[ChangeKind, str]]:
        """Yield (kind, path) pairs grouped by kind."""
        for kind, paths in self.entries.items():
            for path in paths:
                yield kind, path

    def __len__(self) -> int:
        return sum(len(paths) for paths in self.entries.values())


@dataclass(frozen=True)
class StatusSnapshot:
    """Result of one status query.

    When ``error`` is set the records are empty and must not be trusted as a
    description of the working tree.
    """

    ready: ChangeRecord
    not_ready: ChangeRecord
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def is_clean(self) -> bool:
        """True when the query succeeded and reported no changes."""
        return self.ok and self.ready.is_empty() and self.not_ready.is_empty()

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error
