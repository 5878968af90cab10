"""Classification of `git status --porcelain` output."""

import re
from typing import Dict, List, Optional, Set, Tuple

from git_sync_keeper.models.status import (
    ChangeKind,
    ChangeRecord,
    StatusSnapshot,
    READY_KINDS,
    NOT_READY_KINDS,
)

READY = "ready"
NOT_READY = "not_ready"

# Evaluated in order; the first matching rule wins.
# Each pattern exposes a "path" group and, unless the rule fixes it, a "kind" group.
CLASSIFICATION_RULES: Tuple[Tuple[re.Pattern, str, Optional[ChangeKind]], ...] = (
    # "M  path": change staged in the index, nothing left in the working tree
    (re.compile(r"^(?P<kind>[ADM])  (?P<path>.*)$"), READY, None),
    # " M path": working-tree change not yet staged
    (re.compile(r"^ (?P<kind>[?ADM]) (?P<path>.*)$"), NOT_READY, None),
    # "?? path": untracked file as printed by porcelain v1
    (re.compile(r"^\?\? (?P<path>.*)$"), NOT_READY, ChangeKind.UNTRACKED),
)


def classify_line(line: str) -> Optional[Tuple[str, ChangeKind, str]]:
    """Return (target, kind, path) for a report line, or None if no rule matches."""
    for pattern, target, fixed_kind in CLASSIFICATION_RULES:
        match = pattern.match(line)
        if match:
            kind = fixed_kind or ChangeKind(match.group("kind"))
            return target, kind, match.group("path")
    return None


def classify(raw_output: str, error: Optional[Exception] = None) -> StatusSnapshot:
    """Turn porcelain status text into a StatusSnapshot.

    Args:
        raw_output: Captured stdout of `git status --porcelain`
        error: Failure of the command that produced ``raw_output``, if any

    Returns:
        A snapshot with empty records when ``error`` is set or the output is
        empty; otherwise every recognized line filed under its record and kind.
        Unrecognized lines are skipped, as are repeats of a path already
        filed in the same record.
    """
    if error is not None or not raw_output:
        return StatusSnapshot(
            ready=ChangeRecord.empty(READY_KINDS),
            not_ready=ChangeRecord.empty(NOT_READY_KINDS),
            error=error,
        )

    collected: Dict[str, Dict[ChangeKind, List[str]]] = {READY: {}, NOT_READY: {}}
    seen: Dict[str, Set[str]] = {READY: set(), NOT_READY: set()}
    for line in raw_output.split("\n"):
        classified = classify_line(line.rstrip("\r"))
        if classified is None:
            continue
        target, kind, path = classified
        # A path keeps the first kind reported for it
        if path in seen[target]:
            continue
        seen[target].add(path)
        collected[target].setdefault(kind, []).append(path)

    return StatusSnapshot(
        ready=_freeze(collected[READY], READY_KINDS),
        not_ready=_freeze(collected[NOT_READY], NOT_READY_KINDS),
    )


def _freeze(entries: Dict[ChangeKind, List[str]], allowed) -> ChangeRecord:
    return ChangeRecord(allowed, {kind: tuple(paths) for kind, paths in entries.items()})
