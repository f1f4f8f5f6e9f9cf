"""Group candidates by their group attribute."""
from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from .models import Candidate


def partition_roster(candidates: Iterable[Candidate]) -> Tuple[Dict[str, List[Candidate]], List[str]]:
    """Split a roster into per-group FIFO lists.

    Returns the mapping and the distinct group names in first-seen order.
    Every strategy iterates groups in that order so identical input order
    always gives identical seating.
    """
    groups: Dict[str, List[Candidate]] = {}
    order: List[str] = []
    for cand in candidates:
        if cand.group not in groups:
            groups[cand.group] = []
            order.append(cand.group)
        groups[cand.group].append(cand)
    return groups, order


class GroupQueues:
    """Per-call read cursors over a partitioned roster.

    The partition lists are never mutated, so one partition can back several
    queues at once.
    """

    def __init__(self, groups: Dict[str, List[Candidate]], order: List[str]) -> None:
        self.groups = groups
        self.order = order
        self._cursor: Dict[str, int] = {g: 0 for g in order}

    @classmethod
    def from_roster(cls, candidates: Iterable[Candidate]) -> "GroupQueues":
        groups, order = partition_roster(candidates)
        return cls(groups, order)

    def remaining(self, group: str) -> int:
        return len(self.groups.get(group, [])) - self._cursor.get(group, 0)

    def has_next(self, group: str) -> bool:
        return self.remaining(group) > 0

    def pop(self, group: str) -> Candidate:
        if not self.has_next(group):
            raise IndexError(f"Group {group!r} is exhausted")
        cand = self.groups[group][self._cursor[group]]
        self._cursor[group] += 1
        return cand

    def total_remaining(self) -> int:
        return sum(self.remaining(g) for g in self.order)

    def active(self) -> List[str]:
        """Non-exhausted groups in first-seen order."""
        return [g for g in self.order if self.has_next(g)]
