"""Data models for exam seating."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple
import math

from .errors import InvalidDimensions


def parse_pipe_list(value: object) -> List[str]:
    """Split a pipe separated string into a list.

    Empty values such as ``""`` or ``None`` return an empty list.
    ``pandas`` often provides ``float('nan')`` for missing values which is
    also treated as empty.
    """
    if value is None:
        return []
    if isinstance(value, float) and math.isnan(value):
        return []
    text = str(value).strip()
    if not text or text.lower() == "nan":
        return []
    return [part.strip() for part in text.split("|") if part.strip()]


class PlanStatus(str, Enum):
    """Lifecycle of a seating plan. The engine only creates drafts."""

    DRAFT = "draft"
    FINAL = "final"
    PUBLISHED = "published"


@dataclass(frozen=True)
class Room:
    """Examination room with a rectangular seat grid."""

    id: str
    rows: int
    columns: int
    capacity: int
    name: str = ""
    building: str = ""

    def __post_init__(self) -> None:
        if self.rows < 1 or self.columns < 1:
            raise InvalidDimensions(self.rows, self.columns)

    @property
    def seat_count(self) -> int:
        return self.rows * self.columns


@dataclass(frozen=True)
class Candidate:
    """A student eligible for a seat in one room."""

    id: str
    name: str = ""
    group: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Candidate id must be a non-empty string")


@dataclass(frozen=True)
class Seat:
    """A single grid cell. ``candidate_id`` is empty when nobody sits here."""

    row: int
    column: int
    candidate_id: str = ""
    is_empty: bool = True

    def __post_init__(self) -> None:
        if self.is_empty != (self.candidate_id == ""):
            raise ValueError(
                f"Seat ({self.row}, {self.column}): is_empty={self.is_empty} "
                f"contradicts candidate_id={self.candidate_id!r}"
            )

    @classmethod
    def taken(cls, row: int, column: int, candidate_id: str) -> "Seat":
        return cls(row=row, column=column, candidate_id=candidate_id, is_empty=False)

    @classmethod
    def vacant(cls, row: int, column: int) -> "Seat":
        return cls(row=row, column=column)


@dataclass(frozen=True)
class Infeasible:
    """Placement outcome when adjacency rules left candidates unseated."""

    unassigned_count: int


@dataclass
class RoomAssignment:
    """A room together with the roster already distributed to it."""

    room: Room
    roster: List[Candidate] = field(default_factory=list)
    invigilators: List[str] = field(default_factory=list)


@dataclass
class RoomPlan:
    """Seat grid of one room inside a plan."""

    room_id: str
    name: str
    building: str
    rows: int
    columns: int
    capacity: int
    invigilators: List[str] = field(default_factory=list)
    seats: List[Seat] = field(default_factory=list)

    def occupied(self) -> List[Seat]:
        return [s for s in self.seats if not s.is_empty]

    def seat_at(self, row: int, column: int) -> Seat:
        return self.seats[(row - 1) * self.columns + (column - 1)]


@dataclass
class SeatingPlan:
    """Multi-room seating plan for one exam."""

    exam_id: str
    algorithm: str
    status: PlanStatus = PlanStatus.DRAFT
    rooms: List[RoomPlan] = field(default_factory=list)

    def seat_of(self, candidate_id: str) -> Optional[Tuple[str, Seat]]:
        """Return ``(room_id, seat)`` for a candidate, or ``None`` if unseated."""
        for room in self.rooms:
            for seat in room.seats:
                if seat.candidate_id == candidate_id:
                    return room.room_id, seat
        return None
