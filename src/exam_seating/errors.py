"""Exceptions raised by the seating engine."""
from __future__ import annotations

from typing import Optional


class SeatingError(ValueError):
    """Base class for every seating engine failure."""


class InvalidDimensions(SeatingError):
    """A room grid with fewer than one row or column."""

    def __init__(self, rows: int, columns: int) -> None:
        super().__init__(f"Invalid room dimensions: rows={rows}, columns={columns}")
        self.rows = rows
        self.columns = columns


class InvalidAlgorithm(SeatingError):
    """Unknown placement algorithm selector."""

    def __init__(self, algorithm: str) -> None:
        super().__init__(f"Invalid algorithm specified: {algorithm!r}")
        self.algorithm = algorithm


class CapacityExceeded(SeatingError):
    """More candidates than seats, either overall or within a single room."""

    def __init__(self, demand: int, supply: int, room_id: Optional[str] = None) -> None:
        if room_id is None:
            msg = f"Total students ({demand}) exceed total room capacity ({supply})"
        else:
            msg = f"Room {room_id} has {demand} students for {supply} seats"
        super().__init__(msg)
        self.demand = demand
        self.supply = supply
        self.room_id = room_id


class PlacementInfeasible(SeatingError):
    """Adjacency constraints left candidates without a seat.

    Callers may retry with a different algorithm.
    """

    def __init__(self, room_id: str, unassigned_count: int) -> None:
        super().__init__(
            f"Could not seat {unassigned_count} student(s) in room {room_id} "
            "without same-group neighbours"
        )
        self.room_id = room_id
        self.unassigned_count = unassigned_count
