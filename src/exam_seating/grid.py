"""Seat grid construction helpers."""
from __future__ import annotations

from typing import Dict, List, Tuple

from .errors import InvalidDimensions
from .models import Seat


def seat_index(row: int, column: int, columns: int) -> int:
    """Row-major offset of a 1-based ``(row, column)`` coordinate."""
    return (row - 1) * columns + (column - 1)


def empty_grid(rows: int, columns: int) -> List[Seat]:
    """Return ``rows * columns`` empty seats in row-major order."""
    if rows < 1 or columns < 1:
        raise InvalidDimensions(rows, columns)
    return [Seat.vacant(r, c) for r in range(1, rows + 1) for c in range(1, columns + 1)]


def build_grid(rows: int, columns: int, placed: Dict[Tuple[int, int], str]) -> List[Seat]:
    """Emit a row-major grid from a ``(row, column) -> candidate id`` mapping.

    Fill order is a strategy's own business; the output is always row-major.
    """
    seats = empty_grid(rows, columns)
    for (r, c), candidate_id in placed.items():
        seats[seat_index(r, c, columns)] = Seat.taken(r, c, candidate_id)
    return seats
