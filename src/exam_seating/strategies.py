"""
Seat placement strategies.

Every strategy takes the grid dimensions and a fresh ``GroupQueues`` built from
one room's roster and returns a row-major seat grid. Groups are always visited
in first-seen order, so the deterministic strategies give identical output for
identical input order.

    column-banded       one group per grid column, cycling through the groups
    serpentine          boustrophedon walk, round-robin over the groups
    adjacency-avoiding  row-major walk, never seats a group next to itself
    shuffled            seeded shuffle, row-major fill

Only ``adjacency-avoiding`` can fail on a roster that fits the room; it returns
``Infeasible`` instead of a grid.
"""
from __future__ import annotations

import random
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Tuple, Union

from .errors import InvalidAlgorithm
from .grid import build_grid, empty_grid
from .models import Candidate, Infeasible, Room, Seat
from .roster import GroupQueues

PlacementResult = Union[List[Seat], Infeasible]
Strategy = Callable[[int, int, GroupQueues, Optional[random.Random]], PlacementResult]

COLUMN_BANDED = "column-banded"
SERPENTINE = "serpentine"
ADJACENCY_AVOIDING = "adjacency-avoiding"
SHUFFLED = "shuffled"


# ----------------------------- traversal helpers -----------------------------
def serpentine_order(rows: int, columns: int) -> Iterator[Tuple[int, int]]:
    """Row 1 left to right, row 2 right to left, and so on."""
    for r in range(1, rows + 1):
        cols = range(1, columns + 1) if r % 2 == 1 else range(columns, 0, -1)
        for c in cols:
            yield r, c


def row_major_order(rows: int, columns: int) -> Iterator[Tuple[int, int]]:
    for r in range(1, rows + 1):
        for c in range(1, columns + 1):
            yield r, c


# ----------------------------- strategies -----------------------------
def column_banded(rows: int, columns: int, queues: GroupQueues,
                  rng: Optional[random.Random] = None) -> List[Seat]:
    """Give each column to one group and fill it top to bottom.

    Column ``j`` belongs to ``order[j mod len(order)]``. A column whose group
    runs dry keeps its remaining seats empty; leftovers are not moved to other
    columns.
    """
    order = queues.order
    if not order:
        return empty_grid(rows, columns)
    placed: Dict[Tuple[int, int], str] = {}
    for j in range(columns):
        group = order[j % len(order)]
        for i in range(rows):
            if not queues.has_next(group):
                break
            placed[(i + 1, j + 1)] = queues.pop(group).id
    return build_grid(rows, columns, placed)


def serpentine(rows: int, columns: int, queues: GroupQueues,
               rng: Optional[random.Random] = None) -> List[Seat]:
    """Walk the grid boustrophedon style and interleave groups round-robin.

    Seats that touch across a row turn can still share a group; this strategy
    only interleaves along the walk.
    """
    order = queues.order
    placed: Dict[Tuple[int, int], str] = {}
    cursor = 0
    for r, c in serpentine_order(rows, columns):
        picked = None
        for step in range(len(order)):
            idx = (cursor + step) % len(order)
            if queues.has_next(order[idx]):
                picked = idx
                break
        if picked is None:
            break
        placed[(r, c)] = queues.pop(order[picked]).id
        cursor = (picked + 1) % len(order)
    return build_grid(rows, columns, placed)


def _nearest_group(placed: Dict[Tuple[int, int], str], coords: Sequence[Tuple[int, int]]) -> Optional[str]:
    for key in coords:
        if key in placed:
            return placed[key]
    return None


def adjacency_avoiding(rows: int, columns: int, queues: GroupQueues,
                       rng: Optional[random.Random] = None) -> PlacementResult:
    """Row-major fill that never seats a group beside or below itself.

    The neighbours checked are the nearest occupied seat to the left in the
    same row and the nearest occupied seat above in the same column. Ties go
    to the earliest group in first-seen order. A seat with no eligible group
    stays empty.

    An empty seat does not separate two candidates: a 1x3 row with two
    candidates of one group seats only the first and reports one unassigned,
    even though the outer seats are not directly adjacent.
    """
    placed_group: Dict[Tuple[int, int], str] = {}
    placed: Dict[Tuple[int, int], str] = {}
    for r, c in row_major_order(rows, columns):
        blocked = set()
        left = _nearest_group(placed_group, [(r, k) for k in range(c - 1, 0, -1)])
        above = _nearest_group(placed_group, [(k, c) for k in range(r - 1, 0, -1)])
        if left is not None:
            blocked.add(left)
        if above is not None:
            blocked.add(above)
        pool = [g for g in queues.active() if g not in blocked]
        if not pool:
            continue
        group = pool[0]
        placed[(r, c)] = queues.pop(group).id
        placed_group[(r, c)] = group

    unassigned = queues.total_remaining()
    if unassigned:
        return Infeasible(unassigned_count=unassigned)
    return build_grid(rows, columns, placed)


def shuffled(rows: int, columns: int, queues: GroupQueues,
             rng: Optional[random.Random] = None) -> List[Seat]:
    """Shuffle the roster with the caller's generator and fill row-major."""
    if rng is None:
        raise ValueError("Shuffled seating needs an explicit random.Random source")
    pool: List[Candidate] = []
    for group in queues.order:
        while queues.has_next(group):
            pool.append(queues.pop(group))
    rng.shuffle(pool)
    placed = dict(zip(row_major_order(rows, columns), (cand.id for cand in pool)))
    return build_grid(rows, columns, placed)


def row_fill(rows: int, columns: int) -> List[Seat]:
    """All-empty grid used for rooms without candidates."""
    return empty_grid(rows, columns)


STRATEGIES: Dict[str, Strategy] = {
    COLUMN_BANDED: column_banded,
    SERPENTINE: serpentine,
    ADJACENCY_AVOIDING: adjacency_avoiding,
    SHUFFLED: shuffled,
}


def get_strategy(algorithm: str) -> Strategy:
    try:
        return STRATEGIES[algorithm]
    except KeyError:
        raise InvalidAlgorithm(algorithm) from None


def place_seats(room: Room, roster: Sequence[Candidate], algorithm: str,
                rng: Optional[random.Random] = None) -> PlacementResult:
    """Seat one room's roster with the selected algorithm.

    The caller guarantees ``len(roster) <= room.rows * room.columns``.
    """
    strategy = get_strategy(algorithm)
    if not roster:
        return row_fill(room.rows, room.columns)
    return strategy(room.rows, room.columns, GroupQueues.from_roster(roster), rng)
