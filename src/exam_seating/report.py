"""
Seating plan reporting.

Room grading is based on the share of orthogonally adjacent occupied seat
pairs whose two candidates belong to the same group:
    A: no same-group neighbours
    B: up to 10%
    C: up to 25%
    D: up to 50%
    F: anything worse
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Mapping

import pandas as pd

from .models import Candidate, RoomPlan, SeatingPlan

SEAT_COLUMNS = ["room", "row", "column", "candidate_id", "name", "group", "is_empty"]


def compute_room_stats(room: RoomPlan, groups: Mapping[str, str]) -> Dict[str, int | float]:
    """Count occupancy and neighbour pairs for one room.

    ``groups`` maps candidate id to group. Pairs are counted once, looking
    right and down from every occupied seat.
    """
    occupied = {(s.row, s.column): s.candidate_id for s in room.seats if not s.is_empty}
    pairs = same = 0
    for (r, c), cand in occupied.items():
        for key in ((r, c + 1), (r + 1, c)):
            other = occupied.get(key)
            if other is None:
                continue
            pairs += 1
            a, b = groups.get(cand), groups.get(other)
            if a is not None and b is not None and a == b:
                same += 1
    seat_count = len(room.seats)
    return {
        "occupied": len(occupied),
        "empty": seat_count - len(occupied),
        "fill_ratio": len(occupied) / seat_count if seat_count else 0.0,
        "adjacent_pairs": pairs,
        "same_group_pairs": same,
    }


def grade_rooms(stats: List[Dict[str, int | float]]) -> List[Dict[str, int | float | str]]:
    """Assign A to F based on the same-group neighbour share."""
    graded = []
    for s in stats:
        share = s["same_group_pairs"] / s["adjacent_pairs"] if s["adjacent_pairs"] else 0.0
        if share == 0:
            g = "A"
        elif share <= 0.10:
            g = "B"
        elif share <= 0.25:
            g = "C"
        elif share <= 0.50:
            g = "D"
        else:
            g = "F"
        out = dict(s)
        out["same_group_share"] = share
        out["grade"] = g
        graded.append(out)
    return graded


def plan_report(plan: SeatingPlan, candidates: Iterable[Candidate]) -> List[Dict[str, int | float | str]]:
    """Graded stats for every room of a plan, in plan order."""
    groups = {c.id: c.group for c in candidates}
    stats = []
    for room in plan.rooms:
        s = compute_room_stats(room, groups)
        s["room"] = room.room_id
        stats.append(s)
    return grade_rooms(stats)


def seats_frame(plan: SeatingPlan, candidates: Iterable[Candidate]) -> pd.DataFrame:
    """One row per seat across all rooms, row-major within each room."""
    by_id = {c.id: c for c in candidates}
    records = []
    for room in plan.rooms:
        for seat in room.seats:
            cand = by_id.get(seat.candidate_id)
            records.append({
                "room": room.room_id,
                "row": seat.row,
                "column": seat.column,
                "candidate_id": seat.candidate_id,
                "name": cand.name if cand else "",
                "group": cand.group if cand else "",
                "is_empty": seat.is_empty,
            })
    return pd.DataFrame.from_records(records, columns=SEAT_COLUMNS)


def room_matrix(room: RoomPlan) -> pd.DataFrame:
    """Candidate ids laid out as the room's grid, blanks for empty seats."""
    cells = [[room.seat_at(r, c).candidate_id for c in range(1, room.columns + 1)]
             for r in range(1, room.rows + 1)]
    return pd.DataFrame(
        cells,
        index=pd.Index(range(1, room.rows + 1), name="row"),
        columns=pd.Index(range(1, room.columns + 1), name="column"),
    )
