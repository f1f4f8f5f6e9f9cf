"""CSV loading utilities."""
from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import IO, Any, Dict, List, Sequence

import pandas as pd

from .models import Candidate, Room, RoomAssignment, parse_pipe_list

LOG = logging.getLogger(__name__)


def _read(path: Path | str | IO[Any]) -> pd.DataFrame:
    # Everything as text so ids like "007" survive and blanks stay "".
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    df.columns = [str(c).strip() for c in df.columns]
    return df


def _require_columns(df: pd.DataFrame, required: Sequence[str], label: str) -> None:
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise ValueError(f"{label}: missing columns: {', '.join(missing)}")


def _to_int(value: object, column: str, row_id: str) -> int:
    text = str(value).strip()
    try:
        number = float(text)
    except ValueError:
        number = math.nan
    # is_integer() is False for fractions, inf and nan alike.
    if not number.is_integer():
        raise ValueError(f"Room {row_id}: {column} must be a whole number, got {text!r}")
    return int(number)


def load_rooms(path: Path | str | IO[Any]) -> List[RoomAssignment]:
    """Load rooms with their invigilators. Rosters start out empty.

    ``capacity`` defaults to ``rows * columns`` when the column is missing or
    blank.
    """
    df = _read(path)
    _require_columns(df, ["id", "rows", "columns"], "rooms.csv")
    assignments: List[RoomAssignment] = []
    seen = set()
    for _, row in df.iterrows():
        room_id = str(row["id"]).strip()
        if not room_id:
            raise ValueError("rooms.csv: empty room id")
        if room_id in seen:
            raise ValueError(f"rooms.csv: duplicate room id {room_id}")
        seen.add(room_id)
        rows = _to_int(row["rows"], "rows", room_id)
        columns = _to_int(row["columns"], "columns", room_id)
        raw_capacity = str(row.get("capacity", "")).strip()
        capacity = _to_int(raw_capacity, "capacity", room_id) if raw_capacity else rows * columns
        room = Room(
            id=room_id,
            rows=rows,
            columns=columns,
            capacity=capacity,
            name=str(row.get("name", "")).strip() or room_id,
            building=str(row.get("building", "")).strip(),
        )
        assignments.append(RoomAssignment(room=room, invigilators=parse_pipe_list(row.get("invigilators", ""))))
    return assignments


def load_candidates(path: Path | str | IO[Any]) -> List[tuple[str, Candidate]]:
    """Load ``(room id, candidate)`` pairs in sheet order.

    The group comes from the ``group`` column, or ``department`` for sheets
    exported without one.
    """
    df = _read(path)
    _require_columns(df, ["id", "room"], "candidates.csv")
    group_col = "group" if "group" in df.columns else "department"
    pairs: List[tuple[str, Candidate]] = []
    seen = set()
    for _, row in df.iterrows():
        cand_id = str(row["id"]).strip()
        if cand_id in seen:
            raise ValueError(f"candidates.csv: duplicate candidate id {cand_id}")
        seen.add(cand_id)
        cand = Candidate(
            id=cand_id,
            name=str(row.get("name", "")).strip(),
            group=str(row.get(group_col, "")).strip(),
        )
        pairs.append((str(row["room"]).strip(), cand))
    return pairs


def load_all(rooms_path: Path | str | IO[Any], candidates_path: Path | str | IO[Any]) -> List[RoomAssignment]:
    """Convenience wrapper returning one ``RoomAssignment`` per room."""
    assignments = load_rooms(rooms_path)
    by_room: Dict[str, RoomAssignment] = {a.room.id: a for a in assignments}
    for room_id, cand in load_candidates(candidates_path):
        if room_id not in by_room:
            raise ValueError(f"Unknown room referenced by candidate {cand.id}: {room_id}")
        by_room[room_id].roster.append(cand)
    for a in assignments:
        LOG.debug("Loaded room %s with %d students", a.room.id, len(a.roster))
    return assignments
