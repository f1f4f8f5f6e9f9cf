"""Assemble a multi-room seating plan for one exam."""
from __future__ import annotations

import logging
import random
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Sequence

from .errors import CapacityExceeded, PlacementInfeasible
from .models import Infeasible, PlanStatus, RoomAssignment, RoomPlan, SeatingPlan
from .strategies import PlacementResult, get_strategy, place_seats

LOG = logging.getLogger(__name__)


def check_capacity(assignments: Sequence[RoomAssignment]) -> None:
    """Raise ``CapacityExceeded`` unless every roster fits.

    The exam-wide total is checked against the sum of room capacities first,
    then each roster against its own grid.
    """
    supply = sum(a.room.capacity for a in assignments)
    demand = sum(len(a.roster) for a in assignments)
    if demand > supply:
        raise CapacityExceeded(demand, supply)
    for a in assignments:
        if len(a.roster) > a.room.seat_count:
            raise CapacityExceeded(len(a.roster), a.room.seat_count, room_id=a.room.id)


def _composition(assignment: RoomAssignment) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for cand in assignment.roster:
        counts[cand.group] = counts.get(cand.group, 0) + 1
    return counts


def assemble_plan(
    exam_id: str,
    assignments: Sequence[RoomAssignment],
    algorithm: str,
    rng: Optional[random.Random] = None,
    max_workers: int = 1,
) -> SeatingPlan:
    """Seat every room of an exam with one algorithm.

    Rooms are placed independently, on a thread pool when ``max_workers > 1``.
    When ``rng`` is given each room gets its own generator seeded from it in
    room order, so seeded results do not depend on ``max_workers``.
    The first room that comes back infeasible fails the whole plan.
    """
    get_strategy(algorithm)
    check_capacity(assignments)

    room_rngs: List[Optional[random.Random]] = [
        random.Random(rng.getrandbits(64)) if rng is not None else None for _ in assignments
    ]

    def run(idx: int) -> PlacementResult:
        a = assignments[idx]
        LOG.debug("Room %s: %d students %s", a.room.id, len(a.roster), _composition(a))
        return place_seats(a.room, a.roster, algorithm, room_rngs[idx])

    indices = range(len(assignments))
    if max_workers > 1 and len(assignments) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            results = list(pool.map(run, indices))
    else:
        results = [run(i) for i in indices]

    rooms: List[RoomPlan] = []
    for a, result in zip(assignments, results):
        if isinstance(result, Infeasible):
            LOG.warning("Room %s: %d student(s) left unseated by %s",
                        a.room.id, result.unassigned_count, algorithm)
            raise PlacementInfeasible(a.room.id, result.unassigned_count)
        rooms.append(
            RoomPlan(
                room_id=a.room.id,
                name=a.room.name,
                building=a.room.building,
                rows=a.room.rows,
                columns=a.room.columns,
                capacity=a.room.capacity,
                invigilators=list(a.invigilators),
                seats=result,
            )
        )

    return SeatingPlan(exam_id=exam_id, algorithm=algorithm, status=PlanStatus.DRAFT, rooms=rooms)
