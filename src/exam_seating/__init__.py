"""Exam seating package."""
from .errors import (
    SeatingError,
    InvalidDimensions,
    InvalidAlgorithm,
    CapacityExceeded,
    PlacementInfeasible,
)
from .models import (
    Room,
    Candidate,
    Seat,
    Infeasible,
    RoomAssignment,
    RoomPlan,
    SeatingPlan,
    PlanStatus,
)
from .grid import empty_grid
from .roster import partition_roster, GroupQueues
from .strategies import place_seats, STRATEGIES
from .planner import assemble_plan
from .csv_loader import load_rooms, load_candidates, load_all

__all__ = [
    "SeatingError",
    "InvalidDimensions",
    "InvalidAlgorithm",
    "CapacityExceeded",
    "PlacementInfeasible",
    "Room",
    "Candidate",
    "Seat",
    "Infeasible",
    "RoomAssignment",
    "RoomPlan",
    "SeatingPlan",
    "PlanStatus",
    "empty_grid",
    "partition_roster",
    "GroupQueues",
    "place_seats",
    "STRATEGIES",
    "assemble_plan",
    "load_rooms",
    "load_candidates",
    "load_all",
]
