import pytest

from exam_seating.models import Candidate
from exam_seating.roster import GroupQueues, partition_roster


def _roster():
    return [
        Candidate("A1", "A1", "Y"),
        Candidate("A2", "A2", "X"),
        Candidate("A3", "A3", "Y"),
        Candidate("A4", "A4", ""),
        Candidate("A5", "A5", "X"),
    ]


def test_partition_keeps_first_seen_order_and_fifo():
    groups, order = partition_roster(_roster())
    assert order == ["Y", "X", ""]
    assert [c.id for c in groups["Y"]] == ["A1", "A3"]
    assert [c.id for c in groups["X"]] == ["A2", "A5"]
    assert [c.id for c in groups[""]] == ["A4"]


def test_partition_empty():
    assert partition_roster([]) == ({}, [])


def test_queues_do_not_mutate_partition():
    groups, order = partition_roster(_roster())
    queues = GroupQueues(groups, order)
    assert queues.pop("Y").id == "A1"
    assert queues.pop("Y").id == "A3"
    assert not queues.has_next("Y")
    assert [c.id for c in groups["Y"]] == ["A1", "A3"]
    assert queues.active() == ["X", ""]
    assert queues.total_remaining() == 3

    fresh = GroupQueues(groups, order)
    assert fresh.remaining("Y") == 2


def test_pop_exhausted_group_raises():
    queues = GroupQueues.from_roster([Candidate("A1", group="X")])
    queues.pop("X")
    with pytest.raises(IndexError):
        queues.pop("X")
    assert queues.remaining("unknown") == 0
