import io
import pathlib

import pytest

from exam_seating import csv_loader
from exam_seating.errors import InvalidDimensions

DATA = pathlib.Path(__file__).parent / "data"


def test_load_all_sample_sheets():
    assignments = csv_loader.load_all(DATA / "rooms.csv", DATA / "candidates.csv")
    assert [a.room.id for a in assignments] == ["R101", "R102", "R201"]

    r101 = assignments[0]
    assert r101.room.name == "Room 101"
    assert (r101.room.rows, r101.room.columns, r101.room.capacity) == (2, 3, 6)
    assert r101.invigilators == ["alice@example.edu", "bob@example.edu"]
    assert [c.id for c in r101.roster] == ["S001", "S002", "S003", "S004", "S005"]
    assert r101.roster[2].group == "ECE"

    r201 = assignments[2]
    assert r201.room.capacity == 4
    assert r201.room.building == "Annex"
    assert r201.roster == []
    assert assignments[1].invigilators == []


def test_group_column_preferred_and_ids_kept_as_text():
    rooms = io.StringIO("id,rows,columns\nR1,1,2\n")
    cands = io.StringIO("id,name,group,department,room\n007,Bond,MI6,Ignored,R1\n008,Moneypenny,,Ignored,R1\n")
    (a,) = csv_loader.load_all(rooms, cands)
    assert [c.id for c in a.roster] == ["007", "008"]
    assert [c.group for c in a.roster] == ["MI6", ""]
    assert a.room.name == "R1"


def test_missing_columns():
    with pytest.raises(ValueError, match="missing columns: columns"):
        csv_loader.load_rooms(io.StringIO("id,rows\nR1,2\n"))
    with pytest.raises(ValueError, match="room"):
        csv_loader.load_candidates(io.StringIO("id,name\nS1,A\n"))


def test_unknown_room_reference():
    rooms = io.StringIO("id,rows,columns\nR1,1,2\n")
    cands = io.StringIO("id,room\nS1,R9\n")
    with pytest.raises(ValueError, match="Unknown room"):
        csv_loader.load_all(rooms, cands)


def test_duplicates_rejected():
    with pytest.raises(ValueError, match="duplicate room"):
        csv_loader.load_rooms(io.StringIO("id,rows,columns\nR1,1,2\nR1,2,2\n"))
    with pytest.raises(ValueError, match="duplicate candidate"):
        csv_loader.load_candidates(io.StringIO("id,room\nS1,R1\nS1,R1\n"))


def test_bad_numbers_and_dimensions():
    with pytest.raises(ValueError, match="whole number"):
        csv_loader.load_rooms(io.StringIO("id,rows,columns\nR1,two,2\n"))
    with pytest.raises(InvalidDimensions):
        csv_loader.load_rooms(io.StringIO("id,rows,columns\nR1,0,2\n"))


@pytest.mark.parametrize("value", ["2.9", "inf", "nan", "-inf"])
def test_non_whole_numbers_rejected(value):
    with pytest.raises(ValueError, match="whole number"):
        csv_loader.load_rooms(io.StringIO(f"id,rows,columns\nR1,{value},3\n"))


def test_integral_float_accepted():
    (a,) = csv_loader.load_rooms(io.StringIO("id,rows,columns\nR1,2.0,3\n"))
    assert a.room.rows == 2
