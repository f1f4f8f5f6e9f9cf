from exam_seating.models import Candidate, RoomPlan, Seat, SeatingPlan
from exam_seating.report import compute_room_stats, grade_rooms, plan_report, room_matrix, seats_frame


def small_plan():
    # (1,1)=a X  (1,2)=b X
    # (2,1)=c Y  (2,2)=empty
    room = RoomPlan(
        room_id="R1", name="R1", building="", rows=2, columns=2, capacity=4,
        seats=[Seat.taken(1, 1, "a"), Seat.taken(1, 2, "b"), Seat.taken(2, 1, "c"), Seat.vacant(2, 2)],
    )
    cands = [Candidate("a", "Ann", "X"), Candidate("b", "Bo", "X"), Candidate("c", "Cy", "Y")]
    return SeatingPlan(exam_id="E1", algorithm="serpentine", rooms=[room]), cands


def test_compute_room_stats():
    plan, cands = small_plan()
    stats = compute_room_stats(plan.rooms[0], {c.id: c.group for c in cands})
    assert stats == {
        "occupied": 3,
        "empty": 1,
        "fill_ratio": 0.75,
        "adjacent_pairs": 2,
        "same_group_pairs": 1,
    }


def test_grades():
    graded = grade_rooms([
        {"adjacent_pairs": 4, "same_group_pairs": 0},
        {"adjacent_pairs": 10, "same_group_pairs": 1},
        {"adjacent_pairs": 4, "same_group_pairs": 1},
        {"adjacent_pairs": 4, "same_group_pairs": 2},
        {"adjacent_pairs": 4, "same_group_pairs": 3},
        {"adjacent_pairs": 0, "same_group_pairs": 0},
    ])
    assert [g["grade"] for g in graded] == ["A", "B", "C", "D", "F", "A"]


def test_plan_report_labels_rooms():
    plan, cands = small_plan()
    (row,) = plan_report(plan, cands)
    assert row["room"] == "R1"
    assert row["grade"] == "D"
    assert row["same_group_share"] == 0.5


def test_seats_frame():
    plan, cands = small_plan()
    df = seats_frame(plan, cands)
    assert list(df.columns) == ["room", "row", "column", "candidate_id", "name", "group", "is_empty"]
    assert len(df) == 4
    assert df.iloc[0]["name"] == "Ann"
    assert df.iloc[3]["candidate_id"] == ""
    assert bool(df.iloc[3]["is_empty"]) is True


def test_room_matrix():
    plan, _ = small_plan()
    m = room_matrix(plan.rooms[0])
    assert m.shape == (2, 2)
    assert m.loc[1, 2] == "b"
    assert m.loc[2, 2] == ""


def test_unknown_candidates_do_not_count_as_same_group():
    plan, _ = small_plan()
    stats = compute_room_stats(plan.rooms[0], {})
    assert stats["adjacent_pairs"] == 2
    assert stats["same_group_pairs"] == 0
