"""Command line interface for exam seating."""
from __future__ import annotations

import argparse
import csv
import logging
import random
import sys
from pathlib import Path
from typing import Sequence

from .csv_loader import load_all
from .errors import SeatingError
from .planner import assemble_plan
from .report import plan_report, seats_frame
from .strategies import STRATEGIES, SERPENTINE


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Exam seat assignment")
    parser.add_argument("--rooms", required=True, help="Path to rooms.csv")
    parser.add_argument("--candidates", required=True, help="Path to candidates.csv")
    parser.add_argument("--algorithm", choices=sorted(STRATEGIES), default=SERPENTINE,
                        help="Placement algorithm used for every room.")
    parser.add_argument("--exam-id", default="exam", help="Identifier stored on the plan.")
    parser.add_argument("--seed", type=int,
                        help="Seed for the shuffled algorithm.")
    parser.add_argument("--workers", type=int, default=1,
                        help="Place rooms on this many threads.")
    parser.add_argument("--out-seats", type=Path,
                        help="Write seats CSV: room,row,column,candidate_id,...")
    parser.add_argument("--out-report", type=Path,
                        help="Write per-room report CSV with stats and grades.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point used by ``python -m exam_seating.cli``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    rng = random.Random(args.seed) if args.seed is not None else None
    try:
        assignments = load_all(args.rooms, args.candidates)
        plan = assemble_plan(args.exam_id, assignments, args.algorithm, rng=rng, max_workers=args.workers)
    except SeatingError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"input error: {e}", file=sys.stderr)
        return 2

    candidates = [c for a in assignments for c in a.roster]
    frame = seats_frame(plan, candidates)

    # Print occupied seats
    for rec in frame[frame["candidate_id"] != ""].itertuples(index=False):
        print(f"{rec.candidate_id},{rec.room},{rec.row},{rec.column}")

    if args.out_seats:
        args.out_seats.parent.mkdir(parents=True, exist_ok=True)
        frame.to_csv(args.out_seats, index=False)

    graded = plan_report(plan, candidates)
    for s in graded:
        print(f"[REPORT] {s['room']} grade={s['grade']} occupied={s['occupied']} empty={s['empty']} "
              f"pairs={s['adjacent_pairs']} same={s['same_group_pairs']}")

    if args.out_report:
        args.out_report.parent.mkdir(parents=True, exist_ok=True)
        with args.out_report.open("w", newline="") as f:
            w = csv.DictWriter(f, fieldnames=[
                "room", "grade", "occupied", "empty", "fill_ratio",
                "adjacent_pairs", "same_group_pairs", "same_group_share",
            ])
            w.writeheader()
            for s in graded:
                w.writerow({
                    "room": s["room"],
                    "grade": s["grade"],
                    "occupied": s["occupied"],
                    "empty": s["empty"],
                    "fill_ratio": f"{s['fill_ratio']:.4f}",
                    "adjacent_pairs": s["adjacent_pairs"],
                    "same_group_pairs": s["same_group_pairs"],
                    "same_group_share": f"{s['same_group_share']:.4f}",
                })
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
