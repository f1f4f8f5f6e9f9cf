"""Streamlit UI for exam seating with CSV previews and validations."""
from __future__ import annotations

# Add src to sys.path so exam_seating can be found
import sys
import os
import io
import random
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

import pandas as pd
import streamlit as st

from exam_seating.csv_loader import load_all
from exam_seating.errors import PlacementInfeasible
from exam_seating.planner import assemble_plan
from exam_seating.report import plan_report, room_matrix, seats_frame
from exam_seating.strategies import STRATEGIES, SERPENTINE, SHUFFLED

# -----------------------------
# Helpers
# -----------------------------

def uploadedfile_to_csvio(uploaded_file) -> io.StringIO:
    """Read a Streamlit UploadedFile into a StringIO positioned at start."""
    uploaded_file.seek(0)
    return io.StringIO(uploaded_file.read().decode("utf-8"))

def validate_columns(df: pd.DataFrame, required: list[str], file_label: str) -> bool:
    """Check required columns and show an error if any are missing."""
    missing = [col for col in required if col not in df.columns]
    if missing:
        st.error(f"Error in {file_label}: missing columns: {', '.join(missing)}")
        return False
    return True

# -----------------------------
# Sidebar options
# -----------------------------

st.sidebar.header("Seating Options")
algorithms = sorted(STRATEGIES)
algorithm = st.sidebar.selectbox(
    "Algorithm",
    algorithms,
    index=algorithms.index(SERPENTINE),
    help="Placement algorithm applied to every room.",
)
exam_id = st.sidebar.text_input("Exam id", value="exam")
seed = st.sidebar.number_input(
    "Seed",
    min_value=0,
    value=0,
    help="Random seed, only used by the shuffled algorithm.",
)

# -----------------------------
# Main UI and previews
# -----------------------------

st.title("Exam Seating")

_rooms_file = st.file_uploader("Rooms CSV", type="csv")
_candidates_file = st.file_uploader("Candidates CSV", type="csv")

if _rooms_file is not None:
    rooms_df = pd.read_csv(_rooms_file, dtype=str, keep_default_na=False)
    st.subheader("Rooms preview")
    st.dataframe(rooms_df, use_container_width=True)
    validate_columns(rooms_df, ["id", "rows", "columns"], "rooms.csv")

if _candidates_file is not None:
    candidates_df = pd.read_csv(_candidates_file, dtype=str, keep_default_na=False)
    st.subheader("Candidates preview")
    st.dataframe(candidates_df, use_container_width=True)
    validate_columns(candidates_df, ["id", "room"], "candidates.csv")

# Keep the button disabled until both files are provided
run_disabled = not (_rooms_file and _candidates_file)
run_clicked = st.button("Build seating plan", disabled=run_disabled, key="run_planner_button")

# -----------------------------
# Plan
# -----------------------------

if run_clicked and not run_disabled:
    try:
        assignments = load_all(uploadedfile_to_csvio(_rooms_file), uploadedfile_to_csvio(_candidates_file))
        rng = random.Random(int(seed)) if algorithm == SHUFFLED else None
        plan = assemble_plan(exam_id, assignments, algorithm, rng=rng)

        candidates = [c for a in assignments for c in a.roster]
        report_df = pd.DataFrame(plan_report(plan, candidates))
        st.subheader("Rooms")
        st.dataframe(report_df, use_container_width=True)

        for room in plan.rooms:
            st.subheader(f"{room.name} ({room.rows} x {room.columns})")
            if room.invigilators:
                st.caption("Invigilators: " + ", ".join(room.invigilators))
            st.dataframe(room_matrix(room), use_container_width=True)

        # Download
        csv_bytes = seats_frame(plan, candidates).to_csv(index=False).encode("utf-8")
        st.download_button(
            "Download seats as CSV",
            csv_bytes,
            file_name=f"{exam_id}_seats.csv",
        )

    except PlacementInfeasible as e:
        st.warning(f"{e}. Try the serpentine or column-banded algorithm.")
        st.stop()
    except ValueError as e:
        st.error(f"Input validation error: {e}")
        st.stop()
    except Exception as e:
        st.exception(e)
        st.stop()
