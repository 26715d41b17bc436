"""Streamlit demo UI for mindful-tasks."""

from __future__ import annotations

import tempfile
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from mindful_tasks.adapters import csv_adapter, json_adapter
from mindful_tasks.analyzer import analyze_productivity, productivity_summary
from mindful_tasks.explain import explain_ranking

MOODS = ["neutral", "happy", "energetic", "excited", "stressed", "sad", "angry"]
ENERGY_LEVELS = ["low", "medium", "high"]


def _adapter_for(file_path: str):
    suffix = Path(file_path).suffix.lower()
    if suffix == ".csv":
        return csv_adapter
    if suffix == ".json":
        return json_adapter
    raise ValueError("Unsupported file type. Please use .csv or .json")


def _save_uploaded(uploaded_file) -> str:
    suffix = Path(uploaded_file.name).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        return handle.name


def run_engine(
    tasks: list,
    completions: list,
    mood: Optional[str],
    energy_level: Optional[str],
    now: Optional[datetime] = None,
) -> dict[str, Any]:
    """Run prioritization and analysis and return a UI-friendly payload."""

    ranking = explain_ranking(tasks, mood=mood, energy_level=energy_level, now=now)
    rows = [
        {
            "rank": index,
            "title": item["title"],
            "score": round(item["score"], 3),
            "dominant_factor": item["dominant_factor"] or "completed",
        }
        for index, item in enumerate(ranking, start=1)
    ]
    return {
        "ranking": rows,
        "analysis": productivity_summary(analyze_productivity(completions)),
    }


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="Mindful Tasks Demo", layout="wide")
    st.title("Mindful Tasks — Streamlit Demo")

    with st.sidebar:
        st.header("Controls")
        tasks_file = st.file_uploader("Upload tasks", type=["csv", "json"])
        completions_file = st.file_uploader("Upload completions", type=["csv", "json"])
        use_demo = st.checkbox("Load demo dataset", value=True)
        mood = st.selectbox("Current mood", options=MOODS, index=0)
        energy = st.selectbox("Current energy", options=ENERGY_LEVELS, index=1)
        run = st.button("Run engine", type="primary")

    if not run:
        st.info("Configure inputs in the sidebar and click **Run engine**.")
        return

    try:
        if use_demo:
            tasks = csv_adapter.parse_tasks("examples/sample_tasks.csv")
            completions = csv_adapter.parse_completions("examples/sample_completions.csv")
        elif tasks_file is not None and completions_file is not None:
            tasks_path = _save_uploaded(tasks_file)
            completions_path = _save_uploaded(completions_file)
            tasks = _adapter_for(tasks_path).parse_tasks(tasks_path)
            completions = _adapter_for(completions_path).parse_completions(completions_path)
        else:
            st.error("Please upload both files or enable 'Load demo dataset'.")
            return

        result = run_engine(tasks, completions, mood, energy)

        st.subheader("A) Prioritized Tasks")
        st.table(result["ranking"])

        analysis = result["analysis"]
        st.subheader("B) Productivity Patterns")
        c1, c2 = st.columns(2)
        c1.metric("Best time of day", analysis["best_time_of_day"])
        c2.metric("Best day", analysis["best_day_of_week"])

        t1, t2 = st.columns(2)
        t1.bar_chart(analysis["time_of_day"], x="bucket", y="average")
        t2.bar_chart(analysis["day_of_week"], x="bucket", y="average")

    except ValueError as exc:
        st.error(f"Input error: {exc}")
    except Exception:
        st.error("Something went wrong while running the demo. Please verify the input format.")


if __name__ == "__main__":
    main()
