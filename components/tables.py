"""Dataframe builders and display helpers for allocation results."""

import streamlit as st
import pandas as pd
from typing import List, Optional

from models.group import Group
from models.assignment import AllocationResult
from engine.topology import SeatTopology
from engine.aggregator import accounting_summary
from config.defaults import COURSE_LABELS


def assignments_df(result: AllocationResult, groups: List[Group], topology: SeatTopology) -> pd.DataFrame:
    labels = {g.group_id: g.label for g in groups}
    rows = [{
        "Seat": a.seat_id,
        "Mentor": labels.get(a.group_id, a.group_id),
        "Course": COURSE_LABELS[a.course.value],
        "Floor": "Yes" if topology.is_overflow(a.seat_id) else "",
    } for a in sorted(result.assignments, key=lambda a: topology.clockwise_index(a.seat_id))]
    return pd.DataFrame(rows, columns=["Seat", "Mentor", "Course", "Floor"])


def summary_df(result: AllocationResult, groups: List[Group], topology: SeatTopology) -> pd.DataFrame:
    rows = []
    for row in accounting_summary(groups, result, topology):
        rows.append({
            "Mentor": row["label"],
            "Requested": row["requested"].total,
            "Seated": row["seated"].total,
            "Floor": row["overflow"],
            "Unplaced": row["unmet"].total,
            "Status": row["status"],
        })
    return pd.DataFrame(rows)


def render_styled_table(
    df: pd.DataFrame,
    title: Optional[str] = None,
    height: Optional[int] = None,
    use_container_width: bool = True,
):
    """Render a styled, non-editable dataframe."""
    if title:
        st.subheader(title)
    st.dataframe(df, height=height, use_container_width=use_container_width)


def render_status_table(df: pd.DataFrame, status_column: str = "Status"):
    """Render a table with colour-coded placement status."""
    def color_status(val):
        if val == "error":
            return "background-color: #ffcccc; color: #cc0000; font-weight: bold"
        elif val == "overflow":
            return "background-color: #fff3cd; color: #856404; font-weight: bold"
        elif val == "seated":
            return "background-color: #d4edda; color: #155724"
        return ""

    if status_column in df.columns:
        styled = df.style.map(color_status, subset=[status_column])
        st.dataframe(styled, use_container_width=True)
    else:
        st.dataframe(df, use_container_width=True)
