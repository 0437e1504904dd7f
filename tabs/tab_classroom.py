"""Tab 1: Classroom — seat map, overflow and errors for the last run."""

import streamlit as st

from data.session_store import get_state, set_state
from data.seating_state import manual_assign_seat
from engine.topology import DEFAULT_TOPOLOGY
from components.charts import classroom_map
from components.tables import assignments_df, summary_df, render_status_table, render_styled_table
from components.metrics_cards import render_alert_card
from models.course import CourseType
from models.seat import SeatFamily
from config.defaults import COURSE_LABELS


def _render_overflow(state, labels):
    overflow = state.result.overflow
    if not overflow:
        return
    contributors = ", ".join(
        f"{labels.get(c.group_id, c.group_id)}: {c.count}" for c in overflow.contributors
    )
    render_alert_card(
        f"Robot students on the floor: {overflow.total} "
        f"(floor seats: {', '.join(overflow.seat_ids) or 'none'}), "
        f"managed by {labels.get(overflow.owner_group_id, overflow.owner_group_id)} "
        f"({contributors})",
        level="warning",
    )


def _render_errors(state):
    for e in state.result.errors:
        c = e.unassigned_counts
        render_alert_card(
            f"**{e.group_label}**: {e.reason} "
            f"(Robot {c.robot}, Game {c.game}, Fab {c.fab}, Prime {c.prime})",
            level="error",
        )


def _render_manual_edit(state):
    with st.expander("Edit a seat by hand"):
        topology = DEFAULT_TOPOLOGY
        col1, col2, col3 = st.columns(3)
        seat_id = col1.selectbox("Seat", topology.seat_ids, key="manual_seat")
        options = [None] + [g.group_id for g in state.groups]
        labels = {g.group_id: g.label for g in state.groups}
        group_id = col2.selectbox(
            "Mentor", options, format_func=lambda gid: "— empty —" if gid is None else labels[gid],
            key="manual_group",
        )
        if topology.course_family(seat_id) is SeatFamily.FOCUSED:
            courses = [CourseType.ROBOT]
        else:
            courses = [c for c in CourseType if not c.is_focused]
        course = col3.selectbox(
            "Course", courses, format_func=lambda c: COURSE_LABELS[c.value], key="manual_course",
        )
        if st.button("Apply", key="manual_apply"):
            set_state(manual_assign_seat(get_state(), seat_id, group_id, course))
            st.rerun()


def render(sidebar_state):
    """Render the Classroom tab."""
    st.header("Classroom")

    state = get_state()
    labels = {g.group_id: g.label for g in state.groups}

    st.plotly_chart(
        classroom_map(DEFAULT_TOPOLOGY, state.groups, state.result),
        use_container_width=True,
    )

    if state.result is None:
        st.info("Press **Assign seats** in the sidebar to seat the current mentors.")
        return

    _render_overflow(state, labels)
    _render_errors(state)

    st.divider()
    render_status_table(summary_df(state.result, state.groups, DEFAULT_TOPOLOGY))

    col1, col2 = st.columns([3, 2])
    with col1:
        render_styled_table(
            assignments_df(state.result, state.groups, DEFAULT_TOPOLOGY),
            title="Seat Assignments",
            height=400,
        )
    with col2:
        st.subheader("How each mentor was placed")
        for group in state.groups:
            steps = state.result.explanations.get(group.group_id, [])
            if steps:
                with st.expander(group.label):
                    for step in steps:
                        st.write(step)

    _render_manual_edit(state)
