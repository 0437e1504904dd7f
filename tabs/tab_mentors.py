"""Tab 2: Mentors — add, remove and edit mentor groups; roster upload."""

import streamlit as st

from data.session_store import get_state, set_state
from data.seating_state import add_group, remove_group, rename_group, update_count, set_groups
from data.loader import load_file, parse_groups, groups_to_df
from data.validator import validate_roster
from data.sample_data import generate_roster_df
from engine.aggregator import headcount_totals
from components.metrics_cards import render_headcount_totals
from models.course import CourseType
from config.defaults import COURSE_LABELS, MAX_GROUPS, MAX_HEADCOUNT


def _load_roster(df):
    """Validate and store an uploaded roster."""
    result = validate_roster(df)
    if not result.is_valid:
        for e in result.errors:
            st.error(e)
        return False
    for w in result.warnings:
        st.warning(w)

    groups = parse_groups(df)
    set_state(set_groups(get_state(), groups))
    st.success(f"Roster loaded: {len(groups)} mentors")
    return True


def _render_group_editor(group, can_remove: bool):
    with st.container(border=True):
        col_name, col_remove = st.columns([5, 1])
        label = col_name.text_input("Mentor name", value=group.label, key=f"label_{group.group_id}")
        if label != group.label:
            set_state(rename_group(get_state(), group.group_id, label))

        if col_remove.button("Remove", key=f"remove_{group.group_id}", disabled=not can_remove):
            set_state(remove_group(get_state(), group.group_id))
            st.rerun()

        cols = st.columns(len(CourseType))
        for col, course in zip(cols, CourseType):
            value = col.number_input(
                COURSE_LABELS[course.value],
                min_value=0,
                max_value=MAX_HEADCOUNT,
                step=1,
                value=group.counts.get(course),
                key=f"count_{group.group_id}_{course.value}",
            )
            if value != group.counts.get(course):
                set_state(update_count(get_state(), group.group_id, course, int(value)))


def render(sidebar_state):
    """Render the Mentors tab."""
    st.header("Mentors")

    state = get_state()
    render_headcount_totals(headcount_totals(state.groups))
    st.divider()

    for group in state.groups:
        _render_group_editor(group, can_remove=len(state.groups) > 1)

    if st.button("Add mentor", disabled=len(state.groups) >= MAX_GROUPS):
        set_state(add_group(get_state()))
        st.rerun()

    st.divider()
    st.subheader("Roster File")

    uploaded = st.file_uploader("Upload roster (CSV or XLSX)", type=["csv", "xlsx"])
    if uploaded is not None and st.button("Load roster"):
        try:
            df = load_file(uploaded)
        except ValueError as e:
            st.error(str(e))
        else:
            _load_roster(df)

    col1, col2 = st.columns(2)
    if col1.button("Load sample roster"):
        _load_roster(generate_roster_df())
    col2.download_button(
        "Download current roster",
        data=groups_to_df(get_state().groups).to_csv(index=False),
        file_name="roster.csv",
        mime="text/csv",
    )
