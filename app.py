"""Classroom Seating Planner — Streamlit entry point."""

import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.sidebar import render_sidebar
from config.logging_config import setup_logging
from data.session_store import initialize_session_state, get_state, set_state
from data.seating_state import set_result
from engine.allocator import assign_seats
from tabs import tab_classroom, tab_mentors


def main():
    st.set_page_config(
        page_title="Classroom Seating",
        page_icon="🪑",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    setup_logging()
    initialize_session_state()
    sidebar_state = render_sidebar()

    if sidebar_state.run_requested:
        state = get_state()
        set_state(set_result(state, assign_seats(state.groups)))

    tab1, tab2 = st.tabs([
        "🪑 Classroom",
        "👥 Mentors",
    ])

    with tab1:
        tab_classroom.render(sidebar_state)
    with tab2:
        tab_mentors.render(sidebar_state)


if __name__ == "__main__":
    main()
