"""Typed wrapper around st.session_state for the seating state."""

import streamlit as st

from data.seating_state import SeatingState, initial_state


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    if "seating" not in st.session_state:
        st.session_state["seating"] = initial_state()


def get_state() -> SeatingState:
    return st.session_state.get("seating") or initial_state()


def set_state(state: SeatingState):
    st.session_state["seating"] = state
