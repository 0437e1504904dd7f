"""Global sidebar: run seating, reset, and the session memo."""

import streamlit as st
from dataclasses import dataclass

from data.session_store import get_state, set_state
from data.seating_state import reset_all, update_memo


@dataclass
class SidebarState:
    run_requested: bool


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    with st.sidebar:
        st.title("Classroom Seating")
        st.divider()

        run_requested = st.button("Assign seats", type="primary", use_container_width=True)

        state = get_state()
        if state.result is None:
            st.caption("No seating computed for the current mentors.")
        elif state.result.errors:
            st.warning(f"{len(state.result.errors)} mentor(s) could not be seated")
        else:
            st.success("All mentors seated")

        if st.button("Reset everything", use_container_width=True):
            set_state(reset_all())
            st.rerun()

        st.divider()
        memo = st.text_area("Memo", value=state.memo, key="sidebar_memo", height=150)
        if memo != state.memo:
            set_state(update_memo(get_state(), memo))

    return SidebarState(run_requested=run_requested)
