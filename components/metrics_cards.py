"""Reusable KPI metric card widgets."""

import streamlit as st

from config.defaults import COURSE_LABELS


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(label=m["label"], value=m["value"], delta=m.get("delta"))


def render_headcount_totals(totals: dict):
    """Per-course totals plus the grand total, as one metric row."""
    metrics = [{"label": COURSE_LABELS[c], "value": totals[c]} for c in COURSE_LABELS]
    metrics.append({"label": "Total", "value": totals["total"]})
    render_metric_row(metrics)


def render_alert_card(message: str, level: str = "warning"):
    """Render an alert card with appropriate styling."""
    if level == "error":
        st.error(message, icon="🔴")
    elif level == "warning":
        st.warning(message, icon="🟡")
    else:
        st.info(message, icon="🔵")
