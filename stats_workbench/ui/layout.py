"""Reusable layout helpers for Streamlit pages."""

from __future__ import annotations

import streamlit as st
import pandas as pd

from core.export.tables import ResultTable, has_error_payload

from .session import STAGES, STAGE_LABELS, is_stage_complete


def page_header(title: str, description: str = ""):
    """Render a standardized page header."""
    st.title(title)
    if description:
        st.caption(description)
    st.divider()


def pipeline_progress_sidebar():
    """Show workflow progress in the sidebar."""
    with st.sidebar:
        st.subheader("Progress")
        for stage in STAGES:
            label = STAGE_LABELS.get(stage, stage)
            done = is_stage_complete(stage)
            icon = "+" if done else " "
            st.text(f"[{icon}] {label}")

        st.divider()
        if st.button("Reset Session", type="secondary"):
            from .session import reset_pipeline
            reset_pipeline()
            st.rerun()


def show_dataframe_summary(df: pd.DataFrame, title: str = "Data Summary"):
    """Show a compact dataframe summary in an expander."""
    with st.expander(title, expanded=False):
        col1, col2, col3 = st.columns(3)
        col1.metric("Rows", f"{len(df):,}")
        col2.metric("Columns", f"{len(df.columns):,}")
        col3.metric("Memory", f"{df.memory_usage(deep=True).sum() / 1024:.1f} KB")

        st.write("**First 5 Rows:**")
        st.dataframe(df.head(), use_container_width=True)


def show_result_table(table: ResultTable):
    """Render a result table, or its message when it is an error payload."""
    if has_error_payload(table):
        st.error(table.rows[0].cells.get("description", "Analysis failed."))
        return
    st.markdown(f"**{table.title}**")
    frame = table.to_frame()
    if not frame.empty:
        st.dataframe(frame, use_container_width=True)
    for note in table.footnotes:
        st.caption(note)
