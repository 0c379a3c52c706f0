"""Statistics Workbench - Main Entry Point.

Run with: streamlit run app.py
"""

import streamlit as st

st.set_page_config(
    page_title="Statistics Workbench",
    page_icon="bar_chart",
    layout="wide",
    initial_sidebar_state="expanded",
)

from ui.session import init_session_state
from ui.layout import pipeline_progress_sidebar

# Initialize session state
init_session_state()

# Define pages
pages = {
    "Data": [
        st.Page("pages/1_data_upload.py", title="Upload & Variables", icon=":material/upload_file:"),
    ],
    "Time Series": [
        st.Page("pages/2_decomposition.py", title="Decomposition", icon=":material/stacked_line_chart:"),
        st.Page("pages/3_smoothing.py", title="Smoothing", icon=":material/trending_up:"),
    ],
    "Nonparametric": [
        st.Page("pages/4_runs_test.py", title="Runs Test", icon=":material/fact_check:"),
    ],
    "Results": [
        st.Page("pages/5_results.py", title="Results & Export", icon=":material/download:"),
    ],
}

# Navigation
pg = st.navigation(pages)

# Sidebar: workflow progress
pipeline_progress_sidebar()

# Sidebar: app info
with st.sidebar:
    st.divider()
    st.caption("Statistics Workbench v1.0")
    st.caption("Upload a dataset, define variables, then run decomposition, smoothing or the runs test.")

# Run the selected page
pg.run()
