"""Session state management for the workbench."""

from __future__ import annotations

import datetime

import streamlit as st

from core.export.result_log import ResultEntry, ResultLog

# Workflow stages
DATA_LOADED = "data_loaded"
VARIABLES_DEFINED = "variables_defined"
DECOMPOSITION_DONE = "decomposition_done"
SMOOTHING_DONE = "smoothing_done"
RUNS_TEST_DONE = "runs_test_done"

STAGES = [DATA_LOADED, VARIABLES_DEFINED, DECOMPOSITION_DONE, SMOOTHING_DONE, RUNS_TEST_DONE]

STAGE_LABELS = {
    DATA_LOADED: "Data Uploaded",
    VARIABLES_DEFINED: "Variables Defined",
    DECOMPOSITION_DONE: "Decomposition Run",
    SMOOTHING_DONE: "Smoothing Run",
    RUNS_TEST_DONE: "Runs Test Run",
}


def init_session_state():
    """Initialize default session state values."""
    defaults = {
        "pipeline_stages": {s: False for s in STAGES},
        "dataset": None,
        "quality_report": None,
        "decomposition_output": None,
        "smoothing_output": None,
        "runs_test_output": None,
        "decomposition_mode": "additive",
        "trend_method": "linear",
        "period_option": "q",
        "smoothing_method": "ses",
        "date_type": "index",
        "start_year": 2000,
        "result_log": ResultLog(),
        "run_log": [],
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


def set_stage(stage: str, value: bool = True):
    """Mark a workflow stage as complete or incomplete."""
    if "pipeline_stages" not in st.session_state:
        st.session_state["pipeline_stages"] = {s: False for s in STAGES}
    st.session_state["pipeline_stages"][stage] = value


def is_stage_complete(stage: str) -> bool:
    if "pipeline_stages" not in st.session_state:
        return False
    return st.session_state["pipeline_stages"].get(stage, False)


def require_stage(stage: str, message: str | None = None) -> bool:
    """Check if a prerequisite stage is complete. Shows warning and returns False if not."""
    if not is_stage_complete(stage):
        label = STAGE_LABELS.get(stage, stage)
        msg = message or f"Please complete the '{label}' step first."
        st.warning(msg)
        return False
    return True


def reset_pipeline():
    """Reset all session state."""
    for key in list(st.session_state.keys()):
        del st.session_state[key]
    init_session_state()


def log_action(message: str):
    """Add an entry to the run log."""
    if "run_log" not in st.session_state:
        st.session_state["run_log"] = []
    st.session_state["run_log"].append(
        {"timestamp": datetime.datetime.now().isoformat(), "message": message}
    )


def add_result(entry: ResultEntry) -> bool:
    """Store an analysis output in the result log; error outputs are refused."""
    if "result_log" not in st.session_state:
        st.session_state["result_log"] = ResultLog()
    added = st.session_state["result_log"].add(entry)
    if added:
        log_action(f"Logged result: {entry.title}")
    return added
