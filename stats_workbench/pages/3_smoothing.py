"""Page 3: Moving Average and Exponential Smoothing."""

import streamlit as st

from ui.layout import page_header, show_result_table
from ui.session import require_stage, set_stage, log_action, add_result, DATA_LOADED, SMOOTHING_DONE
from ui.widgets import variable_selector, smoothing_method_selector, parameter_inputs, period_selector, date_settings
from ui.charts import plot_chart_payload
from core.data.ingestion import append_result_column
from core.data.missing import column_values, series_values
from core.export.result_log import ResultEntry
from core.timeseries.analyze import run_smoothing
from core.timeseries.dates import labels_from_column
from core.timeseries.registry import get_method_spec

page_header(
    "Smoothing",
    "One-step-ahead smoothing with moving averages and exponential smoothing methods.",
)

if not require_stage(DATA_LOADED, "Please upload a dataset first."):
    st.stop()

dataset = st.session_state["dataset"]

# --- Configuration ---
st.subheader("1. Series")
col1, col2 = st.columns(2)
with col1:
    data_var = variable_selector(dataset.variables, "Data Variable", key="smooth_data_var")
with col2:
    time_choices = [None] + [v for v in dataset.variables if v is not data_var]
    time_var = st.selectbox(
        "Time Variable (optional)",
        time_choices,
        format_func=lambda v: "(generate labels)" if v is None else v.display_name,
        key="smooth_time_var",
    )

if data_var is None:
    st.stop()

st.subheader("2. Method")
method = smoothing_method_selector()
spec = get_method_spec(method)

periodicity = None
default_date_type = "index"
if spec.seasonal:
    period = period_selector()
    periodicity = period.periodicity
    default_date_type = period.date_type

params = parameter_inputs(method, periodicity)

date_type, start_year = "index", None
if time_var is None:
    date_type, start_year = date_settings(default_date_type)

if st.button("Run Smoothing", type="primary"):
    data = series_values(dataset.df, data_var)
    time = labels_from_column(column_values(dataset.df, time_var)) if time_var is not None else None

    with st.spinner("Smoothing..."):
        output = run_smoothing(
            data,
            data_var.display_name,
            params,
            periodicity,
            date_type,
            start_year,
            method,
            time=time,
        )
    st.session_state["smoothing_output"] = output
    st.session_state["smoothing_context"] = {"variable": data_var, "method": method}

    if output.status == "success":
        set_stage(SMOOTHING_DONE)
        log_action(f"Smoothing ({method} {params}) on '{data_var.name}'")
        add_result(ResultEntry(
            analysis="smoothing",
            title=f"{spec.label}: {data_var.display_name}",
            tables=output.tables,
            charts=[output.chart],
        ))
    else:
        log_action(f"Smoothing on '{data_var.name}' failed: {output.error}")

# --- Results ---
output = st.session_state.get("smoothing_output")
if output is None:
    st.stop()

st.subheader("3. Results")
if output.status == "error":
    show_result_table(output.description)
    st.stop()

show_result_table(output.description)
st.plotly_chart(plot_chart_payload(output.chart), use_container_width=True)
show_result_table(output.evaluation)

context = st.session_state["smoothing_context"]
if st.button("Save Smoothed Series to Dataset"):
    try:
        saved = append_result_column(dataset, context["variable"], context["method"], output.smoothed)
        log_action(f"Saved smoothing result as '{saved.name}'")
        st.success(f"Saved '{saved.name}'.")
    except ValueError as e:
        st.error(str(e))
