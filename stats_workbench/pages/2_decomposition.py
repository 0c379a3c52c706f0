"""Page 2: Classical Time Series Decomposition."""

import streamlit as st

from ui.layout import page_header, show_result_table
from ui.session import require_stage, set_stage, log_action, add_result, DATA_LOADED, DECOMPOSITION_DONE
from ui.widgets import variable_selector, period_selector, date_settings
from ui.charts import plot_chart_payload, plot_decomposition, plot_seasonal_indices
from core.data.ingestion import append_result_column
from core.data.missing import column_values, series_values
from core.export.result_log import ResultEntry
from core.timeseries.analyze import run_decomposition
from core.timeseries.dates import generate_time_labels, labels_from_column
from core.timeseries.registry import DECOMPOSITION_MODE_LABELS, TREND_METHOD_LABELS

page_header(
    "Decomposition",
    "Split a series into trend, seasonal and irregular components with classical decomposition.",
)

if not require_stage(DATA_LOADED, "Please upload a dataset first."):
    st.stop()

dataset = st.session_state["dataset"]

# --- Configuration ---
st.subheader("1. Series")
col1, col2 = st.columns(2)
with col1:
    data_var = variable_selector(dataset.variables, "Data Variable", key="decomp_data_var")
with col2:
    time_choices = [None] + [v for v in dataset.variables if v is not data_var]
    time_var = st.selectbox(
        "Time Variable (optional)",
        time_choices,
        format_func=lambda v: "(generate labels)" if v is None else v.display_name,
        key="decomp_time_var",
    )

if data_var is None:
    st.stop()

st.subheader("2. Method")
col1, col2 = st.columns(2)
with col1:
    mode = st.radio(
        "Decomposition Method",
        list(DECOMPOSITION_MODE_LABELS),
        format_func=DECOMPOSITION_MODE_LABELS.get,
        key="decomposition_mode",
    )
with col2:
    trend_method = st.selectbox(
        "Trend Equation",
        list(TREND_METHOD_LABELS),
        format_func=TREND_METHOD_LABELS.get,
        disabled=mode == "additive",
        help="Additive decomposition always fits a linear trend.",
        key="trend_method",
    )

period = period_selector()
if time_var is None:
    date_type, start_year = date_settings(period.date_type)

if st.button("Run Decomposition", type="primary"):
    data = series_values(dataset.df, data_var)
    if time_var is not None:
        time = labels_from_column(column_values(dataset.df, time_var))
        time_header = time_var.display_name
    else:
        start = None if date_type == "index" else f"{start_year}-01-01"
        time = generate_time_labels(date_type, start, len(data))
        time_header = date_type

    with st.spinner("Decomposing..."):
        output = run_decomposition(
            data,
            data_var.display_name,
            time,
            time_header,
            mode,
            trend_method,
            period.periodicity,
            period.label,
        )
    st.session_state["decomposition_output"] = output
    st.session_state["decomposition_context"] = {"variable": data_var, "labels": time, "mode": mode}

    if output.status == "success":
        set_stage(DECOMPOSITION_DONE)
        log_action(f"Decomposition ({mode}, period {period.periodicity}) on '{data_var.name}'")
        add_result(ResultEntry(
            analysis="decomposition",
            title=f"{DECOMPOSITION_MODE_LABELS[mode]}: {data_var.display_name}",
            tables=output.tables,
            charts=list(output.charts.values()),
        ))
    else:
        log_action(f"Decomposition on '{data_var.name}' failed: {output.error}")

# --- Results ---
output = st.session_state.get("decomposition_output")
if output is None:
    st.stop()

st.subheader("3. Results")
if output.status == "error":
    show_result_table(output.description)
    st.stop()

context = st.session_state["decomposition_context"]
labels = context["labels"]

show_result_table(output.description)

tab1, tab2, tab3 = st.tabs(["Forecast", "Components", "Seasonal Indices"])
with tab1:
    st.plotly_chart(plot_chart_payload(output.charts["forecasting"]), use_container_width=True)
    show_result_table(output.evaluation)
    show_result_table(output.equation)
with tab2:
    observed = [row["value"] for row in output.charts["data"].data]
    st.plotly_chart(
        plot_decomposition(labels, observed, output.trend, output.seasonal, output.irregular),
        use_container_width=True,
    )
with tab3:
    indices = [float(r.cells["value"]) for r in output.seasonal_indices.rows]
    st.plotly_chart(plot_seasonal_indices(indices, context["mode"]), use_container_width=True)
    show_result_table(output.seasonal_indices)

# --- Save to dataset ---
with st.expander("Save Components to Dataset"):
    components = st.multiselect(
        "Components",
        ["forecast", "trend", "seasonal", "irregular", "centered"],
        default=["forecast"],
    )
    if st.button("Save"):
        for name in components:
            try:
                saved = append_result_column(dataset, context["variable"], name, getattr(output, name))
                log_action(f"Saved decomposition {name} as '{saved.name}'")
                st.success(f"Saved '{saved.name}'.")
            except ValueError as e:
                st.error(str(e))
