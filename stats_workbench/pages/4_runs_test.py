"""Page 4: One-Sample Runs Test."""

import streamlit as st

from ui.layout import page_header, show_result_table
from ui.session import require_stage, set_stage, log_action, add_result, DATA_LOADED, RUNS_TEST_DONE
from ui.widgets import runs_test_options_panel
from ui.charts import plot_runs_sequence
from core.data.missing import column_values, valid_numeric_values
from core.export.result_log import ResultEntry
from core.timeseries.analyze import run_runs_test

page_header(
    "Runs Test",
    "Test whether the order of observations above and below a cut point is random.",
)

if not require_stage(DATA_LOADED, "Please upload a dataset first."):
    st.stop()

dataset = st.session_state["dataset"]
numeric_vars = [v for v in dataset.variables if v.is_numeric_type]

st.subheader("1. Test Variables")
selected = st.multiselect(
    "Test Variable List",
    numeric_vars,
    format_func=lambda v: v.display_name,
    key="runs_vars",
)

st.subheader("2. Options")
options = runs_test_options_panel()

if st.button("Run Test", type="primary", disabled=not selected or options is None):
    columns = [column_values(dataset.df, v) for v in selected]
    with st.spinner("Computing runs..."):
        analysis = run_runs_test(selected, columns, options)
    st.session_state["runs_test_output"] = analysis

    if analysis.status == "success":
        set_stage(RUNS_TEST_DONE)
        names = ", ".join(v.name for v in selected)
        log_action(f"Runs test on {names} ({', '.join(options.methods)})")
        add_result(ResultEntry(analysis="runs_test", title=f"Runs Test: {names}", tables=analysis.tables))
    else:
        log_action(f"Runs test failed: {analysis.error}")

# --- Results ---
analysis = st.session_state.get("runs_test_output")
if analysis is None:
    st.stop()

st.subheader("3. Results")
if analysis.descriptive is not None:
    show_result_table(analysis.descriptive)
for table in analysis.runs_tables:
    show_result_table(table)

if analysis.status == "success":
    with st.expander("Runs Sequence"):
        output = st.selectbox(
            "Variable",
            analysis.outputs,
            format_func=lambda o: o.variable.display_name,
        )
        method = st.selectbox("Cut Point", list(output.runs_test))
        statistic = output.runs_test[method]
        if statistic.test_value is None:
            st.info("Not enough valid cases to plot.")
        else:
            values = valid_numeric_values(column_values(dataset.df, output.variable), output.variable)
            st.plotly_chart(
                plot_runs_sequence(values, statistic.test_value, f"Runs Sequence: {output.variable.display_name}"),
                use_container_width=True,
            )
