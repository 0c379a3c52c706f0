"""Page 1: Data Upload and Variable Definitions."""

import streamlit as st
import pandas as pd
from io import BytesIO

from ui.layout import page_header, show_dataframe_summary
from ui.session import set_stage, log_action, DATA_LOADED, VARIABLES_DEFINED
from core.data.ingestion import load_file
from core.data.missing import column_values
from core.data.validation import check_dataset, check_variable_quality
from core.data.variables import MEASURES, Variable, parse_missing_spec

page_header(
    "Data Upload & Variables",
    "Upload an Excel or CSV file, then review measurement levels, labels and missing-value codes.",
)

# --- Template Download ---
with st.expander("Download Template"):
    st.write("One column per variable, one row per case. Time series run down the rows in time order.")
    template_df = pd.DataFrame({
        "quarter": ["2020-Q1", "2020-Q2", "2020-Q3", "2020-Q4"],
        "sales": [120.0, 150.0, 95.0, 170.0],
        "score": [3, 5, 99, 4],
    })
    st.dataframe(template_df, use_container_width=True)

    buf = BytesIO()
    template_df.to_excel(buf, index=False, engine="openpyxl")
    buf.seek(0)
    st.download_button(
        "Download Template (.xlsx)",
        data=buf,
        file_name="workbench_template.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )

# --- File Upload ---
st.subheader("1. Upload Data File")
uploaded_file = st.file_uploader(
    "Choose an Excel (.xlsx) or CSV file",
    type=["xlsx", "xls", "csv"],
)

if uploaded_file is not None:
    current = st.session_state.get("dataset")
    if current is None or current.source_name != uploaded_file.name:
        try:
            dataset = load_file(uploaded_file, uploaded_file.name)
            dataset.source_name = uploaded_file.name
        except Exception as e:
            st.error(f"Error loading file: {e}")
            st.stop()

        report = check_dataset(dataset.df)
        if not report.is_valid:
            for issue in report.errors:
                st.error(f"[{issue.category}] {issue.message}")
            st.stop()

        st.session_state["dataset"] = dataset
        set_stage(DATA_LOADED)
        set_stage(VARIABLES_DEFINED, False)
        log_action(f"Uploaded file: {uploaded_file.name} ({dataset.shape[0]} rows, {dataset.shape[1]} cols)")
        for issue in report.warnings:
            st.warning(f"[{issue.category}] {issue.message}")

dataset = st.session_state.get("dataset")
if dataset is None:
    st.info("Please upload a file to get started.")
    st.stop()

show_dataframe_summary(dataset.df, f"Data Summary: {dataset.source_name}")

# --- Variable Definitions ---
st.subheader("2. Variable Definitions")
st.caption(
    "Missing codes are comma-separated. Scale and date variables compare codes numerically; "
    "the range marks every value between Low and High as missing."
)

editor_df = pd.DataFrame([
    {
        "Name": v.name,
        "Label": v.label,
        "Type": v.type,
        "Measure": v.measure,
        "Missing Codes": ", ".join(str(c) for c in v.missing.discrete) if v.missing else "",
        "Range Low": str(v.missing.range.min) if v.missing and v.missing.range else "",
        "Range High": str(v.missing.range.max) if v.missing and v.missing.range else "",
    }
    for v in dataset.variables
])

edited = st.data_editor(
    editor_df,
    use_container_width=True,
    hide_index=True,
    disabled=["Name", "Type"],
    column_config={
        "Measure": st.column_config.SelectboxColumn("Measure", options=MEASURES, required=True),
    },
    key="variable_editor",
)

if st.button("Apply Variable Definitions", type="primary"):
    variables = []
    for i, row in edited.iterrows():
        variables.append(Variable(
            column_index=dataset.variables[i].column_index,
            name=row["Name"],
            label=str(row["Label"] or ""),
            measure=row["Measure"],
            type=row["Type"],
            missing=parse_missing_spec(
                str(row["Missing Codes"] or ""),
                str(row["Range Low"] or ""),
                str(row["Range High"] or ""),
            ),
        ))
    dataset.variables = variables
    set_stage(VARIABLES_DEFINED)
    log_action(f"Variable definitions applied ({len(variables)} variables)")
    st.success("Variable definitions applied.")

# --- Variable Quality ---
st.subheader("3. Variable Quality")
rows = []
for variable in dataset.variables:
    values = column_values(dataset.df, variable)
    report = check_variable_quality(values, variable)
    rows.append({
        "Variable": variable.display_name,
        "Measure": variable.measure,
        "Cases": report.stats["n"],
        "Valid": report.stats["n_valid"],
        "Missing": report.stats["n_missing"],
        "Issues": "; ".join(i.message for i in report.issues if i.severity != "info"),
    })
st.session_state["quality_report"] = pd.DataFrame(rows)
st.dataframe(st.session_state["quality_report"], use_container_width=True, hide_index=True)
