"""Page 5: Result Log and Export."""

import streamlit as st
import pandas as pd
from datetime import datetime

from ui.layout import page_header, show_result_table
from ui.charts import plot_chart_payload
from ui.session import log_action
from core.export.excel_report import create_results_workbook
from core.export.csv_export import export_results_csv, export_dataset_csv
from core.export.summary_report import build_text_report

page_header(
    "Results & Export",
    "Review logged results and download them as CSV, Excel or a text report.",
)

result_log = st.session_state["result_log"]
dataset = st.session_state.get("dataset")

# --- Result Log ---
st.subheader("Output")
if len(result_log) == 0:
    st.info("No results logged yet. Run an analysis to add it here.")

for position, entry in enumerate(result_log.entries):
    with st.expander(f"{position + 1}. {entry.title} ({entry.timestamp})", expanded=position == len(result_log) - 1):
        for table in entry.tables:
            show_result_table(table)
        for chart in entry.charts:
            st.plotly_chart(plot_chart_payload(chart, height=350), use_container_width=True, key=f"chart_{position}_{chart.title}")
        if st.button("Remove", key=f"remove_{position}"):
            result_log.remove(position)
            log_action(f"Removed result: {entry.title}")
            st.rerun()

if len(result_log) > 0 and st.button("Clear All Results", type="secondary"):
    result_log.clear()
    log_action("Result log cleared")
    st.rerun()

# --- Export Options ---
st.subheader("Download Options")

data_summary = {}
if dataset is not None:
    data_summary = {
        "Source": dataset.source_name,
        "Cases": dataset.shape[0],
        "Variables": len(dataset.variables),
    }
text_report = build_text_report(data_summary, result_log)

col1, col2, col3 = st.columns(3)

# CSV Export
with col1:
    st.write("**CSV Export**")
    st.download_button(
        "Download Results (CSV)",
        data=export_results_csv(result_log),
        file_name=f"results_{datetime.now().strftime('%Y%m%d')}.csv",
        mime="text/csv",
    )
    if dataset is not None:
        st.download_button(
            "Download Dataset (CSV)",
            data=export_dataset_csv(dataset.df),
            file_name=f"dataset_{datetime.now().strftime('%Y%m%d')}.csv",
            mime="text/csv",
        )

# Excel Export
with col2:
    st.write("**Excel Report**")
    excel_data = create_results_workbook(
        result_log,
        dataset_df=dataset.df if dataset is not None else None,
        summary_text=text_report,
    )
    st.download_button(
        "Download Full Report (Excel)",
        data=excel_data,
        file_name=f"results_report_{datetime.now().strftime('%Y%m%d')}.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )

# Text Report
with col3:
    st.write("**Text Summary**")
    st.download_button(
        "Download Summary (Text)",
        data=text_report,
        file_name=f"results_summary_{datetime.now().strftime('%Y%m%d')}.txt",
        mime="text/plain",
    )

with st.expander("Report Preview"):
    st.text(text_report)

# --- Audit Trail ---
st.subheader("Run Log")
run_log = st.session_state.get("run_log", [])
if run_log:
    st.dataframe(pd.DataFrame(run_log), use_container_width=True)
else:
    st.info("No actions logged yet.")
