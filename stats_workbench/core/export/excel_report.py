"""Multi-sheet Excel workbook export."""

from __future__ import annotations

import re
from io import BytesIO

import pandas as pd

from .result_log import ResultLog


def _sheet_name(position: int, title: str) -> str:
    cleaned = re.sub(r"[\[\]:*?/\\]", " ", title)
    cleaned = re.sub(r"\s+", " ", cleaned)
    return f"{position} {cleaned}"[:31].rstrip()


def create_results_workbook(
    log: ResultLog,
    dataset_df: pd.DataFrame | None = None,
    summary_text: str = "",
) -> BytesIO:
    """Create a workbook with one sheet per logged result, plus dataset and summary sheets."""
    output = BytesIO()

    with pd.ExcelWriter(output, engine="xlsxwriter") as writer:
        workbook = writer.book

        # Header format
        header_fmt = workbook.add_format({
            "bold": True,
            "bg_color": "#1f77b4",
            "font_color": "#ffffff",
            "border": 1,
        })
        title_fmt = workbook.add_format({"bold": True, "font_size": 12})
        note_fmt = workbook.add_format({"italic": True, "font_color": "#666666"})

        # One sheet per result entry, tables stacked vertically
        for position, entry in enumerate(log, start=1):
            ws = workbook.add_worksheet(_sheet_name(position, entry.title))
            writer.sheets[ws.name] = ws
            ws.set_column(0, 0, 32)
            ws.set_column(1, 12, 16)

            row = 0
            for table in entry.tables:
                ws.write(row, 0, table.title, title_fmt)
                row += 1
                columns = list(dict.fromkeys(k for r in table.rows for k in r.cells))
                ws.write(row, 0, "", header_fmt)
                for i, col in enumerate(columns):
                    ws.write(row, i + 1, col, header_fmt)
                row += 1
                for table_row in table.rows:
                    ws.write(row, 0, " / ".join(table_row.row_header))
                    for i, col in enumerate(columns):
                        value = table_row.cells.get(col)
                        if value is not None:
                            ws.write(row, i + 1, value)
                    row += 1
                for note in table.footnotes:
                    ws.write(row, 0, note, note_fmt)
                    row += 1
                row += 1

        # Dataset with saved result columns
        if dataset_df is not None and len(dataset_df) > 0:
            dataset_df.to_excel(writer, sheet_name="Dataset", index=False)
            ws = writer.sheets["Dataset"]
            for i, col in enumerate(dataset_df.columns):
                ws.write(0, i, str(col), header_fmt)
                ws.set_column(i, i, max(15, len(str(col)) + 5))

        # Summary
        if summary_text:
            ws = workbook.add_worksheet("Summary")
            writer.sheets["Summary"] = ws
            text_fmt = workbook.add_format({"font_name": "Consolas"})
            ws.set_column(0, 0, 100)
            ws.write(0, 0, "Statistics Workbench Report", workbook.add_format({"bold": True, "font_size": 14}))
            for i, line in enumerate(summary_text.splitlines()):
                ws.write(i + 2, 0, line, text_fmt)

        if not workbook.worksheets():
            workbook.add_worksheet("Results").write(0, 0, "No results have been logged.")

    output.seek(0)
    return output
