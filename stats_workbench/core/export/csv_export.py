"""CSV export utilities."""

from __future__ import annotations

from io import BytesIO

import pandas as pd

from .result_log import ResultLog


def export_results_csv(log: ResultLog) -> BytesIO:
    """Export every table in the result log as one long CSV."""
    records = []
    for position, entry in enumerate(log, start=1):
        for table in entry.tables:
            for row in table.rows:
                for column, value in row.cells.items():
                    records.append({
                        "Entry": position,
                        "Analysis": entry.analysis,
                        "Table": table.title,
                        "Row": " / ".join(row.row_header),
                        "Column": column,
                        "Value": value,
                    })

    output = BytesIO()
    pd.DataFrame(records, columns=["Entry", "Analysis", "Table", "Row", "Column", "Value"]).to_csv(output, index=False)
    output.seek(0)
    return output


def export_dataset_csv(df: pd.DataFrame) -> BytesIO:
    """Export the working dataset, including saved result columns."""
    output = BytesIO()
    df.to_csv(output, index=False)
    output.seek(0)
    return output
