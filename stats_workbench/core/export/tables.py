"""Display-ready result tables and chart payloads."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Sequence

import pandas as pd

from ..timeseries.metrics import METRIC_DISPLAY_NAMES

ERROR_TABLE_TITLE = "Error Table"


@dataclass
class TableRow:
    row_header: list[str]
    cells: dict[str, Any] = field(default_factory=dict)


@dataclass
class ResultTable:
    title: str
    column_headers: list[str]
    rows: list[TableRow] = field(default_factory=list)
    footnotes: list[str] = field(default_factory=list)

    def add_row(self, header: str | list[str], **cells):
        row_header = header if isinstance(header, list) else [header]
        self.rows.append(TableRow(row_header=row_header, cells=cells))

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "columnHeaders": [{"header": h} for h in self.column_headers],
            "rows": [{"rowHeader": r.row_header, **r.cells} for r in self.rows],
            **({"footnotes": list(self.footnotes)} if self.footnotes else {}),
        }

    def to_frame(self) -> pd.DataFrame:
        records = [r.cells for r in self.rows]
        index = [" / ".join(r.row_header) for r in self.rows]
        return pd.DataFrame(records, index=index)


@dataclass
class ChartPayload:
    chart_type: str
    title: str
    category: str
    subcategories: list[str]
    data: list[dict[str, Any]] = field(default_factory=list)
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "chartType": self.chart_type,
            "chartMetadata": {
                "axisInfo": {"category": self.category, "subCategory": self.subcategories},
                "description": self.description,
                "title": self.title,
            },
            "chartData": self.data,
        }

    def to_frame(self) -> pd.DataFrame:
        """Wide frame: one row per position, one column per subcategory, indexed by category label.

        Rows follow each subcategory's order of appearance, so repeated labels stay separate rows.
        """
        if not self.data:
            return pd.DataFrame()
        long = pd.DataFrame(self.data)
        long["position"] = long.groupby("subcategory", sort=False).cumcount()
        wide = long.pivot(index="position", columns="subcategory", values="value")
        wide = wide.reindex(columns=self.subcategories).astype(float)
        labels = long.drop_duplicates("position").set_index("position")["category"]
        wide.index = pd.Index(labels.reindex(wide.index).tolist(), name=self.category)
        wide.columns.name = None
        return wide


def format_number(value: float | None, precision: int = 3) -> str | None:
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return None
    return f"{value:.{precision}f}"


def format_p_value(value: float | None) -> str | None:
    if value is None:
        return None
    if 0 < value < 0.001:
        return "<.001"
    return f"{value:.3f}"


def error_table(message: str) -> ResultTable:
    table = ResultTable(title=ERROR_TABLE_TITLE, column_headers=["", "error"])
    table.add_row("Error Message", description=message)
    return table


def has_error_payload(table: ResultTable | None) -> bool:
    return table is not None and table.title == ERROR_TABLE_TITLE


def description_table(entries: dict[str, Any]) -> ResultTable:
    table = ResultTable(title="Description Table", column_headers=["", "description"])
    for key, value in entries.items():
        table.add_row(key, description=str(value))
    return table


def metric_table(title: str, metrics: dict[str, float]) -> ResultTable:
    table = ResultTable(title=title, column_headers=["", "value"])
    for name, value in metrics.items():
        table.add_row(name, value=format_number(value), description=METRIC_DISPLAY_NAMES.get(name, name))
    return table


def seasonal_index_table(indices: Sequence[float], period_label: str) -> ResultTable:
    period = len(indices)
    title = f"Seasonal Indices {period_label}".strip()
    table = ResultTable(title=title, column_headers=["", "value"])
    for i, value in enumerate(indices):
        table.add_row(f"period {i + 1} of {period}", value=format_number(float(value)))
    return table


def equation_table(title: str, equation: str, r_squared: float | None = None) -> ResultTable:
    table = ResultTable(title=title, column_headers=[equation])
    table.add_row("The Equation", trend=equation)
    if r_squared is not None:
        table.add_row("R Square", trend=format_number(r_squared))
    return table


def _clean(value: float | None, zero_as_null: bool) -> float | None:
    if value is None or math.isnan(value):
        return None
    if zero_as_null and value == 0:
        return None
    return float(value)


def line_chart(
    title: str,
    labels: Sequence[str],
    series: dict[str, Sequence[float]],
    zero_as_null: Sequence[str] = (),
) -> ChartPayload:
    """Line chart payload; several series make a multiple line chart."""
    names = list(series.keys())
    chart = ChartPayload(
        chart_type="Multiple Line Chart" if len(names) > 1 else "Line Chart",
        title=title,
        category="date",
        subcategories=names,
        description=title,
    )
    for i, label in enumerate(labels):
        for name in names:
            chart.data.append({
                "category": label,
                "subcategory": name,
                "value": _clean(series[name][i], name in zero_as_null),
            })
    return chart
