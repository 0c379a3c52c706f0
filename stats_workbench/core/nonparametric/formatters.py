"""Result tables for the runs test."""

from __future__ import annotations

from ..export.tables import ResultTable, format_number, format_p_value
from .runs_test import RunsTestOutput

_CUT_POINT_LABELS = {
    "median": "Median",
    "mean": "Mean",
    "mode": "Mode",
    "custom": "Custom",
}


def _insufficient_note(reason: str, variable_name: str) -> str:
    if reason == "empty":
        return f"There are no valid cases for {variable_name}. Runs Test cannot be performed."
    kind, _, method = reason.rpartition(" ")
    label = _CUT_POINT_LABELS.get(method, method).lower()
    if kind == "single":
        return f"All values of {variable_name} lie on one side of the {label} cut point. Runs Test cannot be performed."
    return f"The number of runs for {variable_name} has zero variance at the {label} cut point. Z cannot be computed."


def format_runs_test_table(outputs: list[RunsTestOutput], decimals: int = 3) -> list[ResultTable]:
    """One SPSS-style Runs Test table per variable, one column per cut point."""
    tables = []
    for output in outputs:
        methods = list(output.runs_test.keys())
        name = output.metadata.variable_label or output.metadata.variable_name
        table = ResultTable(
            title=f"Runs Test: {name}",
            column_headers=[""] + [_CUT_POINT_LABELS[m] for m in methods],
        )

        stats = output.runs_test
        table.add_row("Test Value", **{m: format_number(stats[m].test_value, decimals) for m in methods})
        table.add_row("Cases < Test Value", **{m: stats[m].cases_below for m in methods})
        table.add_row("Cases >= Test Value", **{m: stats[m].cases_above for m in methods})
        table.add_row("Total Cases", **{m: stats[m].total for m in methods})
        table.add_row("Number of Runs", **{m: stats[m].runs for m in methods})
        table.add_row("Z", **{m: format_number(stats[m].z, decimals) for m in methods})
        table.add_row("Asymp. Sig. (2-tailed)", **{m: format_p_value(stats[m].p_value) for m in methods})

        for reason in output.metadata.insufficient_type:
            table.footnotes.append(_insufficient_note(reason, output.metadata.variable_name))
        tables.append(table)
    return tables


def format_descriptive_statistics_table(outputs: list[RunsTestOutput], decimals: int = 3) -> ResultTable | None:
    """Descriptive statistics (and quartiles when computed) for every variable that has them."""
    rows = [o for o in outputs if o.descriptive_statistics is not None]
    if not rows:
        return None

    has_quartiles = any("Percentile25" in o.descriptive_statistics for o in rows)
    headers = ["", "N", "Mean", "Std. Deviation", "Minimum", "Maximum"]
    if has_quartiles:
        headers += ["25th", "50th (Median)", "75th"]

    table = ResultTable(title="Descriptive Statistics", column_headers=headers)
    for output in rows:
        stats = output.descriptive_statistics
        cells = {
            "N": stats["N"],
            "Mean": format_number(stats["Mean"], decimals),
            "Std. Deviation": format_number(stats["StdDev"], decimals),
            "Minimum": format_number(stats["Min"], decimals),
            "Maximum": format_number(stats["Max"], decimals),
        }
        if has_quartiles:
            cells["25th"] = format_number(stats.get("Percentile25"), decimals)
            cells["50th (Median)"] = format_number(stats.get("Percentile50"), decimals)
            cells["75th"] = format_number(stats.get("Percentile75"), decimals)
        table.add_row(output.metadata.variable_label or output.metadata.variable_name, **cells)
    return table
