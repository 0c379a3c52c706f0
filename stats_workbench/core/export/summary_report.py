"""Summary report builder."""

from __future__ import annotations

from .result_log import ResultLog


def build_text_report(data_summary: dict, log: ResultLog) -> str:
    """Build a full-text report of the dataset and every logged result."""
    lines = []

    lines.append("=" * 70)
    lines.append("STATISTICS WORKBENCH REPORT")
    lines.append("=" * 70)
    lines.append("")

    # Data summary
    lines.append("DATA OVERVIEW")
    lines.append("-" * 40)
    for key, val in data_summary.items():
        lines.append(f"  {key}: {val}")
    lines.append("")

    if len(log) == 0:
        lines.append("No results have been logged.")
        lines.append("")

    for position, entry in enumerate(log, start=1):
        lines.append(f"{position}. {entry.title.upper()} ({entry.timestamp})")
        lines.append("-" * 40)
        for table in entry.tables:
            lines.append(f"  {table.title}")
            frame = table.to_frame()
            if not frame.empty:
                for text_line in frame.fillna("").to_string().splitlines():
                    lines.append(f"    {text_line}")
            for note in table.footnotes:
                lines.append(f"    Note: {note}")
            lines.append("")

    lines.append("=" * 70)
    lines.append("End of Report")
    lines.append("=" * 70)

    return "\n".join(lines)
