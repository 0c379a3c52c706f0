"""Time label generation for series without a usable date column."""

from __future__ import annotations

import pandas as pd

# date type -> (pandas frequency, label format)
DATE_TYPES: dict[str, tuple[str, str]] = {
    "hourly": ("h", "%Y-%m-%d %H:00"),
    "daily": ("D", "%Y-%m-%d"),
    "weekly": ("W-MON", "%Y-%m-%d"),
    "monthly": ("MS", "%Y-%m"),
    "quarterly": ("QS", "%Y-%m"),
    "four-monthly": ("4MS", "%Y-%m"),
    "semi-annual": ("6MS", "%Y-%m"),
    "yearly": ("YS", "%Y"),
}


def generate_time_labels(date_type: str, start: str | pd.Timestamp | None, n: int) -> list[str]:
    """Build n consecutive time labels starting at `start`.

    "index" yields 1..n and ignores the start date.
    """
    if date_type == "index":
        return [str(i) for i in range(1, n + 1)]
    if date_type not in DATE_TYPES:
        raise ValueError(f"Unknown date type: {date_type}. Available: {['index', *DATE_TYPES]}")

    freq, fmt = DATE_TYPES[date_type]
    dates = pd.date_range(start=pd.Timestamp(start or "2000-01-01"), periods=n, freq=freq)
    return [d.strftime(fmt) for d in dates]


def labels_from_column(values: list) -> list[str]:
    """Render a date/time column's values as strings."""
    labels = []
    for value in values:
        if isinstance(value, pd.Timestamp):
            labels.append(value.strftime("%Y-%m-%d"))
        else:
            labels.append("" if value is None else str(value))
    return labels
