"""Variable definitions: measurement level, type and missing-value codes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pandas as pd


MEASURES = ["scale", "nominal", "ordinal", "date"]
NUMERIC_MEASURES = ("scale", "date")


@dataclass
class MissingRange:
    min: Any = None
    max: Any = None


@dataclass
class MissingSpec:
    discrete: list[Any] = field(default_factory=list)
    range: MissingRange | None = None


@dataclass
class Variable:
    column_index: int
    name: str
    label: str = ""
    measure: str = "scale"  # "scale", "nominal", "ordinal", "date"
    type: str = "NUMERIC"  # "NUMERIC", "STRING", "DATE"
    missing: MissingSpec | None = None

    @property
    def is_numeric_type(self) -> bool:
        """Whether missing-value codes are compared numerically."""
        return self.measure in NUMERIC_MEASURES

    @property
    def display_name(self) -> str:
        return self.label or self.name


_DATE_HINTS = [
    "date", "time", "period", "week", "month", "year", "ds", "timestamp",
]


def infer_variables(df: pd.DataFrame) -> list[Variable]:
    """Build default variable definitions from a dataframe's columns."""
    variables = []
    for i, col in enumerate(df.columns):
        norm = str(col).strip().lower().replace(" ", "_")
        series = df[col]

        if pd.api.types.is_datetime64_any_dtype(series) or norm in _DATE_HINTS:
            var_type, measure = "DATE", "date"
        elif pd.api.types.is_numeric_dtype(series):
            var_type = "NUMERIC"
            # Few distinct integer codes usually mean a categorical variable
            n_unique = series.nunique(dropna=True)
            is_integer = pd.api.types.is_integer_dtype(series)
            measure = "nominal" if is_integer and 0 < n_unique <= 5 else "scale"
        else:
            converted = pd.to_numeric(series, errors="coerce")
            if series.notna().sum() > 0 and converted.notna().sum() == series.notna().sum():
                var_type, measure = "NUMERIC", "scale"
            else:
                var_type, measure = "STRING", "nominal"

        variables.append(Variable(
            column_index=i,
            name=str(col),
            label="",
            measure=measure,
            type=var_type,
        ))
    return variables


def parse_missing_spec(discrete_text: str = "", range_min: str = "", range_max: str = "") -> MissingSpec | None:
    """Build a MissingSpec from the comma-separated codes and range bounds typed by a user."""
    codes = [c.strip() for c in discrete_text.split(",") if c.strip()]
    missing_range = None
    if range_min.strip() or range_max.strip():
        missing_range = MissingRange(min=range_min.strip(), max=range_max.strip())

    if not codes and missing_range is None:
        return None
    return MissingSpec(discrete=codes, range=missing_range)
