"""Missing-value classification and valid-value extraction."""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Iterable

import pandas as pd

from .variables import MissingSpec, Variable


def _to_float(value: Any) -> float | None:
    """Parse a value as float; None when it does not parse or is NaN."""
    if isinstance(value, bool):
        return None
    if isinstance(value, Real):
        result = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            result = float(text)
        except ValueError:
            return None
    else:
        return None
    return None if math.isnan(result) else result


def _is_null(value: Any) -> bool:
    if value is None or value is pd.NA or value is pd.NaT:
        return True
    # pandas reads empty cells as NaN
    return isinstance(value, float) and math.isnan(value)


def is_numeric(value: Any) -> bool:
    """True for real numbers (not NaN) and non-empty strings that parse as floats."""
    if isinstance(value, bool):
        return False
    if isinstance(value, Real):
        return not math.isnan(float(value))
    if isinstance(value, str):
        return _to_float(value) is not None
    return False


def _as_text(value: Any) -> str:
    """String form of a cell; integral floats drop the trailing .0 pandas gives them."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_real(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def is_missing(raw_value: Any, missing_spec: MissingSpec | None, is_numeric_type: bool) -> bool:
    """Decide whether a raw cell value is excluded from analysis."""
    if _is_null(raw_value):
        return True
    if is_numeric_type and raw_value == "":
        return True
    if missing_spec is None:
        return False

    if missing_spec.discrete:
        value_num = _to_float(raw_value) if is_numeric_type else None
        for code in missing_spec.discrete:
            if value_num is not None:
                code_num = _to_float(code)
                if code_num is not None and code_num == value_num:
                    return True
            if not is_numeric_type and _is_real(raw_value) and _is_real(code) and raw_value == code:
                return True
            if _as_text(raw_value) == _as_text(code):
                return True

    if is_numeric_type and missing_spec.range is not None:
        value_num = _to_float(raw_value)
        low = _to_float(missing_spec.range.min)
        high = _to_float(missing_spec.range.max)
        if value_num is not None and low is not None and high is not None:
            if low <= value_num <= high:
                return True

    return False


def valid_numeric_values(values: Iterable[Any], variable: Variable) -> list[float]:
    """Keep values that are neither missing nor non-numeric, as floats, in order."""
    is_numeric_type = variable.is_numeric_type
    return [
        _to_float(v)
        for v in values
        if not is_missing(v, variable.missing, is_numeric_type) and is_numeric(v)
    ]


def column_values(df: pd.DataFrame, variable: Variable) -> list[Any]:
    """Extract a column's raw values up to its last non-empty row."""
    raw = df[variable.name].tolist()
    last = -1
    for i, value in enumerate(raw):
        if not _is_null(value) and value != "":
            last = i
    return [None if _is_null(v) else v for v in raw[:last + 1]]


def series_values(df: pd.DataFrame, variable: Variable) -> list[float | None]:
    """Column values in row order as floats; missing or non-numeric cells become None."""
    is_numeric_type = variable.is_numeric_type
    return [
        _to_float(v) if not is_missing(v, variable.missing, is_numeric_type) and is_numeric(v) else None
        for v in column_values(df, variable)
    ]
