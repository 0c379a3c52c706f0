"""Input validation: series shape checks and dataset quality diagnostics."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Sequence

import pandas as pd

from .missing import is_missing, is_numeric
from .variables import Variable


@dataclass
class ValidationIssue:
    severity: str  # "error", "warning", "info"
    category: str
    message: str
    details: str = ""


@dataclass
class ValidationReport:
    is_valid: bool = True
    issues: list[ValidationIssue] = field(default_factory=list)
    stats: dict = field(default_factory=dict)

    def add(self, severity: str, category: str, message: str, details: str = ""):
        issue = ValidationIssue(severity=severity, category=category, message=message, details=details)
        self.issues.append(issue)
        if severity == "error":
            self.is_valid = False

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == "error"]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == "warning"]

    def first_error(self) -> str:
        errors = self.errors
        return errors[0].message if errors else ""


class SeriesValidationError(ValueError):
    """Raised when a series does not satisfy an engine's preconditions."""

    def __init__(self, report: ValidationReport):
        self.report = report
        super().__init__(report.first_error())


def _is_finite_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def validate_periodic_series(
    data: Sequence[Any],
    period: Any,
    time: Sequence[Any] | None = None,
) -> ValidationReport:
    """Check the shape rules shared by decomposition and Winters smoothing."""
    report = ValidationReport()
    n = len(data)
    report.stats["n_obs"] = n

    if time is not None:
        if len(time) != n:
            report.add("error", "length", "Data and Time length is not equal.")
        elif not all(isinstance(label, str) for label in time):
            report.add("error", "time", "Time labels must be strings.")

    if not all(_is_finite_number(v) for v in data):
        report.add("error", "non_numeric", "Data values contain non-numeric values.")

    if isinstance(period, bool) or not isinstance(period, Real) or not math.isfinite(period) or int(period) != period or period < 2:
        report.add("error", "periodicity", f"Periodicity must be an integer of at least 2, got {period!r}.")
        return report

    period = int(period)
    report.stats["period"] = period
    if n < 4 * period:
        report.add("error", "too_short", "Data length is less than 4 times the periodicity.")
    if n % period != 0:
        report.add("error", "not_multiple", "Data length is not a multiple of the periodicity.")

    return report


def validate_numeric_series(data: Sequence[Any], min_length: int = 2) -> ValidationReport:
    """Check a plain numeric series (smoothing methods without seasonality)."""
    report = ValidationReport()
    report.stats["n_obs"] = len(data)
    if len(data) == 0:
        report.add("error", "empty", "No data available for the selected variable.")
        return report
    if not all(_is_finite_number(v) for v in data):
        report.add("error", "non_numeric", "Data values contain non-numeric values.")
    if len(data) < min_length:
        report.add("error", "too_short", f"At least {min_length} observations are required, got {len(data)}.")
    return report


def check_variable_quality(values: Sequence[Any], variable: Variable) -> ValidationReport:
    """Summarise how many cells of a variable are missing or non-numeric."""
    report = ValidationReport()
    n = len(values)
    n_missing = sum(is_missing(v, variable.missing, variable.is_numeric_type) for v in values)
    n_non_numeric = sum(
        not is_missing(v, variable.missing, variable.is_numeric_type) and not is_numeric(v)
        for v in values
    )
    n_valid = n - n_missing - n_non_numeric

    if n == 0:
        report.add("error", "empty", f"Variable '{variable.name}' has no values.")
    elif n_valid == 0:
        report.add("error", "no_valid", f"Variable '{variable.name}' has no valid numeric values.")
    if n_missing > 0:
        report.add("info", "missing_values", f"{n_missing} missing value(s) in '{variable.name}'.")
    if n_non_numeric > 0 and variable.is_numeric_type:
        report.add("warning", "non_numeric", f"{n_non_numeric} non-numeric value(s) in '{variable.name}' are ignored.")

    report.stats["n"] = n
    report.stats["n_valid"] = n_valid
    report.stats["n_missing"] = n_missing
    return report


def check_dataset(df: pd.DataFrame) -> ValidationReport:
    report = ValidationReport()
    if df.empty:
        report.add("error", "empty", "The uploaded file contains no rows.")
        return report

    n_dup_cols = df.columns.duplicated().sum()
    if n_dup_cols > 0:
        report.add("error", "schema", f"{n_dup_cols} duplicate column name(s) found.")

    empty_cols = [c for c in df.columns if df[c].isna().all()]
    if empty_cols:
        report.add("warning", "empty_columns", f"{len(empty_cols)} column(s) contain no values.", ", ".join(map(str, empty_cols)))

    report.stats["n_rows"] = len(df)
    report.stats["n_cols"] = len(df.columns)
    return report
