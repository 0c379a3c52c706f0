"""Tests for series shape validation and dataset quality checks."""

import pandas as pd
import pytest

from core.data.validation import (
    SeriesValidationError,
    check_dataset,
    check_variable_quality,
    validate_numeric_series,
    validate_periodic_series,
)


class TestPeriodicSeries:
    def test_valid_series(self):
        report = validate_periodic_series([1.0] * 16, 4, [str(i) for i in range(16)])
        assert report.is_valid
        assert report.stats["period"] == 4

    def test_time_length_mismatch(self):
        report = validate_periodic_series([1.0] * 16, 4, ["a"] * 15)
        assert report.first_error() == "Data and Time length is not equal."

    def test_time_labels_must_be_strings(self):
        report = validate_periodic_series([1.0] * 16, 4, list(range(16)))
        assert report.first_error() == "Time labels must be strings."

    def test_non_numeric_values(self):
        report = validate_periodic_series([1.0] * 15 + [None], 4)
        assert report.first_error() == "Data values contain non-numeric values."

    def test_infinite_values_are_non_numeric(self):
        report = validate_periodic_series([1.0] * 15 + [float("inf")], 4)
        assert not report.is_valid

    @pytest.mark.parametrize("period", [1, 2.5, "4", True, float("nan"), float("inf")])
    def test_bad_periodicity(self, period):
        report = validate_periodic_series([1.0] * 16, period)
        assert not report.is_valid
        assert report.errors[0].category == "periodicity"
        assert "must be an integer" in report.errors[0].message

    def test_too_short(self):
        report = validate_periodic_series([1.0] * 12, 4)
        assert report.first_error() == "Data length is less than 4 times the periodicity."

    def test_not_a_multiple(self):
        report = validate_periodic_series([1.0] * 18, 4)
        assert report.first_error() == "Data length is not a multiple of the periodicity."


class TestNumericSeries:
    def test_empty(self):
        assert not validate_numeric_series([]).is_valid

    def test_min_length(self):
        report = validate_numeric_series([1.0, 2.0], min_length=3)
        assert report.errors[0].category == "too_short"

    def test_valid(self):
        assert validate_numeric_series([1.0, 2.0, 3.0], min_length=3).is_valid


def test_series_validation_error_carries_report():
    report = validate_periodic_series([1.0] * 12, 4)
    error = SeriesValidationError(report)
    assert isinstance(error, ValueError)
    assert str(error) == "Data length is less than 4 times the periodicity."
    assert error.report is report


class TestQualityChecks:
    def test_variable_quality_counts(self, coded_variable):
        report = check_variable_quality([1, 99, None, "x", -2, 5], coded_variable)
        assert report.stats == {"n": 6, "n_valid": 2, "n_missing": 3}
        assert any(i.category == "non_numeric" for i in report.warnings)

    def test_variable_without_valid_values(self, scale_variable):
        report = check_variable_quality([None, "a"], scale_variable)
        assert not report.is_valid

    def test_empty_dataset(self):
        assert not check_dataset(pd.DataFrame()).is_valid

    def test_empty_columns_are_warnings(self, sample_df):
        df = sample_df.assign(blank=None)
        report = check_dataset(df)
        assert report.is_valid
        assert report.warnings[0].details == "blank"
