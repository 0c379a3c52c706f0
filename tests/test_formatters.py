"""Tests for runs-test result tables."""

from core.nonparametric.formatters import format_descriptive_statistics_table, format_runs_test_table
from core.nonparametric.runs_test import RunsTestCalculator, RunsTestOptions


def _output(variable, data, **options):
    return RunsTestCalculator(variable, data, RunsTestOptions(**options)).get_output()


def test_runs_table_has_one_column_per_cut_point(scale_variable):
    tables = format_runs_test_table([_output(scale_variable, list(range(1, 11)), mean=True)])

    assert len(tables) == 1
    table = tables[0]
    assert table.title == "Runs Test: Test Score"
    assert table.column_headers == ["", "Median", "Mean"]
    assert [r.row_header[0] for r in table.rows] == [
        "Test Value",
        "Cases < Test Value",
        "Cases >= Test Value",
        "Total Cases",
        "Number of Runs",
        "Z",
        "Asymp. Sig. (2-tailed)",
    ]
    assert table.rows[0].cells["median"] == "5.500"
    assert table.rows[5].cells["median"] == "-2.348"
    assert table.rows[6].cells["median"] == "0.019"


def test_insufficient_data_becomes_footnote(scale_variable):
    table = format_runs_test_table([_output(scale_variable, [3, 3, 3])])[0]
    assert table.rows[5].cells["median"] is None
    assert len(table.footnotes) == 1
    assert "one side" in table.footnotes[0]
    assert table.to_dict()["footnotes"] == table.footnotes


def test_descriptive_table_only_for_requested_outputs(scale_variable, coded_variable):
    outputs = [
        _output(scale_variable, [1, 2, 3, 4], quartiles=True),
        _output(coded_variable, [1, 2, 3]),
    ]
    table = format_descriptive_statistics_table(outputs)

    assert len(table.rows) == 1
    assert table.rows[0].row_header == ["Test Score"]
    assert table.rows[0].cells["Mean"] == "2.500"
    assert table.rows[0].cells["25th"] == "1.250"


def test_no_descriptive_table_without_statistics(scale_variable):
    assert format_descriptive_statistics_table([_output(scale_variable, [1, 2, 3])]) is None
