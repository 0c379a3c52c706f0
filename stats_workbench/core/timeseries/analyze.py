"""Analysis entry points used by the pages.

Each function runs an engine and packages its result as display-ready
tables and chart payloads. Failures never propagate: they come back as an
output with status "error" whose table slots all hold the error table.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

import numpy as np

from ..data.variables import Variable
from ..export.tables import (
    ChartPayload,
    ResultTable,
    description_table,
    equation_table,
    error_table,
    line_chart,
    metric_table,
    seasonal_index_table,
)
from ..nonparametric.formatters import format_descriptive_statistics_table, format_runs_test_table
from ..nonparametric.runs_test import RunsTestCalculator, RunsTestOptions, RunsTestOutput
from .dates import generate_time_labels
from .decomposition import decompose
from .registry import DECOMPOSITION_MODE_LABELS, TREND_METHOD_LABELS, get_method_spec, validate_parameters
from .smoothing import smooth

logger = logging.getLogger(__name__)

PRECISION = 3


def round_series(values: np.ndarray, precision: int = PRECISION) -> list[float | None]:
    """Round to fixed precision; undefined positions become None."""
    return [None if np.isnan(v) else round(float(v), precision) for v in values]


@dataclass
class DecompositionOutput:
    status: str
    description: ResultTable
    evaluation: ResultTable
    seasonal_indices: ResultTable
    equation: ResultTable
    centered: list[float | None] = field(default_factory=lambda: [0.0])
    seasonal: list[float | None] = field(default_factory=lambda: [0.0])
    trend: list[float | None] = field(default_factory=lambda: [0.0])
    irregular: list[float | None] = field(default_factory=lambda: [0.0])
    forecast: list[float | None] = field(default_factory=lambda: [0.0])
    charts: dict[str, ChartPayload] = field(default_factory=dict)
    error: str = ""

    @property
    def tables(self) -> list[ResultTable]:
        return [self.description, self.seasonal_indices, self.equation, self.evaluation]


@dataclass
class SmoothingOutput:
    status: str
    description: ResultTable
    evaluation: ResultTable
    smoothed: list[float | None] = field(default_factory=lambda: [0.0])
    chart: ChartPayload | None = None
    error: str = ""

    @property
    def tables(self) -> list[ResultTable]:
        return [self.description, self.evaluation]


@dataclass
class RunsTestAnalysis:
    status: str
    runs_tables: list[ResultTable]
    descriptive: ResultTable | None = None
    outputs: list[RunsTestOutput] = field(default_factory=list)
    error: str = ""

    @property
    def tables(self) -> list[ResultTable]:
        return self.runs_tables + ([self.descriptive] if self.descriptive is not None else [])


def run_decomposition(
    data: Sequence[float],
    data_header: str,
    time: Sequence[str] | None,
    time_header: str,
    mode: str,
    trend_method: str,
    period: int,
    period_label: str = "",
) -> DecompositionOutput:
    """Decompose a series and package the components for display."""
    try:
        result = decompose(data, period, mode=mode, trend_method=trend_method, time=time)
        labels = list(time) if time is not None else generate_time_labels("index", None, len(data))

        trend_name = "none" if mode == "additive" else trend_method
        description = description_table({
            "Decomposition Method": DECOMPOSITION_MODE_LABELS[mode],
            "Formula of Calculating Decomposition": "Classical Decomposition",
            "Trend Method": trend_name,
            "Series Name": data_header,
            "Time Variable": time_header or "index",
            "Series Period": f"{labels[0]} - {labels[-1]}",
            "Periodicity": period,
            "Observations": len(data),
        })

        equation_title = TREND_METHOD_LABELS[result.trend_fit.method]
        charts = {
            "forecasting": line_chart(
                f"Forecasting {data_header}",
                labels,
                {data_header: result.observed, "Forecasting": result.forecast},
                zero_as_null=("Forecasting",),
            ),
            "data": line_chart(f"{data_header}", labels, {data_header: result.observed}),
            "trend": line_chart("Trend Component", labels, {"Trend": result.trend}),
            "seasonal": line_chart("Seasonal Component", labels, {"Seasonal": result.seasonal}),
            "irregular": line_chart("Irregular Component", labels, {"Irregular": result.irregular}),
        }

        logger.info(f"Decomposition of '{data_header}' finished ({mode}, period {period})")
        return DecompositionOutput(
            status="success",
            description=description,
            evaluation=metric_table("Decomposition Evaluation", result.evaluation),
            seasonal_indices=seasonal_index_table(result.seasonal_indices, period_label),
            equation=equation_table(equation_title, result.trend_fit.equation, result.trend_fit.r_squared),
            centered=round_series(result.centered),
            seasonal=round_series(result.seasonal),
            trend=round_series(result.trend),
            irregular=round_series(result.irregular),
            forecast=round_series(result.forecast),
            charts=charts,
        )
    except Exception as e:
        logger.warning(f"Decomposition of '{data_header}' failed: {e}")
        table = error_table(str(e))
        return DecompositionOutput(
            status="error",
            description=table,
            evaluation=table,
            seasonal_indices=table,
            equation=table,
            error=str(e),
        )


def _start_date(date_type: str, start_date: Any) -> Any:
    """Integers are read as a starting year."""
    if isinstance(start_date, int) and not isinstance(start_date, bool):
        if date_type == "index":
            return None
        return f"{start_date}-01-01"
    return start_date


def run_smoothing(
    data: Sequence[float],
    data_header: str,
    params: Sequence[float],
    periodicity: int | None,
    date_type: str,
    start_date: Any,
    method: str,
    time: Sequence[str] | None = None,
) -> SmoothingOutput:
    """Smooth a series and package the forecast for display.

    `time` overrides the generated labels when the dataset has a time
    column. For Winters the periodicity argument must agree with the last
    parameter.
    """
    try:
        spec = get_method_spec(method)
        params = validate_parameters(method, list(params))
        if spec.seasonal and periodicity is not None and int(params[-1]) != int(periodicity):
            raise ValueError(
                f"Periodicity parameter ({params[-1]}) does not match the selected periodicity ({periodicity})."
            )

        result = smooth(data, method, params)
        if time is not None:
            if len(time) != len(data):
                raise ValueError("Data and Time length is not equal.")
            labels = list(time)
        else:
            labels = generate_time_labels(date_type, _start_date(date_type, start_date), len(data))

        entries = {
            "Smoothing Method": spec.label,
            "Series Name": data_header,
            "Series Period": f"{labels[0]} - {labels[-1]}",
            "Observations": len(data),
        }
        for p, value in zip(spec.parameters, result.params):
            entries[f"Parameter {p.name}"] = value

        chart = line_chart(
            f"{spec.label} {data_header}",
            labels,
            {data_header: result.observed, "Smoothing": result.forecast},
            zero_as_null=("Smoothing",),
        )

        logger.info(f"Smoothing of '{data_header}' finished ({method} {result.params})")
        return SmoothingOutput(
            status="success",
            description=description_table(entries),
            evaluation=metric_table(f"{spec.label} Evaluation", result.evaluation),
            smoothed=round_series(result.forecast),
            chart=chart,
        )
    except Exception as e:
        logger.warning(f"Smoothing of '{data_header}' with {method} failed: {e}")
        table = error_table(str(e))
        return SmoothingOutput(status="error", description=table, evaluation=table, error=str(e))


def run_runs_test(
    variables: Variable | Sequence[Variable],
    data: Sequence[Any] | Sequence[Sequence[Any]],
    options: RunsTestOptions | None = None,
) -> RunsTestAnalysis:
    """Runs test for one variable, or for several variables with one column of data each."""
    if isinstance(variables, Variable):
        variables, columns = [variables], [data]
    else:
        variables, columns = list(variables), list(data)

    try:
        if len(variables) != len(columns):
            raise ValueError("Each test variable needs exactly one column of data.")
        if not variables:
            raise ValueError("Select at least one test variable.")

        outputs = [RunsTestCalculator(v, c, options).get_output() for v, c in zip(variables, columns)]
        logger.info(f"Runs test finished for {len(outputs)} variable(s)")
        return RunsTestAnalysis(
            status="success",
            runs_tables=format_runs_test_table(outputs),
            descriptive=format_descriptive_statistics_table(outputs),
            outputs=outputs,
        )
    except Exception as e:
        logger.warning(f"Runs test failed: {e}")
        return RunsTestAnalysis(status="error", runs_tables=[error_table(str(e))], error=str(e))
