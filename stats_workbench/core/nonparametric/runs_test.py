"""One-sample runs test for randomness around a cut point."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Sequence

from scipy import stats

from ..data.missing import valid_numeric_values
from ..data.variables import Variable
from .descriptives import describe

CUT_POINT_METHODS = ["median", "mean", "mode", "custom"]


@dataclass
class RunsTestOptions:
    median: bool = True
    mean: bool = False
    mode: bool = False
    custom: bool = False
    custom_value: float | None = None
    descriptive: bool = False
    quartiles: bool = False

    def __post_init__(self):
        if self.custom and self.custom_value is None:
            raise ValueError("A custom cut point requires a custom value.")

    @property
    def methods(self) -> list[str]:
        return [m for m in CUT_POINT_METHODS if getattr(self, m)]


@dataclass(frozen=True)
class RunsTestStatistic:
    test_value: float | None
    cases_below: int
    cases_above: int
    total: int
    runs: int
    z: float | None
    p_value: float | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "TestValue": self.test_value,
            "CasesBelow": self.cases_below,
            "CasesAbove": self.cases_above,
            "Total": self.total,
            "Runs": self.runs,
            "Z": self.z,
            "PValue": self.p_value,
        }


@dataclass
class RunsTestMetadata:
    has_insufficient_data: bool
    insufficient_type: list[str]
    variable_name: str
    variable_label: str


@dataclass
class RunsTestOutput:
    variable: Variable
    runs_test: dict[str, RunsTestStatistic]
    metadata: RunsTestMetadata
    descriptive_statistics: dict | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "variable1": asdict(self.variable),
            "runsTest": {k: v.to_dict() for k, v in self.runs_test.items()},
            "descriptiveStatistics": self.descriptive_statistics,
            "metadata": {
                "hasInsufficientData": self.metadata.has_insufficient_data,
                "insufficientType": list(self.metadata.insufficient_type),
                "variableName": self.metadata.variable_name,
                "variableLabel": self.metadata.variable_label,
            },
        }


class RunsTestCalculator:
    """Runs test for one variable.

    Valid values are extracted lazily on first use; every statistic is
    computed once and cached, so repeated calls return the same objects.
    """

    def __init__(self, variable: Variable, data: Sequence[Any], options: RunsTestOptions | None = None):
        self.variable = variable
        self._data = list(data)
        self.options = options or RunsTestOptions()
        self._valid: list[float] | None = None
        self._insufficient: list[str] = []
        self._memo: dict[str, Any] = {}

    def _initialize(self) -> list[float]:
        if self._valid is None:
            self._valid = valid_numeric_values(self._data, self.variable)
            if not self._valid:
                self._flag("empty")
        return self._valid

    def _flag(self, reason: str):
        if reason not in self._insufficient:
            self._insufficient.append(reason)

    def get_n(self) -> int:
        return len(self._data)

    def get_valid_n(self) -> int:
        return len(self._initialize())

    def _mean(self) -> float:
        valid = self._initialize()
        return math.fsum(valid) / len(valid)

    def _median(self) -> float:
        ordered = sorted(self._initialize())
        mid = len(ordered) // 2
        if len(ordered) % 2 == 0:
            return (ordered[mid - 1] + ordered[mid]) / 2
        return ordered[mid]

    def _mode(self) -> float:
        counts: dict[float, int] = {}
        for value in self._initialize():
            counts[value] = counts.get(value, 0) + 1
        best_value, best_count = None, 0
        for value, count in counts.items():
            if count > best_count:
                best_value, best_count = value, count
        return best_value

    def _resolve_test_value(self, method: str) -> float:
        if method == "median":
            return self._median()
        if method == "mean":
            return self._mean()
        if method == "mode":
            return self._mode()
        if method == "custom":
            return float(self.options.custom_value)
        raise ValueError(f"Unknown cut point method: {method}. Available: {CUT_POINT_METHODS}")

    def compute_for_cut_point(self, method: str) -> RunsTestStatistic:
        key = f"runs_{method}"
        if key in self._memo:
            return self._memo[key]

        valid = self._initialize()
        n = len(valid)
        if n <= 1:
            result = RunsTestStatistic(None, 0, 0, n, 0, None, None)
            self._memo[key] = result
            return result

        test_value = self._resolve_test_value(method)
        below = [x < test_value for x in valid]
        cases_below = sum(below)
        cases_above = n - cases_below
        runs = 1 + sum(below[i] != below[i - 1] for i in range(1, n))

        z = None
        p_value = None
        if runs == 1:
            self._flag(f"single {method}")
        else:
            product = 2 * cases_below * cases_above
            mu_r = 1 + product / n
            sigma_r = math.sqrt(product * (product - n) / (n * n * (n - 1)))

            corrected = float(runs)
            if runs < mu_r:
                corrected = runs + 0.5
            elif runs > mu_r:
                corrected = runs - 0.5

            if sigma_r > 0:
                z = (corrected - mu_r) / sigma_r
                p_value = min(1.0, max(0.0, 2 * (1 - float(stats.norm.cdf(abs(z))))))
            else:
                self._flag(f"zero variance {method}")

        result = RunsTestStatistic(
            test_value=test_value,
            cases_below=cases_below,
            cases_above=cases_above,
            total=n,
            runs=runs,
            z=z,
            p_value=p_value,
        )
        self._memo[key] = result
        return result

    def get_runs_test(self) -> dict[str, RunsTestStatistic]:
        if "runs_test" not in self._memo:
            self._memo["runs_test"] = {m: self.compute_for_cut_point(m) for m in self.options.methods}
        return dict(self._memo["runs_test"])

    def get_descriptive_statistics(self) -> dict | None:
        if not (self.options.descriptive or self.options.quartiles):
            return None
        if "descriptives" not in self._memo:
            self._memo["descriptives"] = describe(self._initialize(), quartiles=self.options.quartiles)
        return dict(self._memo["descriptives"])

    def get_output(self) -> RunsTestOutput:
        runs_test = self.get_runs_test()
        return RunsTestOutput(
            variable=self.variable,
            runs_test=runs_test,
            descriptive_statistics=self.get_descriptive_statistics(),
            metadata=RunsTestMetadata(
                has_insufficient_data=bool(self._insufficient),
                insufficient_type=list(self._insufficient),
                variable_name=self.variable.name,
                variable_label=self.variable.label,
            ),
        )
