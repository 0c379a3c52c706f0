"""Method registry: smoothing methods, decomposition options, periods and defaults."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class ParameterSpec:
    name: str
    default: float
    min_value: float
    max_value: float
    step: float
    integer: bool = False


@dataclass(frozen=True)
class SmoothingMethodSpec:
    key: str
    label: str
    parameters: tuple[ParameterSpec, ...]
    seasonal: bool = False


_WINDOW = ParameterSpec("distance", 2, 2, 11, 1, integer=True)
_ALPHA = ParameterSpec("alpha", 0.1, 0.1, 0.9, 0.1)
_BETA = ParameterSpec("beta", 0.1, 0.1, 0.9, 0.1)
_GAMMA = ParameterSpec("gamma", 0.1, 0.1, 0.9, 0.1)
_PERIODICITY = ParameterSpec("periodicity", 7, 2, 30, 1, integer=True)


SMOOTHING_REGISTRY: dict[str, SmoothingMethodSpec] = {
    "sma": SmoothingMethodSpec("sma", "Simple Moving Average", (_WINDOW,)),
    "dma": SmoothingMethodSpec("dma", "Double Moving Average", (_WINDOW,)),
    "ses": SmoothingMethodSpec("ses", "Simple Exponential Smoothing", (_ALPHA,)),
    "des": SmoothingMethodSpec("des", "Double Exponential Smoothing", (_ALPHA,)),
    "holt": SmoothingMethodSpec("holt", "Holt's Method Exponential Smoothing", (_ALPHA, _BETA)),
    "winter": SmoothingMethodSpec(
        "winter",
        "Winter's Method Exponential Smoothing",
        (_ALPHA, _BETA, _GAMMA, _PERIODICITY),
        seasonal=True,
    ),
}

DECOMPOSITION_MODE_LABELS = {
    "additive": "Additive Decomposition",
    "multiplicative": "Multiplicative Decomposition",
}

TREND_METHOD_LABELS = {
    "linear": "Linear Trend Equation",
    "quadratic": "Quadratic Trend Equation",
    "exponential": "Exponential Trend Equation",
}


@dataclass(frozen=True)
class PeriodOption:
    id: str
    periodicity: int
    label: str
    date_type: str


PERIOD_OPTIONS: list[PeriodOption] = [
    PeriodOption("diw", 7, "Daily in Week", "daily"),
    PeriodOption("dim", 30, "Daily in Month", "daily"),
    PeriodOption("wim", 4, "Weekly in Month", "weekly"),
    PeriodOption("sa", 2, "Semi Annual", "semi-annual"),
    PeriodOption("fm", 3, "Four-Monthly", "four-monthly"),
    PeriodOption("q", 4, "Quarterly", "quarterly"),
    PeriodOption("m", 12, "Monthly", "monthly"),
]


def get_smoothing_methods() -> list[str]:
    return list(SMOOTHING_REGISTRY.keys())


def get_method_spec(method: str) -> SmoothingMethodSpec:
    if method not in SMOOTHING_REGISTRY:
        raise ValueError(f"Unknown smoothing method: {method}. Available: {get_smoothing_methods()}")
    return SMOOTHING_REGISTRY[method]


def get_period_option(option_id: str) -> PeriodOption:
    for option in PERIOD_OPTIONS:
        if option.id == option_id:
            return option
    raise ValueError(f"Unknown period option: {option_id}")


def default_parameters(method: str, periodicity: int | None = None) -> list[float]:
    """Fresh default parameter vector for a smoothing method.

    Winters takes its periodicity from the selected period when given.
    """
    spec = get_method_spec(method)
    params = [p.default for p in spec.parameters]
    if spec.seasonal and periodicity is not None:
        params[-1] = periodicity
    return params


def validate_parameters(method: str, params: list[float]) -> list[float]:
    """Check a parameter vector's length and ranges; returns it normalized."""
    spec = get_method_spec(method)
    if len(params) != len(spec.parameters):
        raise ValueError(
            f"{spec.label} expects {len(spec.parameters)} parameter(s) "
            f"({', '.join(p.name for p in spec.parameters)}), got {len(params)}."
        )

    normalized = []
    for value, p in zip(params, spec.parameters):
        if p.integer:
            if not math.isfinite(value) or int(value) != value or value < 2:
                raise ValueError(f"Parameter '{p.name}' must be an integer of at least 2, got {value}.")
            normalized.append(int(value))
        else:
            if not 0 < value < 1:
                raise ValueError(f"Parameter '{p.name}' must lie strictly between 0 and 1, got {value}.")
            normalized.append(float(value))
    return normalized
