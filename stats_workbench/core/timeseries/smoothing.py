"""Moving-average and exponential smoothing methods.

Every method returns a one-step-ahead forecast aligned with the input:
position t holds the forecast of observation t made from observations
before it. Positions without enough history hold NaN.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np
import pandas as pd
from statsmodels.tsa.holtwinters import ExponentialSmoothing

from ..data.validation import SeriesValidationError, validate_numeric_series, validate_periodic_series
from .metrics import compute_metrics
from .registry import get_method_spec, validate_parameters

logger = logging.getLogger(__name__)


@dataclass
class SmoothingResult:
    observed: np.ndarray
    forecast: np.ndarray
    method: str
    params: list[float] = field(default_factory=list)
    evaluation: dict[str, float] = field(default_factory=dict)


def simple_moving_average(y: np.ndarray, window: int) -> np.ndarray:
    return pd.Series(y).rolling(window).mean().shift(1).to_numpy()


def double_moving_average(y: np.ndarray, window: int) -> np.ndarray:
    first = pd.Series(y).rolling(window).mean()
    second = first.rolling(window).mean()
    level = 2 * first - second
    slope = 2 / (window - 1) * (first - second)
    return (level + slope).shift(1).to_numpy()


def simple_exponential(y: np.ndarray, alpha: float) -> np.ndarray:
    return pd.Series(y).ewm(alpha=alpha, adjust=False).mean().shift(1).to_numpy()


def double_exponential(y: np.ndarray, alpha: float) -> np.ndarray:
    """Brown's linear exponential smoothing."""
    single = pd.Series(y).ewm(alpha=alpha, adjust=False).mean()
    double = single.ewm(alpha=alpha, adjust=False).mean()
    level = 2 * single - double
    slope = alpha / (1 - alpha) * (single - double)
    return (level + slope).shift(1).to_numpy()


def _fitted_with_warmup(model: ExponentialSmoothing, warmup: int, n: int, **smoothing) -> np.ndarray:
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        result = model.fit(optimized=False, **smoothing)
    forecast = np.full(n, np.nan)
    forecast[warmup:] = np.asarray(result.fittedvalues, dtype=float)
    return forecast


def holt(y: np.ndarray, alpha: float, beta: float) -> np.ndarray:
    """Holt's two-parameter trend-corrected smoothing, seeded from the first two points."""
    model = ExponentialSmoothing(
        y[2:],
        trend="add",
        initialization_method="known",
        initial_level=y[1],
        initial_trend=y[1] - y[0],
    )
    return _fitted_with_warmup(model, 2, len(y), smoothing_level=alpha, smoothing_trend=beta)


def winters(y: np.ndarray, alpha: float, beta: float, gamma: float, period: int) -> np.ndarray:
    """Multiplicative Holt-Winters, initialized from the first two cycles."""
    if (y <= 0).any():
        raise ValueError("Multiplicative Holt-Winters requires strictly positive observations.")

    level = y[:period].mean()
    trend = (y[period:2 * period].mean() - level) / period
    model = ExponentialSmoothing(
        y[period:],
        trend="add",
        seasonal="mul",
        seasonal_periods=period,
        initialization_method="known",
        initial_level=level,
        initial_trend=trend,
        initial_seasonal=y[:period] / level,
    )
    forecast = _fitted_with_warmup(
        model, period, len(y),
        smoothing_level=alpha, smoothing_trend=beta, smoothing_seasonal=gamma,
    )
    if not np.isfinite(forecast[period:]).all():
        raise ValueError("Holt-Winters forecast is undefined for this series.")
    return forecast


_MIN_LENGTH = {
    "sma": lambda p: p[0] + 1,
    "dma": lambda p: 2 * p[0],
    "ses": lambda p: 2,
    "des": lambda p: 2,
    "holt": lambda p: 3,
}


def smooth(data: Sequence[float], method: str, params: Sequence[float]) -> SmoothingResult:
    """Run a smoothing method and evaluate it against the observations."""
    spec = get_method_spec(method)
    params = validate_parameters(method, list(params))

    if spec.seasonal:
        report = validate_periodic_series(data, params[-1])
    else:
        report = validate_numeric_series(data, min_length=_MIN_LENGTH[method](params))
    if not report.is_valid:
        raise SeriesValidationError(report)

    y = np.array(data, dtype=float)
    if method == "sma":
        forecast = simple_moving_average(y, params[0])
    elif method == "dma":
        forecast = double_moving_average(y, params[0])
    elif method == "ses":
        forecast = simple_exponential(y, params[0])
    elif method == "des":
        forecast = double_exponential(y, params[0])
    elif method == "holt":
        forecast = holt(y, params[0], params[1])
    else:
        forecast = winters(y, params[0], params[1], params[2], params[3])

    logger.debug(f"Smoothed {len(y)} observations with {method} {params}")
    return SmoothingResult(
        observed=y,
        forecast=forecast,
        method=method,
        params=params,
        evaluation=compute_metrics(y, forecast),
    )
