"""Classical time series decomposition (additive and multiplicative)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from ..data.validation import SeriesValidationError, validate_periodic_series
from .metrics import compute_metrics
from .seasonality import classical_components, tile_indices
from .trend import TREND_METHODS, TrendFit, fit_trend

logger = logging.getLogger(__name__)

DECOMPOSITION_MODES = ["additive", "multiplicative"]


@dataclass
class DecompositionResult:
    observed: np.ndarray
    centered: np.ndarray
    seasonal: np.ndarray
    trend: np.ndarray
    irregular: np.ndarray
    forecast: np.ndarray
    seasonal_indices: np.ndarray
    trend_fit: TrendFit
    evaluation: dict[str, float] = field(default_factory=dict)
    mode: str = "additive"
    period: int = 4


def decompose(
    data: Sequence[float],
    period: int,
    mode: str = "additive",
    trend_method: str = "linear",
    time: Sequence[str] | None = None,
) -> DecompositionResult:
    """Split a series into trend, seasonal and irregular components.

    Additive mode always fits a linear trend; the trend method applies to
    multiplicative mode only. Trends are fitted to the deseasonalized
    series against t = 1..n.
    """
    if mode not in DECOMPOSITION_MODES:
        raise ValueError(f"Unknown decomposition method: {mode}. Available: {DECOMPOSITION_MODES}")
    if mode == "multiplicative" and trend_method not in TREND_METHODS:
        raise ValueError(f"Unknown trend method: {trend_method}. Available: {TREND_METHODS}")

    report = validate_periodic_series(data, period, time)
    if not report.is_valid:
        raise SeriesValidationError(report)

    period = int(period)
    y = np.array(data, dtype=float)
    n = len(y)
    t = np.arange(1, n + 1)

    centered, indices = classical_components(y, period, mode)
    seasonal = tile_indices(indices, n)

    if mode == "additive":
        trend_fit = fit_trend(y - seasonal, "linear")
        trend = trend_fit.predict(t)
        irregular = y - trend - seasonal
        forecast = trend + seasonal
    else:
        trend_fit = fit_trend(y / seasonal, trend_method)
        trend = trend_fit.predict(t)
        forecast = trend * seasonal
        if (forecast == 0).any():
            raise ValueError("Trend times seasonal component is zero; irregular component is undefined.")
        irregular = y / forecast

    evaluation = compute_metrics(y, forecast)
    logger.debug(f"Decomposed {n} observations ({mode}, period={period}, trend={trend_fit.method})")

    return DecompositionResult(
        observed=y,
        centered=centered,
        seasonal=seasonal,
        trend=trend,
        irregular=irregular,
        forecast=forecast,
        seasonal_indices=indices,
        trend_fit=trend_fit,
        evaluation=evaluation,
        mode=mode,
        period=period,
    )
