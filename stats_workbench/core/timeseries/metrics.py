"""Forecast evaluation metrics for decomposition and smoothing."""

from __future__ import annotations

import numpy as np


def sse(actual: np.ndarray, predicted: np.ndarray) -> float:
    """Sum of Squared Errors."""
    return float(np.sum((actual - predicted) ** 2))


def mse(actual: np.ndarray, predicted: np.ndarray) -> float:
    """Mean Squared Error."""
    return float(np.mean((actual - predicted) ** 2))


def rmse(actual: np.ndarray, predicted: np.ndarray) -> float:
    """Root Mean Squared Error."""
    return float(np.sqrt(np.mean((actual - predicted) ** 2)))


def mae(actual: np.ndarray, predicted: np.ndarray) -> float:
    """Mean Absolute Error."""
    return float(np.mean(np.abs(actual - predicted)))


def mpe(actual: np.ndarray, predicted: np.ndarray) -> float:
    """Mean Percentage Error (undefined when actual=0)."""
    mask = actual != 0
    if not mask.any():
        return float("inf")
    return float(np.mean((actual[mask] - predicted[mask]) / actual[mask]) * 100)


def mape(actual: np.ndarray, predicted: np.ndarray) -> float:
    """Mean Absolute Percentage Error (undefined when actual=0)."""
    mask = actual != 0
    if not mask.any():
        return float("inf")
    return float(np.mean(np.abs((actual[mask] - predicted[mask]) / actual[mask])) * 100)


METRIC_FUNCTIONS = {
    "SSE": sse,
    "MSE": mse,
    "RMSE": rmse,
    "MAE": mae,
    "MPE": mpe,
    "MAPE": mape,
}

METRIC_DISPLAY_NAMES = {
    "SSE": "Sum of Squared Errors",
    "MSE": "Mean Squared Error",
    "RMSE": "Root Mean Squared Error",
    "MAE": "Mean Absolute Error",
    "MPE": "Mean Percentage Error",
    "MAPE": "Mean Absolute % Error",
}


def compute_metrics(
    actual: np.ndarray,
    predicted: np.ndarray,
    metric_names: list[str] | None = None,
) -> dict[str, float]:
    """Compute metrics over the positions where the prediction exists."""
    if metric_names is None:
        metric_names = list(METRIC_FUNCTIONS.keys())

    actual = np.asarray(actual, dtype=float)
    predicted = np.asarray(predicted, dtype=float)
    if actual.shape != predicted.shape:
        raise ValueError(f"Actual and predicted lengths differ: {len(actual)} vs {len(predicted)}.")

    mask = ~np.isnan(predicted)
    if not mask.any():
        raise ValueError("No forecast values available for evaluation.")
    actual, predicted = actual[mask], predicted[mask]

    results = {}
    for name in metric_names:
        func = METRIC_FUNCTIONS.get(name)
        if func:
            results[name] = func(actual, predicted)
    return results
