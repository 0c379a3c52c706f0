"""Centered moving averages and seasonal indices from classical decomposition."""

from __future__ import annotations

import numpy as np
from statsmodels.tsa.seasonal import seasonal_decompose


def classical_components(values: np.ndarray, period: int, model: str = "additive") -> tuple[np.ndarray, np.ndarray]:
    """Return the centered moving average and the normalized seasonal indices.

    An even period uses the 2 x period average so the window stays centered
    on an observation; positions without a full window are NaN. Additive
    indices sum to zero, multiplicative indices average to one.
    """
    y = np.asarray(values, dtype=float)
    if model == "multiplicative" and (y <= 0).any():
        raise ValueError("Multiplicative decomposition requires strictly positive observations.")

    result = seasonal_decompose(y, model=model, period=period)
    centered = np.asarray(result.trend, dtype=float)
    indices = np.asarray(result.seasonal[:period], dtype=float)
    return centered, indices


def tile_indices(indices: np.ndarray, n: int) -> np.ndarray:
    """Repeat seasonal indices across a series of length n."""
    period = len(indices)
    return np.asarray(indices, dtype=float)[np.arange(n) % period]
