"""Descriptive statistics shown alongside nonparametric tests."""

from __future__ import annotations

from typing import Sequence

import numpy as np


def describe(values: Sequence[float], quartiles: bool = False) -> dict[str, float | int | None]:
    """N, mean, sample std dev, min, max and optionally the quartiles.

    Quartiles use the weighted average at (n + 1)p, the default definition
    of SPSS percentiles.
    """
    arr = np.asarray(values, dtype=float)
    n = len(arr)
    stats: dict[str, float | int | None] = {
        "N": n,
        "Mean": float(arr.mean()) if n > 0 else None,
        "StdDev": float(arr.std(ddof=1)) if n > 1 else None,
        "Min": float(arr.min()) if n > 0 else None,
        "Max": float(arr.max()) if n > 0 else None,
    }

    if quartiles:
        for pct in (25, 50, 75):
            stats[f"Percentile{pct}"] = float(np.percentile(arr, pct, method="weibull")) if n > 0 else None

    return stats
