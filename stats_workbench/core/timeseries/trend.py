"""Trend equations fitted by least squares: linear, quadratic, exponential."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import statsmodels.api as sm

TREND_METHODS = ["linear", "quadratic", "exponential"]


@dataclass
class TrendFit:
    method: str
    coefficients: tuple[float, ...]
    r_squared: float
    equation: str

    def predict(self, t: np.ndarray) -> np.ndarray:
        """Evaluate the trend at time indices t (1-based)."""
        t = np.asarray(t, dtype=float)
        if self.method == "exponential":
            a, b = self.coefficients
            return a * np.exp(b * t)
        # coefficients are in increasing powers of t
        return sum(c * t ** p for p, c in enumerate(self.coefficients))


def _signed(coef: float, suffix: str) -> str:
    sign = "-" if coef < 0 else "+"
    return f" {sign} {abs(coef):.3f}{suffix}"


def format_equation(method: str, coefficients: tuple[float, ...]) -> str:
    if method == "exponential":
        a, b = coefficients
        return f"Yt = {a:.3f} * e^({b:.3f}t)"
    terms = [f"{coefficients[0]:.3f}"]
    terms.append(_signed(coefficients[1], "t"))
    if method == "quadratic":
        terms.append(_signed(coefficients[2], "t^2"))
    return "Yt = " + "".join(terms)


def fit_trend(values: np.ndarray, method: str = "linear") -> TrendFit:
    """Fit a trend equation against t = 1..n."""
    if method not in TREND_METHODS:
        raise ValueError(f"Unknown trend method: {method}. Available: {TREND_METHODS}")

    y = np.asarray(values, dtype=float)
    valid = ~np.isnan(y)
    t = np.arange(1, len(y) + 1, dtype=float)[valid]
    y = y[valid]

    degree = 2 if method == "quadratic" else 1
    if len(y) <= degree:
        raise ValueError(f"At least {degree + 1} points are needed for a {method} trend.")

    if method == "exponential":
        if (y <= 0).any():
            raise ValueError("Exponential trend requires strictly positive values.")
        y = np.log(y)

    X = sm.add_constant(np.column_stack([t ** p for p in range(1, degree + 1)]), has_constant="add")
    result = sm.OLS(y, X).fit()
    params = tuple(float(p) for p in result.params)

    if method == "exponential":
        params = (float(np.exp(params[0])), params[1])

    r_squared = float(result.rsquared) if np.isfinite(result.rsquared) else 1.0
    return TrendFit(
        method=method,
        coefficients=params,
        r_squared=r_squared,
        equation=format_equation(method, params),
    )
