"""Shared pytest fixtures for all tests."""

import numpy as np
import pandas as pd
import pytest

from core.data.variables import MissingRange, MissingSpec, Variable


@pytest.fixture
def additive_series() -> list[float]:
    """Four years of quarterly data: 10 + 0.5t plus a fixed zero-sum seasonal pattern."""
    pattern = [2.0, -1.0, -3.0, 2.0]
    return [10 + 0.5 * t + pattern[(t - 1) % 4] for t in range(1, 17)]


@pytest.fixture
def multiplicative_series() -> list[float]:
    """Five years of quarterly data: (100 + 2t) times seasonal factors averaging one."""
    factors = [0.9, 1.1, 1.2, 0.8]
    return [(100 + 2 * t) * factors[(t - 1) % 4] for t in range(1, 21)]


@pytest.fixture
def scale_variable() -> Variable:
    return Variable(column_index=0, name="score", label="Test Score", measure="scale", type="NUMERIC")


@pytest.fixture
def coded_variable() -> Variable:
    """Scale variable treating 99 and anything in [-9, -1] as missing."""
    return Variable(
        column_index=1,
        name="coded",
        measure="scale",
        missing=MissingSpec(discrete=["99"], range=MissingRange(min="-9", max="-1")),
    )


@pytest.fixture
def sample_df() -> pd.DataFrame:
    return pd.DataFrame({
        "date": pd.date_range("2020-01-01", periods=6, freq="MS"),
        "sales": [10.5, 12.0, 11.2, 13.8, 12.9, 14.1],
        "group": [1, 2, 1, 2, 1, 2],
        "region": ["N", "S", "E", "W", "N", "S"],
        "partial": [1.0, 2.0, np.nan, 4.0, np.nan, np.nan],
    })
