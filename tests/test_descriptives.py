"""Tests for descriptive statistics."""

import pytest

from core.nonparametric.descriptives import describe


def test_basic_statistics():
    stats = describe([1, 2, 3, 4])
    assert stats["N"] == 4
    assert stats["Mean"] == 2.5
    assert stats["StdDev"] == pytest.approx(1.290994, abs=1e-6)
    assert stats["Min"] == 1.0
    assert stats["Max"] == 4.0
    assert "Percentile25" not in stats


def test_quartiles_use_n_plus_one_positions():
    stats = describe([1, 2, 3, 4], quartiles=True)
    assert stats["Percentile25"] == pytest.approx(1.25)
    assert stats["Percentile50"] == pytest.approx(2.5)
    assert stats["Percentile75"] == pytest.approx(3.75)


def test_single_value_has_no_std_dev():
    stats = describe([5.0])
    assert stats["StdDev"] is None
    assert stats["Mean"] == 5.0


def test_empty():
    stats = describe([], quartiles=True)
    assert stats["N"] == 0
    assert stats["Mean"] is None
    assert stats["Percentile75"] is None
