"""Tests for classical decomposition."""

import numpy as np
import pytest

from core.data.validation import SeriesValidationError
from core.timeseries.decomposition import decompose
from core.timeseries.seasonality import classical_components, tile_indices


class TestClassicalComponents:
    def test_odd_period(self):
        cma, _ = classical_components(np.arange(1, 7, dtype=float), 3)
        assert np.isnan(cma[0]) and np.isnan(cma[-1])
        np.testing.assert_allclose(cma[1:-1], [2, 3, 4, 5])

    def test_even_period_stays_centered(self):
        cma, _ = classical_components(np.arange(1, 9, dtype=float), 4)
        assert np.isnan(cma[:2]).all()
        assert np.isnan(cma[-2:]).all()
        np.testing.assert_allclose(cma[2:6], [3, 4, 5, 6])

    def test_even_period_uses_two_by_period_average(self):
        y = np.array([4.0, 8.0, 2.0, 6.0, 5.0, 9.0, 3.0, 7.0])
        cma, _ = classical_components(y, 4)
        # (0.5*4 + 8 + 2 + 6 + 0.5*5) / 4
        assert cma[2] == pytest.approx(5.125)

    def test_additive_indices_sum_to_zero(self):
        _, indices = classical_components(np.array([1.0, 3.0, 2.0, 2.0, 5.0, 4.0, 3.0, 6.0, 5.0]), 3, "additive")
        assert len(indices) == 3
        assert indices.sum() == pytest.approx(0.0)

    def test_multiplicative_indices_average_one(self):
        _, indices = classical_components(np.array([8.0, 13.0, 11.0, 7.0, 12.0, 10.0, 9.0, 14.0, 12.0]), 3, "multiplicative")
        assert indices.mean() == pytest.approx(1.0)

    def test_multiplicative_rejects_non_positive_values(self):
        with pytest.raises(ValueError, match="strictly positive"):
            classical_components(np.array([1.0, 0.0, 2.0, 3.0, 1.0, 2.0]), 3, "multiplicative")

    def test_tile(self):
        np.testing.assert_allclose(tile_indices(np.array([1.0, 2.0, 3.0]), 7), [1, 2, 3, 1, 2, 3, 1])


class TestAdditive:
    def test_recovers_trend_and_pattern(self, additive_series):
        result = decompose(additive_series, 4, mode="additive")

        np.testing.assert_allclose(result.seasonal_indices, [2.0, -1.0, -3.0, 2.0], atol=1e-9)
        assert result.trend_fit.coefficients == pytest.approx((10.0, 0.5))
        assert result.trend_fit.equation == "Yt = 10.000 + 0.500t"
        np.testing.assert_allclose(result.irregular, 0.0, atol=1e-9)
        np.testing.assert_allclose(result.forecast, additive_series)

    def test_component_lengths(self, additive_series):
        result = decompose(additive_series, 4)
        n = len(additive_series)
        for component in (result.centered, result.seasonal, result.trend, result.irregular, result.forecast):
            assert len(component) == n
        assert len(result.seasonal_indices) == 4
        assert np.isnan(result.centered[:2]).all()

    def test_additive_ignores_trend_method(self, additive_series):
        result = decompose(additive_series, 4, mode="additive", trend_method="exponential")
        assert result.trend_fit.method == "linear"

    def test_components_add_up(self, multiplicative_series):
        result = decompose(multiplicative_series, 4, mode="additive")
        np.testing.assert_allclose(result.trend + result.seasonal + result.irregular, multiplicative_series)


class TestMultiplicative:
    def test_indices_close_to_factors(self, multiplicative_series):
        result = decompose(multiplicative_series, 4, mode="multiplicative")
        assert result.seasonal_indices.mean() == pytest.approx(1.0)
        np.testing.assert_allclose(result.seasonal_indices, [0.9, 1.1, 1.2, 0.8], atol=0.01)

    def test_components_multiply_up(self, multiplicative_series):
        result = decompose(multiplicative_series, 4, mode="multiplicative", trend_method="quadratic")
        np.testing.assert_allclose(result.trend * result.seasonal * result.irregular, multiplicative_series)
        assert result.trend_fit.method == "quadratic"

    def test_evaluation_metrics(self, multiplicative_series):
        result = decompose(multiplicative_series, 4, mode="multiplicative")
        assert set(result.evaluation) == {"SSE", "MSE", "RMSE", "MAE", "MPE", "MAPE"}
        assert result.evaluation["MAPE"] < 2.0

    def test_exponential_trend(self, multiplicative_series):
        result = decompose(multiplicative_series, 4, mode="multiplicative", trend_method="exponential")
        assert result.trend_fit.equation.startswith("Yt = ")
        assert (result.trend > 0).all()


class TestRejections:
    def test_not_a_multiple_of_period(self, additive_series):
        with pytest.raises(SeriesValidationError, match="not a multiple"):
            decompose(additive_series + [1.0, 2.0], 4)

    def test_too_short(self):
        with pytest.raises(SeriesValidationError, match="less than 4 times"):
            decompose([1.0] * 12, 4)

    def test_unknown_mode(self, additive_series):
        with pytest.raises(ValueError, match="Unknown decomposition method"):
            decompose(additive_series, 4, mode="hybrid")

    def test_unknown_trend_method(self, additive_series):
        with pytest.raises(ValueError, match="Unknown trend method"):
            decompose(additive_series, 4, mode="multiplicative", trend_method="cubic")

    def test_zero_average_breaks_multiplicative(self):
        data = [1.0, -1.0] * 8
        with pytest.raises(ValueError):
            decompose(data, 2, mode="multiplicative")
