"""Property-based tests for series decimation.

**Feature: ohlc-zoom-view**
"""

import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from ohlcview.core import decimate, decimated_length, decimation_step, normalize_factor
from ohlcview.models import Candle


def make_series(num_points: int, start: int = 1_700_000_000) -> list[Candle]:
    """Create a simple increasing series, one point per day."""
    return [
        Candle(
            timestamp=start + i * 86400,
            open=100.0 + i,
            high=105.0 + i,
            low=97.0 + i,
            close=102.0 + i,
            volume=1000 + i,
        )
        for i in range(num_points)
    ]


factors = st.floats(min_value=1.0, max_value=50.0, allow_nan=False, allow_infinity=False)


class TestDecimationSubsequence:
    """
    **Feature: ohlc-zoom-view, Property 1: Decimation Subsequence**

    *For any* factor f >= 1 and non-empty series S, decimate(S, f) is a
    subsequence of S containing S[0] with length ceil(len(S) / ceil(f)).
    """

    @given(num_points=st.integers(min_value=1, max_value=300), factor=factors)
    @settings(max_examples=100)
    def test_subsequence_keeps_first_point(self, num_points: int, factor: float):
        series = make_series(num_points)
        result = decimate(series, factor)

        assert result[0] == series[0]
        assert len(result) == math.ceil(num_points / math.ceil(factor))
        assert len(result) == decimated_length(num_points, factor)

        # Strictly ordered, no duplicates, every point from the source
        timestamps = [c.timestamp for c in result]
        assert timestamps == sorted(set(timestamps))
        assert all(c in series for c in result)

    @given(num_points=st.integers(min_value=1, max_value=300), factor=factors)
    @settings(max_examples=100)
    def test_kept_indices_divisible_by_step(self, num_points: int, factor: float):
        series = make_series(num_points)
        step = math.ceil(factor)
        kept = {c.timestamp for c in decimate(series, factor)}

        for i, candle in enumerate(series):
            assert (candle.timestamp in kept) == (i % step == 0)


class TestDecimationIdentity:
    """
    **Feature: ohlc-zoom-view, Property 2: Identity And Idempotence**
    """

    @given(num_points=st.integers(min_value=1, max_value=200))
    @settings(max_examples=50)
    def test_factor_one_is_identity(self, num_points: int):
        series = make_series(num_points)
        assert decimate(series, 1) == series

    @given(num_points=st.integers(min_value=1, max_value=200), factor=factors)
    @settings(max_examples=50)
    def test_redecimating_at_one_is_stable(self, num_points: int, factor: float):
        series = make_series(num_points)
        once = decimate(series, factor)
        assert decimate(once, 1) == once

    def test_result_is_a_new_list(self):
        series = make_series(5)
        result = decimate(series, 1)
        assert result == series
        assert result is not series


class TestDecimationScenarios:
    """Concrete zoom scenarios."""

    def test_hundred_points_at_factor_three(self):
        series = make_series(100)
        result = decimate(series, 3)

        assert len(result) == 34
        assert series[0] in result
        assert series[1] not in result
        assert series[2] not in result
        assert series[3] in result

    def test_fractional_factor_rounds_up(self):
        series = make_series(10)
        assert decimate(series, 2.1) == series[::3]

    def test_empty_series(self):
        assert decimate([], 4) == []
        assert decimated_length(0, 4) == 0


class TestFactorClamping:
    """
    **Feature: ohlc-zoom-view, Property 3: Invalid Factor Clamping**

    Non-finite or sub-unit factors decimate as factor 1.
    """

    @pytest.mark.parametrize(
        "factor",
        [0, -1, -0.5, 0.5, float("nan"), float("inf"), float("-inf")],
    )
    def test_invalid_factor_clamps_to_one(self, factor: float):
        series = make_series(12)
        assert normalize_factor(factor) == 1.0
        assert decimation_step(factor) == 1
        assert decimate(series, factor) == series

    @given(factor=factors)
    @settings(max_examples=50)
    def test_valid_factor_unchanged(self, factor: float):
        assert normalize_factor(factor) == factor
        assert decimation_step(factor) == math.ceil(factor)
