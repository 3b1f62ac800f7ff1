"""Tests for the chart view pipeline.

**Feature: ohlc-zoom-view**
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from ohlcview.config import ViewConfig
from ohlcview.models import ALL_FIELDS, Candle, SeriesField, SeriesResponse
from ohlcview.view import ChartView, SeriesStore


def make_series(num_points: int, start: int = 1_700_000_000) -> list[Candle]:
    return [
        Candle(
            timestamp=start + i * 3600,
            open=100.0 + i,
            high=110.0 + i,
            low=90.0 + i,
            close=105.0 + i,
            volume=500,
        )
        for i in range(num_points)
    ]


class TestSeriesStore:
    """Raw series ownership."""

    def test_replace_is_wholesale(self):
        store = SeriesStore("AAPL", make_series(5))
        store.replace(make_series(2, start=1), "MSFT")

        assert len(store) == 2
        assert store.symbol == "MSFT"

    def test_rejects_unordered_timestamps(self):
        series = make_series(3)
        with pytest.raises(ValueError, match="must not decrease"):
            SeriesStore("AAPL", [series[1], series[0]])

    def test_accepts_repeated_timestamps(self):
        series = make_series(3)
        repeated = [series[0], series[1], series[1], series[2]]
        store = SeriesStore("AAPL", repeated)

        assert store.candles == tuple(repeated)

        view = ChartView(candles=repeated)
        view.apply_zoom(2.0)
        assert view.decimated == [series[0], series[1]]

    def test_rejected_replace_keeps_previous_series(self):
        series = make_series(2)
        store = SeriesStore("AAPL", series)
        with pytest.raises(ValueError):
            store.replace([series[1], series[0]])
        assert store.candles == tuple(series)


class TestViewZoom:
    """
    **Feature: ohlc-zoom-view, Property 10: Commit Drives Decimation**

    Live gesture updates never change derived data; commits and resets do.
    """

    def test_scenario_pinch_to_two(self):
        view = ChartView(candles=make_series(10))
        view.gesture_start()
        view.gesture_update(2.0)
        view.gesture_end()

        assert view.factor == 2.0
        assert len(view.decimated) == 5
        assert view.decimated[0] == view.store.candles[0]

    def test_live_updates_do_not_redecimate(self):
        view = ChartView(candles=make_series(30))
        before = view.decimated

        view.gesture_start()
        view.gesture_update(5.0)
        assert view.decimated is before

        view.gesture_end()
        assert len(view.decimated) == 6

    @given(scale=st.floats(min_value=0.1, max_value=40.0), num_points=st.integers(1, 80))
    @settings(max_examples=50)
    def test_reset_restores_full_series(self, scale: float, num_points: int):
        series = make_series(num_points)
        view = ChartView(candles=series)
        view.apply_zoom(scale)
        view.reset()

        assert view.factor == 1.0
        assert view.decimated == series

    def test_hundred_points_factor_three(self):
        view = ChartView(candles=make_series(100))
        view.apply_zoom(3.0)

        model = view.view_model()
        assert model.length == 34
        assert all(len(points) == 34 for points in model.series.values())

    def test_load_invalidates(self):
        view = ChartView(candles=make_series(10))
        view.apply_zoom(2.0)
        assert len(view.decimated) == 5

        view.load_response(SeriesResponse(symbol="AAPL", data=make_series(20)))
        assert view.factor == 2.0
        assert len(view.decimated) == 10


class TestViewVisibility:
    """Visibility toggles and tick scope."""

    def test_toggle_removes_series(self):
        view = ChartView(candles=make_series(4))
        assert set(view.series) == set(ALL_FIELDS)

        view.toggle("high")
        assert SeriesField.HIGH not in view.view_model().series

        view.toggle("high")
        assert SeriesField.HIGH in view.view_model().series

    def test_ticks_ignore_visibility_by_default(self):
        view = ChartView(candles=make_series(5))
        before = view.ticks
        view.toggle("high")
        view.toggle("low")
        assert view.ticks == before

    def test_visible_scope_ticks_follow_toggles(self):
        config = ViewConfig(tick_scope="visible")
        view = ChartView(config, candles=make_series(5))
        assert view.ticks[0] == 114.0

        view.toggle("high")
        assert view.ticks[0] == 109.0

    def test_default_visible_from_config(self):
        config = ViewConfig(default_visible=["open", "close"])
        view = ChartView(config, candles=make_series(3))
        assert list(view.series) == [SeriesField.OPEN, SeriesField.CLOSE]

    def test_empty_view(self):
        view = ChartView()
        model = view.view_model()
        assert model.ticks == [0, 1, 2, 3, 4]
        assert all(points == [] for points in model.series.values())
