"""Data models for ohlcview."""

from ohlcview.models.candle import Candle
from ohlcview.models.fields import ALL_FIELDS, FIELD_COLORS, SeriesField
from ohlcview.models.response import SeriesResponse
from ohlcview.models.view import ChartPoint, ViewModel

__all__ = [
    "ALL_FIELDS",
    "Candle",
    "ChartPoint",
    "FIELD_COLORS",
    "SeriesField",
    "SeriesResponse",
    "ViewModel",
]
