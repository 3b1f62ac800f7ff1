"""Series data sources for ohlcview."""

from ohlcview.sources.base import BaseDataSource, FetchError
from ohlcview.sources.cache import CachedDataSource, FetchState
from ohlcview.sources.rest import HttpDataSource

__all__ = [
    "BaseDataSource",
    "CachedDataSource",
    "FetchError",
    "FetchState",
    "HttpDataSource",
]
