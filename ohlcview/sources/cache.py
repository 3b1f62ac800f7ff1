"""Time-windowed fetch cache with retry and loading/error state."""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from ohlcview.models import SeriesResponse
from ohlcview.sources.base import BaseDataSource, FetchError

logger = logging.getLogger(__name__)


@dataclass
class FetchState:
    """Observable state of the last fetch for a symbol."""

    data: Optional[SeriesResponse] = None
    error: Optional[FetchError] = None
    is_loading: bool = False
    fetched_at: Optional[float] = None

    @property
    def is_error(self) -> bool:
        return self.error is not None


class CachedDataSource(BaseDataSource):
    """Wraps a data source; results stay fresh for ``stale_seconds``.

    A failed fetch is retried ``retry`` more times before the error is
    recorded and raised.
    """

    def __init__(
        self,
        source: BaseDataSource,
        stale_seconds: float = 300.0,
        retry: int = 1,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._source = source
        self._stale_seconds = stale_seconds
        self._retry = retry
        self._clock = clock
        self._states: dict[str, FetchState] = {}

    def state(self, symbol: str) -> FetchState:
        """Current fetch state for a symbol."""
        return self._states.setdefault(symbol.upper(), FetchState())

    def is_fresh(self, symbol: str) -> bool:
        st = self.state(symbol)
        if st.data is None or st.fetched_at is None:
            return False
        return self._clock() - st.fetched_at < self._stale_seconds

    def invalidate(self, symbol: Optional[str] = None) -> None:
        """Mark cached data stale so the next call refetches."""
        if symbol is None:
            for st in self._states.values():
                st.fetched_at = None
        else:
            self.state(symbol).fetched_at = None

    def get_series(self, symbol: str) -> SeriesResponse:
        st = self.state(symbol)
        if self.is_fresh(symbol):
            logger.debug("Cache hit for %s", symbol)
            return st.data

        st.is_loading = True
        try:
            attempts = self._retry + 1
            for attempt in range(1, attempts + 1):
                try:
                    data = self._source.get_series(symbol)
                except FetchError as e:
                    if attempt < attempts:
                        logger.warning(
                            "Fetch for %s failed (attempt %d/%d): %s",
                            symbol, attempt, attempts, e,
                        )
                        continue
                    st.error = e
                    raise
                st.data = data
                st.error = None
                st.fetched_at = self._clock()
                return data
        finally:
            st.is_loading = False
