"""Base data source interface for ohlcview."""

from abc import ABC, abstractmethod

from ohlcview.models import SeriesResponse


class FetchError(RuntimeError):
    """Raised when series data is unavailable (transport, status or payload)."""


class BaseDataSource(ABC):
    """Abstract base class for history data sources."""

    @abstractmethod
    def get_series(self, symbol: str) -> SeriesResponse:
        """Fetch the full OHLCV history for a symbol.

        Args:
            symbol: Trading symbol.

        Returns:
            The response envelope with ordered points.

        Raises:
            FetchError: If the data could not be fetched or parsed.
        """
        pass
