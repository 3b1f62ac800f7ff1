"""HTTP history endpoint data source."""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from ohlcview.config import ViewConfig
from ohlcview.models import SeriesResponse
from ohlcview.sources.base import BaseDataSource, FetchError

logger = logging.getLogger(__name__)


class HttpDataSource(BaseDataSource):
    """Fetches ``{symbol, data}`` JSON with a single GET per call.

    No retry happens here; see ``CachedDataSource``.
    """

    def __init__(self, config: ViewConfig, client: Optional[httpx.Client] = None):
        """Initialize the source.

        Args:
            config: View configuration holding endpoint and timeout.
            client: Optional preconfigured httpx client (owned by the caller).
        """
        self._config = config
        self._client = client

    def get_series(self, symbol: str) -> SeriesResponse:
        url = self._config.url_for(symbol)
        logger.info("Fetching history for %s from %s", symbol, url)

        try:
            if self._client is not None:
                response = self._client.get(url)
            else:
                with httpx.Client(timeout=self._config.timeout) as client:
                    response = client.get(url)
        except httpx.HTTPError as e:
            raise FetchError(f"Request to {url} failed: {e}") from e

        if response.status_code != 200:
            raise FetchError(
                f"History endpoint returned HTTP {response.status_code} for {symbol}"
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise FetchError(f"Malformed JSON from history endpoint: {e}") from e

        try:
            result = SeriesResponse.model_validate(payload)
        except ValidationError as e:
            raise FetchError(f"Unexpected response shape for {symbol}: {e}") from e

        logger.info("Fetched %d points for %s", len(result.data), result.symbol)
        return result
