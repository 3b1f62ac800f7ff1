"""Candle (OHLCV) data model."""

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, Field

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Candle(BaseModel):
    """Represents a single OHLCV point of a series.

    The data source delivers ``timestamp`` as a decimal string of Unix
    seconds; it is coerced to an integer on ingestion.
    """

    timestamp: int = Field(..., description="Unix timestamp in seconds")
    open: float = Field(..., description="Opening price")
    high: float = Field(..., description="High price")
    low: float = Field(..., description="Low price")
    close: float = Field(..., description="Closing price")
    volume: float = Field(default=0.0, ge=0, description="Trading volume")

    model_config = {"frozen": True}

    @property
    def date(self) -> datetime:
        """Calendar datetime (UTC) of the point, from epoch milliseconds."""
        return EPOCH + timedelta(milliseconds=self.timestamp * 1000)

    def value(self, field: str) -> float:
        """Return the numeric value of an OHLC field by name."""
        return getattr(self, str(field))
