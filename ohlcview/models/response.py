"""Data source response envelope."""

from pydantic import BaseModel, Field

from ohlcview.models.candle import Candle


class SeriesResponse(BaseModel):
    """Represents the ``{symbol, data}`` payload of the history endpoint."""

    symbol: str = Field(..., min_length=1, description="Trading symbol")
    data: list[Candle] = Field(default_factory=list, description="Ordered OHLCV points")

    model_config = {"frozen": True}
