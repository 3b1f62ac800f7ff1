"""Composed chart output models."""

from typing import Optional

from pydantic import BaseModel, Field

from ohlcview.models.fields import SeriesField


class ChartPoint(BaseModel):
    """A single point handed to the rendering surface."""

    value: float = Field(..., description="Field value at this point")
    label: Optional[str] = Field(default=None, description="Human-readable date")

    model_config = {"frozen": True}


class ViewModel(BaseModel):
    """Per-field point arrays plus the value-axis ticks."""

    series: dict[SeriesField, list[ChartPoint]] = Field(default_factory=dict)
    ticks: list[float] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def length(self) -> int:
        """Number of points in each visible series."""
        for points in self.series.values():
            return len(points)
        return 0
