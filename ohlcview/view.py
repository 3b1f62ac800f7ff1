"""Chart view: owns series, zoom and visibility state for one view.

Derived data (decimated series, axis ticks, composed points) is cached
and recomputed in full whenever its inputs change. Decimation always
runs against the current series store.
"""

import logging
from typing import Iterable, Optional, Sequence

from ohlcview.config import ViewConfig
from ohlcview.core import compose, compute_ticks, decimate
from ohlcview.models import ALL_FIELDS, Candle, ChartPoint, SeriesField, SeriesResponse, ViewModel
from ohlcview.state import VisibilityState, ZoomState

logger = logging.getLogger(__name__)


class SeriesStore:
    """Raw ordered OHLCV series for one symbol, replaced wholesale."""

    def __init__(self, symbol: str = "", candles: Iterable[Candle] = ()):
        self._symbol = symbol
        self._candles: tuple[Candle, ...] = ()
        self.replace(candles, symbol)

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def candles(self) -> tuple[Candle, ...]:
        return self._candles

    def __len__(self) -> int:
        return len(self._candles)

    def replace(self, candles: Iterable[Candle], symbol: Optional[str] = None) -> None:
        """Swap in a new series.

        Raises:
            ValueError: If a timestamp is earlier than the one before it.
        """
        candles = tuple(candles)
        for prev, cur in zip(candles, candles[1:]):
            if cur.timestamp < prev.timestamp:
                raise ValueError(
                    f"Series timestamps must not decrease: "
                    f"{cur.timestamp} follows {prev.timestamp}"
                )
        self._candles = candles
        if symbol is not None:
            self._symbol = symbol


class ChartView:
    """Interactive zoom/visibility pipeline for a single chart."""

    def __init__(
        self,
        config: Optional[ViewConfig] = None,
        candles: Iterable[Candle] = (),
        symbol: Optional[str] = None,
    ):
        self.config = config or ViewConfig()
        self.store = SeriesStore(symbol or self.config.symbol, candles)
        self.zoom = ZoomState()
        self.visibility = VisibilityState(self.config.default_visible)

        self._decimated: Optional[list[Candle]] = None
        self._ticks: Optional[list[float]] = None
        self._series: Optional[dict[SeriesField, list[ChartPoint]]] = None

        self.zoom.on_commit(self._on_commit)

    def load(self, candles: Iterable[Candle], symbol: Optional[str] = None) -> None:
        """Replace the series (e.g. after a fetch completes)."""
        self.store.replace(candles, symbol)
        logger.debug("Loaded %d points for %s", len(self.store), self.store.symbol)
        self._invalidate()

    def load_response(self, response: SeriesResponse) -> None:
        self.load(response.data, response.symbol)

    def gesture_start(self) -> None:
        self.zoom.start()

    def gesture_update(self, scale_delta: float) -> float:
        """Track the gesture; derived data is not recomputed."""
        return self.zoom.update(scale_delta)

    def gesture_end(self) -> bool:
        return self.zoom.end()

    def apply_zoom(self, scale_delta: float) -> bool:
        """Run a complete start/update/end gesture."""
        self.gesture_start()
        self.gesture_update(scale_delta)
        return self.gesture_end()

    def toggle(self, field: "str | SeriesField") -> bool:
        visible = self.visibility.toggle(field)
        self._series = None
        if self.config.tick_scope == "visible":
            self._ticks = None
        return visible

    def reset(self) -> None:
        """Reset zoom to factor 1 and resync derived data with the store."""
        self.zoom.reset()
        self._invalidate()

    @property
    def factor(self) -> float:
        return self.zoom.committed

    @property
    def decimated(self) -> list[Candle]:
        if self._decimated is None:
            self._decimated = decimate(self.store.candles, self.zoom.committed)
            logger.debug(
                "Decimated %d -> %d points at factor %.4f",
                len(self.store), len(self._decimated), self.zoom.committed,
            )
        return self._decimated

    @property
    def ticks(self) -> list[float]:
        if self._ticks is None:
            self._ticks = compute_ticks(self.decimated, self._tick_fields())
        return self._ticks

    @property
    def series(self) -> dict[SeriesField, list[ChartPoint]]:
        if self._series is None:
            self._series = compose(
                self.decimated, self.visibility, self.config.label_policy
            )
        return self._series

    def view_model(self) -> ViewModel:
        return ViewModel(series=self.series, ticks=self.ticks)

    def _tick_fields(self) -> Sequence[SeriesField]:
        if self.config.tick_scope == "visible":
            return self.visibility.visible_fields()
        return ALL_FIELDS

    def _on_commit(self, factor: float) -> None:
        self._invalidate()

    def _invalidate(self) -> None:
        self._decimated = None
        self._ticks = None
        self._series = None
