"""Zoom factor state machine driven by pinch gesture events."""

import logging
import math
from enum import Enum
from typing import Callable

from ohlcview.core.decimation import normalize_factor

logger = logging.getLogger(__name__)

CommitListener = Callable[[float], None]


class GesturePhase(str, Enum):
    IDLE = "idle"
    GESTURING = "gesturing"


class ZoomState:
    """Committed and live zoom factor for one chart view.

    The live factor follows the gesture in progress and is always
    ``committed * scale_delta`` for the latest update. Only ``end()``
    (and ``reset()``) change the committed factor, and only those
    notify commit listeners; decimation observes nothing else.
    """

    def __init__(self, factor: float = 1.0):
        self._committed = normalize_factor(factor)
        self._live = self._committed
        self._phase = GesturePhase.IDLE
        self._updated = False
        self._listeners: list[CommitListener] = []

    @property
    def committed(self) -> float:
        return self._committed

    @property
    def live(self) -> float:
        return self._live

    @property
    def phase(self) -> GesturePhase:
        return self._phase

    @property
    def is_gesturing(self) -> bool:
        return self._phase is GesturePhase.GESTURING

    def on_commit(self, listener: CommitListener) -> None:
        """Register a callback invoked with the new committed factor."""
        self._listeners.append(listener)

    def start(self) -> None:
        """Begin a gesture; the live factor starts from the committed one."""
        self._phase = GesturePhase.GESTURING
        self._live = self._committed
        self._updated = False

    def update(self, scale_delta: float) -> float:
        """Apply a gesture update.

        Args:
            scale_delta: Scale relative to the start of the gesture.

        Returns:
            The live factor after the update.
        """
        if self._phase is not GesturePhase.GESTURING:
            return self._live
        if not math.isfinite(scale_delta) or scale_delta <= 0:
            logger.debug("Ignoring invalid scale delta %r", scale_delta)
            return self._live
        live = self._committed * scale_delta
        if not math.isfinite(live):
            logger.debug("Ignoring scale delta %r: live factor overflows", scale_delta)
            return self._live
        self._live = live
        self._updated = True
        return self._live

    def end(self) -> bool:
        """Finish the gesture and commit the live factor (clamped to >= 1).

        A gesture that saw no update commits nothing.

        Returns:
            True if the committed factor changed.
        """
        if self._phase is not GesturePhase.GESTURING:
            return False
        self._phase = GesturePhase.IDLE
        if not self._updated:
            self._live = self._committed
            return False
        self._updated = False
        return self._commit(self._live)

    def cancel(self) -> None:
        """Abandon the gesture in progress without committing."""
        self._phase = GesturePhase.IDLE
        self._live = self._committed
        self._updated = False

    def reset(self) -> bool:
        """Return to factor 1 from any state.

        Returns:
            True if the committed factor changed.
        """
        self._phase = GesturePhase.IDLE
        self._updated = False
        return self._commit(1.0)

    def _commit(self, factor: float) -> bool:
        factor = normalize_factor(factor)
        changed = factor != self._committed
        self._committed = factor
        self._live = factor
        if changed:
            logger.debug("Committed zoom factor %.4f", factor)
            for listener in self._listeners:
                listener(factor)
        return changed
