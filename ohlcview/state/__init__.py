"""Session-local UI state: zoom and visibility."""

from ohlcview.state.visibility import VisibilityState
from ohlcview.state.zoom import GesturePhase, ZoomState

__all__ = ["GesturePhase", "VisibilityState", "ZoomState"]
