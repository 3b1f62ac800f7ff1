"""Decimation, axis and composition functions."""

from ohlcview.core.axis import (
    FALLBACK_TICKS,
    TICK_COUNT,
    compute_ticks,
    round_tick,
    value_range,
)
from ohlcview.core.compose import compose, format_label
from ohlcview.core.decimation import (
    decimate,
    decimated_length,
    decimation_step,
    normalize_factor,
)

__all__ = [
    "FALLBACK_TICKS",
    "TICK_COUNT",
    "compose",
    "compute_ticks",
    "decimate",
    "decimated_length",
    "decimation_step",
    "format_label",
    "normalize_factor",
    "round_tick",
    "value_range",
]
