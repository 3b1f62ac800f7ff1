"""Value-axis tick calculation."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Sequence

from ohlcview.models import ALL_FIELDS, Candle, SeriesField

TICK_COUNT = 5

# Returned for empty or flat data instead of dividing by zero
FALLBACK_TICKS: tuple[float, ...] = (0, 1, 2, 3, 4)

CENT = Decimal("0.01")


def round_tick(value: float) -> float:
    """Round to 2 decimal places, halves away from zero."""
    return float(Decimal(repr(value)).quantize(CENT, rounding=ROUND_HALF_UP))


def value_range(
    series: Sequence[Candle],
    fields: Iterable[SeriesField] = ALL_FIELDS,
) -> Optional[tuple[float, float]]:
    """Find the min and max across the given fields of every point.

    Returns:
        ``(min, max)`` or None if there are no values.
    """
    names = [str(f) for f in fields]
    lo = float("inf")
    hi = float("-inf")
    for candle in series:
        for name in names:
            v = getattr(candle, name)
            if v < lo:
                lo = v
            if v > hi:
                hi = v
    if lo == float("inf") or hi == float("-inf"):
        return None
    return lo, hi


def compute_ticks(
    series: Sequence[Candle],
    fields: Iterable[SeriesField] = ALL_FIELDS,
) -> list[float]:
    """Calculate the 5 value-axis ticks for a (decimated) series.

    Ticks run from the maximum down to the minimum in 4 equal steps,
    each rounded to 2 decimal places. Empty or flat data gets the
    fixed fallback ``[0, 1, 2, 3, 4]``.

    Args:
        series: Points currently displayed.
        fields: Fields that bound the axis (all four by default).

    Returns:
        List of 5 tick values, top of axis first.
    """
    bounds = value_range(series, fields)
    if bounds is None:
        return list(FALLBACK_TICKS)

    lo, hi = bounds
    if lo == hi:
        return list(FALLBACK_TICKS)

    step = (hi - lo) / (TICK_COUNT - 1)
    return [
        round_tick(hi),
        round_tick(hi - step),
        round_tick(hi - 2 * step),
        round_tick(hi - 3 * step),
        round_tick(lo),
    ]
