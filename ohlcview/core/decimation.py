"""Nth-sample decimation of an ordered OHLC series.

Zooming out keeps every Nth point of the raw series, where N is the
ceiling of the committed zoom factor. No aggregation or smoothing is
performed, so local extrema between kept samples can be hidden at
aggressive zoom-out levels.
"""

import math
from typing import Sequence, TypeVar

T = TypeVar("T")


def normalize_factor(factor: float) -> float:
    """Clamp a zoom factor into the valid range.

    Non-finite values and values below 1 clamp to 1 so that decimation
    never sees a zero or negative step.

    Args:
        factor: Raw zoom factor.

    Returns:
        A finite factor >= 1.
    """
    try:
        factor = float(factor)
    except (TypeError, ValueError):
        return 1.0
    if not math.isfinite(factor) or factor < 1:
        return 1.0
    return factor


def decimation_step(factor: float) -> int:
    """Integer sampling step for a zoom factor (``ceil`` of the clamped factor)."""
    return math.ceil(normalize_factor(factor))


def decimate(series: Sequence[T], factor: float) -> list[T]:
    """Decimate a series by keeping every Nth point.

    Args:
        series: Ordered sequence of points.
        factor: Zoom factor; N = ceil(factor).

    Returns:
        The points whose zero-based index is divisible by N, in original
        order. The first point is always kept. A factor of 1 returns a
        copy of the whole series.
    """
    step = decimation_step(factor)
    return list(series[::step])


def decimated_length(length: int, factor: float) -> int:
    """Number of points ``decimate`` keeps from a series of ``length`` points."""
    if length <= 0:
        return 0
    step = decimation_step(factor)
    return -(-length // step)
