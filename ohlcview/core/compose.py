"""Composition of per-field point arrays for the rendering surface."""

from typing import Literal, Mapping, Sequence

from ohlcview.models import ALL_FIELDS, Candle, ChartPoint, SeriesField

LabelPolicy = Literal["first", "all", "none"]

DATE_FORMAT = "%Y-%m-%d"


def format_label(candle: Candle) -> str:
    """Human-readable calendar date of a point (UTC)."""
    return candle.date.strftime(DATE_FORMAT)


def compose(
    series: Sequence[Candle],
    visibility: Mapping[SeriesField, bool],
    label_policy: LabelPolicy = "first",
) -> dict[SeriesField, list[ChartPoint]]:
    """Build one point array per visible field.

    Fields whose flag is false are omitted from the result entirely.
    Every array has exactly one entry per point in ``series``.

    Args:
        series: Decimated points.
        visibility: Flag per field; missing fields count as hidden.
        label_policy: Which arrays carry date labels: only the first
            visible one, every one, or none.

    Returns:
        Mapping of field to ordered chart points, in canonical field order.
    """
    labels = [format_label(c) for c in series] if label_policy != "none" else []

    result: dict[SeriesField, list[ChartPoint]] = {}
    for field in ALL_FIELDS:
        if not visibility.get(field, False):
            continue
        labelled = label_policy == "all" or (label_policy == "first" and not result)
        result[field] = [
            ChartPoint(
                value=candle.value(field),
                label=labels[i] if labelled else None,
            )
            for i, candle in enumerate(series)
        ]
    return result
