"""OHLC value fields and their legend presentation."""

from enum import Enum


class SeriesField(str, Enum):
    """One of the four plotted price fields."""

    OPEN = "open"
    HIGH = "high"
    LOW = "low"
    CLOSE = "close"

    def __str__(self) -> str:
        return self.value

    @property
    def color(self) -> str:
        return FIELD_COLORS[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, name: "str | SeriesField") -> "SeriesField":
        """Resolve a field from its name (case-insensitive).

        Raises:
            ValueError: If the name is not an OHLC field.
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            valid = ", ".join(f.value for f in cls)
            raise ValueError(f"Unknown series field: {name!r}. Must be one of {valid}")


FIELD_COLORS = {
    SeriesField.OPEN: "#0A0A7C",
    SeriesField.HIGH: "#E8618C",
    SeriesField.LOW: "#22CCB2",
    SeriesField.CLOSE: "#7F55E0",
}

# Canonical ordering used for iteration and output
ALL_FIELDS: tuple[SeriesField, ...] = (
    SeriesField.OPEN,
    SeriesField.HIGH,
    SeriesField.LOW,
    SeriesField.CLOSE,
)
