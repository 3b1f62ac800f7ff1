"""Per-field visibility flags."""

from typing import Iterable, Iterator, Mapping, Optional

from ohlcview.models import ALL_FIELDS, SeriesField


class VisibilityState(Mapping[SeriesField, bool]):
    """Independent on/off flag for each OHLC field."""

    def __init__(self, visible: Optional[Iterable["str | SeriesField"]] = None):
        """Initialize the flags.

        Args:
            visible: Fields shown by default. All four when omitted.
        """
        if visible is None:
            defaults = set(ALL_FIELDS)
        else:
            defaults = {SeriesField.parse(f) for f in visible}
        self._defaults = {f: f in defaults for f in ALL_FIELDS}
        self._flags = dict(self._defaults)

    def __getitem__(self, field: "str | SeriesField") -> bool:
        try:
            return self._flags[SeriesField.parse(field)]
        except ValueError:
            raise KeyError(field) from None

    def __iter__(self) -> Iterator[SeriesField]:
        return iter(ALL_FIELDS)

    def __len__(self) -> int:
        return len(self._flags)

    def __repr__(self) -> str:
        shown = ",".join(str(f) for f in self.visible_fields())
        return f"VisibilityState({shown})"

    def is_visible(self, field: "str | SeriesField") -> bool:
        return self._flags[SeriesField.parse(field)]

    def toggle(self, field: "str | SeriesField") -> bool:
        """Flip one field's flag and return its new value."""
        field = SeriesField.parse(field)
        self._flags[field] = not self._flags[field]
        return self._flags[field]

    def set(self, field: "str | SeriesField", visible: bool) -> None:
        self._flags[SeriesField.parse(field)] = bool(visible)

    def visible_fields(self) -> list[SeriesField]:
        """Visible fields in canonical order."""
        return [f for f in ALL_FIELDS if self._flags[f]]

    def reset(self) -> None:
        """Restore the flags this state was created with."""
        self._flags = dict(self._defaults)
