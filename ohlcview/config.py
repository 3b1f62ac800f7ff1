"""Configuration for ohlcview.

Settings live in ``~/.config/ohlcview/config.toml`` under a ``[view]``
table. A missing file means defaults.
"""

from pathlib import Path
from typing import Literal, Optional

import toml
from pydantic import BaseModel, Field, ValidationError, field_validator

from ohlcview.models import ALL_FIELDS, SeriesField

CONFIG_DIR = Path.home() / ".config" / "ohlcview"
CONFIG_PATH = CONFIG_DIR / "config.toml"

DEFAULT_ENDPOINT = "https://mock.apidog.com/m1/892843-874692-default/marketdata/history/{symbol}"


class ViewConfig(BaseModel):
    """Settings owned by a single chart view instance."""

    endpoint: str = Field(
        default=DEFAULT_ENDPOINT,
        description="History endpoint URL; '{symbol}' is substituted",
    )
    symbol: str = Field(default="AAPL", min_length=1, description="Default symbol")
    timeout: float = Field(default=10.0, gt=0, description="HTTP timeout in seconds")
    stale_seconds: float = Field(
        default=300.0, ge=0, description="How long fetched data stays fresh"
    )
    retry: int = Field(default=1, ge=0, description="Extra attempts after a failed fetch")
    default_visible: list[SeriesField] = Field(
        default_factory=lambda: list(ALL_FIELDS),
        description="Fields shown when the view is created or reset",
    )
    tick_scope: Literal["all", "visible"] = Field(
        default="all", description="Fields that bound the value axis"
    )
    label_policy: Literal["first", "all", "none"] = Field(
        default="first", description="Which series carry date labels"
    )

    model_config = {"frozen": True}

    @field_validator("default_visible", mode="before")
    @classmethod
    def _parse_fields(cls, value):
        return [SeriesField.parse(v) for v in value]

    def url_for(self, symbol: str) -> str:
        return self.endpoint.format(symbol=symbol.upper())


def load_config(path: Optional[Path] = None) -> ViewConfig:
    """Load the view configuration.

    Args:
        path: Config file path (defaults to ~/.config/ohlcview/config.toml).

    Returns:
        The parsed configuration, or defaults if the file does not exist.

    Raises:
        ValueError: If the file cannot be parsed or holds invalid values.
    """
    path = path or CONFIG_PATH
    if not path.exists():
        return ViewConfig()

    try:
        raw = toml.load(path)
    except (OSError, toml.TomlDecodeError) as e:
        raise ValueError(f"Could not read config file {path}: {e}") from e

    try:
        return ViewConfig(**raw.get("view", {}))
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {path}:\n{e}") from e


def write_template_config(path: Optional[Path] = None) -> Path:
    """Write a template configuration file with the default values."""
    path = path or CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)

    defaults = ViewConfig()
    template = {
        "view": {
            "endpoint": defaults.endpoint,
            "symbol": defaults.symbol,
            "timeout": defaults.timeout,
            "stale_seconds": defaults.stale_seconds,
            "retry": defaults.retry,
            "default_visible": [str(f) for f in defaults.default_visible],
            "tick_scope": defaults.tick_scope,  # all or visible
            "label_policy": defaults.label_policy,  # first, all or none
        },
    }

    with open(path, "w") as f:
        toml.dump(template, f)

    return path
