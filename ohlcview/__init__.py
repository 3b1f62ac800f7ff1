"""ohlcview - zoomable, decimated OHLC chart pipeline."""

__version__ = "0.1.0"
