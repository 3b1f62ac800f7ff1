"""Chart commands for the ohlcview CLI.

Fetches a symbol's history once, drives the zoom state through a
pinch gesture and prints the resulting axis ticks and series.
"""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ohlcview.config import ViewConfig, load_config
from ohlcview.models import ALL_FIELDS, SeriesField
from ohlcview.sources import BaseDataSource, CachedDataSource, FetchError, HttpDataSource
from ohlcview.view import ChartView

console = Console()

FIELD_NAMES = [f.value for f in ALL_FIELDS]


def _error(message: str) -> None:
    console.print(Panel(
        message,
        title="[bold red]Error[/bold red]",
        border_style="red",
    ))
    raise SystemExit(1)


def _get_config(config_path: Optional[Path]) -> ViewConfig:
    try:
        return load_config(config_path)
    except ValueError as e:
        _error(f"[red]Configuration error:[/red]\n\n{e}")


def _get_source(ctx: click.Context, config: ViewConfig) -> BaseDataSource:
    """Data source from the context object, or the configured HTTP endpoint."""
    source = (ctx.obj or {}).get("source")
    if source is not None:
        return source
    return CachedDataSource(
        HttpDataSource(config),
        stale_seconds=config.stale_seconds,
        retry=config.retry,
    )


def _build_view(
    ctx: click.Context,
    symbol: str,
    zoom: float,
    hide: tuple[str, ...],
    config: ViewConfig,
) -> ChartView:
    """Fetch the series and apply zoom and visibility to a new view."""
    source = _get_source(ctx, config)
    console.print(f"[dim]Fetching history for {symbol}...[/dim]")

    try:
        response = source.get_series(symbol)
    except FetchError as e:
        _error(f"[red]Failed to fetch data:[/red]\n\n{e}")

    view = ChartView(config)
    try:
        view.load_response(response)
    except ValueError as e:
        _error(f"[red]Invalid series data:[/red]\n\n{e}")

    if zoom != 1:
        view.apply_zoom(zoom)

    for name in hide:
        if view.visibility.is_visible(name):
            view.toggle(name)

    return view


def _legend(view: ChartView) -> Text:
    legend = Text()
    for field in ALL_FIELDS:
        shown = view.visibility.is_visible(field)
        marker = "●" if shown else "○"
        legend.append(f"{marker} {field.label}  ", style=field.color if shown else "dim")
    return legend


def _ticks_text(ticks: list[float]) -> str:
    return "\n".join(f"${t:g}" for t in ticks)


def render_chart(view: ChartView, rows: int) -> None:
    """Print legend, axis ticks and a table of the composed series."""
    model = view.view_model()

    console.print(_legend(view))
    console.print(Panel(
        _ticks_text(model.ticks),
        title="[bold]Axis[/bold]",
        border_style="cyan",
        expand=False,
    ))

    table = Table(
        title=(
            f"{view.store.symbol} - zoom {view.factor:g} "
            f"({len(view.decimated)} of {len(view.store)} points)"
        ),
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Date", style="dim")
    for field in model.series:
        table.add_column(field.label, justify="right", style=field.color)

    display = view.decimated[:rows] if rows > 0 else view.decimated
    for i, candle in enumerate(display):
        row = [candle.date.strftime("%Y-%m-%d")]
        row.extend(f"{points[i].value:.2f}" for points in model.series.values())
        table.add_row(*row)

    console.print(table)

    if 0 < rows < len(view.decimated):
        console.print(f"[dim]Showing first {rows} of {len(view.decimated)} points[/dim]")


@click.command()
@click.argument("symbol", required=False)
@click.option(
    "-z", "--zoom",
    default=1.0,
    type=float,
    help="Pinch scale applied to the chart (default: 1, full resolution)",
)
@click.option(
    "--hide",
    multiple=True,
    type=click.Choice(FIELD_NAMES, case_sensitive=False),
    help="Hide a series (repeatable)",
)
@click.option(
    "-n", "--rows",
    default=20,
    type=int,
    help="Number of rows to print, 0 for all (default: 20)",
)
@click.option(
    "-c", "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config.toml",
)
@click.pass_context
def chart(
    ctx: click.Context,
    symbol: Optional[str],
    zoom: float,
    hide: tuple[str, ...],
    rows: int,
    config_path: Optional[Path],
) -> None:
    """Show the decimated OHLC series for a symbol.

    SYMBOL defaults to the configured symbol.

    \b
    Examples:
      ohlcview chart AAPL
      ohlcview chart AAPL --zoom 4
      ohlcview chart AAPL --hide high --hide low
    """
    config = _get_config(config_path)
    symbol = (symbol or config.symbol).upper()
    view = _build_view(ctx, symbol, zoom, hide, config)
    render_chart(view, rows)


@click.command()
@click.argument("symbol", required=False)
@click.option("-z", "--zoom", default=1.0, type=float, help="Pinch scale (default: 1)")
@click.option(
    "-s", "--scope",
    type=click.Choice(["all", "visible"]),
    default=None,
    help="Fields that bound the axis (default: from config)",
)
@click.option(
    "--hide",
    multiple=True,
    type=click.Choice(FIELD_NAMES, case_sensitive=False),
    help="Hide a series (repeatable)",
)
@click.option(
    "-c", "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config.toml",
)
@click.pass_context
def ticks(
    ctx: click.Context,
    symbol: Optional[str],
    zoom: float,
    scope: Optional[str],
    hide: tuple[str, ...],
    config_path: Optional[Path],
) -> None:
    """Print the value-axis ticks for a symbol at a zoom level."""
    config = _get_config(config_path)
    if scope is not None:
        config = config.model_copy(update={"tick_scope": scope})
    symbol = (symbol or config.symbol).upper()
    view = _build_view(ctx, symbol, zoom, hide, config)

    for value in view.ticks:
        console.print(f"{value:.2f}")
