"""Configuration commands for the ohlcview CLI."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel

from ohlcview.config import CONFIG_PATH, write_template_config

console = Console()


@click.command()
@click.option(
    "-p", "--path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Where to write the config (default: {CONFIG_PATH})",
)
@click.option("-f", "--force", is_flag=True, help="Overwrite an existing config file")
def init(path: Optional[Path], force: bool) -> None:
    """Write a template configuration file."""
    target = path or CONFIG_PATH

    if target.exists() and not force:
        console.print(Panel(
            f"[yellow]Config already exists at[/yellow] [cyan]{target}[/cyan]\n\n"
            "Use [cyan]--force[/cyan] to overwrite it.",
            title="[bold yellow]Exists[/bold yellow]",
            border_style="yellow",
        ))
        return

    written = write_template_config(target)
    console.print(f"[green]✓[/green] Wrote config template to [cyan]{written}[/cyan]")
