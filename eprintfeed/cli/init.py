"""Init command implementation."""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import ATOM_FEED_URL, DEFAULT_CONFIG_PATH, LEGACY_FEED_URL, ConfigModel, save_config

console = Console()


def init_command(
    config_path: Path = typer.Option(
        DEFAULT_CONFIG_PATH,
        "--config",
        "-c",
        help="Configuration file to write",
    ),
    generic: bool = typer.Option(
        True,
        "--generic/--legacy",
        help="Read the Atom feed through feedparser, or the legacy RSS layout with the line parser",
    ),
    port: int = typer.Option(8080, "--port", "-p", help="HTTP port"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write a default eprintfeed configuration."""
    if config_path.exists() and not force:
        console.print(f"[red]Config already exists: {config_path} (use --force to overwrite)[/red]")
        raise typer.Exit(1)

    config = ConfigModel(
        feed={
            "url": ATOM_FEED_URL if generic else LEGACY_FEED_URL,
            "format": "generic" if generic else "legacy",
        },
        server={"port": port},
    )
    save_config(config, config_path)

    console.print(
        Panel(
            f"[green]✅ Created config: {config_path}[/green]\n\n"
            f"Feed: {config.feed.url} ({config.feed.format})\n"
            f"Refresh every {config.refresh.interval_hours:g} hours\n\n"
            f"Next: [bold]eprintfeed serve[/bold]",
            style="green",
        )
    )
