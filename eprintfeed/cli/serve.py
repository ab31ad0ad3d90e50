"""Serve command implementation."""

from pathlib import Path
from typing import Optional

import typer
import uvicorn
from rich.console import Console
from rich.markup import escape

from ..config import Config
from ..pipeline import build_scheduler
from ..query import FeedQueries
from ..store import FeedStore
from ..web import create_app

console = Console()


def serve_command(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Configuration file"),
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port"),
) -> None:
    """Refresh the feed periodically and serve it over HTTP."""
    try:
        config = Config(config_path).config
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    store = FeedStore()
    scheduler = build_scheduler(config, store)

    # Populate before serving so the first requests see data.
    if config.refresh.run_on_start:
        result = scheduler.run_once()
        if not result.success:
            console.print("[yellow]Initial refresh failed; serving 'unavailable' until the next refresh[/yellow]")

    scheduler.start()
    console.print(
        f"[dim]Refreshing {config.feed.url} every {config.refresh.interval_hours:g} hours[/dim]"
    )

    app = create_app(FeedQueries(store, config.feed.url), public_url=config.server.public_url)
    try:
        uvicorn.run(
            app,
            host=host or config.server.host,
            port=port or config.server.port,
        )
    finally:
        scheduler.stop(timeout=5)
