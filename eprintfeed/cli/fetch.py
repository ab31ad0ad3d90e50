"""Fetch and parse commands."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import Config
from ..errors import FeedError
from ..ingestion import PARSERS
from ..models import FeedSnapshot
from ..pipeline import build_scheduler
from ..query import filter_by_keywords
from ..store import FeedStore
from ..utils import format_rfc1123z

console = Console()


def print_snapshot(snapshot: FeedSnapshot, keywords: Optional[List[str]] = None) -> None:
    """Print a table of the snapshot's items, optionally filtered."""
    items = filter_by_keywords(snapshot, keywords) if keywords else list(snapshot.items)

    table = Table(title=f"Feed items (last build {format_rfc1123z(snapshot.updated) or 'unknown'})")
    table.add_column("Id", style="cyan", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Author", style="magenta")
    table.add_column("Created", style="yellow")

    for item in items:
        table.add_row(
            escape(item.id),
            escape(item.title),
            escape(item.author) or "-",
            format_rfc1123z(item.created) or "-",
        )

    console.print(table)
    console.print(f"{len(items)} of {len(snapshot.items)} items")


def fetch_command(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Configuration file"),
    keyword: Optional[List[str]] = typer.Option(None, "--keyword", "-k", help="Only show matching items"),
) -> None:
    """Fetch the upstream feed once and print its items."""
    try:
        config = Config(config_path).config
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    store = FeedStore()
    result = build_scheduler(config, store).run_once()
    if not result.success:
        raise typer.Exit(1)

    print_snapshot(store.current_snapshot(), keyword)


def parse_command(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Feed document to parse"),
    generic: bool = typer.Option(False, "--generic", help="Parse with feedparser instead of the line parser"),
    keyword: Optional[List[str]] = typer.Option(None, "--keyword", "-k", help="Only show matching items"),
) -> None:
    """Parse a local feed document and print its items."""
    parse = PARSERS["generic" if generic else "legacy"]
    try:
        snapshot = parse(path.read_bytes())
    except FeedError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    print_snapshot(snapshot, keyword)
