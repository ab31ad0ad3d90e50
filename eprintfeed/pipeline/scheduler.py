"""Periodic fetch, parse and commit of the upstream feed."""

import threading
import time
from datetime import datetime
from typing import Callable, Optional

import pendulum
from pydantic import BaseModel, Field
from rich.console import Console
from rich.markup import escape

from ..config import ConfigModel
from ..errors import FeedError
from ..ingestion import PARSERS, FeedFetcher
from ..models import FeedSnapshot
from ..store import FeedStore
from ..utils import format_rfc1123z

console = Console()

DEFAULT_INTERVAL = 2 * 60 * 60.0


class RefreshResult(BaseModel):
    """Outcome of a single refresh cycle."""

    success: bool = Field(..., description="Whether a snapshot was committed")
    started_at: datetime = Field(..., description="When the cycle started")
    duration: float = Field(0.0, description="Cycle duration in seconds")
    item_count: int = Field(0, description="Items in the committed snapshot")
    indexed: int = Field(0, description="Items newly added to the weekly index")
    updated: Optional[datetime] = Field(None, description="Last build time of the committed snapshot")
    error: Optional[str] = Field(None, description="Error message if failed")
    error_kind: Optional[str] = Field(None, description="Error class name if failed")


class RefreshScheduler:
    """
    Keeps a FeedStore populated from the upstream feed.

    A failed cycle leaves the store untouched, so consumers keep the last
    good snapshot until a later cycle succeeds. There is no retry or backoff
    beyond waiting for the next tick.
    """

    def __init__(
        self,
        store: FeedStore,
        fetch: Callable[[], bytes],
        parse: Callable[[bytes], FeedSnapshot],
        interval: float = DEFAULT_INTERVAL,
    ) -> None:
        """Initialize refresh scheduler."""
        self.store = store
        self.fetch = fetch
        self.parse = parse
        self.interval = interval
        self.last_result: Optional[RefreshResult] = None
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def run_once(self) -> RefreshResult:
        """Fetch, parse and commit once; failures are reported, not raised."""
        started_at = pendulum.now("UTC")
        start = time.monotonic()

        try:
            snapshot = self.parse(self.fetch())
        except FeedError as e:
            result = RefreshResult(
                success=False,
                started_at=started_at,
                duration=time.monotonic() - start,
                error=str(e),
                error_kind=type(e).__name__,
            )
            console.print(
                f"[red]Refresh failed at {format_rfc1123z(started_at)} "
                f"({result.error_kind}): {escape(result.error)}[/red]"
            )
            self.last_result = result
            return result

        commit = self.store.commit(snapshot)
        result = RefreshResult(
            success=True,
            started_at=started_at,
            duration=time.monotonic() - start,
            item_count=commit.item_count,
            indexed=commit.indexed,
            updated=snapshot.updated,
        )
        console.print(
            f"[green]Refreshed feed: {commit.item_count} items, "
            f"{commit.indexed} newly indexed, last build {format_rfc1123z(snapshot.updated) or 'unknown'}[/green]"
        )
        self.last_result = result
        return result

    def run_forever(self, interval: Optional[float] = None) -> None:
        """Call run_once every *interval* seconds until stop() is called."""
        if interval is None:
            interval = self.interval
        while not self._stop.wait(interval):
            try:
                self.run_once()
            except Exception as e:
                console.print(f"[red]Unexpected refresh error: {escape(str(e))}[/red]")

    def start(self, interval: Optional[float] = None) -> threading.Thread:
        """Run run_forever on a daemon thread."""
        if self._thread is not None and self._thread.is_alive():
            return self._thread
        self._stop.clear()
        self._thread = threading.Thread(
            target=self.run_forever,
            args=(interval,),
            name="eprintfeed-refresh",
            daemon=True,
        )
        self._thread.start()
        return self._thread

    def stop(self, timeout: Optional[float] = None) -> None:
        """Stop the background loop and wait for it to exit."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None


def build_scheduler(config: ConfigModel, store: FeedStore) -> RefreshScheduler:
    """Wire a scheduler to the configured upstream feed."""
    fetcher = FeedFetcher(
        url=config.feed.url,
        timeout=config.feed.timeout,
        user_agent=config.feed.user_agent,
    )
    return RefreshScheduler(
        store=store,
        fetch=fetcher.fetch_document_sync,
        parse=PARSERS[config.feed.format],
        interval=config.refresh.interval_seconds,
    )
