"""Concurrency-safe owner of the current feed snapshot and weekly index."""

import threading
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from ..models import FeedSnapshot, Item
from .weekly_index import WeeklyIndex


class CommitResult(BaseModel):
    """Outcome of installing a snapshot."""

    item_count: int = Field(0, description="Items in the committed snapshot")
    indexed: int = Field(0, description="Items newly added to the weekly index")
    unindexed: int = Field(0, description="Items without a creation time")


class FeedStore:
    """
    Holds the latest FeedSnapshot and the WeeklyIndex derived from it.

    A single lock guards both structures, so a reader never observes a
    snapshot whose items are not yet merged into the index, or the reverse.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._snapshot: Optional[FeedSnapshot] = None
        self._index = WeeklyIndex()

    def commit(self, snapshot: FeedSnapshot) -> CommitResult:
        """Install *snapshot* and merge its items into the weekly index."""
        with self._lock:
            self._snapshot = snapshot
            indexed, unindexed = self._index.merge(snapshot.items)
        return CommitResult(item_count=len(snapshot.items), indexed=indexed, unindexed=unindexed)

    def current_snapshot(self) -> Optional[FeedSnapshot]:
        """Return the most recently committed snapshot, or None before the first commit."""
        with self._lock:
            return self._snapshot

    @property
    def ready(self) -> bool:
        """Whether at least one snapshot has been committed."""
        return self.current_snapshot() is not None

    def week_bucket(self, year: int, week: int) -> Optional[Tuple[Item, ...]]:
        """Return the items indexed for an ISO year/week, or None if there are none."""
        with self._lock:
            return self._index.bucket(year, week)

    def read_week(self, year: int, week: int) -> Tuple[Optional[FeedSnapshot], Optional[Tuple[Item, ...]]]:
        """Return the current snapshot and one bucket, read under the same lock."""
        with self._lock:
            return self._snapshot, self._index.bucket(year, week)

    def weeks(self) -> List[Tuple[int, int]]:
        """Return every indexed (year, week) pair in ascending order."""
        with self._lock:
            return self._index.keys()
