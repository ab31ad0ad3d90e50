"""Read API consumed by the presentation layer."""

from typing import List, Optional, Sequence, Tuple

from ..errors import FeedUnavailableError
from ..models import FeedSnapshot, Item
from ..store import FeedStore
from .filters import CustomFeed, build_custom_feed, filter_by_keywords
from .weekly import week_lookup


class FeedQueries:
    """Derive response views from a FeedStore without mutating it."""

    def __init__(self, store: FeedStore, source_url: str) -> None:
        self.store = store
        self.source_url = source_url

    def current_snapshot(self) -> FeedSnapshot:
        """
        Return the current snapshot.

        Raises:
            FeedUnavailableError: before the first successful refresh
        """
        snapshot = self.store.current_snapshot()
        if snapshot is None:
            raise FeedUnavailableError()
        return snapshot

    def filter_by_keywords(self, keywords: Sequence[str], show_all: bool = False) -> List[Item]:
        return filter_by_keywords(self.current_snapshot(), keywords, show_all=show_all)

    def custom_feed(self, keywords: Sequence[str], show_all: bool, link: str) -> CustomFeed:
        return build_custom_feed(self.current_snapshot(), keywords, show_all, link, self.source_url)

    def week_bucket(self, year: int, week: int) -> Optional[Tuple[Item, ...]]:
        return week_lookup(self.store, year, week)

    def read_week(self, year: int, week: int) -> Tuple[FeedSnapshot, Optional[Tuple[Item, ...]]]:
        """
        Return the current snapshot and one bucket, read together.

        Raises:
            FeedUnavailableError: before the first successful refresh
        """
        snapshot, bucket = self.store.read_week(year, week)
        if snapshot is None:
            raise FeedUnavailableError()
        return snapshot, bucket

    def weeks(self) -> List[Tuple[int, int]]:
        return self.store.weeks()
