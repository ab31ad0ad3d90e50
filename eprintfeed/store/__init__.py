"""In-memory feed storage."""

from .feed_store import CommitResult, FeedStore
from .weekly_index import WeeklyIndex

__all__ = ["CommitResult", "FeedStore", "WeeklyIndex"]
