"""Derived views over the feed store."""

from .filters import (
    TRIGGER_ANNOTATION,
    CustomFeed,
    build_custom_feed,
    filter_by_keywords,
    filter_items,
    triggering_keyword,
)
from .service import FeedQueries
from .weekly import parse_week_key, week_lookup

__all__ = [
    "TRIGGER_ANNOTATION",
    "CustomFeed",
    "FeedQueries",
    "build_custom_feed",
    "filter_by_keywords",
    "filter_items",
    "parse_week_key",
    "triggering_keyword",
    "week_lookup",
]
