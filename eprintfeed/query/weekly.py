"""Weekly digest lookups."""

from typing import Optional, Tuple

from ..errors import FilterInputError
from ..models import Item
from ..store import FeedStore


def parse_week_key(year: str, week: str) -> Tuple[int, int]:
    """
    Parse year and week path segments.

    Raises:
        FilterInputError: if either segment is not a non-negative integer
    """
    if not year.isdigit() or not year.isascii():
        raise FilterInputError(year, "invalid year")
    if not week.isdigit() or not week.isascii():
        raise FilterInputError(week, "invalid week")
    return int(year), int(week)


def week_lookup(store: FeedStore, year: int, week: int) -> Optional[Tuple[Item, ...]]:
    """Return the bucket for an ISO year/week verbatim, or None if absent."""
    return store.week_bucket(year, week)
