from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from eprintfeed.models import FeedSnapshot, Item
from eprintfeed.store import FeedStore

FIXTURES = Path(__file__).parent / "fixtures"

# Monday of ISO week 10, 2022.
WEEK_10_2022 = datetime(2022, 3, 7, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def small_rss() -> bytes:
    """The two-item legacy RSS document."""
    return (FIXTURES / "small-rss.xml").read_bytes()


@pytest.fixture
def small_atom() -> bytes:
    """A two-item Atom document as served at the default upstream URL."""
    return (FIXTURES / "small-atom.xml").read_bytes()


@pytest.fixture
def make_item():
    """Factory for items created in ISO week 10 of 2022 unless told otherwise."""

    def _make(n: int = 1, created=WEEK_10_2022, **overrides) -> Item:
        fields = {
            "title": f"Paper {n}",
            "link": f"https://eprint.iacr.org/2022/{n}",
            "author": "Alice, and Bob",
            "description": f"Abstract of paper {n}",
            "id": f"https://eprint.iacr.org/2022/{n}",
            "created": created,
            "updated": created,
        }
        fields.update(overrides)
        return Item(**fields)

    return _make


@pytest.fixture
def make_snapshot(make_item):
    def _make(*numbers: int, updated=WEEK_10_2022, **item_overrides) -> FeedSnapshot:
        return FeedSnapshot(
            items=tuple(make_item(n, **item_overrides) for n in numbers),
            updated=updated,
        )

    return _make


@pytest.fixture
def store() -> FeedStore:
    return FeedStore()


def hours_after(start: datetime, hours: int) -> datetime:
    return start + timedelta(hours=hours)
