"""Tolerant ingestion path for feeds already decomposed by feedparser."""

import time
from datetime import datetime, timezone
from typing import Any, List, Optional, Union

import feedparser

from ..errors import ParseError
from ..models import FeedSnapshot, Item
from .normalize import join_authors, sanitize


def _to_datetime(parsed: Optional[time.struct_time]) -> Optional[datetime]:
    """Convert a feedparser UTC time tuple to an aware datetime."""
    if not parsed:
        return None
    return datetime(*parsed[:6], tzinfo=timezone.utc)


def _author_names(entry: Any) -> List[str]:
    names = [a.get("name", "") for a in entry.get("authors", []) if a.get("name")]
    if not names and entry.get("author"):
        names = [entry.get("author")]
    return names


def _sanitize_field(entry: Any, field: str, text: str) -> str:
    try:
        return sanitize(text)
    except ValueError as e:
        raise ParseError(field, f"for {entry.get('link', '')!r}: {e}", line=text) from e


def item_from_entry(entry: Any) -> Item:
    """
    Build an Item from a single feedparser entry.

    Entries without a publication date are dated by their update time.

    Raises:
        ParseError: if the title or description markup cannot be sanitized
    """
    description = entry.get("summary") or entry.get("description") or ""
    link = entry.get("link", "")
    return Item(
        title=_sanitize_field(entry, "title", entry.get("title", "")),
        link=link,
        author=join_authors(_author_names(entry)),
        description=_sanitize_field(entry, "description", description),
        id=entry.get("id") or link,
        created=_to_datetime(entry.get("published_parsed") or entry.get("updated_parsed")),
        updated=_to_datetime(entry.get("updated_parsed")),
    )


def snapshot_from_feedparser(parsed: Any) -> FeedSnapshot:
    """
    Convert a feedparser result into a FeedSnapshot.

    A document feedparser flags as malformed is still accepted as long as it
    produced entries.

    Raises:
        ParseError: if the document is malformed and yielded no entries, or
            an entry carries markup that cannot be sanitized
    """
    if parsed.get("bozo") and not parsed.get("entries"):
        raise ParseError("feed", f"invalid feed: {parsed.get('bozo_exception')}")

    items = tuple(item_from_entry(entry) for entry in parsed.get("entries", []))

    updated = _to_datetime(parsed.get("feed", {}).get("updated_parsed"))
    if updated is None:
        times = [i.updated or i.created for i in items if i.updated or i.created]
        updated = max(times) if times else None

    return FeedSnapshot(items=items, updated=updated)


def parse_generic_feed(data: Union[bytes, str]) -> FeedSnapshot:
    """Parse any RSS or Atom document with feedparser."""
    return snapshot_from_feedparser(feedparser.parse(data))
