"""Keyword filtering of feed items."""

import html
from datetime import datetime
from typing import List, Optional, Sequence

from pydantic import BaseModel, Field

from ..models import FeedSnapshot, Item

TRIGGER_ANNOTATION = '[[Triggering Keyword: "{keyword}"]] '


class CustomFeed(BaseModel):
    """A derived feed ready for rendering."""

    title: str = Field(..., description="Feed title")
    link: str = Field(..., description="Self link of the derived feed")
    description: str = Field("", description="Feed description")
    updated: Optional[datetime] = Field(None, description="Last build time of the source snapshot")
    items: List[Item] = Field(default_factory=list, description="Selected items")


def triggering_keyword(item: Item, keywords: Sequence[str]) -> Optional[str]:
    """
    Return the keyword that selects *item*, or None.

    Every keyword is checked case-insensitively against the title,
    description and author. When several match, the last one in keyword
    order wins.
    """
    title = item.title.lower()
    description = item.description.lower()
    author = item.author.lower()

    triggering = None
    for keyword in keywords:
        needle = keyword.lower()
        if needle in title or needle in description or needle in author:
            triggering = keyword
    return triggering


def filter_items(items: Sequence[Item], keywords: Sequence[str], show_all: bool = False) -> List[Item]:
    """
    Select items matching any keyword, in their original order.

    Matching items get their description prefixed with the triggering
    keyword annotation. With *show_all* every item is returned unchanged.
    """
    if show_all:
        return list(items)

    selected = []
    for item in items:
        keyword = triggering_keyword(item, keywords)
        if keyword is None:
            continue
        # Descriptions hold escaped text.
        annotation = TRIGGER_ANNOTATION.format(keyword=html.escape(keyword, quote=False))
        selected.append(item.model_copy(update={"description": annotation + item.description}))
    return selected


def filter_by_keywords(snapshot: FeedSnapshot, keywords: Sequence[str], show_all: bool = False) -> List[Item]:
    """Apply filter_items to a snapshot."""
    return filter_items(snapshot.items, keywords, show_all=show_all)


def custom_feed_title(keywords: Sequence[str], show_all: bool = False) -> str:
    if show_all:
        return "full eprint feed"
    return 'custom eprint feed with keywords: "' + '", "'.join(keywords) + '"'


def build_custom_feed(
    snapshot: FeedSnapshot,
    keywords: Sequence[str],
    show_all: bool,
    link: str,
    source_url: str,
) -> CustomFeed:
    """Build the keyword-filtered (or full) feed served to subscribers."""
    return CustomFeed(
        title=custom_feed_title(keywords, show_all),
        link=link,
        description=f"generated using eprint.fans from {source_url}",
        updated=snapshot.updated,
        items=filter_by_keywords(snapshot, keywords, show_all=show_all),
    )
