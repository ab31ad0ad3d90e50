"""Immutable view of the upstream feed at one point in time."""

from datetime import datetime
from typing import Optional, Tuple

from pydantic import Field

from .base import FeedModel
from .item import Item


class FeedSnapshot(FeedModel):
    """Ordered items plus the document-level last build time."""

    items: Tuple[Item, ...] = Field(default_factory=tuple, description="Items in upstream order")
    updated: Optional[datetime] = Field(None, description="Last build time of the document")
