"""Canonical feed entry."""

from datetime import datetime
from typing import Optional, Tuple

from pydantic import Field

from .base import FeedModel


class Item(FeedModel):
    """A single normalized feed entry."""

    title: str = Field("", description="Markup-free title")
    link: str = Field("", description="Entry URL")
    author: str = Field("", description="Display-joined author list")
    description: str = Field("", description="Markup-free abstract")
    id: str = Field("", description="Upstream identifier, not guaranteed unique")
    created: Optional[datetime] = Field(None, description="Publication time")
    updated: Optional[datetime] = Field(None, description="Last modification time")

    def iso_week(self) -> Optional[Tuple[int, int]]:
        """Return the ISO (year, week) of the creation time, if known."""
        if self.created is None:
            return None
        year, week, _ = self.created.isocalendar()
        return year, week
