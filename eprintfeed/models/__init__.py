"""Data models for feed items and snapshots."""

from .item import Item
from .snapshot import FeedSnapshot

__all__ = ["Item", "FeedSnapshot"]
