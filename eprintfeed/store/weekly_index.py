"""Items accumulated per ISO year and week."""

from typing import Dict, Iterable, List, Optional, Tuple

from ..models import Item


class WeeklyIndex:
    """
    Mapping of ISO year -> ISO week -> items, in first-seen order.

    The index only grows: merging appends items not already present in their
    bucket and never removes anything. It is not synchronized; FeedStore owns
    the only instance and guards it.
    """

    def __init__(self) -> None:
        self._years: Dict[int, Dict[int, List[Item]]] = {}

    def merge(self, items: Iterable[Item]) -> Tuple[int, int]:
        """
        Merge items into their buckets.

        Returns:
            Number of newly added items and number of items without a
            creation time, which cannot be bucketed
        """
        added = 0
        skipped = 0
        for item in items:
            key = item.iso_week()
            if key is None:
                skipped += 1
                continue
            year, week = key
            bucket = self._years.setdefault(year, {}).setdefault(week, [])
            if item not in bucket:
                bucket.append(item)
                added += 1
        return added, skipped

    def bucket(self, year: int, week: int) -> Optional[Tuple[Item, ...]]:
        """Return a copy of one bucket, or None if it does not exist."""
        weeks = self._years.get(year)
        if weeks is None or week not in weeks:
            return None
        return tuple(weeks[week])

    def keys(self) -> List[Tuple[int, int]]:
        """Return every (year, week) pair in ascending order."""
        return sorted((year, week) for year, weeks in self._years.items() for week in weeks)

    def __len__(self) -> int:
        return sum(len(bucket) for weeks in self._years.values() for bucket in weeks.values())
