"""Upstream fetching, parsing and normalization."""

from .fetcher import FeedFetcher
from .generic import parse_generic_feed, snapshot_from_feedparser
from .line_parser import LineParser, parse_eprint_feed
from .normalize import join_authors, sanitize, strip_cdata

PARSERS = {
    "legacy": parse_eprint_feed,
    "generic": parse_generic_feed,
}

__all__ = [
    "FeedFetcher",
    "LineParser",
    "PARSERS",
    "parse_eprint_feed",
    "parse_generic_feed",
    "snapshot_from_feedparser",
    "join_authors",
    "sanitize",
    "strip_cdata",
]
