"""Strict line-oriented parser for the legacy ePrint RSS document.

The upstream document is not validated against a schema. Instead every line
is matched against the exact layout the archive emits, and any drift in that
layout is reported as a ParseError rather than silently dropping data.
"""

from datetime import datetime
from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional, Union

from ..errors import ParseError
from ..models import FeedSnapshot, Item
from .normalize import sanitize, strip_cdata

LINES_TO_IGNORE = frozenset(
    [
        '<?xml version="1.0" encoding="UTF-8" ?>',
        '<rss version="2.0">',
        "<channel><title>Cryptology ePrint Archive</title>",
        "<link>https://eprint.iacr.org/</link>",
        "<description>Recently modified papers in the IACR Cryptology ePrint Archive</description>",
        "<language>en-us</language>",
        "<webMaster>webmaster@iacr.org</webMaster>",
        "<managingEditor>eprint-admin@iacr.org</managingEditor>",
        "<generator>None of your business</generator>",
        "<ttl>60</ttl>",
        "</channel></rss>",
    ]
)

LAST_BUILD_DATE_FORMAT = "%a, %d %b %Y %H:%M:%S %z"

ITEM_OPEN = "<item>"
ITEM_CLOSE = "</item>"
LAST_BUILD_DATE_OPEN = "<lastBuildDate>"
DESCRIPTION_OPEN = "<description>"
DESCRIPTION_CLOSE = "</description>"


class State(Enum):
    """Parser states."""

    SCANNING = "scanning"
    AWAITING_LINK = "awaiting link"
    AWAITING_TITLE = "awaiting title"
    AWAITING_DESCRIPTION = "awaiting description"
    AWAITING_GUID = "awaiting guid"
    AWAITING_ITEM_END = "awaiting item end"


def iter_lines(data: bytes) -> Iterator[str]:
    """Split *data* on newlines, dropping a trailing carriage return per line."""
    if not data:
        return
    chunks = data.split(b"\n")
    if chunks[-1] == b"":
        chunks.pop()
    for chunk in chunks:
        if chunk.endswith(b"\r"):
            chunk = chunk[:-1]
        yield chunk.decode("utf-8", errors="replace")


def strip_prefix_and_postfix(line: str, prefix: str, postfix: str) -> str:
    """
    Unwrap *line* from its literal *prefix* and *postfix*.

    Raises:
        ValueError: if either literal is missing or not at the expected end
    """
    if prefix not in line or postfix not in line:
        raise ValueError(f"expected line with {prefix} and {postfix}, got: {line}")
    if not line.startswith(prefix):
        raise ValueError(f"unexpected prefix! expected: {prefix!r}, got: {line[:len(prefix)]!r}")
    if not line.endswith(postfix):
        raise ValueError(f"unexpected postfix! expected: {postfix!r}, got: {line[len(line) - len(postfix):]!r}")
    return line[len(prefix):len(line) - len(postfix)]


def parse_last_build_date(line: str) -> datetime:
    """Parse a ``<lastBuildDate>`` line."""
    value = strip_prefix_and_postfix(line, LAST_BUILD_DATE_OPEN, "</lastBuildDate>")
    try:
        return datetime.strptime(value, LAST_BUILD_DATE_FORMAT)
    except ValueError as e:
        raise ValueError(f"unexpected date format {value!r}: {e}") from e


def parse_link(line: str) -> str:
    """Parse a ``<link>`` line."""
    return strip_prefix_and_postfix(line, "<link>", "</link>")


def parse_title(line: str) -> str:
    """Parse and sanitize a ``<title>`` line."""
    title = strip_prefix_and_postfix(line, "<title>", "</title>")
    return sanitize(strip_cdata(title))


def parse_description(text: str) -> str:
    """Parse and sanitize the concatenated description lines."""
    if DESCRIPTION_OPEN not in text or DESCRIPTION_CLOSE not in text:
        raise ValueError(f"expected description line, got: {text}")
    description = strip_prefix_and_postfix(text, DESCRIPTION_OPEN, DESCRIPTION_CLOSE)
    return sanitize(strip_cdata(description))


def parse_guid(line: str) -> str:
    """Parse a ``<guid>`` line."""
    return strip_prefix_and_postfix(line, "<guid>", "</guid>")


class LineParser:
    """
    State machine turning the legacy document into a FeedSnapshot.

    Each state has exactly one handler; a handler consumes one line and
    returns the next state. Inside an item no line may be skipped.
    """

    def __init__(self) -> None:
        self._transitions: Dict[State, Callable[[str], State]] = {
            State.SCANNING: self._scan,
            State.AWAITING_LINK: self._expect_link,
            State.AWAITING_TITLE: self._expect_title,
            State.AWAITING_DESCRIPTION: self._expect_description,
            State.AWAITING_GUID: self._expect_guid,
            State.AWAITING_ITEM_END: self._expect_item_end,
        }
        self._reset()

    def _reset(self) -> None:
        self.state = State.SCANNING
        self._items: List[Item] = []
        self._updated: Optional[datetime] = None
        self._link = ""
        self._title = ""
        self._description = ""
        self._description_lines = ""
        self._guid = ""

    def parse(self, data: Union[bytes, str]) -> FeedSnapshot:
        """
        Parse a complete document.

        Raises:
            ParseError: on the first line that does not fit the layout
        """
        if isinstance(data, str):
            data = data.encode("utf-8")

        self._reset()
        try:
            for line in iter_lines(data):
                self.state = self._transitions[self.state](line)
            if self.state is not State.SCANNING:
                self._finish()
            return FeedSnapshot(items=tuple(self._items), updated=self._updated)
        finally:
            self.state = State.SCANNING

    def _finish(self) -> None:
        # Input ended inside an item. The pending expectation sees an empty
        # line and fails through the same path as any other mismatch.
        if self.state is State.AWAITING_DESCRIPTION:
            raise ParseError(
                "description",
                f"for {self._link!r}: unterminated description: {self._description_lines}",
                line=self._description_lines,
            )
        self._transitions[self.state]("")

    def _scan(self, line: str) -> State:
        if line in LINES_TO_IGNORE:
            return State.SCANNING
        if LAST_BUILD_DATE_OPEN in line:
            try:
                self._updated = parse_last_build_date(line)
            except ValueError as e:
                raise ParseError("last build date", str(e), line=line) from e
            return State.SCANNING
        if ITEM_OPEN in line:
            return State.AWAITING_LINK
        raise ParseError("line", line, line=line)

    def _expect_link(self, line: str) -> State:
        try:
            self._link = parse_link(line)
        except ValueError as e:
            raise ParseError("link", str(e), line=line) from e
        return State.AWAITING_TITLE

    def _expect_title(self, line: str) -> State:
        try:
            self._title = parse_title(line)
        except ValueError as e:
            raise ParseError("title", f"for {self._link!r}: {e}", line=line) from e
        self._description_lines = ""
        return State.AWAITING_DESCRIPTION

    def _expect_description(self, line: str) -> State:
        self._description_lines += line
        if DESCRIPTION_CLOSE not in self._description_lines:
            return State.AWAITING_DESCRIPTION
        try:
            self._description = parse_description(self._description_lines)
        except ValueError as e:
            raise ParseError(
                "description", f"for {self._link!r}: {e}", line=self._description_lines
            ) from e
        return State.AWAITING_GUID

    def _expect_guid(self, line: str) -> State:
        try:
            self._guid = parse_guid(line)
        except ValueError as e:
            raise ParseError("guid", f"for {self._link!r}: {e}", line=line) from e
        return State.AWAITING_ITEM_END

    def _expect_item_end(self, line: str) -> State:
        if line != ITEM_CLOSE:
            raise ParseError("item end", f"for {self._link!r}: expected {ITEM_CLOSE}, got: {line}", line=line)
        self._items.append(
            Item(
                title=self._title,
                link=self._link,
                author="",
                description=self._description,
                id=self._guid,
                created=None,
                updated=None,
            )
        )
        return State.SCANNING


def parse_eprint_feed(data: Union[bytes, str]) -> FeedSnapshot:
    """Parse the legacy ePrint RSS document."""
    return LineParser().parse(data)
