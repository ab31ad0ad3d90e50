"""Text normalization for feed fields."""

import html
import warnings
from typing import Sequence

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning
from bs4.exceptions import ParserRejectedMarkup

# Short titles often look like URLs or file names to BeautifulSoup.
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

CDATA_OPEN = "<![CDATA["
CDATA_CLOSE = "]]>"

# Elements whose content is dropped along with the tags.
_DROPPED_ELEMENTS = ["script", "style"]


def strip_cdata(text: str) -> str:
    """Remove every CDATA marker from *text*."""
    return text.replace(CDATA_OPEN, "").replace(CDATA_CLOSE, "")


def sanitize(text: str) -> str:
    """
    Strip all markup from *text*, leaving escaped plain text.

    No tag survives: elements are unwrapped to their text content, while
    script and style elements are removed entirely. The remaining text is
    HTML-escaped so that decoded entities cannot reintroduce markup, which
    also makes the operation idempotent.

    Raises:
        ValueError: if the markup is too broken for the HTML parser
    """
    if not text:
        return ""

    try:
        soup = BeautifulSoup(text, "html.parser")
    except ParserRejectedMarkup as e:
        raise ValueError(f"unparseable markup in {text!r}: {e}") from e
    for element in soup(_DROPPED_ELEMENTS):
        element.decompose()

    return html.escape(soup.get_text(), quote=False)


def join_authors(names: Sequence[str]) -> str:
    """
    Join author names for display.

    Examples:
        [] -> ""
        ["A"] -> "A"
        ["A", "B"] -> "A, and B"
        ["A", "B", "C"] -> "A, B, and C"
    """
    if not names:
        return ""
    if len(names) == 1:
        return names[0]
    return ", ".join(names[:-1]) + ", and " + names[-1]
