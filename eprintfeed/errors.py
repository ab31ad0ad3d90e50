"""Error types raised by the ingestion pipeline and query layer."""

from typing import Optional


class FeedError(Exception):
    """Base class for all eprintfeed errors."""


class FetchError(FeedError):
    """Upstream document could not be retrieved."""

    def __init__(self, url: str, message: str, status_code: Optional[int] = None) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(f"failed to fetch {url}: {message}")


class ParseError(FeedError):
    """Upstream document does not follow the expected line grammar."""

    def __init__(self, field: str, message: str, line: Optional[str] = None) -> None:
        self.field = field
        self.line = line
        super().__init__(f"failed to parse {field}: {message}")


class FilterInputError(FeedError):
    """Query parameters that cannot be interpreted."""

    def __init__(self, value: str, message: str) -> None:
        self.value = value
        super().__init__(f"{message}: {value!r}")


class FeedUnavailableError(FeedError):
    """No snapshot has been committed yet."""

    def __init__(self) -> None:
        super().__init__("feed not yet available, please try again later")
