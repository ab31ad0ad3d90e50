import httpx
import pytest

from eprintfeed.errors import FetchError
from eprintfeed.ingestion import FeedFetcher

URL = "https://eprint.iacr.org/rss/rss.xml"


def make_fetcher(handler) -> FeedFetcher:
    return FeedFetcher(URL, timeout=1.0, transport=httpx.MockTransport(handler))


def test_fetch_returns_body_bytes(small_rss):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["user_agent"] = request.headers["User-Agent"]
        return httpx.Response(200, content=small_rss)

    assert make_fetcher(handler).fetch_document_sync() == small_rss
    assert seen["url"] == URL
    assert seen["user_agent"].startswith("eprintfeed/")


def test_non_2xx_is_a_fetch_error():
    fetcher = make_fetcher(lambda request: httpx.Response(503, text="maintenance"))

    with pytest.raises(FetchError) as excinfo:
        fetcher.fetch_document_sync()

    assert excinfo.value.status_code == 503
    assert excinfo.value.url == URL


def test_connection_failure_is_a_fetch_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(FetchError) as excinfo:
        make_fetcher(handler).fetch_document_sync()

    assert excinfo.value.status_code is None


def test_timeout_is_a_fetch_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("too slow", request=request)

    with pytest.raises(FetchError, match="timed out"):
        make_fetcher(handler).fetch_document_sync()
