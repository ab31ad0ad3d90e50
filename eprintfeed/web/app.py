"""HTTP surface over the feed store."""

from typing import Annotated, List

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import PlainTextResponse, Response

from ..errors import FeedUnavailableError, FilterInputError
from ..query import FeedQueries, parse_week_key
from ..utils import format_rfc1123z, minutes_since
from .atom import render_atom

ATOM_MEDIA_TYPE = "application/atom+xml"
UNAVAILABLE_MESSAGE = "failed to retrieve page, please try again later."


def create_app(queries: FeedQueries, public_url: str = "https://eprint.fans") -> FastAPI:
    """Build the FastAPI application serving *queries*."""
    app = FastAPI(
        title="eprintfeed",
        description="Keyword-filtered and weekly views of the IACR Cryptology ePrint Archive feed",
        version="0.1.0",
    )

    @app.exception_handler(FeedUnavailableError)
    def unavailable_handler(request: Request, exc: FeedUnavailableError) -> PlainTextResponse:
        return PlainTextResponse(UNAVAILABLE_MESSAGE, status_code=503)

    @app.exception_handler(FilterInputError)
    def bad_input_handler(request: Request, exc: FilterInputError) -> PlainTextResponse:
        return PlainTextResponse(str(exc), status_code=400)

    @app.get("/")
    def root():
        """Feed status and the weeks that can be browsed."""
        snapshot = queries.current_snapshot()
        return {
            "last_updated": format_rfc1123z(snapshot.updated),
            "elapsed_since_last_updated": minutes_since(snapshot.updated),
            "items": len(snapshot.items),
            "weeks": [{"year": year, "week": week} for year, week in queries.weeks()],
        }

    @app.get("/feed/")
    def feed(
        request: Request,
        keyword: Annotated[List[str], Query(description="Keywords to match (repeatable)")] = [],
        show_all_items: Annotated[str, Query(description='"true" to disable filtering')] = "",
    ) -> Response:
        """Atom feed filtered by keywords, or the full feed."""
        show_all = show_all_items == "true"
        link = public_url.rstrip("/") + str(request.url.path)
        if request.url.query:
            link += "?" + request.url.query
        custom = queries.custom_feed(keyword, show_all, link)
        return Response(content=render_atom(custom), media_type=ATOM_MEDIA_TYPE)

    @app.get("/week/{year}/{week}")
    def week(year: str, week: str):
        """Every item first published in an ISO year/week."""
        year_num, week_num = parse_week_key(year, week)
        snapshot, bucket = queries.read_week(year_num, week_num)
        if bucket is None:
            raise HTTPException(status_code=404, detail="week not found")
        return {
            "year": year_num,
            "week": week_num,
            "number": len(bucket),
            "listings": [item.model_dump(mode="json") for item in bucket],
            "last_updated": format_rfc1123z(snapshot.updated),
            "elapsed_since_last_updated": minutes_since(snapshot.updated),
        }

    return app
