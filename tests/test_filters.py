import pytest

from eprintfeed.errors import FeedUnavailableError, FilterInputError
from eprintfeed.models import FeedSnapshot
from eprintfeed.query import (
    FeedQueries,
    build_custom_feed,
    filter_by_keywords,
    filter_items,
    parse_week_key,
    triggering_keyword,
)

from .conftest import WEEK_10_2022


@pytest.fixture
def snapshot(make_item):
    return FeedSnapshot(
        items=(
            make_item(1, title="Efficient lattice signatures", description="We build ZK proofs."),
            make_item(2, title="Isogeny walks", description="Supersingular curves.", author="Carol"),
            make_item(3, title="Threshold ECDSA", description="Lattice-free MPC.", author="Dave, and Erin"),
        ),
        updated=WEEK_10_2022,
    )


def test_keyword_in_title_selects_and_annotates(snapshot):
    items = filter_by_keywords(snapshot, ["lattice"])

    assert [item.title for item in items] == ["Efficient lattice signatures", "Threshold ECDSA"]
    assert items[0].description == '[[Triggering Keyword: "lattice"]] We build ZK proofs.'
    assert items[1].description == '[[Triggering Keyword: "lattice"]] Lattice-free MPC.'


def test_matching_is_case_insensitive_and_keeps_keyword_spelling(snapshot):
    items = filter_by_keywords(snapshot, ["ISOGENY"])

    assert [item.title for item in items] == ["Isogeny walks"]
    assert items[0].description.startswith('[[Triggering Keyword: "ISOGENY"]] ')


def test_author_matches(snapshot):
    items = filter_by_keywords(snapshot, ["erin"])

    assert [item.title for item in items] == ["Threshold ECDSA"]


def test_last_matching_keyword_is_annotated(snapshot):
    items = filter_by_keywords(snapshot, ["zk", "missing", "lattice"])

    assert items[0].description.startswith('[[Triggering Keyword: "lattice"]] ')
    assert triggering_keyword(snapshot.items[0], ["lattice", "zk"]) == "zk"


def test_keyword_markup_is_escaped_in_the_annotation(make_item):
    item = make_item(1, title="Bounds for x<b>y", description="Plain abstract.")

    (selected,) = filter_items([item], ["x<b>"])

    assert selected.description == '[[Triggering Keyword: "x&lt;b&gt;"]] Plain abstract.'


def test_unmatched_keyword_returns_nothing(snapshot):
    assert filter_by_keywords(snapshot, ["hash-based"]) == []


def test_no_keywords_returns_nothing(snapshot):
    assert filter_by_keywords(snapshot, []) == []


def test_show_all_ignores_keywords_and_leaves_items_unmodified(snapshot):
    items = filter_by_keywords(snapshot, ["hash-based"], show_all=True)

    assert items == list(snapshot.items)


def test_filtering_does_not_mutate_the_snapshot(snapshot):
    before = snapshot.model_copy(deep=True)

    filter_items(snapshot.items, ["lattice"])

    assert snapshot == before


def test_custom_feed_titles(snapshot):
    custom = build_custom_feed(
        snapshot, ["lattice", "zk"], False, "https://eprint.fans/feed/?keyword=lattice", "https://src"
    )
    full = build_custom_feed(snapshot, [], True, "https://eprint.fans/feed/", "https://src")

    assert custom.title == 'custom eprint feed with keywords: "lattice", "zk"'
    assert custom.description == "generated using eprint.fans from https://src"
    assert custom.updated == WEEK_10_2022
    assert len(custom.items) == 2
    assert full.title == "full eprint feed"
    assert len(full.items) == 3


def test_queries_report_unavailable_before_first_commit(store):
    queries = FeedQueries(store, "https://src")

    with pytest.raises(FeedUnavailableError):
        queries.filter_by_keywords(["lattice"])
    with pytest.raises(FeedUnavailableError):
        queries.read_week(2022, 10)
    assert queries.week_bucket(2022, 10) is None


def test_queries_read_from_store(store, snapshot):
    store.commit(snapshot)
    queries = FeedQueries(store, "https://src")

    assert len(queries.filter_by_keywords(["lattice"])) == 2
    assert queries.week_bucket(2022, 10) == snapshot.items
    assert queries.week_bucket(2022, 11) is None
    assert queries.weeks() == [(2022, 10)]


@pytest.mark.parametrize("year, week", [("2022", "x"), ("-1", "3"), ("20.2", "3"), ("2022", ""), ("２０２２", "1")])
def test_parse_week_key_rejects_malformed_input(year, week):
    with pytest.raises(FilterInputError):
        parse_week_key(year, week)


def test_parse_week_key():
    assert parse_week_key("2022", "09") == (2022, 9)
