from datetime import datetime, timezone

import pytest

from eprintfeed.errors import ParseError
from eprintfeed.ingestion.generic import item_from_entry, parse_generic_feed
from eprintfeed.store import FeedStore

ATOM = b"""<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Cryptology ePrint Archive</title>
  <id>https://eprint.iacr.org/</id>
  <updated>2022-03-08T10:00:00Z</updated>
  <entry>
    <title>Lattice signatures</title>
    <id>https://eprint.iacr.org/2022/300</id>
    <link href="https://eprint.iacr.org/2022/300"/>
    <published>2022-03-07T12:00:00Z</published>
    <updated>2022-03-08T09:00:00Z</updated>
    <author><name>Alice</name></author>
    <author><name>Bob</name></author>
    <author><name>Carol</name></author>
    <summary type="html">&lt;p&gt;We build ZK proofs.&lt;/p&gt;</summary>
  </entry>
  <entry>
    <title>Solo work</title>
    <id>https://eprint.iacr.org/2022/301</id>
    <link href="https://eprint.iacr.org/2022/301"/>
    <published>2022-01-03T08:30:00Z</published>
    <author><name>Dave</name></author>
    <summary>Plain abstract</summary>
  </entry>
</feed>
"""


def test_parse_generic_feed_builds_items():
    snapshot = parse_generic_feed(ATOM)

    assert snapshot.updated == datetime(2022, 3, 8, 10, 0, tzinfo=timezone.utc)
    assert len(snapshot.items) == 2

    first, second = snapshot.items
    assert first.title == "Lattice signatures"
    assert first.link == "https://eprint.iacr.org/2022/300"
    assert first.id == "https://eprint.iacr.org/2022/300"
    assert first.author == "Alice, Bob, and Carol"
    assert first.description == "We build ZK proofs."
    assert first.created == datetime(2022, 3, 7, 12, 0, tzinfo=timezone.utc)
    assert first.updated == datetime(2022, 3, 8, 9, 0, tzinfo=timezone.utc)

    assert second.author == "Dave"
    assert second.description == "Plain abstract"
    assert second.iso_week() == (2022, 1)


def test_feed_without_updated_uses_newest_item():
    doc = ATOM.replace(b"  <updated>2022-03-08T10:00:00Z</updated>\n", b"", 1)

    snapshot = parse_generic_feed(doc)

    assert snapshot.updated == datetime(2022, 3, 8, 9, 0, tzinfo=timezone.utc)


def test_garbage_document_is_a_parse_error():
    with pytest.raises(ParseError):
        parse_generic_feed(b"<html><body>not a feed")


def test_entry_with_only_updated_is_dated_and_indexed():
    doc = b"""<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Cryptology ePrint Archive</title>
  <id>https://eprint.iacr.org/</id>
  <entry>
    <title>Revised paper</title>
    <id>https://eprint.iacr.org/2022/302</id>
    <link href="https://eprint.iacr.org/2022/302"/>
    <updated>2022-03-07T09:15:04Z</updated>
    <summary>Only an update time</summary>
  </entry>
</feed>
"""
    snapshot = parse_generic_feed(doc)
    item = snapshot.items[0]

    assert item.created == datetime(2022, 3, 7, 9, 15, 4, tzinfo=timezone.utc)
    assert item.updated == item.created

    store = FeedStore()
    result = store.commit(snapshot)

    assert result.indexed == 1
    assert store.weeks() == [(2022, 10)]


@pytest.mark.parametrize("field", ["title", "description"])
def test_unparseable_entry_markup_is_a_parse_error(field):
    entry = {
        "title": "Lattice signatures",
        "summary": "Plain abstract",
        "link": "https://eprint.iacr.org/2022/300",
    }
    entry["summary" if field == "description" else field] = "SecFloat <![3 : broken"

    with pytest.raises(ParseError) as excinfo:
        item_from_entry(entry)

    assert excinfo.value.field == field
    assert "https://eprint.iacr.org/2022/300" in str(excinfo.value)
