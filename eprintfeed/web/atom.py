"""Atom 1.0 rendering of derived feeds."""

import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from typing import Optional

import pendulum

from ..query import CustomFeed

ATOM_NS = "http://www.w3.org/2005/Atom"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


def rfc3339(value: Optional[datetime]) -> str:
    """Format a timestamp for Atom date constructs; naive values are taken as UTC."""
    if value is None:
        value = pendulum.now("UTC")
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def render_atom(feed: CustomFeed) -> str:
    """Serialize *feed* as an Atom document."""
    root = ET.Element("feed", {"xmlns": ATOM_NS})
    ET.SubElement(root, "title").text = feed.title
    ET.SubElement(root, "id").text = feed.link
    ET.SubElement(root, "updated").text = rfc3339(feed.updated)
    ET.SubElement(root, "subtitle").text = feed.description
    ET.SubElement(root, "link", {"href": feed.link, "rel": "self"})

    for item in feed.items:
        entry = ET.SubElement(root, "entry")
        ET.SubElement(entry, "title").text = item.title
        ET.SubElement(entry, "id").text = item.id or item.link
        ET.SubElement(entry, "updated").text = rfc3339(item.updated or item.created or feed.updated)
        if item.created is not None:
            ET.SubElement(entry, "published").text = rfc3339(item.created)
        ET.SubElement(entry, "link", {"href": item.link, "rel": "alternate"})
        if item.author:
            author = ET.SubElement(entry, "author")
            ET.SubElement(author, "name").text = item.author
        # Descriptions are already HTML-escaped plain text.
        ET.SubElement(entry, "summary", {"type": "html"}).text = item.description

    return XML_DECLARATION + ET.tostring(root, encoding="unicode")
