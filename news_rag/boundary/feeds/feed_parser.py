"""
Tolerant feed parser.

feedparser turns the payload into a sequence of entries (unwrapping CDATA
and escaped text, surviving malformed markup); each entry is then
field-extracted on its own so a bad item never takes its siblings down.

Dependencies: feedparser, news_rag.core.exceptions
System role: Structured extraction of candidate articles from raw feeds
"""

import io
import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

import feedparser

from news_rag.core.exceptions import ParseError

logger = logging.getLogger(__name__)

MIN_TITLE_LENGTH = 5
MIN_DESCRIPTION_LENGTH = 20

_TAG_RE = re.compile(r"<[^>]*>")

# Decoded after tag stripping, so escaped markup in text survives as literal text
_ENTITIES = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#x27;", "'"),
    ("&#39;", "'"),
    ("&nbsp;", " "),
    ("\xa0", " "),
    ("&amp;", "&"),
)


@dataclass(frozen=True)
class FeedItem:
    """A candidate article extracted from one feed entry."""

    title: str
    link: str
    description: str
    published_at: datetime | None = None


def clean_description(text: str) -> str:
    """
    Strip markup tags and decode the common HTML entities.

    Args:
        text: Raw description, possibly containing HTML

    Returns:
        str: Plain, trimmed text
    """
    text = _TAG_RE.sub("", text)
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return text.strip()


def _text_field(entry: Any, *keys: str) -> str | None:
    for key in keys:
        value = entry.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def _link(entry: Any) -> str | None:
    """
    URL of the entry's own link element.

    Only <link> elements count. feedparser also copies a permalink <guid>
    into entry.link when <link> is missing; that value is ignored.
    """
    for link in entry.get("links") or ():
        href = link.get("href")
        if link.get("rel", "alternate") == "alternate" and isinstance(href, str) and href.strip():
            return href.strip()
    return None


def _published_at(entry: Any) -> datetime | None:
    parsed = entry.get("published_parsed") or entry.get("updated_parsed")
    if not parsed:
        return None
    try:
        return datetime(*parsed[:6], tzinfo=timezone.utc)
    except (TypeError, ValueError, OverflowError):
        return None


def extract_item(entry: Any) -> FeedItem | None:
    """
    Extract one feed entry into a FeedItem.

    Missing fields are treated as absent rather than errors. Entries below
    the quality floor (title and link present, title longer than 5 chars,
    description longer than 20 chars) return None.

    Args:
        entry: feedparser entry mapping

    Returns:
        FeedItem, or None when the entry is below the quality floor

    Raises:
        ParseError: If the entry cannot be read at all
    """
    try:
        title = _text_field(entry, "title")
        link = _link(entry)
        raw_description = _text_field(entry, "summary", "description")
        published_at = _published_at(entry)
    except (AttributeError, KeyError, TypeError) as e:
        raise ParseError(f"Unreadable feed entry: {type(e).__name__}: {e}") from e

    description = clean_description(raw_description) if raw_description else ""

    if not title or not link:
        return None
    if len(title) <= MIN_TITLE_LENGTH or len(description) <= MIN_DESCRIPTION_LENGTH:
        return None

    return FeedItem(
        title=title,
        link=link,
        description=description,
        published_at=published_at,
    )


def parse_feed(payload: bytes | str, max_items: int = 10) -> list[FeedItem]:
    """
    Parse a raw RSS/Atom payload into candidate articles.

    Only the first max_items entries are considered. Malformed payloads
    yield whatever entries feedparser could recover, possibly none.

    Args:
        payload: Raw feed body
        max_items: Cap on entries read from this payload

    Returns:
        list[FeedItem]: Items that passed extraction and the quality floor
    """
    if isinstance(payload, str):
        payload = payload.encode("utf-8")

    parsed = feedparser.parse(io.BytesIO(payload))
    if parsed.get("bozo"):
        logger.warning(
            "Feed payload is not well-formed, continuing with recovered entries",
            extra={"error": str(parsed.get("bozo_exception"))},
        )

    items: list[FeedItem] = []
    for index, entry in enumerate(parsed.entries[:max_items]):
        try:
            item = extract_item(entry)
        except ParseError as e:
            logger.warning(f"Skipping feed entry #{index}: {e}")
            continue
        if item is not None:
            items.append(item)

    return items
