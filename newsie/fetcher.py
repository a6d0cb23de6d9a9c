from __future__ import annotations

import logging
from typing import Any, Dict, List

import feedparser

from .exceptions import RSSFetchError
from .models import FeedItem
from .parser import parse_entry

logger = logging.getLogger(__name__)


def fetch_feed_entries(url: str) -> List[Dict[str, Any]]:
    """
    Fetch a single feed URL and return its raw entries in feed order.

    Raises RSSFetchError on network/parse issues. A feed flagged as malformed (bozo)
    is only rejected when nothing usable came out of it.
    """
    try:
        feed = feedparser.parse(url)
    except Exception as e:  # surface as domain error
        raise RSSFetchError(f"Failed to fetch feed: {url} ({e})") from e

    entries = getattr(feed, "entries", None)
    if getattr(feed, "bozo", 0):
        exc = getattr(feed, "bozo_exception", None)
        if not entries:
            msg = f"Invalid RSS/Atom feed: {url}"
            if exc:
                msg += f" ({exc})"
            raise RSSFetchError(msg)
        logger.warning("Feed may be malformed: %s (%s)", url, exc)

    if not isinstance(entries, list):
        raise RSSFetchError(f"Feed has no entries: {url}")
    return entries


def fetch_items(url: str) -> List[FeedItem]:
    """Fetch the feed and map every entry to a FeedItem, keeping feed order."""
    items = [parse_entry(e) for e in fetch_feed_entries(url)]
    logger.info("Fetched %d item(s) from %s", len(items), url)
    return items
