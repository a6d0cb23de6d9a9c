from __future__ import annotations

from typing import Any, Dict, Iterable

from .models import FeedItem


def _first_text(entry: Dict[str, Any], keys: Iterable[str]) -> str:
    for key in keys:
        val = entry.get(key)
        if isinstance(val, str) and val:
            return val
    return ""


def parse_entry(entry: Dict[str, Any]) -> FeedItem:
    """
    Map a raw feed entry (from feedparser) to a FeedItem.

    The description is kept as HTML; rendering happens later. Titles are stripped
    because they are hashed for read tracking and stray whitespace would change the hash.
    """
    return FeedItem(
        title=_first_text(entry, ("title",)).strip(),
        description=_first_text(entry, ("description", "summary")),
        published=_first_text(entry, ("published", "updated")).strip(),
        link=_first_text(entry, ("link",)).strip(),
    )
