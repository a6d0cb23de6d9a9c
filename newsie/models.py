from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FeedItem:
    """
    One announcement from the news feed.

    `description` holds the raw HTML body as supplied by the feed.
    """
    title: str
    description: str
    published: str
    link: str


@dataclass(frozen=True)
class TextRun:
    """A contiguous span of rendered text and whether it came from a <code> element."""
    text: str
    is_code: bool = False
