"""
newsie

A small terminal reader for the Arch Linux news feed.

Core ideas:
- Input: the Arch Linux news RSS feed
- Process: fetch → parse → check each title against the read-state cache → render
- Output: listings, rendered posts, and an unread count usable as an exit status
  (handy from a pacman hook)

Example
-------
from newsie import FeedSession

session = FeedSession.initialize()
for line in session.list_items(include_read=True):
    print(line)
print(session.read_item(1))
"""
__version__ = "1.0.0"

from .models import FeedItem, TextRun
from .cache import ReadStateCache, hash_title
from .renderer import render_item, tokenize_description
from .core import FeedSession

__all__ = [
    "FeedItem",
    "TextRun",
    "ReadStateCache",
    "hash_title",
    "render_item",
    "tokenize_description",
    "FeedSession",
    "__version__",
]
