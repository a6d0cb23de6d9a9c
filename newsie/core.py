from __future__ import annotations

import logging
import subprocess
from typing import Callable, List, Optional, Sequence, Tuple

from .cache import ReadStateCache, bootstrap_cache
from .config import Settings
from .exceptions import CacheWriteError, PostNumberError
from .fetcher import fetch_items
from .models import FeedItem
from .renderer import render_item
from .termstyle import style_text

logger = logging.getLogger(__name__)

NO_NEWS_MESSAGE = "No news is good news.\n"
NO_UNREAD_BROWSE_MESSAGE = (
    "You don't have any unread news. Use the -a option to browse all posts."
)
BROWSE_COMMAND = "newsie browse"

_AFFIRMATIVE = {"", "y", "yes"}


def clear_screen() -> None:
    try:
        subprocess.run(["clear"], check=False)
    except OSError as exc:
        logger.debug("Cannot clear screen: %s", exc)


class FeedSession:
    """
    State for one newsie invocation: the fetched posts, the read-state cache and
    the number of unread posts.

    The unread count is computed once at start-up and then only decremented when
    this session marks an unread post as read.

    Cache-write failures are tolerated by read_item (and therefore browse): the post
    is still shown and simply stays unread. clear_all lets them propagate.
    """

    def __init__(
        self,
        items: Sequence[FeedItem],
        cache: ReadStateCache,
        *,
        input_reader: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
        screen_clearer: Callable[[], None] = clear_screen,
    ) -> None:
        self.items: List[FeedItem] = list(items)
        self.cache = cache
        self._input = input_reader
        self._output = output
        self._clear_screen = screen_clearer
        self._unread = sum(1 for item in self.items if not cache.is_read(item.title))

    @classmethod
    def initialize(
        cls,
        settings: Optional[Settings] = None,
        *,
        fetcher: Callable[[str], List[FeedItem]] = fetch_items,
        **kwargs,
    ) -> "FeedSession":
        """
        Prepare and load the cache, then fetch the feed.

        Every failure surfaces as a NewsieError; there is no partial session.
        """
        settings = settings or Settings()
        path = bootstrap_cache(settings.cache_dir)
        logger.info("Using cache %s", path)
        cache = ReadStateCache.open(path)
        items = fetcher(settings.feed_url)
        return cls(items, cache, **kwargs)

    @property
    def unread_count(self) -> int:
        return self._unread

    def is_read(self, item: FeedItem) -> bool:
        return self.cache.is_read(item.title)

    def _mark_read(self, item: FeedItem) -> None:
        self.cache.mark_read(item.title)
        self._unread = max(0, self._unread - 1)
        logger.info("Marked as read: %s", item.title)

    def _confirm(self, prompt: str) -> bool:
        try:
            answer = self._input(prompt)
        except EOFError:
            return False
        return answer.strip().lower() in _AFFIRMATIVE

    def list_items(self, include_read: bool = False) -> List[str]:
        """
        Return one formatted line per listed post, numbered by feed position.

        Unread posts are highlighted; read posts only appear with include_read.
        """
        lines: List[str] = []
        for number, item in enumerate(self.items, start=1):
            index = f"{number}.".ljust(4)
            if not self.is_read(item):
                lines.append(
                    style_text(index, ["bold", "red"]) + style_text(item.title, ["red"])
                )
            elif include_read:
                lines.append(style_text(index, ["bold"]) + item.title)
        return lines

    def read_item(self, number: int) -> str:
        """
        Render post `number` (1-based) and mark it read if it was unread.

        Raises PostNumberError when the number is out of range.
        """
        if number < 1 or number > len(self.items):
            raise PostNumberError(f"Invalid post number: {number}")

        item = self.items[number - 1]
        pretty = render_item(item)

        if not self.is_read(item):
            try:
                self._mark_read(item)
            except CacheWriteError as exc:
                logger.warning("Could not mark post as read: %s", exc)
        return pretty

    def browse(self, include_all: bool = False) -> None:
        """
        Show posts one by one (unread only unless include_all), asking before each next one.
        """
        if not include_all and self._unread == 0:
            self._output(NO_UNREAD_BROWSE_MESSAGE)
            return

        for number, item in enumerate(self.items, start=1):
            if not include_all and self.is_read(item):
                continue
            self._clear_screen()
            self._output(self.read_item(number))
            if not self._confirm(style_text("\nContinue? [Y/n] ", ["bold"])):
                break

    def fetch_status(self, prompt: bool = False) -> Tuple[int, str]:
        """
        Report the number of unread posts.

        With prompt, the status is shown as part of the question and the user may
        browse right away; the returned message is then empty because everything was
        already printed. The count returned after browsing is what is still unread.
        """
        if self._unread == 0:
            return 0, NO_NEWS_MESSAGE

        msg = style_text(f"* You have {self._unread} unread item(s).\n", ["yellow"])

        if prompt:
            if self._confirm(msg + "Read them now? [Y/n] "):
                self.browse(False)
                return self._unread, ""

        cmd = style_text(BROWSE_COMMAND, ["bold", "green"])
        msg += f"Use {cmd} to view them.\n"
        return self._unread, msg

    def clear_all(self) -> int:
        """Mark every unread post as read. Cache-write errors propagate."""
        cleared = 0
        for item in self.items:
            if not self.is_read(item):
                self._mark_read(item)
                cleared += 1
        return cleared
