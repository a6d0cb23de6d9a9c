from __future__ import annotations

from html.parser import HTMLParser
from typing import Iterable, List, Optional

from .models import FeedItem, TextRun
from .termstyle import style_text


class _DescriptionTokenizer(HTMLParser):
    """
    Splits a post description into text runs, tracking whether each run sits
    inside a <code> element. Paragraph ends become newlines; every other tag
    is dropped.
    """

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.runs: List[TextRun] = []
        self.is_code = False

    def handle_starttag(self, tag: str, attrs) -> None:
        if tag == "code":
            self.is_code = True

    def handle_endtag(self, tag: str) -> None:
        if tag == "code":
            self.is_code = False
        elif tag == "p":
            self.runs.append(TextRun("\n", self.is_code))

    def handle_data(self, data: str) -> None:
        self.runs.append(TextRun(data, self.is_code))


def tokenize_description(description: Optional[str]) -> List[TextRun]:
    """
    Tokenize an HTML description into TextRuns.

    Malformed or truncated markup is tolerated: whatever could be tokenized
    before the input ran out is returned.
    """
    tokenizer = _DescriptionTokenizer()
    tokenizer.feed(description or "")
    # An unfinished tag at the end is dropped, not shown as text.
    if tokenizer.rawdata.startswith("<"):
        tokenizer.rawdata = ""
    tokenizer.close()
    return tokenizer.runs


def render_body(runs: Iterable[TextRun]) -> str:
    return "".join(
        style_text(run.text, ["code"]) if run.is_code else run.text
        for run in runs
    )


def render_item(item: FeedItem) -> str:
    """
    Render a feed item for the terminal:
    title, publication date, blank line, body, then the link on its own line.
    """
    pretty = style_text(item.title + "\n", ["bold", "red"])
    pretty += style_text(item.published + "\n\n", ["blue"])
    pretty += render_body(tokenize_description(item.description))
    pretty += style_text("\n" + item.link, ["underline", "blue"])
    return pretty
