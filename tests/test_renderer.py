"""HTML description tokenizer and post rendering."""

from newsie.models import FeedItem, TextRun
from newsie.renderer import render_body, render_item, tokenize_description
from newsie.termstyle import RESET, STYLES, style_text


def test_tokenize_paragraph_with_code():
    runs = tokenize_description("<p>Hello <code>world</code></p>")

    assert runs == [
        TextRun("Hello ", False),
        TextRun("world", True),
        TextRun("\n", False),
    ]


def test_render_body_styles_only_code():
    body = render_body(tokenize_description("<p>Hello <code>world</code></p>"))

    assert body == "Hello " + STYLES["green"] + "world" + RESET + "\n"


def test_other_tags_are_ignored():
    runs = tokenize_description('<p>See <a href="https://x">the <em>wiki</em></a>.</p>')

    assert "".join(r.text for r in runs) == "See the wiki.\n"
    assert not any(r.is_code for r in runs)


def test_entities_are_decoded():
    runs = tokenize_description("<p><code>a &amp;&amp; b</code> &lt;ok&gt;</p>")

    assert runs[0] == TextRun("a && b", True)
    assert "".join(r.text for r in runs[1:]) == " <ok>\n"


def test_paragraph_end_inside_code_keeps_code_mode():
    runs = tokenize_description("<code>x</p>y</code>z")

    assert runs == [
        TextRun("x", True),
        TextRun("\n", True),
        TextRun("y", True),
        TextRun("z", False),
    ]


def test_truncated_text_is_kept():
    runs = tokenize_description("<p>Hello <code>wor")

    assert runs == [TextRun("Hello ", False), TextRun("wor", True)]


def test_unfinished_tag_at_end_is_dropped():
    """A tag cut off mid-name leaves only what came before it."""
    assert tokenize_description("<p>Hello <cod") == [TextRun("Hello ", False)]
    assert tokenize_description('<p>Hi</p><a href="x') == [
        TextRun("Hi", False),
        TextRun("\n", False),
    ]
    assert render_body(tokenize_description("<p>Hello <cod")) == "Hello "


def test_empty_description():
    assert tokenize_description("") == []
    assert tokenize_description(None) == []


def test_unclosed_code_does_not_leak_into_next_call():
    first = tokenize_description("<code>never closed")
    second = tokenize_description("plain")

    assert first[0].is_code
    assert second == [TextRun("plain", False)]


def _item(title="Title", description="<p>Hello <code>world</code></p>"):
    return FeedItem(
        title=title,
        description=description,
        published="Mon, 01 Jul 2024 10:00:00 +0000",
        link="https://archlinux.org/news/x/",
    )


def test_render_item_layout():
    item = _item()

    expected = (
        style_text("Title\n", ["bold", "red"])
        + style_text("Mon, 01 Jul 2024 10:00:00 +0000\n\n", ["blue"])
        + "Hello " + style_text("world", ["code"]) + "\n"
        + style_text("\nhttps://archlinux.org/news/x/", ["underline", "blue"])
    )
    assert render_item(item) == expected


def test_render_is_deterministic_across_items():
    a = _item("A", "<p><code>unterminated")
    b = _item("B", "<p>plain</p>")

    first_b = render_item(b)
    render_item(a)
    assert render_item(b) == first_b
    assert render_item(a) == render_item(a)


def test_style_text_order_and_reset():
    assert style_text("x", ["bold", "red"]) == "\x1b[91m\x1b[1mx\x1b[0m"
    assert style_text("x", ["underline"]) == "\x1b[4mx\x1b[0m"
