from __future__ import annotations

from typing import Iterable

from colorama import Fore, Style
from colorama.ansi import code_to_chars

UNDERLINE = code_to_chars(4)

STYLES = {
    "blue": Fore.LIGHTBLUE_EX,
    "bold": Style.BRIGHT,
    "green": Fore.LIGHTGREEN_EX,
    "red": Fore.LIGHTRED_EX,
    "underline": UNDERLINE,
    "yellow": Fore.LIGHTYELLOW_EX,
}
# Code spans inside posts.
STYLES["code"] = STYLES["green"]

RESET = Style.RESET_ALL


def style_text(text: str, styles: Iterable[str]) -> str:
    """
    Wrap text in the escape sequences for each named style, ending with a reset.

    Styles are prefixed in the order given, so the last one ends up outermost.
    """
    for name in styles:
        try:
            text = STYLES[name] + text
        except KeyError:
            raise ValueError(f"Unknown style: {name}") from None
    return text + RESET
