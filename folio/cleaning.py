"""
Small, focused text cleaning utilities.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

_TAG = re.compile(r"<[^>]*>")
_ZERO_WIDTH = re.compile("[\u200b\u200c\u200d\u2060\ufeff]")
_NON_BREAKING_SPACES = re.compile("[\u00a0\u202f]")
_INLINE_SPACE = re.compile(r"[ \t\r\f\v]+")
_SPACE_AROUND_NEWLINE = re.compile(r" *\n *")
_EXTRA_BLANK_LINES = re.compile(r"\n{3,}")
_BLOCK_TAGS = (
    "p",
    "div",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "li",
    "blockquote",
)


def strip_markup(value: str) -> str:
    """Replace every ``<...>`` tag with a space.

    Example:
        >>> strip_markup("Hello <b>world</b>")
        'Hello  world '
    """

    return _TAG.sub(" ", value)


def normalize_whitespace(value: str) -> str:
    """Collapse unusual whitespace while keeping paragraph breaks.

    Example:
        >>> normalize_whitespace("a\\u00a0 b\\u200b\\n\\n\\n\\nc ")
        'a b\\n\\nc'
    """

    clean = _NON_BREAKING_SPACES.sub(" ", value)
    clean = _ZERO_WIDTH.sub("", clean)
    clean = _INLINE_SPACE.sub(" ", clean)
    clean = _SPACE_AROUND_NEWLINE.sub("\n", clean)
    clean = _EXTRA_BLANK_LINES.sub("\n\n", clean)
    return clean.strip()


def html_to_text(html: str) -> str:
    """Flatten an HTML chapter body into plain paragraphs.

    ``<br>`` becomes a line break and block elements end with a blank line.

    Example:
        >>> html_to_text("<p>One <b>two</b></p><p>Three<br>four</p>")
        'One two\\n\\nThree\\nfour'
    """

    soup = BeautifulSoup(html, "html.parser")
    for br in soup.find_all("br"):
        br.replace_with("\n")
    for block in soup.find_all(_BLOCK_TAGS):
        block.insert_after("\n\n")
    return normalize_whitespace(soup.get_text())
