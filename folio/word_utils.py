"""
Word and character counting for chapters and pages.
"""

from __future__ import annotations

import math

from .cleaning import strip_markup

WORDS_PER_MINUTE = 200
WORDS_PER_PAGE = 250


def count_words(text: str) -> int:
    """Return the number of words in ``text``, ignoring ``<...>`` tags.

    Example:
        >>> count_words("Hello <b>world</b>   foo")
        3
        >>> count_words("   ")
        0
    """

    if not text or not isinstance(text, str):
        return 0
    return len(strip_markup(text).split())


def count_characters(text: str) -> int:
    """Return the raw length of ``text``, spaces included."""

    if not text or not isinstance(text, str):
        return 0
    return len(text)


def count_characters_no_spaces(text: str) -> int:
    """Return the length of ``text`` with every whitespace character removed.

    Example:
        >>> count_characters_no_spaces("a b\\tc\\n")
        3
    """

    if not text or not isinstance(text, str):
        return 0
    return sum(1 for char in text if not char.isspace())


def estimate_reading_time(word_count: int, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """Return reading time in whole minutes, rounded up.

    Example:
        >>> estimate_reading_time(450)
        3
    """

    return math.ceil(word_count / words_per_minute)


def estimate_pages(word_count: int, words_per_page: int = WORDS_PER_PAGE) -> int:
    """Return a rough printed page count for ``word_count`` words.

    Example:
        >>> [estimate_pages(n) for n in (0, 1, 500, 501)]
        [0, 1, 2, 3]
    """

    if word_count == 0:
        return 0
    return max(1, math.ceil(word_count / words_per_page))


def format_word_count(count: int) -> str:
    """Format a word count for display, e.g. ``'1,234 words'``."""

    return f"{count:,} word{'' if count == 1 else 's'}"
