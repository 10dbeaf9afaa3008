"""Split chapter text into printed pages from typography settings."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from ..word_utils import count_characters, count_characters_no_spaces, count_words
from .constants import DEBUG_PAGINATION
from .settings import TypographyConfig
from .types import PageCapacity, PageDescriptor


def _debug(*, msg: str) -> None:
    """Print pagination debug output when enabled.

    Args:
        msg: Message to print.
    Returns:
        None.
    """

    if DEBUG_PAGINATION:
        print(msg)


def page_capacity(typography: TypographyConfig) -> PageCapacity:
    """Return the estimated line and character capacity of a page.

    Args:
        typography: Configuration to measure; validated first.
    Returns:
        PageCapacity for body pages and for the first page of a chapter.

    Example:
        >>> page_capacity(TypographyConfig()).chars_per_page
        1344
    """

    typography.validate()
    lines = typography.lines_per_page()
    first_lines = max(1, lines - typography.title_lines())
    return PageCapacity(
        lines_per_page=lines,
        chars_per_line=typography.chars_per_line(),
        first_page_lines=first_lines,
    )


def _break_offset(text: str, start: int, limit: int) -> Tuple[int, bool]:
    """Return where the page starting at ``start`` ends.

    Args:
        text: Full chapter text.
        start: Offset of the first character on the page.
        limit: Page capacity in characters, at least one.
    Returns:
        Tuple of (end offset, True when the break splits a word).
    """

    hard = start + limit
    if hard >= len(text):
        return len(text), False
    if text[hard - 1].isspace() or text[hard].isspace():
        return hard, False
    for idx in range(hard - 1, start, -1):
        if text[idx - 1].isspace():
            return idx, False
    return hard, True


def _descriptor(text: str, page_number: int, start: int, end: int) -> PageDescriptor:
    content = text[start:end]
    return PageDescriptor(
        page_number=page_number,
        start_offset=start,
        end_offset=end,
        word_count=count_words(content),
        character_count=count_characters(content),
        character_count_no_spaces=count_characters_no_spaces(content),
    )


def compute_pages(text: str, typography: TypographyConfig) -> List[PageDescriptor]:
    """Paginate ``text`` greedily without splitting words across pages.

    Each page takes as many characters as its capacity allows. A break that
    would land inside a word moves back to the last whitespace on the page;
    a page that is a single unbroken token is cut at the capacity limit.

    Args:
        text: Chapter text. Markup is counted as ordinary characters.
        typography: Page layout settings; validated before any work.
    Returns:
        Page descriptors whose spans partition ``text`` in order. Empty text
        yields no pages.

    Example:
        >>> tiny = TypographyConfig(page_width_in=1.5, page_height_in=1.5,
        ...     margin_top_in=0.5, margin_bottom_in=0.5,
        ...     margin_left_in=0.5, margin_right_in=0.5, font_size_pt=12,
        ...     line_height=1.0)
        >>> [(p.start_offset, p.end_offset) for p in compute_pages("aaa bbb ccc dddddddddddd", tiny)]
        [(0, 12), (12, 24)]
    """

    capacity = page_capacity(typography)
    if not text:
        return []
    pages: List[PageDescriptor] = []
    start = 0
    hard_splits = 0
    while start < len(text):
        limit = capacity.first_page_chars if not pages else capacity.chars_per_page
        end, split_word = _break_offset(text, start, limit)
        if split_word:
            hard_splits += 1
            _debug(msg=f"hard split on page {len(pages) + 1} at offset {end}")
        pages.append(_descriptor(text, len(pages) + 1, start, end))
        start = end
    _debug(
        msg=(
            f"paginated {len(text)} chars into {len(pages)} pages "
            f"({capacity.chars_per_page} chars/page, {hard_splits} hard splits)"
        )
    )
    return pages


def page_text(text: str, page: PageDescriptor) -> str:
    """Return the part of ``text`` shown on ``page``."""

    return text[page.start_offset : page.end_offset]


def find_page_for_position(
    pages: Sequence[PageDescriptor], position: int
) -> Tuple[int, int]:
    """Locate the page that holds a character offset.

    Args:
        pages: Pages from ``compute_pages``.
        position: Offset into the chapter text.
    Returns:
        Tuple of (page index, offset within that page). An offset equal to a
        page's end stays on that page; offsets past the text map to the end
        of the last page.
    """

    if position < 0:
        raise ValueError(f"position must not be negative, got {position}")
    if not pages:
        return 0, 0
    for index, page in enumerate(pages):
        if position <= page.end_offset:
            return index, position - page.start_offset
    last = pages[-1]
    return len(pages) - 1, last.end_offset - last.start_offset


def global_position(
    pages: Sequence[PageDescriptor], page_index: int, local_offset: int
) -> int:
    """Return the chapter offset of ``local_offset`` on page ``page_index``.

    Indices before the first page count from offset 0; indices past the last
    page count from the end of the text.
    """

    if not pages or page_index < 0:
        return local_offset
    if page_index >= len(pages):
        return pages[-1].end_offset + local_offset
    return pages[page_index].start_offset + local_offset
