"""Data structures returned by the pagination engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(slots=True, frozen=True)
class PageDescriptor:
    """One computed page: a span of the chapter text and its counts.

    Args:
        page_number: 1-based position of the page in the chapter.
        start_offset: Offset of the first character on the page.
        end_offset: Offset one past the last character on the page.
        word_count: Words in ``text[start_offset:end_offset]``.
        character_count: Characters in the span, whitespace included.
        character_count_no_spaces: Characters in the span, whitespace removed.
    """

    page_number: int
    start_offset: int
    end_offset: int
    word_count: int
    character_count: int
    character_count_no_spaces: int

    def to_dict(self) -> Dict[str, int]:
        """Return the JSON object served for this page.

        Example:
            >>> PageDescriptor(1, 0, 5, 1, 5, 5).to_dict()["endOffset"]
            5
        """

        return {
            "pageNumber": self.page_number,
            "startOffset": self.start_offset,
            "endOffset": self.end_offset,
            "wordCount": self.word_count,
            "characterCount": self.character_count,
            "characterCountNoSpaces": self.character_count_no_spaces,
        }


@dataclass(slots=True, frozen=True)
class PageCapacity:
    """Estimated text capacity of a page for a typography configuration."""

    lines_per_page: int
    chars_per_line: int
    first_page_lines: int

    @property
    def chars_per_page(self) -> int:
        return self.lines_per_page * self.chars_per_line

    @property
    def first_page_chars(self) -> int:
        return self.first_page_lines * self.chars_per_line
