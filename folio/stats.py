"""
Statistics for pages, chapters and whole books.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict

from .models import Book, Chapter
from .pagination.engine import page_text
from .pagination.types import PageDescriptor
from .word_utils import (
    count_characters,
    count_characters_no_spaces,
    count_words,
    estimate_pages,
    estimate_reading_time,
)


@dataclass(slots=True)
class PageStats:
    """Counts for a single computed page, with the page text itself."""

    page_number: int
    content: str
    word_count: int
    character_count: int
    character_count_no_spaces: int
    reading_time_minutes: int


@dataclass(slots=True)
class ChapterStats:
    title: str
    word_count: int
    character_count: int
    character_count_no_spaces: int
    paragraphs: int
    reading_time_minutes: int
    estimated_pages: int


@dataclass(slots=True)
class BookStats:
    title: str
    total_words: int
    total_pages: int
    total_chapters: int
    avg_words_per_chapter: int
    reading_time_minutes: int

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


def page_stats(text: str, page: PageDescriptor) -> PageStats:
    """Return counts for ``page`` taken from the chapter ``text``."""

    content = page_text(text, page)
    words = count_words(content)
    return PageStats(
        page_number=page.page_number,
        content=content,
        word_count=words,
        character_count=count_characters(content),
        character_count_no_spaces=count_characters_no_spaces(content),
        reading_time_minutes=estimate_reading_time(words),
    )


def count_paragraphs(text: str) -> int:
    """Return the number of non-blank blocks separated by a blank line.

    Example:
        >>> count_paragraphs("One.\\n\\nTwo.\\n\\n   \\n\\nThree.")
        3
    """

    return sum(1 for block in text.split("\n\n") if block.strip())


def chapter_stats(chapter: Chapter) -> ChapterStats:
    words = chapter.word_count
    return ChapterStats(
        title=chapter.title,
        word_count=words,
        character_count=count_characters(chapter.content),
        character_count_no_spaces=count_characters_no_spaces(chapter.content),
        paragraphs=count_paragraphs(chapter.content),
        reading_time_minutes=estimate_reading_time(words),
        estimated_pages=estimate_pages(words),
    )


def book_stats(book: Book) -> BookStats:
    """Return totals for ``book``.

    Every chapter contributes at least one page, even when it is empty.

    Example:
        >>> book_stats(Book("Draft", [Chapter("Empty", "")])).total_pages
        1
    """

    total_words = 0
    total_pages = 0
    for chapter in book.chapters:
        words = chapter.word_count
        total_words += words
        total_pages += max(1, estimate_pages(words))
    chapters = len(book.chapters)
    return BookStats(
        title=book.title,
        total_words=total_words,
        total_pages=total_pages,
        total_chapters=chapters,
        avg_words_per_chapter=round(total_words / chapters) if chapters else 0,
        reading_time_minutes=estimate_reading_time(total_words),
    )
