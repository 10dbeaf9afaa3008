"""Manuscript pagination, counting and proofing for book projects."""

from __future__ import annotations

from .errors import ConfigurationError, ManuscriptError
from .models import Book, BookSettings, Chapter
from .pagination import PageDescriptor, TypographyConfig, compute_pages
from .word_utils import (
    count_characters,
    count_characters_no_spaces,
    count_words,
    estimate_pages,
    estimate_reading_time,
    format_word_count,
)

__all__ = [
    "Book",
    "BookSettings",
    "Chapter",
    "ConfigurationError",
    "ManuscriptError",
    "PageDescriptor",
    "TypographyConfig",
    "compute_pages",
    "count_characters",
    "count_characters_no_spaces",
    "count_words",
    "estimate_pages",
    "estimate_reading_time",
    "format_word_count",
]
