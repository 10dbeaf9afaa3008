"""
Typed containers for books, chapters and their stored settings.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, List, Mapping

from .word_utils import count_words

_SETTING_KEYS = {
    "font_size": "fontSize",
    "line_height": "lineHeight",
    "page_width": "pageWidth",
    "page_height": "pageHeight",
    "margin_top": "marginTop",
    "margin_bottom": "marginBottom",
    "margin_left": "marginLeft",
    "margin_right": "marginRight",
    "chapter_title_font_size": "chapterTitleFontSize",
    "chapter_title_padding": "chapterTitlePadding",
    "show_chapter_title": "showChapterTitle",
    "font_name": "fontName",
}


@dataclass(slots=True)
class BookSettings:
    """Typography columns stored with a book.

    Page sizes and margins are in inches; font sizes and title padding
    in points.
    """

    font_size: float = 12
    line_height: float = 1.5
    page_width: float = 6.0
    page_height: float = 9.0
    margin_top: float = 1.0
    margin_bottom: float = 1.0
    margin_left: float = 1.0
    margin_right: float = 1.0
    chapter_title_font_size: float = 26
    chapter_title_padding: float = 65
    show_chapter_title: bool = True
    font_name: str = "Times-Roman"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "BookSettings":
        """Read camelCase settings, keeping defaults for missing or empty values.

        Zero counts as empty, the same way unset numeric columns do.

        Example:
            >>> BookSettings.from_mapping({"fontSize": 0, "pageWidth": 5.5}).font_size
            12
        """

        settings = cls()
        if not data:
            return settings
        for item in fields(cls):
            key = _SETTING_KEYS[item.name]
            value = data.get(key)
            if item.name == "show_chapter_title":
                if value is None:
                    continue
                if not isinstance(value, bool):
                    raise ValueError(f"{key} must be true or false, got {value!r}")
                settings.show_chapter_title = value
                continue
            if value:
                setattr(settings, item.name, value)
        return settings


@dataclass(slots=True)
class Chapter:
    """A chapter of a manuscript."""

    title: str
    content: str
    order_index: int = 0

    @property
    def word_count(self) -> int:
        return count_words(self.content)

    def append_content(self, extra: str) -> None:
        """Append ``extra`` as a new paragraph.

        Example:
            >>> chapter = Chapter("One", "First.")
            >>> chapter.append_content("Second.")
            >>> chapter.content
            'First.\\n\\nSecond.'
        """

        separator = "\n\n" if self.content else ""
        self.content = f"{self.content}{separator}{extra}"


@dataclass(slots=True)
class Book:
    """A manuscript: ordered chapters plus book-level settings."""

    title: str
    chapters: List[Chapter] = field(default_factory=list)
    settings: BookSettings = field(default_factory=BookSettings)

    def __post_init__(self) -> None:
        self.chapters = sorted(self.chapters, key=lambda chapter: chapter.order_index)
