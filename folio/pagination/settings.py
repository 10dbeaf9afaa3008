"""Typography settings and the page geometry derived from them."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from numbers import Real
from typing import Tuple

from ..errors import ConfigurationError
from ..models import BookSettings
from .constants import DEFAULT_CHAR_WIDTH_RATIO, EPSILON, POINTS_PER_INCH
from .metrics import measured_char_width_ratio

_POSITIVE_FIELDS: Tuple[str, ...] = (
    "font_size_pt",
    "line_height",
    "page_width_in",
    "page_height_in",
    "char_width_ratio",
)
_NON_NEGATIVE_FIELDS: Tuple[str, ...] = (
    "margin_top_in",
    "margin_bottom_in",
    "margin_left_in",
    "margin_right_in",
    "chapter_title_height_pt",
)


@dataclass(slots=True, frozen=True)
class TypographyConfig:
    """Font, page and margin parameters that control how much text fits a page.

    Sizes of the page and its margins are in inches, font sizes in points.
    The defaults match the settings a new book starts with.

    Example:
        >>> config = TypographyConfig()
        >>> (config.lines_per_page(), config.chars_per_line())
        (28, 48)
    """

    font_size_pt: float = 12.0
    line_height: float = 1.5
    page_width_in: float = 6.0
    page_height_in: float = 9.0
    margin_top_in: float = 1.0
    margin_bottom_in: float = 1.0
    margin_left_in: float = 1.0
    margin_right_in: float = 1.0
    char_width_ratio: float = DEFAULT_CHAR_WIDTH_RATIO
    chapter_title_height_pt: float = 0.0

    @classmethod
    def from_book_settings(
        cls, settings: BookSettings, *, include_title: bool = False
    ) -> "TypographyConfig":
        """Build a configuration from stored book settings.

        Args:
            settings: Book-level typography columns.
            include_title: Reserve first-page space for the chapter title
                when the book shows chapter titles.
        Returns:
            A new ``TypographyConfig``.
        """

        title_height = 0.0
        if include_title and settings.show_chapter_title:
            title_height = float(
                settings.chapter_title_font_size + settings.chapter_title_padding
            )
        return cls(
            font_size_pt=settings.font_size,
            line_height=settings.line_height,
            page_width_in=settings.page_width,
            page_height_in=settings.page_height,
            margin_top_in=settings.margin_top,
            margin_bottom_in=settings.margin_bottom,
            margin_left_in=settings.margin_left,
            margin_right_in=settings.margin_right,
            chapter_title_height_pt=title_height,
        )

    def with_font_metrics(self, font_name: str) -> "TypographyConfig":
        """Return a copy whose character width is measured from ``font_name``."""

        return replace(self, char_width_ratio=measured_char_width_ratio(font_name))

    def validate(self) -> None:
        """Raise ``ConfigurationError`` for the first field out of range.

        Example:
            >>> TypographyConfig(font_size_pt=0).validate()
            Traceback (most recent call last):
            ...
            folio.errors.ConfigurationError: font_size_pt: must be greater than zero
        """

        for name in _POSITIVE_FIELDS + _NON_NEGATIVE_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise ConfigurationError(name, f"expected a number, got {value!r}")
            if not math.isfinite(value):
                raise ConfigurationError(name, "must be finite")
        for name in _POSITIVE_FIELDS:
            if getattr(self, name) <= 0:
                raise ConfigurationError(name, "must be greater than zero")
        for name in _NON_NEGATIVE_FIELDS:
            if getattr(self, name) < 0:
                raise ConfigurationError(name, "must not be negative")
        if self.margin_left_in + self.margin_right_in >= self.page_width_in:
            raise ConfigurationError(
                "margin_left_in", "left and right margins leave no room on the page"
            )
        if self.margin_top_in + self.margin_bottom_in >= self.page_height_in:
            raise ConfigurationError(
                "margin_top_in", "top and bottom margins leave no room on the page"
            )

    @property
    def usable_width_in(self) -> float:
        """Return the text block width inside the left and right margins."""

        return self.page_width_in - self.margin_left_in - self.margin_right_in

    @property
    def usable_height_in(self) -> float:
        """Return the text block height inside the top and bottom margins."""

        return self.page_height_in - self.margin_top_in - self.margin_bottom_in

    @property
    def line_height_pt(self) -> float:
        return self.font_size_pt * self.line_height

    @property
    def char_width_pt(self) -> float:
        return self.font_size_pt * self.char_width_ratio

    def lines_per_page(self) -> int:
        """Return how many body lines fit the text block, at least one."""

        usable = self.usable_height_in * POINTS_PER_INCH
        return max(1, math.floor(usable / self.line_height_pt + EPSILON))

    def chars_per_line(self) -> int:
        """Return how many average characters fit one line, at least one."""

        usable = self.usable_width_in * POINTS_PER_INCH
        return max(1, math.floor(usable / self.char_width_pt + EPSILON))

    def title_lines(self) -> int:
        """Return the body lines given up to the chapter title block."""

        if self.chapter_title_height_pt <= 0:
            return 0
        return math.ceil(self.chapter_title_height_pt / self.line_height_pt - EPSILON)
