"""
Font metric helpers for the character width estimate.
"""

from __future__ import annotations

from functools import lru_cache

from reportlab.pdfbase import pdfmetrics

from ..errors import ConfigurationError
from .constants import SAMPLE_CHARS


@lru_cache(maxsize=None)
def measured_char_width_ratio(font_name: str) -> float:
    """Return the mean glyph width of ``font_name`` as a fraction of its size.

    The font must be one of ReportLab's standard fonts or already registered
    with ``pdfmetrics``.

    Example:
        >>> round(measured_char_width_ratio("Courier"), 3)
        0.6
    """

    try:
        pdfmetrics.getFont(font_name)
    except KeyError as exc:
        raise ConfigurationError("char_width_ratio", f"unknown font {font_name!r}") from exc
    total = sum(pdfmetrics.stringWidth(char, font_name, 1.0) for char in SAMPLE_CHARS)
    return total / len(SAMPLE_CHARS)
