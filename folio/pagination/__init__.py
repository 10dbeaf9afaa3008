"""Public pagination helpers."""

from __future__ import annotations

from .engine import (
    compute_pages,
    find_page_for_position,
    global_position,
    page_capacity,
    page_text,
)
from .metrics import measured_char_width_ratio
from .settings import TypographyConfig
from .types import PageCapacity, PageDescriptor

__all__ = [
    "PageCapacity",
    "PageDescriptor",
    "TypographyConfig",
    "compute_pages",
    "find_page_for_position",
    "global_position",
    "measured_char_width_ratio",
    "page_capacity",
    "page_text",
]
