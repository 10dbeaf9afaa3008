from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from folio.pagination import TypographyConfig


@pytest.fixture
def small_page() -> TypographyConfig:
    """3 lines of 6 characters: 18 characters per page."""

    return TypographyConfig(
        font_size_pt=12,
        line_height=1.0,
        page_width_in=1.5,
        page_height_in=1.5,
        margin_top_in=0.5,
        margin_bottom_in=0.5,
        margin_left_in=0.5,
        margin_right_in=0.5,
    )


@pytest.fixture
def prose() -> str:
    paragraph = (
        "It was a bright cold day in April, and the clocks were striking "
        "thirteen. Winston Smith slipped quickly through the glass doors, "
        "though not quickly enough to prevent a swirl of gritty dust from "
        "entering along with him."
    )
    return "\n\n".join([paragraph] * 12)
