"""Shared constants for page layout estimation."""

from __future__ import annotations

import os

from reportlab.lib.units import inch

POINTS_PER_INCH = inch
DEFAULT_CHAR_WIDTH_RATIO = 0.5
EPSILON = 1e-4
SAMPLE_CHARS = (
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789 .,!?"
)
DEBUG_PAGINATION = os.getenv("DEBUG_PAGINATION", "0") not in {
    "",
    "0",
    "false",
    "False",
}
