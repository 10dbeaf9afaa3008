"""Exceptions raised by folio."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """A typography setting is outside its allowed range.

    Attributes:
        field: Name of the offending ``TypographyConfig`` field.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field


class ManuscriptError(ValueError):
    """A manuscript file could not be found or parsed."""
