"""Filtering package exceptions."""

from __future__ import annotations

from ..exceptions import ValidationError


class FilterParseError(ValidationError):
    """Raised when the filters parameter is not valid JSON or not a valid expression."""
