"""
Form Input Sanitization
Converts the raw text typed into the form into typed numbers.

Only strictly positive, finite numbers are accepted. The view keeps the
previous value of a field whenever parsing fails.
"""
from __future__ import annotations

import logging
import math
from typing import Optional

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Raised when the text typed into a numeric field is rejected."""


def _parse_positive(text: str) -> float:
    cleaned = text.strip().replace(',', '.')
    try:
        value = float(cleaned)
    except ValueError:
        logger.debug(f"Rejected non-numeric input: {text!r}")
        raise InvalidInputError(f"'{text}' is not a number.") from None

    if not math.isfinite(value) or value <= 0:
        logger.debug(f"Rejected non-positive input: {text!r}")
        raise InvalidInputError(f"'{text}' must be a positive number.")
    return value


def parse_dimension(text: str) -> float:
    """Height or width of a surface. An empty field counts as zero."""
    if not text.strip():
        return 0.0
    return _parse_positive(text)


def parse_optional_positive(text: str) -> Optional[float]:
    """Coverage or cost. An empty field means 'not entered yet'."""
    if not text.strip():
        return None
    return _parse_positive(text)


def parse_optional_count(text: str) -> Optional[int]:
    """Number of workers or coats. Must be a whole number."""
    value = parse_optional_positive(text)
    if value is None:
        return None
    if not value.is_integer():
        logger.debug(f"Rejected fractional count: {text!r}")
        raise InvalidInputError(f"'{text}' must be a whole number.")
    return int(value)


def format_number(value: Optional[float]) -> str:
    """Inverse of the parsers for display in an editable field."""
    if value is None or value == 0:
        return ""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
