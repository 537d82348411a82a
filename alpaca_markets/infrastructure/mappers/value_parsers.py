"""Parsers for the scalar encodings used in Alpaca JSON.

Alpaca sends numbers as strings ("100000.50"), timestamps as RFC 3339 with
up to nanosecond precision, and market times either as "HH:MM" or "HHMM".

Lenient parsers (``parse_decimal``, ``parse_optional_*``) return a default on
missing or bad input. Strict parsers raise ValueError/TypeError, which
mappers catch to reject the whole record.
"""

import re
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import Any

import structlog

logger = structlog.get_logger(__name__)

_EXCESS_FRACTION = re.compile(r"(\.\d{6})\d+")


def parse_decimal(value: Any, default: Decimal = Decimal("0")) -> Decimal:
    """Parse numeric value to Decimal with proper precision.

    Args:
        value: Numeric value (int, float, str, or None).
        default: Value returned for None/invalid input.

    Returns:
        Decimal representation, ``default`` for None/invalid.
    """
    if value is None or value == "":
        return default

    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        logger.warning(
            "alpaca_invalid_decimal_value",
            value=value,
            value_type=type(value).__name__,
        )
        return default


def parse_datetime(value: Any) -> datetime:
    """Parse an RFC 3339 timestamp (strict).

    Fractional seconds beyond microseconds are truncated.

    Raises:
        ValueError: If value is not a parseable timestamp.
        TypeError: If value is not a string.
    """
    if not isinstance(value, str):
        raise TypeError(f"Expected timestamp string, got {type(value).__name__}")
    return datetime.fromisoformat(_EXCESS_FRACTION.sub(r"\1", value))


def parse_optional_datetime(value: Any) -> datetime | None:
    """Parse an RFC 3339 timestamp, returning None when absent or invalid."""
    if not value:
        return None
    try:
        return parse_datetime(value)
    except (TypeError, ValueError):
        logger.warning("alpaca_invalid_timestamp_value", value=value)
        return None


def parse_date(value: Any) -> date:
    """Parse a "YYYY-MM-DD" date (strict)."""
    if not isinstance(value, str):
        raise TypeError(f"Expected date string, got {type(value).__name__}")
    return date.fromisoformat(value)


def parse_optional_date(value: Any) -> date | None:
    """Parse a "YYYY-MM-DD" date, returning None when absent or invalid."""
    if not value:
        return None
    try:
        return parse_date(value)
    except (TypeError, ValueError):
        logger.warning("alpaca_invalid_date_value", value=value)
        return None


def parse_market_time(value: Any) -> time:
    """Parse a market time given as "HH:MM" or "HHMM" (strict)."""
    if not isinstance(value, str):
        raise TypeError(f"Expected time string, got {type(value).__name__}")
    return datetime.strptime(value.replace(":", ""), "%H%M").time()


def parse_optional_market_time(value: Any) -> time | None:
    """Parse a market time, returning None when absent or invalid."""
    if not value:
        return None
    try:
        return parse_market_time(value)
    except (TypeError, ValueError):
        logger.warning("alpaca_invalid_market_time_value", value=value)
        return None
