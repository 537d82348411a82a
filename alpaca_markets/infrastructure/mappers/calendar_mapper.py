"""Alpaca calendar and clock mapper.

Calendar Response Structure (one entry per trading day):
    {
        "date": "2024-07-03",
        "open": "09:30",
        "close": "13:00",
        "session_open": "0400",
        "session_close": "2000",
        "settlement_date": "2024-07-05"
    }

Clock Response Structure:
    {
        "timestamp": "2024-07-03T10:35:21.239566717-04:00",
        "is_open": true,
        "next_open": "2024-07-05T09:30:00-04:00",
        "next_close": "2024-07-03T13:00:00-04:00"
    }

Reference:
    - https://docs.alpaca.markets/reference/getcalendar-1
    - https://docs.alpaca.markets/reference/getclock-1
"""

from typing import Any

import structlog

from alpaca_markets.domain.models import Calendar, Clock
from alpaca_markets.infrastructure.mappers.value_parsers import (
    parse_date,
    parse_datetime,
    parse_market_time,
    parse_optional_date,
    parse_optional_market_time,
)

logger = structlog.get_logger(__name__)


class AlpacaCalendarMapper:
    """Mapper for calendar entries and the market clock.

    Thread-safe: No mutable state, can be shared across requests.
    """

    def map_calendar(self, data: dict[str, Any]) -> Calendar | None:
        """Map one calendar JSON entry to Calendar.

        Returns:
            Calendar, or None if date/open/close are missing or malformed.
        """
        try:
            return Calendar(
                date=parse_date(data["date"]),
                open=parse_market_time(data["open"]),
                close=parse_market_time(data["close"]),
                session_open=parse_optional_market_time(data.get("session_open")),
                session_close=parse_optional_market_time(data.get("session_close")),
                settlement_date=parse_optional_date(data.get("settlement_date")),
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(
                "alpaca_calendar_mapping_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

    def map_clock(self, data: dict[str, Any]) -> Clock | None:
        """Map clock JSON to Clock.

        Returns:
            Clock, or None if any field is missing or malformed.
        """
        try:
            is_open = data["is_open"]
            if not isinstance(is_open, bool):
                raise TypeError(f"is_open must be a boolean, got {type(is_open).__name__}")

            return Clock(
                timestamp=parse_datetime(data["timestamp"]),
                is_open=is_open,
                next_open=parse_datetime(data["next_open"]),
                next_close=parse_datetime(data["next_close"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(
                "alpaca_clock_mapping_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            return None
