"""Alpaca Calendar and Clock API client.

Endpoints:
    GET /v2/calendar - Trading days (with open/close times) in a date range
    GET /v2/clock    - Current market open/closed state

The clock is the authoritative source for "is the market open now";
the calendar is informational (holidays, early closes).

Reference:
    - https://docs.alpaca.markets/reference/getcalendar-1
    - https://docs.alpaca.markets/reference/getclock-1
"""

from datetime import date

from alpaca_markets.core.enums import ErrorCode
from alpaca_markets.core.result import Failure, Result, Success
from alpaca_markets.domain.errors import AlpacaAPIError, AlpacaNotFoundError
from alpaca_markets.domain.models import Calendar, Clock
from alpaca_markets.infrastructure.base_api_client import BaseAlpacaAPIClient
from alpaca_markets.infrastructure.mappers import AlpacaCalendarMapper
from alpaca_markets.infrastructure.request_builder import RequestBuilder


class AlpacaCalendarAPI(BaseAlpacaAPIClient):
    """HTTP client for calendar and clock endpoints."""

    def __init__(self, *, request_builder: RequestBuilder) -> None:
        """Initialize Alpaca Calendar API client.

        Args:
            request_builder: Shared request builder.
        """
        super().__init__(request_builder=request_builder, resource_name="calendar")
        self._mapper = AlpacaCalendarMapper()

    async def get_calendar(self, day: date) -> Result[Calendar, AlpacaAPIError]:
        """Fetch the calendar entry of a single day.

        Args:
            day: Day to look up.

        Returns:
            Success(Calendar).
            Failure(AlpacaNotFoundError): If the market is closed that day
                (weekend or holiday).
        """
        result = await self.get_calendar_range(start=day, end=day)
        if isinstance(result, Failure):
            return result

        for entry in result.value:
            if entry.date == day:
                return Success(value=entry)

        self._logger.info(
            "alpaca_calendar_api_not_a_trading_day",
            operation="get_calendar",
            day=day.isoformat(),
        )
        return Failure(
            error=AlpacaNotFoundError(
                code=ErrorCode.RESOURCE_NOT_FOUND,
                message=f"{day.isoformat()} is not a trading day",
                operation="get_calendar",
                resource=day.isoformat(),
            )
        )

    async def get_calendar_range(
        self,
        *,
        start: date | None = None,
        end: date | None = None,
    ) -> Result[list[Calendar], AlpacaAPIError]:
        """Fetch trading days between two dates, inclusive.

        Args:
            start: First day; the API defaults to the earliest available.
            end: Last day; the API defaults to the latest available.

        Returns:
            Success(list[Calendar]) in date order, or Failure(AlpacaAPIError).
        """
        result = await self._execute_and_parse_list(
            method="GET",
            path="/calendar",
            params={
                "start": start.isoformat() if start else None,
                "end": end.isoformat() if end else None,
            },
            operation="get_calendar_range",
        )
        return self._map_list(result, self._mapper.map_calendar, "get_calendar_range")

    async def get_clock(self) -> Result[Clock, AlpacaAPIError]:
        """Fetch the current market clock."""
        result = await self._execute_and_parse_object(
            method="GET",
            path="/clock",
            operation="get_clock",
        )
        return self._map_object(result, self._mapper.map_clock, "get_clock")
