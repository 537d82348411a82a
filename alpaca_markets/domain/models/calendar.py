"""Market calendar and clock models.

Calendar entries describe one trading day (holidays are absent from the
calendar, early closes show a shorter session). The clock is the
authoritative live open/closed state.

Reference:
    - https://docs.alpaca.markets/reference/getcalendar-1
    - https://docs.alpaca.markets/reference/getclock-1
"""

from dataclasses import dataclass
from datetime import date, datetime, time


@dataclass(frozen=True, kw_only=True)
class Calendar:
    """One trading day of the market calendar.

    Times are America/New_York wall-clock times.

    Attributes:
        date: Trading day.
        open: Regular market open.
        close: Regular market close (earlier on early-close days).
        session_open: Extended session open, if reported.
        session_close: Extended session close, if reported.
        settlement_date: Settlement date for trades made on this day, if reported.
    """

    date: date
    open: time
    close: time
    session_open: time | None = None
    session_close: time | None = None
    settlement_date: date | None = None


@dataclass(frozen=True, kw_only=True)
class Clock:
    """Current market clock.

    Attributes:
        timestamp: Current server time.
        is_open: Whether the market is open right now.
        next_open: Next market open.
        next_close: Next market close.
    """

    timestamp: datetime
    is_open: bool
    next_open: datetime
    next_close: datetime
