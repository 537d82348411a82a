"""Domain models decoded from Alpaca API responses.

Usage:
    from alpaca_markets.domain.models import Account, Asset, Watchlist
"""

from alpaca_markets.domain.models.account import Account
from alpaca_markets.domain.models.asset import Asset
from alpaca_markets.domain.models.calendar import Calendar, Clock
from alpaca_markets.domain.models.watchlist import Watchlist

__all__ = [
    "Account",
    "Asset",
    "Calendar",
    "Clock",
    "Watchlist",
]
