"""Alpaca resource API clients package.

One client per REST resource family. Each receives the shared
RequestBuilder and returns Result-wrapped domain models.
"""

from alpaca_markets.infrastructure.api.accounts_api import AlpacaAccountsAPI
from alpaca_markets.infrastructure.api.assets_api import AlpacaAssetsAPI
from alpaca_markets.infrastructure.api.calendar_api import AlpacaCalendarAPI
from alpaca_markets.infrastructure.api.watchlists_api import AlpacaWatchlistsAPI

__all__ = [
    "AlpacaAccountsAPI",
    "AlpacaAssetsAPI",
    "AlpacaCalendarAPI",
    "AlpacaWatchlistsAPI",
]
