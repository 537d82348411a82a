"""Alpaca mappers package.

Mappers convert raw Alpaca JSON into domain models. They return None for
unusable data; API clients turn that into AlpacaInvalidResponseError.
"""

from alpaca_markets.infrastructure.mappers.account_mapper import AlpacaAccountMapper
from alpaca_markets.infrastructure.mappers.asset_mapper import AlpacaAssetMapper
from alpaca_markets.infrastructure.mappers.calendar_mapper import AlpacaCalendarMapper
from alpaca_markets.infrastructure.mappers.watchlist_mapper import (
    AlpacaWatchlistMapper,
)

__all__ = [
    "AlpacaAccountMapper",
    "AlpacaAssetMapper",
    "AlpacaCalendarMapper",
    "AlpacaWatchlistMapper",
]
