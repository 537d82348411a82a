"""Async client for the Alpaca Trading API.

Accounts, assets, watchlists, the market calendar and the market clock,
for both live and paper trading.

Usage:
    from alpaca_markets import AlpacaMarkets

    markets = AlpacaMarkets(live_api_key_id="AK...", live_api_secret_key="...")
    result = await markets.get_clock()
"""

from alpaca_markets.client import AlpacaMarkets
from alpaca_markets.compat import NullableAlpacaMarkets
from alpaca_markets.core.config import ClientConfig
from alpaca_markets.core.enums import ErrorCode, TradingEnvironment
from alpaca_markets.core.result import Failure, Result, Success, unwrap_or_none
from alpaca_markets.domain.errors import (
    AlpacaAPIError,
    AlpacaAuthenticationError,
    AlpacaInvalidResponseError,
    AlpacaNotFoundError,
    AlpacaRateLimitError,
    AlpacaRequestRejectedError,
    AlpacaUnavailableError,
    CredentialsNotConfiguredError,
)
from alpaca_markets.domain.models import Account, Asset, Calendar, Clock, Watchlist
from alpaca_markets.domain.value_objects import Credentials
from alpaca_markets.infrastructure.logging import configure_console_logging

__all__ = [
    # Clients
    "AlpacaMarkets",
    "NullableAlpacaMarkets",
    "ClientConfig",
    "TradingEnvironment",
    # Models
    "Account",
    "Asset",
    "Calendar",
    "Clock",
    "Credentials",
    "Watchlist",
    # Results
    "Result",
    "Success",
    "Failure",
    "unwrap_or_none",
    # Errors
    "ErrorCode",
    "AlpacaAPIError",
    "AlpacaAuthenticationError",
    "AlpacaInvalidResponseError",
    "AlpacaNotFoundError",
    "AlpacaRateLimitError",
    "AlpacaRequestRejectedError",
    "AlpacaUnavailableError",
    "CredentialsNotConfiguredError",
    # Logging
    "configure_console_logging",
]
