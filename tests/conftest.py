"""Shared fixtures for the alpaca_markets test suite.

Provides:
- Credential pairs for both trading environments
- Representative Alpaca JSON payloads (account, asset, watchlist,
  calendar, clock) as returned by the live API
"""

from typing import Any

import pytest

from alpaca_markets.domain.value_objects import Credentials

LIVE_URL = "https://api.alpaca.markets/v2"
PAPER_URL = "https://paper-api.alpaca.markets/v2"


# =============================================================================
# Credentials
# =============================================================================


@pytest.fixture
def live_credentials() -> Credentials:
    """Live environment key pair."""
    return Credentials(key_id="AKLIVE123", secret_key="live-secret")


@pytest.fixture
def paper_credentials() -> Credentials:
    """Paper environment key pair."""
    return Credentials(key_id="PKPAPER456", secret_key="paper-secret")


# =============================================================================
# Payload builders
# =============================================================================


def asset_json(symbol: str = "AAPL", **overrides: Any) -> dict[str, Any]:
    """Build an asset payload for ``symbol``."""
    data: dict[str, Any] = {
        "id": f"asset-{symbol.lower()}",
        "class": "us_equity",
        "exchange": "NASDAQ",
        "symbol": symbol,
        "name": f"{symbol} Inc. Common Stock",
        "status": "active",
        "tradable": True,
        "marginable": True,
        "shortable": True,
        "easy_to_borrow": True,
        "fractionable": True,
    }
    data.update(overrides)
    return data


def watchlist_json(
    watchlist_id: str = "wl-1",
    name: str = "Tech",
    symbols: list[str] | None = None,
) -> dict[str, Any]:
    """Build a watchlist payload; ``symbols=None`` omits "assets" like the list endpoint."""
    data: dict[str, Any] = {
        "id": watchlist_id,
        "account_id": "acct-1",
        "name": name,
        "created_at": "2024-01-31T21:49:05.14628Z",
        "updated_at": "2024-01-31T21:49:05.14628Z",
    }
    if symbols is not None:
        data["assets"] = [asset_json(symbol) for symbol in symbols]
    return data


@pytest.fixture
def account_payload() -> dict[str, Any]:
    """Paper account payload as returned by GET /v2/account."""
    return {
        "id": "ba0d71b6-1044-4334-9643-ebbf8e2fcbf9",
        "account_number": "PA3CRCJ7QUIR",
        "status": "ACTIVE",
        "currency": "USD",
        "cash": "100000.50",
        "buying_power": "200001",
        "equity": "100000.50",
        "last_equity": "99000",
        "portfolio_value": "100000.50",
        "long_market_value": "0",
        "short_market_value": "0",
        "initial_margin": "0",
        "maintenance_margin": "0",
        "daytrade_count": 2,
        "pattern_day_trader": False,
        "trading_blocked": False,
        "transfers_blocked": False,
        "account_blocked": False,
        "shorting_enabled": True,
        "multiplier": "2",
        "created_at": "2021-03-01T09:30:00.123456Z",
    }


@pytest.fixture
def calendar_payload() -> list[dict[str, Any]]:
    """Two calendar entries around Independence Day 2024."""
    return [
        {
            "date": "2024-07-03",
            "open": "09:30",
            "close": "13:00",
            "session_open": "0400",
            "session_close": "2000",
            "settlement_date": "2024-07-05",
        },
        {
            "date": "2024-07-05",
            "open": "09:30",
            "close": "16:00",
            "session_open": "0400",
            "session_close": "2000",
            "settlement_date": "2024-07-08",
        },
    ]


@pytest.fixture
def clock_payload() -> dict[str, Any]:
    """Clock payload while the market is open."""
    return {
        "timestamp": "2024-07-03T10:35:21.239566-04:00",
        "is_open": True,
        "next_open": "2024-07-05T09:30:00-04:00",
        "next_close": "2024-07-03T13:00:00-04:00",
    }
