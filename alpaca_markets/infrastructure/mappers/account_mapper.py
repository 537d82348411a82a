"""Alpaca account mapper.

Converts Alpaca Trading API account JSON responses to Account models.
Contains Alpaca-specific knowledge about JSON structure.

Alpaca Account Response Structure:
    {
        "id": "ba0d71b6-1044-4334-9643-ebbf8e2fcbf9",
        "account_number": "PA3CRCJ7QUIR",
        "status": "ACTIVE",
        "currency": "USD",
        "buying_power": "200000",
        "cash": "100000",
        "equity": "100000",
        "daytrade_count": 0,
        "created_at": "2021-03-01T09:30:00.123456Z",
        ...
    }

Reference:
    - https://docs.alpaca.markets/reference/getaccount-1
"""

from decimal import Decimal, InvalidOperation
from typing import Any

import structlog

from alpaca_markets.domain.models import Account
from alpaca_markets.infrastructure.mappers.value_parsers import (
    parse_decimal,
    parse_optional_datetime,
)

logger = structlog.get_logger(__name__)


class AlpacaAccountMapper:
    """Mapper for converting Alpaca account data to Account.

    This mapper handles:
    - Extracting data from Alpaca's account JSON structure
    - Converting balance values to Decimal with proper precision
    - Rejecting payloads without an account identity

    Thread-safe: No mutable state, can be shared across requests.

    Example:
        >>> mapper = AlpacaAccountMapper()
        >>> alpaca_data = {"id": "ba0d...", "account_number": "PA123", "equity": "100000"}
        >>> result = mapper.map_account(alpaca_data)
        >>> if result is not None:
        ...     print(f"Account: {result.account_number}")
    """

    def map_account(self, data: dict[str, Any]) -> Account | None:
        """Map Alpaca account JSON to Account.

        Args:
            data: Account object from Alpaca API response.

        Returns:
            Account if mapping succeeds, None if data is invalid
            or missing required fields.
        """
        try:
            return self._map_account_internal(data)
        except (KeyError, TypeError, ValueError, InvalidOperation, AttributeError) as e:
            logger.warning(
                "alpaca_account_mapping_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

    def _map_account_internal(self, data: dict[str, Any]) -> Account | None:
        """Internal mapping logic.

        Raises exceptions on invalid data (caught by map_account).
        """
        # Identity (required)
        account_id = data.get("id", "")
        account_number = data.get("account_number", "")
        if not account_id or not account_number:
            logger.debug("alpaca_account_missing_identity")
            return None

        return Account(
            id=account_id,
            account_number=account_number,
            status=data.get("status", "UNKNOWN"),
            currency=data.get("currency") or "USD",
            cash=parse_decimal(data.get("cash")),
            buying_power=parse_decimal(data.get("buying_power")),
            equity=parse_decimal(data.get("equity")),
            last_equity=parse_decimal(data.get("last_equity")),
            portfolio_value=parse_decimal(data.get("portfolio_value")),
            long_market_value=parse_decimal(data.get("long_market_value")),
            short_market_value=parse_decimal(data.get("short_market_value")),
            initial_margin=parse_decimal(data.get("initial_margin")),
            maintenance_margin=parse_decimal(data.get("maintenance_margin")),
            daytrade_count=int(data.get("daytrade_count") or 0),
            pattern_day_trader=bool(data.get("pattern_day_trader", False)),
            trading_blocked=bool(data.get("trading_blocked", False)),
            transfers_blocked=bool(data.get("transfers_blocked", False)),
            account_blocked=bool(data.get("account_blocked", False)),
            shorting_enabled=bool(data.get("shorting_enabled", False)),
            multiplier=parse_decimal(data.get("multiplier"), default=Decimal("1")),
            created_at=parse_optional_datetime(data.get("created_at")),
            raw_data=data,
        )
