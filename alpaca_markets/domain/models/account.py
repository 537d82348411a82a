"""Trading account model.

Snapshot of the account associated with the API key, as returned by
``GET /v2/account``. Alpaca sends monetary values as strings; they are
held here as Decimal.

Reference:
    - https://docs.alpaca.markets/reference/getaccount-1
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any


@dataclass(frozen=True, kw_only=True)
class Account:
    """Alpaca trading account.

    Attributes:
        id: Account UUID.
        account_number: Human-readable account number (paper accounts start with "PA").
        status: Account status (e.g., "ACTIVE", "ONBOARDING").
        currency: ISO 4217 currency code (always "USD" today).
        cash: Cash balance.
        buying_power: Current available buying power.
        equity: Cash + long market value + short market value.
        last_equity: Equity as of previous trading day close.
        portfolio_value: Total value of cash and holdings.
        long_market_value: Real-time market value of long positions.
        short_market_value: Real-time market value of short positions.
        initial_margin: Reg T initial margin requirement.
        maintenance_margin: Maintenance margin requirement.
        daytrade_count: Day trades in the last five trading days.
        pattern_day_trader: Whether the account is flagged as PDT.
        trading_blocked: Whether the account may not place orders.
        transfers_blocked: Whether the account may not request transfers.
        account_blocked: Whether the account is blocked entirely.
        shorting_enabled: Whether short selling is allowed.
        multiplier: Buying power multiplier (1, 2 or 4).
        created_at: Account creation timestamp.
        raw_data: Full JSON response for fields not modelled here.
    """

    id: str
    account_number: str
    status: str
    currency: str = "USD"
    cash: Decimal = Decimal("0")
    buying_power: Decimal = Decimal("0")
    equity: Decimal = Decimal("0")
    last_equity: Decimal = Decimal("0")
    portfolio_value: Decimal = Decimal("0")
    long_market_value: Decimal = Decimal("0")
    short_market_value: Decimal = Decimal("0")
    initial_margin: Decimal = Decimal("0")
    maintenance_margin: Decimal = Decimal("0")
    daytrade_count: int = 0
    pattern_day_trader: bool = False
    trading_blocked: bool = False
    transfers_blocked: bool = False
    account_blocked: bool = False
    shorting_enabled: bool = False
    multiplier: Decimal = Decimal("1")
    created_at: datetime | None = None
    raw_data: dict[str, Any] | None = None

    @property
    def is_active(self) -> bool:
        """Whether the account is in ACTIVE status."""
        return self.status == "ACTIVE"

    @property
    def is_paper(self) -> bool:
        """Whether this is a paper trading account."""
        return self.account_number.startswith("PA")
