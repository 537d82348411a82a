"""Watchlist model.

A named, ordered, user-owned collection of assets. The list endpoint
returns watchlists without their assets; the detail endpoint (and every
write endpoint) includes them.
"""

from dataclasses import dataclass
from datetime import datetime

from alpaca_markets.domain.models.asset import Asset


@dataclass(frozen=True, kw_only=True)
class Watchlist:
    """Alpaca watchlist.

    Attributes:
        id: Watchlist UUID.
        name: User-defined name.
        account_id: Owning account UUID.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
        assets: Assets in watchlist order (empty when not resolved).

    Example:
        >>> watchlist.symbols
        ('AAPL', 'GOOG')
    """

    id: str
    name: str
    account_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    assets: tuple[Asset, ...] = ()

    @property
    def symbols(self) -> tuple[str, ...]:
        """Symbols of the watchlist's assets, in order."""
        return tuple(asset.symbol for asset in self.assets)
