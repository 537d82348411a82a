"""Alpaca watchlist mapper.

Converts ``/v2/watchlists`` JSON objects to Watchlist models.

Alpaca Watchlist Response Structure:
    {
        "id": "3174d6df-7726-44b4-a5bd-7fda5ae6e009",
        "account_id": "abe25343-a7ba-4255-bdeb-f7e013e9ee5d",
        "name": "Primary Watchlist",
        "created_at": "2022-01-31T21:49:05.14628Z",
        "updated_at": "2022-01-31T21:49:05.14628Z",
        "assets": [ {asset}, {asset}, ... ]
    }

The list endpoint omits "assets"; the detail and write endpoints include
them in watchlist order.
"""

from typing import Any

import structlog

from alpaca_markets.domain.models import Watchlist
from alpaca_markets.infrastructure.mappers.asset_mapper import AlpacaAssetMapper
from alpaca_markets.infrastructure.mappers.value_parsers import parse_optional_datetime

logger = structlog.get_logger(__name__)


class AlpacaWatchlistMapper:
    """Mapper for converting Alpaca watchlist data to Watchlist.

    A watchlist containing an asset that cannot be mapped is rejected as a
    whole, so ``Watchlist.symbols`` always reflects the server's list.

    Thread-safe: No mutable state, can be shared across requests.
    """

    def __init__(self) -> None:
        self._asset_mapper = AlpacaAssetMapper()

    def map_watchlist(self, data: dict[str, Any]) -> Watchlist | None:
        """Map Alpaca watchlist JSON to Watchlist.

        Args:
            data: Watchlist object from Alpaca API response.

        Returns:
            Watchlist, or None if data is invalid.
        """
        try:
            return self._map_watchlist_internal(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning(
                "alpaca_watchlist_mapping_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

    def _map_watchlist_internal(self, data: dict[str, Any]) -> Watchlist | None:
        watchlist_id = data.get("id", "")
        name = data.get("name")
        if not watchlist_id or name is None:
            logger.debug("alpaca_watchlist_missing_identity")
            return None

        assets = []
        for raw_asset in data.get("assets") or []:
            asset = self._asset_mapper.map_asset(raw_asset)
            if asset is None:
                logger.warning(
                    "alpaca_watchlist_asset_unmappable",
                    watchlist_id=watchlist_id,
                )
                return None
            assets.append(asset)

        return Watchlist(
            id=watchlist_id,
            name=name,
            account_id=data.get("account_id"),
            created_at=parse_optional_datetime(data.get("created_at")),
            updated_at=parse_optional_datetime(data.get("updated_at")),
            assets=tuple(assets),
        )
