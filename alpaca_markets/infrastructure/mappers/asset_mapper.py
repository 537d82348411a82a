"""Alpaca asset mapper.

Converts ``/v2/assets`` JSON objects to Asset models.

Alpaca Asset Response Structure:
    {
        "id": "b0b6dd9d-8b9b-48a9-ba46-b9d54906e415",
        "class": "us_equity",
        "exchange": "NASDAQ",
        "symbol": "AAPL",
        "name": "Apple Inc. Common Stock",
        "status": "active",
        "tradable": true,
        "marginable": true,
        "shortable": true,
        "easy_to_borrow": true,
        "fractionable": true
    }

Note the asset class arrives under the key "class".
"""

from typing import Any

import structlog

from alpaca_markets.domain.models import Asset

logger = structlog.get_logger(__name__)


class AlpacaAssetMapper:
    """Mapper for converting Alpaca asset data to Asset.

    Thread-safe: No mutable state, can be shared across requests.
    """

    def map_asset(self, data: dict[str, Any]) -> Asset | None:
        """Map Alpaca asset JSON to Asset.

        Args:
            data: Asset object from Alpaca API response.

        Returns:
            Asset, or None if id or symbol is missing.
        """
        try:
            asset_id = data.get("id", "")
            symbol = data.get("symbol", "")
            if not asset_id or not symbol:
                logger.debug("alpaca_asset_missing_identity", symbol=symbol)
                return None

            return Asset(
                id=asset_id,
                symbol=symbol,
                name=data.get("name") or "",
                asset_class=data.get("class") or data.get("asset_class") or "us_equity",
                exchange=data.get("exchange") or "",
                status=data.get("status") or "active",
                tradable=bool(data.get("tradable", False)),
                marginable=bool(data.get("marginable", False)),
                shortable=bool(data.get("shortable", False)),
                easy_to_borrow=bool(data.get("easy_to_borrow", False)),
                fractionable=bool(data.get("fractionable", False)),
            )
        except (TypeError, AttributeError) as e:
            logger.warning(
                "alpaca_asset_mapping_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            return None
