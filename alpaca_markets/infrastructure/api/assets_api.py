"""Alpaca Assets API client.

Endpoints:
    GET /v2/assets - List assets, optionally filtered
    GET /v2/assets/{symbol} - Get one asset by symbol (or asset id)

Reference:
    - https://docs.alpaca.markets/reference/get-v2-assets-1
"""

from alpaca_markets.core.result import Result
from alpaca_markets.domain.errors import AlpacaAPIError
from alpaca_markets.domain.models import Asset
from alpaca_markets.infrastructure.base_api_client import (
    BaseAlpacaAPIClient,
    path_segment,
)
from alpaca_markets.infrastructure.mappers import AlpacaAssetMapper
from alpaca_markets.infrastructure.request_builder import RequestBuilder


class AlpacaAssetsAPI(BaseAlpacaAPIClient):
    """HTTP client for asset endpoints."""

    def __init__(self, *, request_builder: RequestBuilder) -> None:
        """Initialize Alpaca Assets API client.

        Args:
            request_builder: Shared request builder.
        """
        super().__init__(request_builder=request_builder, resource_name="assets")
        self._mapper = AlpacaAssetMapper()

    async def get_assets(
        self,
        *,
        status: str | None = None,
        asset_class: str | None = None,
        exchange: str | None = None,
    ) -> Result[list[Asset], AlpacaAPIError]:
        """Fetch assets, optionally filtered.

        Args:
            status: e.g. "active". All statuses when omitted.
            asset_class: e.g. "us_equity" (the API default) or "crypto".
            exchange: AMEX, ARCA, BATS, NYSE, NASDAQ, NYSEARCA or OTC.

        Returns:
            Success(list[Asset]) or Failure(AlpacaAPIError).
        """
        result = await self._execute_and_parse_list(
            method="GET",
            path="/assets",
            params={
                "status": status,
                "asset_class": asset_class,
                "exchange": exchange,
            },
            operation="get_assets",
        )
        return self._map_list(result, self._mapper.map_asset, "get_assets")

    async def get_asset(self, symbol: str) -> Result[Asset, AlpacaAPIError]:
        """Fetch one asset.

        Args:
            symbol: Ticker symbol or asset id.

        Returns:
            Success(Asset).
            Failure(AlpacaNotFoundError): If the symbol is unknown.
        """
        result = await self._execute_and_parse_object(
            method="GET",
            path=f"/assets/{path_segment(symbol)}",
            operation="get_asset",
        )
        return self._map_object(result, self._mapper.map_asset, "get_asset")
