"""Alpaca Watchlists API client.

Endpoints:
    GET    /v2/watchlists                 - List watchlists (without assets)
    POST   /v2/watchlists                 - Create a watchlist
    GET    /v2/watchlists/{id}            - Get a watchlist with its assets
    PUT    /v2/watchlists/{id}            - Replace name and/or full symbol list
    POST   /v2/watchlists/{id}            - Append one symbol
    DELETE /v2/watchlists/{id}            - Delete a watchlist
    DELETE /v2/watchlists/{id}/{symbol}   - Remove one symbol

Reference:
    - https://docs.alpaca.markets/reference/getwatchlists-1
"""

import asyncio
from typing import Any

from alpaca_markets.core.result import Failure, Result, Success
from alpaca_markets.domain.errors import AlpacaAPIError
from alpaca_markets.domain.models import Watchlist
from alpaca_markets.infrastructure.base_api_client import (
    BaseAlpacaAPIClient,
    path_segment,
)
from alpaca_markets.infrastructure.mappers import AlpacaWatchlistMapper
from alpaca_markets.infrastructure.request_builder import RequestBuilder


class AlpacaWatchlistsAPI(BaseAlpacaAPIClient):
    """HTTP client for watchlist endpoints.

    Multi-request operations (``get_watchlists(with_assets=True)``,
    ``delete_all_watchlists``) are all-or-nothing: the first failed
    sub-request fails the whole operation and no partial list is returned.
    """

    def __init__(self, *, request_builder: RequestBuilder) -> None:
        """Initialize Alpaca Watchlists API client.

        Args:
            request_builder: Shared request builder.
        """
        super().__init__(request_builder=request_builder, resource_name="watchlists")
        self._mapper = AlpacaWatchlistMapper()

    async def get_watchlists(
        self,
        *,
        with_assets: bool = False,
        concurrent: bool = False,
    ) -> Result[list[Watchlist], AlpacaAPIError]:
        """Fetch all watchlists of the account.

        The list endpoint does not include assets. With ``with_assets`` each
        watchlist is fetched again by id (N additional requests).

        Args:
            with_assets: Resolve each watchlist's assets.
            concurrent: Issue the per-watchlist lookups concurrently instead
                of one after another in list order.

        Returns:
            Success(list[Watchlist]) in server order, or the first Failure
            (in list order) of any request.
        """
        result = await self._execute_and_parse_list(
            method="GET",
            path="/watchlists",
            operation="get_watchlists",
        )
        listed = self._map_list(result, self._mapper.map_watchlist, "get_watchlists")
        if isinstance(listed, Failure) or not with_assets:
            return listed

        detailed: list[Result[Watchlist, AlpacaAPIError]]
        if concurrent:
            detailed = list(
                await asyncio.gather(
                    *(self.get_watchlist(watchlist.id) for watchlist in listed.value)
                )
            )
        else:
            detailed = []
            for watchlist in listed.value:
                detail = await self.get_watchlist(watchlist.id)
                detailed.append(detail)
                if isinstance(detail, Failure):
                    break

        watchlists: list[Watchlist] = []
        for detail in detailed:
            if isinstance(detail, Failure):
                self._logger.warning(
                    "alpaca_watchlists_api_resolve_assets_failed",
                    operation="get_watchlists",
                    resolved=len(watchlists),
                    total=len(listed.value),
                )
                return detail
            watchlists.append(detail.value)

        return Success(value=watchlists)

    async def get_watchlist(self, watchlist_id: str) -> Result[Watchlist, AlpacaAPIError]:
        """Fetch one watchlist with its assets.

        Args:
            watchlist_id: Watchlist UUID.
        """
        result = await self._execute_and_parse_object(
            method="GET",
            path=f"/watchlists/{path_segment(watchlist_id)}",
            operation="get_watchlist",
        )
        return self._map_object(result, self._mapper.map_watchlist, "get_watchlist")

    async def create_watchlist(
        self,
        name: str,
        *,
        symbols: list[str] | None = None,
    ) -> Result[Watchlist, AlpacaAPIError]:
        """Create a watchlist.

        Args:
            name: Watchlist name (must be unique per account).
            symbols: Optional initial symbols, kept in the given order.

        Returns:
            Success(Watchlist): The created watchlist.
        """
        body: dict[str, Any] = {"name": name}
        if symbols is not None:
            body["symbols"] = list(symbols)

        result = await self._execute_and_parse_object(
            method="POST",
            path="/watchlists",
            json_data=body,
            operation="create_watchlist",
        )
        return self._map_object(result, self._mapper.map_watchlist, "create_watchlist")

    async def update_watchlist(
        self,
        watchlist_id: str,
        *,
        name: str | None = None,
        symbols: list[str] | None = None,
    ) -> Result[Watchlist, AlpacaAPIError]:
        """Rename a watchlist and/or replace its symbols.

        ``symbols`` replaces the ENTIRE list; there is no merge. Pass the
        complete list you want to end up with.

        Args:
            watchlist_id: Watchlist UUID.
            name: New name, unchanged when omitted.
            symbols: Complete new symbol list, unchanged when omitted.

        Returns:
            Success(Watchlist): The edited watchlist.
        """
        body: dict[str, Any] = {}
        if name is not None:
            body["name"] = name
        if symbols is not None:
            body["symbols"] = list(symbols)

        result = await self._execute_and_parse_object(
            method="PUT",
            path=f"/watchlists/{path_segment(watchlist_id)}",
            json_data=body,
            operation="update_watchlist",
        )
        return self._map_object(result, self._mapper.map_watchlist, "update_watchlist")

    async def add_watchlist_symbol(
        self,
        watchlist_id: str,
        symbol: str,
    ) -> Result[Watchlist, AlpacaAPIError]:
        """Append a symbol to a watchlist.

        Returns:
            Success(Watchlist): The watchlist including the added asset.
        """
        result = await self._execute_and_parse_object(
            method="POST",
            path=f"/watchlists/{path_segment(watchlist_id)}",
            json_data={"symbol": symbol},
            operation="add_watchlist_symbol",
        )
        return self._map_object(
            result, self._mapper.map_watchlist, "add_watchlist_symbol"
        )

    async def delete_all_watchlists(self) -> Result[None, AlpacaAPIError]:
        """Delete every watchlist of the account.

        Alpaca has no bulk delete: lists the watchlists, then deletes them
        one by one in list order, stopping at the first failure.
        """
        listed = await self.get_watchlists()
        if isinstance(listed, Failure):
            return listed

        for watchlist in listed.value:
            deleted = await self.delete_watchlist(watchlist.id)
            if isinstance(deleted, Failure):
                return deleted

        self._logger.info(
            "alpaca_watchlists_api_all_deleted",
            operation="delete_all_watchlists",
            count=len(listed.value),
        )
        return Success(value=None)

    async def delete_watchlist(
        self,
        watchlist_id: str,
        *,
        symbol: str | None = None,
    ) -> Result[None, AlpacaAPIError]:
        """Delete a watchlist, or only one of its symbols.

        Args:
            watchlist_id: Watchlist UUID.
            symbol: When given, remove just this symbol instead.
        """
        if symbol is not None:
            return await self.delete_watchlist_symbol(watchlist_id, symbol)

        return await self._execute_without_body(
            method="DELETE",
            path=f"/watchlists/{path_segment(watchlist_id)}",
            operation="delete_watchlist",
        )

    async def delete_watchlist_symbol(
        self,
        watchlist_id: str,
        symbol: str,
    ) -> Result[None, AlpacaAPIError]:
        """Remove one symbol from a watchlist."""
        return await self._execute_without_body(
            method="DELETE",
            path=f"/watchlists/{path_segment(watchlist_id)}/{path_segment(symbol)}",
            operation="delete_watchlist_symbol",
        )
