"""Null-on-failure compatibility facade.

``NullableAlpacaMarkets`` exposes the same operations as ``AlpacaMarkets``
but collapses every failure to ``None``: a missing asset, bad credentials
and an unreachable server all look the same to the caller. Delete
operations always return ``None``.

Prefer ``AlpacaMarkets`` in new code; its Result values say *why* a call
failed. Failures are still logged as warnings by the underlying clients.
Configuration errors (no credentials for the selected environment) are
raised in both modes.

Usage:
    from alpaca_markets.compat import NullableAlpacaMarkets

    markets = NullableAlpacaMarkets(paper_api_key_id="PK...", paper_api_secret_key="...")
    asset = await markets.get_asset("AAPL")
    if asset is None:
        ...
"""

from datetime import date

from alpaca_markets.client import AlpacaMarkets
from alpaca_markets.core.config import ClientConfig
from alpaca_markets.core.enums import TradingEnvironment
from alpaca_markets.core.result import unwrap_or_none
from alpaca_markets.domain.models import Account, Asset, Calendar, Clock, Watchlist


class NullableAlpacaMarkets:
    """AlpacaMarkets variant returning ``None`` instead of a Failure."""

    def __init__(
        self,
        *,
        live_api_key_id: str | None = None,
        live_api_secret_key: str | None = None,
        paper_api_key_id: str | None = None,
        paper_api_secret_key: str | None = None,
        config: ClientConfig | None = None,
        markets: AlpacaMarkets | None = None,
    ) -> None:
        """Create the client.

        Args:
            live_api_key_id: API key ID for the live environment.
            live_api_secret_key: API secret key for the live environment.
            paper_api_key_id: API key ID for the paper environment.
            paper_api_secret_key: API secret key for the paper environment.
            config: Endpoint and timeout configuration.
            markets: Existing Result-returning client to wrap instead of
                building one from the keys above.
        """
        if markets is None:
            markets = AlpacaMarkets(
                live_api_key_id=live_api_key_id,
                live_api_secret_key=live_api_secret_key,
                paper_api_key_id=paper_api_key_id,
                paper_api_secret_key=paper_api_secret_key,
                config=config,
            )
        self._markets = markets

    @property
    def environment(self) -> TradingEnvironment:
        """Currently selected trading environment."""
        return self._markets.environment

    @property
    def is_live_trading(self) -> bool:
        """Whether requests target the live environment."""
        return self._markets.is_live_trading

    def update_credentials(
        self,
        api_key_id: str,
        api_secret_key: str,
        *,
        is_live: bool = True,
    ) -> None:
        self._markets.update_credentials(api_key_id, api_secret_key, is_live=is_live)

    def enable_live_trading(self) -> None:
        self._markets.enable_live_trading()

    def enable_paper_trading(self) -> None:
        self._markets.enable_paper_trading()

    async def get_account(self) -> Account | None:
        return unwrap_or_none(await self._markets.get_account())

    async def get_assets(
        self,
        *,
        status: str | None = None,
        asset_class: str | None = None,
        exchange: str | None = None,
    ) -> list[Asset] | None:
        return unwrap_or_none(
            await self._markets.get_assets(
                status=status,
                asset_class=asset_class,
                exchange=exchange,
            )
        )

    async def get_asset(self, symbol: str) -> Asset | None:
        """Return the asset, or None if not found or if an error occurred."""
        return unwrap_or_none(await self._markets.get_asset(symbol))

    async def get_watchlists(
        self,
        *,
        with_assets: bool = False,
        concurrent: bool = False,
    ) -> list[Watchlist] | None:
        """Return all watchlists, or None if any request failed."""
        return unwrap_or_none(
            await self._markets.get_watchlists(
                with_assets=with_assets,
                concurrent=concurrent,
            )
        )

    async def get_watchlist(self, watchlist_id: str) -> Watchlist | None:
        return unwrap_or_none(await self._markets.get_watchlist(watchlist_id))

    async def create_watchlist(
        self,
        name: str,
        *,
        symbols: list[str] | None = None,
    ) -> Watchlist | None:
        return unwrap_or_none(await self._markets.create_watchlist(name, symbols=symbols))

    async def update_watchlist(
        self,
        watchlist_id: str,
        *,
        name: str | None = None,
        symbols: list[str] | None = None,
    ) -> Watchlist | None:
        return unwrap_or_none(
            await self._markets.update_watchlist(watchlist_id, name=name, symbols=symbols)
        )

    async def add_watchlist_symbol(self, watchlist_id: str, symbol: str) -> Watchlist | None:
        return unwrap_or_none(await self._markets.add_watchlist_symbol(watchlist_id, symbol))

    async def delete_all_watchlists(self) -> None:
        await self._markets.delete_all_watchlists()

    async def delete_watchlist(self, watchlist_id: str, *, symbol: str | None = None) -> None:
        await self._markets.delete_watchlist(watchlist_id, symbol=symbol)

    async def delete_watchlist_symbol(self, watchlist_id: str, symbol: str) -> None:
        await self._markets.delete_watchlist_symbol(watchlist_id, symbol)

    async def get_calendar(self, day: date) -> Calendar | None:
        return unwrap_or_none(await self._markets.get_calendar(day))

    async def get_calendar_range(
        self,
        *,
        start: date | None = None,
        end: date | None = None,
    ) -> list[Calendar] | None:
        return unwrap_or_none(await self._markets.get_calendar_range(start=start, end=end))

    async def get_clock(self) -> Clock | None:
        return unwrap_or_none(await self._markets.get_clock())
