"""AlpacaMarkets: the public entry point of the library.

Provides a means to trade with Alpaca's brokerage service: account
details, asset metadata, watchlists, and the market calendar and clock.

The facade owns exactly one RequestBuilder (and its credentials) for its
whole lifetime and hands it to one API client per resource family. Every
method is a direct delegation returning a ``Result``.

Usage:
    from alpaca_markets import AlpacaMarkets, Failure, Success

    markets = AlpacaMarkets(
        paper_api_key_id="PKXXXXXXXX",
        paper_api_secret_key="secret",
    )
    match await markets.get_account():
        case Success(value=account):
            print(account.buying_power)
        case Failure(error=error):
            print(error)

For null-on-failure results see
``alpaca_markets.compat.NullableAlpacaMarkets``.
"""

from datetime import date

import structlog

from alpaca_markets.core.config import ClientConfig
from alpaca_markets.core.enums import TradingEnvironment
from alpaca_markets.core.result import Result
from alpaca_markets.domain.errors import AlpacaAPIError
from alpaca_markets.domain.models import Account, Asset, Calendar, Clock, Watchlist
from alpaca_markets.domain.value_objects import Credentials
from alpaca_markets.infrastructure.api import (
    AlpacaAccountsAPI,
    AlpacaAssetsAPI,
    AlpacaCalendarAPI,
    AlpacaWatchlistsAPI,
)
from alpaca_markets.infrastructure.credential_store import CredentialStore
from alpaca_markets.infrastructure.request_builder import RequestBuilder

logger = structlog.get_logger(__name__)


class AlpacaMarkets:
    """Async client for the Alpaca Trading API.

    Credentials are kept in memory only and are lost when the instance is
    discarded. Live and paper environments use separate key pairs, each
    generated in its own environment.

    Live trading is selected by default. If only paper credentials are
    provided, paper trading is selected instead.

    Concurrency: no locking. Switch environments or update credentials
    before issuing requests, not while requests are in flight.

    Attributes:
        environment: Currently selected trading environment.
        is_live_trading: Whether requests target the live environment.
    """

    def __init__(
        self,
        *,
        live_api_key_id: str | None = None,
        live_api_secret_key: str | None = None,
        paper_api_key_id: str | None = None,
        paper_api_secret_key: str | None = None,
        config: ClientConfig | None = None,
    ) -> None:
        """Create a client for the provided credentials.

        Args:
            live_api_key_id: API key ID for the live environment.
            live_api_secret_key: API secret key for the live environment.
            paper_api_key_id: API key ID for the paper environment.
            paper_api_secret_key: API secret key for the paper environment.
            config: Endpoint and timeout configuration.
        """
        credential_store = CredentialStore(
            live=_credentials_from_pair(
                live_api_key_id, live_api_secret_key, TradingEnvironment.LIVE
            ),
            paper=_credentials_from_pair(
                paper_api_key_id, paper_api_secret_key, TradingEnvironment.PAPER
            ),
        )
        self._request_builder = RequestBuilder(
            credential_store,
            config=config,
            environment=credential_store.default_environment(),
        )

        self._accounts_api = AlpacaAccountsAPI(request_builder=self._request_builder)
        self._assets_api = AlpacaAssetsAPI(request_builder=self._request_builder)
        self._watchlists_api = AlpacaWatchlistsAPI(request_builder=self._request_builder)
        self._calendar_api = AlpacaCalendarAPI(request_builder=self._request_builder)

        logger.debug(
            "alpaca_markets_initialized",
            environment=self._request_builder.environment.value,
            has_live_credentials=credential_store.has(TradingEnvironment.LIVE),
            has_paper_credentials=credential_store.has(TradingEnvironment.PAPER),
        )

    # =========================================================================
    # Credentials and environment
    # =========================================================================

    @property
    def environment(self) -> TradingEnvironment:
        """Currently selected trading environment."""
        return self._request_builder.environment

    @property
    def is_live_trading(self) -> bool:
        """Whether requests target the live environment."""
        return self._request_builder.is_live_trading

    def update_credentials(
        self,
        api_key_id: str,
        api_secret_key: str,
        *,
        is_live: bool = True,
    ) -> None:
        """Replace the credentials of the live (default) or paper environment.

        The other environment's credentials are left untouched, and the
        selected environment does not change.
        """
        self._request_builder.update_credentials(
            Credentials(key_id=api_key_id, secret_key=api_secret_key),
            is_live=is_live,
        )

    def enable_live_trading(self) -> None:
        """Send subsequent requests to the live environment (real money)."""
        self._request_builder.enable_live_trading()

    def enable_paper_trading(self) -> None:
        """Send subsequent requests to the paper environment."""
        self._request_builder.enable_paper_trading()

    # =========================================================================
    # Account
    # =========================================================================

    async def get_account(self) -> Result[Account, AlpacaAPIError]:
        """Return the account associated with the API key."""
        return await self._accounts_api.get_account()

    # =========================================================================
    # Assets
    # =========================================================================

    async def get_assets(
        self,
        *,
        status: str | None = None,
        asset_class: str | None = None,
        exchange: str | None = None,
    ) -> Result[list[Asset], AlpacaAPIError]:
        """Return assets, optionally filtered.

        Args:
            status: e.g. "active". By default, all statuses are included.
            asset_class: Defaults to "us_equity" server-side.
            exchange: AMEX, ARCA, BATS, NYSE, NASDAQ, NYSEARCA or OTC.
        """
        return await self._assets_api.get_assets(
            status=status,
            asset_class=asset_class,
            exchange=exchange,
        )

    async def get_asset(self, symbol: str) -> Result[Asset, AlpacaAPIError]:
        """Return the asset for ``symbol`` (AlpacaNotFoundError if unknown)."""
        return await self._assets_api.get_asset(symbol)

    # =========================================================================
    # Watchlists
    # =========================================================================

    async def get_watchlists(
        self,
        *,
        with_assets: bool = False,
        concurrent: bool = False,
    ) -> Result[list[Watchlist], AlpacaAPIError]:
        """Return the account's watchlists.

        Assets are NOT included by default. ``with_assets`` resolves them
        with one extra request per watchlist, which takes longer; any
        failed lookup fails the whole call.
        """
        return await self._watchlists_api.get_watchlists(
            with_assets=with_assets,
            concurrent=concurrent,
        )

    async def get_watchlist(self, watchlist_id: str) -> Result[Watchlist, AlpacaAPIError]:
        """Return the watchlist identified by ``watchlist_id``."""
        return await self._watchlists_api.get_watchlist(watchlist_id)

    async def create_watchlist(
        self,
        name: str,
        *,
        symbols: list[str] | None = None,
    ) -> Result[Watchlist, AlpacaAPIError]:
        """Create a watchlist, optionally with an initial set of symbols."""
        return await self._watchlists_api.create_watchlist(name, symbols=symbols)

    async def update_watchlist(
        self,
        watchlist_id: str,
        *,
        name: str | None = None,
        symbols: list[str] | None = None,
    ) -> Result[Watchlist, AlpacaAPIError]:
        """Rename a watchlist and/or replace ALL of its symbols."""
        return await self._watchlists_api.update_watchlist(
            watchlist_id,
            name=name,
            symbols=symbols,
        )

    async def add_watchlist_symbol(
        self,
        watchlist_id: str,
        symbol: str,
    ) -> Result[Watchlist, AlpacaAPIError]:
        """Add ``symbol`` to a watchlist; returns the updated watchlist."""
        return await self._watchlists_api.add_watchlist_symbol(watchlist_id, symbol)

    async def delete_all_watchlists(self) -> Result[None, AlpacaAPIError]:
        """Delete every watchlist."""
        return await self._watchlists_api.delete_all_watchlists()

    async def delete_watchlist(
        self,
        watchlist_id: str,
        *,
        symbol: str | None = None,
    ) -> Result[None, AlpacaAPIError]:
        """Delete a watchlist, or only ``symbol`` from it when given."""
        return await self._watchlists_api.delete_watchlist(watchlist_id, symbol=symbol)

    async def delete_watchlist_symbol(
        self,
        watchlist_id: str,
        symbol: str,
    ) -> Result[None, AlpacaAPIError]:
        """Remove ``symbol`` from a watchlist."""
        return await self._watchlists_api.delete_watchlist_symbol(watchlist_id, symbol)

    # =========================================================================
    # Calendar and clock
    # =========================================================================

    async def get_calendar(self, day: date) -> Result[Calendar, AlpacaAPIError]:
        """Return the trading calendar entry for ``day``."""
        return await self._calendar_api.get_calendar(day)

    async def get_calendar_range(
        self,
        *,
        start: date | None = None,
        end: date | None = None,
    ) -> Result[list[Calendar], AlpacaAPIError]:
        """Return the trading calendar between ``start`` and ``end``."""
        return await self._calendar_api.get_calendar_range(start=start, end=end)

    async def get_clock(self) -> Result[Clock, AlpacaAPIError]:
        """Return the current market clock."""
        return await self._calendar_api.get_clock()


def _credentials_from_pair(
    key_id: str | None,
    secret_key: str | None,
    environment: TradingEnvironment,
) -> Credentials | None:
    if key_id is not None and secret_key is not None:
        return Credentials(key_id=key_id, secret_key=secret_key)
    if key_id is not None or secret_key is not None:
        logger.warning(
            "alpaca_partial_credentials_ignored",
            environment=environment.value,
            has_key_id=key_id is not None,
            has_secret_key=secret_key is not None,
        )
    return None
