"""Request builder: the single authority for base URL and credentials.

Given the currently selected trading environment and the stored
credentials, turns a resource path, query parameters and HTTP method into
a fully formed ``ApiRequest`` (URL and authentication headers included).
Resource API clients never touch credentials directly.

Architecture:
    - Owns the environment selector (live | paper)
    - Reads, never writes, the selector while building requests
    - Fails fast with CredentialsNotConfiguredError instead of building an
      unauthenticated request

Reference:
    - https://docs.alpaca.markets/docs/authentication
"""

from dataclasses import dataclass, field
from typing import Any

import structlog

from alpaca_markets.core.config import ClientConfig
from alpaca_markets.core.constants import API_KEY_ID_HEADER, API_SECRET_KEY_HEADER
from alpaca_markets.core.enums import TradingEnvironment
from alpaca_markets.domain.errors import CredentialsNotConfiguredError
from alpaca_markets.domain.value_objects import Credentials
from alpaca_markets.infrastructure.credential_store import CredentialStore

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class ApiRequest:
    """Outbound HTTP request, ready to hand to the transport.

    Attributes:
        method: HTTP method (GET, POST, PUT, DELETE).
        url: Absolute URL including the API version segment.
        headers: Authentication and content negotiation headers.
        params: Query parameters (None values already dropped).
        json_data: JSON body for POST/PUT requests.
    """

    method: str
    url: str
    headers: dict[str, str] = field(repr=False)
    params: dict[str, str] | None = None
    json_data: dict[str, Any] | None = None


class RequestBuilder:
    """Builds authenticated requests for the selected trading environment.

    Attributes:
        environment: Currently selected trading environment.
        base_url: Base URL of the selected environment.

    Example:
        >>> builder = RequestBuilder(
        ...     CredentialStore(paper=Credentials(key_id="PK", secret_key="s")),
        ...     environment=TradingEnvironment.PAPER,
        ... )
        >>> builder.build("GET", "/account").url
        'https://paper-api.alpaca.markets/v2/account'
    """

    def __init__(
        self,
        credential_store: CredentialStore,
        *,
        config: ClientConfig | None = None,
        environment: TradingEnvironment = TradingEnvironment.LIVE,
    ) -> None:
        """Initialize request builder.

        Args:
            credential_store: Store holding live/paper credentials.
            config: Client configuration (endpoints, API version).
            environment: Initially selected environment.
        """
        self._credential_store = credential_store
        self._config = config or ClientConfig()
        self._environment = environment

    @property
    def environment(self) -> TradingEnvironment:
        """Currently selected trading environment."""
        return self._environment

    @property
    def is_live_trading(self) -> bool:
        """Whether requests currently target the live environment."""
        return self._environment is TradingEnvironment.LIVE

    @property
    def base_url(self) -> str:
        """Base URL of the selected environment."""
        return self._config.base_url_for(self._environment)

    @property
    def timeout(self) -> float:
        """Configured HTTP timeout in seconds."""
        return self._config.timeout

    def enable_live_trading(self) -> None:
        """Route subsequent requests to the live environment."""
        self._select(TradingEnvironment.LIVE)

    def enable_paper_trading(self) -> None:
        """Route subsequent requests to the paper environment."""
        self._select(TradingEnvironment.PAPER)

    def update_credentials(
        self,
        credentials: Credentials,
        *,
        is_live: bool = True,
    ) -> None:
        """Replace the credentials of one environment.

        Args:
            credentials: New key pair.
            is_live: True to replace the live slot, False for the paper slot.
        """
        environment = TradingEnvironment.LIVE if is_live else TradingEnvironment.PAPER
        self._credential_store.update(credentials, environment)

    def build(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | None = None,
    ) -> ApiRequest:
        """Build a request for the selected environment.

        Args:
            method: HTTP method.
            path: Resource path relative to the API version (e.g., "/assets").
            params: Query parameters; None values are dropped.
            json_data: Optional JSON body.

        Returns:
            ApiRequest with absolute URL and authentication headers.

        Raises:
            CredentialsNotConfiguredError: If the selected environment has
                no credentials.
        """
        credentials = self._credential_store.get(self._environment)
        if credentials is None:
            raise CredentialsNotConfiguredError(self._environment)

        query = None
        if params:
            query = {
                key: str(value)
                for key, value in params.items()
                if value is not None
            }

        return ApiRequest(
            method=method.upper(),
            url=f"{self.base_url}/{self._config.api_version}{path}",
            headers=self._build_headers(credentials),
            params=query or None,
            json_data=json_data,
        )

    def _select(self, environment: TradingEnvironment) -> None:
        if environment is not self._environment:
            logger.info(
                "alpaca_trading_environment_changed",
                previous=self._environment.value,
                environment=environment.value,
            )
        self._environment = environment

    def _build_headers(self, credentials: Credentials) -> dict[str, str]:
        """Build HTTP headers for Alpaca API requests.

        Args:
            credentials: Key pair of the selected environment.

        Returns:
            Headers dict with API key authentication.
        """
        return {
            API_KEY_ID_HEADER: credentials.key_id,
            API_SECRET_KEY_HEADER: credentials.secret_key,
            "Accept": "application/json",
        }

