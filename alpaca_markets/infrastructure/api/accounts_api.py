"""Alpaca Accounts API client.

Endpoints:
    GET /v2/account - Get account information

Reference:
    - https://docs.alpaca.markets/reference/getaccount-1
"""

from alpaca_markets.core.result import Result
from alpaca_markets.domain.errors import AlpacaAPIError
from alpaca_markets.domain.models import Account
from alpaca_markets.infrastructure.base_api_client import BaseAlpacaAPIClient
from alpaca_markets.infrastructure.mappers import AlpacaAccountMapper
from alpaca_markets.infrastructure.request_builder import RequestBuilder


class AlpacaAccountsAPI(BaseAlpacaAPIClient):
    """HTTP client for the account endpoint.

    Example:
        >>> api = AlpacaAccountsAPI(request_builder=builder)
        >>> result = await api.get_account()
    """

    def __init__(self, *, request_builder: RequestBuilder) -> None:
        """Initialize Alpaca Accounts API client.

        Args:
            request_builder: Shared request builder.
        """
        super().__init__(request_builder=request_builder, resource_name="accounts")
        self._mapper = AlpacaAccountMapper()

    async def get_account(self) -> Result[Account, AlpacaAPIError]:
        """Fetch the account associated with the API key.

        Returns:
            Success(Account): Account snapshot.
            Failure(AlpacaAuthenticationError): If credentials are invalid.
            Failure(AlpacaUnavailableError): If Alpaca API is unreachable.
        """
        result = await self._execute_and_parse_object(
            method="GET",
            path="/account",
            operation="get_account",
        )
        return self._map_object(result, self._mapper.map_account, "get_account")
