"""Tests for alpaca_markets/infrastructure/base_api_client.py.

Verifies BaseAlpacaAPIClient executes requests, classifies HTTP statuses
and parses JSON correctly for all resource API clients.
"""

from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from alpaca_markets.core.enums import ErrorCode
from alpaca_markets.core.result import Failure, Success
from alpaca_markets.domain.errors import (
    AlpacaAuthenticationError,
    AlpacaInvalidResponseError,
    AlpacaNotFoundError,
    AlpacaRateLimitError,
    AlpacaRequestRejectedError,
    AlpacaUnavailableError,
    CredentialsNotConfiguredError,
)
from alpaca_markets.domain.value_objects import Credentials
from alpaca_markets.infrastructure.base_api_client import (
    BaseAlpacaAPIClient,
    path_segment,
)
from alpaca_markets.infrastructure.credential_store import CredentialStore
from alpaca_markets.infrastructure.request_builder import RequestBuilder


class ConcreteAPIClient(BaseAlpacaAPIClient):
    """Concrete implementation for testing."""

    def __init__(self, *, request_builder: RequestBuilder):
        super().__init__(request_builder=request_builder, resource_name="test")


def _mock_async_client(mock_client_class: MagicMock) -> AsyncMock:
    mock_client = AsyncMock()
    mock_client.__aenter__.return_value = mock_client
    mock_client.__aexit__.return_value = None
    mock_client_class.return_value = mock_client
    return mock_client


def _response(status: int, **kwargs: Any) -> httpx.Response:
    return httpx.Response(
        status,
        request=httpx.Request("GET", "https://api.alpaca.markets/v2/assets/XYZ"),
        **kwargs,
    )


@pytest.fixture
def client(live_credentials: Credentials) -> ConcreteAPIClient:
    return ConcreteAPIClient(
        request_builder=RequestBuilder(CredentialStore(live=live_credentials))
    )


@pytest.mark.unit
class TestPathSegment:
    """Tests for path_segment."""

    def test_plain_symbol_unchanged(self):
        assert path_segment("AAPL") == "AAPL"

    def test_slash_is_encoded(self):
        assert path_segment("BTC/USD") == "BTC%2FUSD"


# =============================================================================
# _check_error_response
# =============================================================================


@pytest.mark.unit
class TestCheckErrorResponse:
    """Tests for _check_error_response method."""

    @pytest.mark.parametrize("status", [200, 201, 204])
    def test_returns_none_for_2xx(self, client: ConcreteAPIClient, status: int):
        response = MagicMock(spec=httpx.Response)
        response.status_code = status

        assert client._check_error_response(response, "test_op") is None

    def test_returns_rate_limit_error_for_429(self, client: ConcreteAPIClient):
        response = MagicMock(spec=httpx.Response)
        response.status_code = 429
        response.headers = {"Retry-After": "60"}

        result = client._check_error_response(response, "test_op")

        assert isinstance(result, Failure)
        assert isinstance(result.error, AlpacaRateLimitError)
        assert result.error.code == ErrorCode.API_RATE_LIMITED
        assert result.error.retry_after == 60
        assert result.error.status_code == 429

    def test_rate_limit_ignores_non_numeric_retry_after(
        self, client: ConcreteAPIClient
    ):
        response = MagicMock(spec=httpx.Response)
        response.status_code = 429
        response.headers = {"Retry-After": "Wed, 21 Oct 2015 07:28:00 GMT"}

        result = client._check_error_response(response, "test_op")

        assert isinstance(result, Failure)
        assert result.error.retry_after is None

    @pytest.mark.parametrize("status", [401, 403])
    def test_returns_auth_error(self, client: ConcreteAPIClient, status: int):
        response = MagicMock(spec=httpx.Response)
        response.status_code = status

        result = client._check_error_response(response, "test_op")

        assert isinstance(result, Failure)
        assert isinstance(result.error, AlpacaAuthenticationError)
        assert result.error.code == ErrorCode.API_AUTHENTICATION_FAILED
        assert result.error.operation == "test_op"

    def test_returns_not_found_with_request_path(self, client: ConcreteAPIClient):
        result = client._check_error_response(_response(404), "get_asset")

        assert isinstance(result, Failure)
        assert isinstance(result.error, AlpacaNotFoundError)
        assert result.error.code == ErrorCode.RESOURCE_NOT_FOUND
        assert result.error.resource == "/v2/assets/XYZ"

    def test_not_found_without_request(self, client: ConcreteAPIClient):
        result = client._check_error_response(httpx.Response(404), "get_asset")

        assert isinstance(result, Failure)
        assert isinstance(result.error, AlpacaNotFoundError)
        assert result.error.resource is None

    @pytest.mark.parametrize("status", [500, 502, 503])
    def test_returns_unavailable_for_5xx(self, client: ConcreteAPIClient, status: int):
        response = MagicMock(spec=httpx.Response)
        response.status_code = status

        result = client._check_error_response(response, "test_op")

        assert isinstance(result, Failure)
        assert isinstance(result.error, AlpacaUnavailableError)
        assert result.error.is_transient is True
        assert result.error.status_code == status

    def test_returns_rejected_with_api_message_for_422(
        self, client: ConcreteAPIClient
    ):
        response = _response(422, json={"code": 40010001, "message": "symbol is invalid"})

        result = client._check_error_response(response, "test_op")

        assert isinstance(result, Failure)
        assert isinstance(result.error, AlpacaRequestRejectedError)
        assert result.error.code == ErrorCode.API_REQUEST_REJECTED
        assert result.error.api_message == "symbol is invalid"
        assert "symbol is invalid" in result.error.message

    def test_rejected_without_json_body(self, client: ConcreteAPIClient):
        result = client._check_error_response(_response(400, text="bad"), "test_op")

        assert isinstance(result, Failure)
        assert isinstance(result.error, AlpacaRequestRejectedError)
        assert result.error.api_message is None

    def test_unexpected_status_is_invalid_response(self, client: ConcreteAPIClient):
        result = client._check_error_response(_response(302, text="moved"), "test_op")

        assert isinstance(result, Failure)
        assert isinstance(result.error, AlpacaInvalidResponseError)
        assert result.error.response_body == "moved"


# =============================================================================
# _parse_json
# =============================================================================


@pytest.mark.unit
class TestParseJson:
    """Tests for _parse_json method."""

    def test_returns_object(self, client: ConcreteAPIClient):
        result = client._parse_json(_response(200, json={"id": "1"}), "test_op", dict)

        assert isinstance(result, Success)
        assert result.value == {"id": "1"}

    def test_returns_list(self, client: ConcreteAPIClient):
        result = client._parse_json(_response(200, json=[{"id": "1"}]), "test_op", list)

        assert isinstance(result, Success)
        assert result.value == [{"id": "1"}]

    def test_invalid_json(self, client: ConcreteAPIClient):
        result = client._parse_json(_response(200, text="not json"), "test_op", dict)

        assert isinstance(result, Failure)
        assert isinstance(result.error, AlpacaInvalidResponseError)
        assert result.error.response_body == "not json"

    def test_object_where_list_expected(self, client: ConcreteAPIClient):
        result = client._parse_json(_response(200, json={"id": "1"}), "test_op", list)

        assert isinstance(result, Failure)
        assert isinstance(result.error, AlpacaInvalidResponseError)
        assert "list" in result.error.message

    def test_error_status_checked_before_parsing(self, client: ConcreteAPIClient):
        result = client._parse_json(_response(503, json={}), "test_op", dict)

        assert isinstance(result, Failure)
        assert isinstance(result.error, AlpacaUnavailableError)

    def test_truncates_response_body(self, client: ConcreteAPIClient):
        result = client._parse_json(_response(200, text="x" * 2000), "test_op", dict)

        assert isinstance(result, Failure)
        assert len(result.error.response_body) == 500


# =============================================================================
# _map_object / _map_list
# =============================================================================


@pytest.mark.unit
class TestMapping:
    """Tests for model mapping helpers."""

    def test_map_object_success(self, client: ConcreteAPIClient):
        result = client._map_object(Success(value={"id": "1"}), lambda d: d["id"], "op")

        assert result == Success(value="1")

    def test_map_object_none_is_invalid_response(self, client: ConcreteAPIClient):
        result = client._map_object(Success(value={}), lambda d: None, "op")

        assert isinstance(result, Failure)
        assert isinstance(result.error, AlpacaInvalidResponseError)
        assert result.error.operation == "op"

    def test_map_object_passes_failure_through(self, client: ConcreteAPIClient):
        failure = client._check_error_response(_response(404), "op")

        assert client._map_object(failure, lambda d: d, "op") is failure

    def test_map_list_keeps_order(self, client: ConcreteAPIClient):
        result = client._map_list(
            Success(value=[{"id": "b"}, {"id": "a"}]), lambda d: d["id"], "op"
        )

        assert result == Success(value=["b", "a"])

    def test_map_list_one_bad_item_fails_all(self, client: ConcreteAPIClient):
        result = client._map_list(
            Success(value=[{"id": "a"}, "not-an-object"]), lambda d: d["id"], "op"
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AlpacaInvalidResponseError)


# =============================================================================
# _execute_request
# =============================================================================


@pytest.mark.unit
class TestExecuteRequest:
    """Tests for _execute_request method."""

    async def test_returns_response_on_success(self, client: ConcreteAPIClient):
        mock_response = MagicMock(spec=httpx.Response)
        mock_response.status_code = 200

        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = _mock_async_client(mock_client_class)
            mock_client.request.return_value = mock_response

            result = await client._execute_request(
                method="GET",
                path="/assets",
                params={"status": "active"},
                operation="test_op",
            )

        assert isinstance(result, Success)
        assert result.value is mock_response
        call = mock_client.request.call_args.kwargs
        assert call["url"] == "https://api.alpaca.markets/v2/assets"
        assert call["params"] == {"status": "active"}
        assert call["headers"]["APCA-API-KEY-ID"] == "AKLIVE123"
        mock_client_class.assert_called_once_with(timeout=30.0)

    async def test_returns_unavailable_on_timeout(self, client: ConcreteAPIClient):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = _mock_async_client(mock_client_class)
            mock_client.request.side_effect = httpx.TimeoutException("Timeout")

            result = await client._execute_request(
                method="GET", path="/clock", operation="test_op"
            )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AlpacaUnavailableError)
        assert result.error.code == ErrorCode.API_UNAVAILABLE
        assert result.error.status_code is None
        assert "timed out" in result.error.message.lower()

    async def test_returns_unavailable_on_connection_error(
        self, client: ConcreteAPIClient
    ):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = _mock_async_client(mock_client_class)
            mock_client.request.side_effect = httpx.ConnectError("Connection refused")

            result = await client._execute_request(
                method="GET", path="/clock", operation="test_op"
            )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AlpacaUnavailableError)
        assert "Connection refused" in result.error.message

    async def test_unencodable_credentials_are_auth_failure(
        self, client: ConcreteAPIClient
    ):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = _mock_async_client(mock_client_class)
            mock_client.request.side_effect = UnicodeEncodeError(
                "ascii", "PKCLÉ", 4, 5, "ordinal not in range(128)"
            )

            result = await client._execute_request(
                method="GET", path="/account", operation="test_op"
            )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AlpacaAuthenticationError)
        assert result.error.code == ErrorCode.API_AUTHENTICATION_FAILED
        assert result.error.status_code is None

    async def test_missing_credentials_raise_before_io(self):
        client = ConcreteAPIClient(request_builder=RequestBuilder(CredentialStore()))

        with patch("httpx.AsyncClient") as mock_client_class:
            with pytest.raises(CredentialsNotConfiguredError):
                await client._execute_request(
                    method="GET", path="/clock", operation="test_op"
                )

        mock_client_class.assert_not_called()


# =============================================================================
# _execute_without_body
# =============================================================================


@pytest.mark.unit
class TestExecuteWithoutBody:
    """Tests for _execute_without_body method."""

    async def test_success_on_204(self, client: ConcreteAPIClient):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = _mock_async_client(mock_client_class)
            mock_client.request.return_value = _response(204)

            result = await client._execute_without_body(
                method="DELETE", path="/watchlists/wl-1", operation="delete"
            )

        assert result == Success(value=None)

    async def test_failure_on_404(self, client: ConcreteAPIClient):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = _mock_async_client(mock_client_class)
            mock_client.request.return_value = _response(404)

            result = await client._execute_without_body(
                method="DELETE", path="/watchlists/wl-1", operation="delete"
            )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AlpacaNotFoundError)
