"""Base API client for Alpaca HTTP communication.

This module provides a base class for the resource API clients that handles:
- Asking the RequestBuilder for an authenticated request
- HTTP request execution with timeout/connection error handling
- Response status code interpretation
- JSON parsing and model mapping with error handling
- Structured logging with resource context

Subclasses only need to:
1. Choose method, path and parameters for each operation
2. Pass the decoded JSON through a mapper

Architecture:
    - Uses httpx for async HTTP (one client per call, no pooling, no retries)
    - Returns Result types (no exceptions for API errors)
    - CredentialsNotConfiguredError from the RequestBuilder is NOT caught

Reference:
    - https://docs.alpaca.markets/docs/trading-api
"""

from collections.abc import Callable
from typing import Any
from urllib.parse import quote

import httpx
import structlog

from alpaca_markets.core.constants import RESPONSE_BODY_MAX_LENGTH
from alpaca_markets.core.enums import ErrorCode
from alpaca_markets.core.result import Failure, Result, Success
from alpaca_markets.domain.errors import (
    AlpacaAPIError,
    AlpacaAuthenticationError,
    AlpacaInvalidResponseError,
    AlpacaNotFoundError,
    AlpacaRateLimitError,
    AlpacaRequestRejectedError,
    AlpacaUnavailableError,
)
from alpaca_markets.infrastructure.request_builder import RequestBuilder


def path_segment(value: str) -> str:
    """Percent-encode a value for use as one URL path segment.

    Crypto symbols such as "BTC/USD" contain a slash that must not split
    the path.
    """
    return quote(value, safe="")


class BaseAlpacaAPIClient:
    """Base class for Alpaca resource API clients with shared HTTP handling.

    Provides common functionality for HTTP communication with Alpaca:
    - Request execution with timeout/connection error handling
    - Response status code interpretation (401, 403, 404, 429, 4xx, 5xx)
    - JSON parsing with type validation
    - Model mapping with failure reporting

    The RequestBuilder is passed in, not owned: every resource client of
    one AlpacaMarkets instance shares it, so an environment switch applies
    to all of them at once.

    Attributes:
        _request_builder: Source of URLs and authentication headers.
        _resource_name: Resource identifier for logging.
        _logger: Structured logger with resource context.

    Example:
        >>> class AlpacaAccountsAPI(BaseAlpacaAPIClient):
        ...     def __init__(self, *, request_builder: RequestBuilder):
        ...         super().__init__(
        ...             request_builder=request_builder,
        ...             resource_name="accounts",
        ...         )
        ...
        ...     async def get_account(self):
        ...         return await self._execute_and_parse_object(
        ...             method="GET",
        ...             path="/account",
        ...             operation="get_account",
        ...         )
    """

    def __init__(
        self,
        *,
        request_builder: RequestBuilder,
        resource_name: str,
    ) -> None:
        """Initialize base API client.

        Args:
            request_builder: Shared request builder of the owning client.
            resource_name: Resource identifier (e.g., "assets", "watchlists").
        """
        self._request_builder = request_builder
        self._resource_name = resource_name
        self._logger = structlog.get_logger(f"alpaca_{resource_name}_api")

    async def _execute_request(
        self,
        *,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | None = None,
        operation: str,
    ) -> Result[httpx.Response, AlpacaAPIError]:
        """Execute HTTP request with error handling.

        Args:
            method: HTTP method (GET, POST, etc.).
            path: URL path relative to the API version.
            params: Optional query parameters.
            json_data: Optional JSON body for POST/PUT requests.
            operation: Operation name for logging.

        Returns:
            Success(httpx.Response): Raw HTTP response on success.
            Failure(AlpacaUnavailableError): On timeout or connection error.
            Failure(AlpacaAuthenticationError): If the credentials cannot be
                encoded as header values.

        Raises:
            CredentialsNotConfiguredError: If the selected environment has
                no credentials.
        """
        request = self._request_builder.build(
            method,
            path,
            params=params,
            json_data=json_data,
        )

        self._logger.debug(
            f"alpaca_{self._resource_name}_api_request_started",
            operation=operation,
            method=request.method,
            url=request.url,
            environment=self._request_builder.environment.value,
        )

        try:
            async with httpx.AsyncClient(timeout=self._request_builder.timeout) as client:
                response = await client.request(
                    method=request.method,
                    url=request.url,
                    headers=request.headers,
                    params=request.params,
                    json=request.json_data,
                )
            return Success(value=response)

        except httpx.TimeoutException as e:
            self._logger.warning(
                f"alpaca_{self._resource_name}_api_timeout",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=AlpacaUnavailableError(
                    code=ErrorCode.API_UNAVAILABLE,
                    message="Alpaca API request timed out",
                    operation=operation,
                    is_transient=True,
                )
            )

        except httpx.RequestError as e:
            self._logger.warning(
                f"alpaca_{self._resource_name}_api_connection_error",
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=AlpacaUnavailableError(
                    code=ErrorCode.API_UNAVAILABLE,
                    message=f"Failed to connect to Alpaca API: {e}",
                    operation=operation,
                    is_transient=True,
                )
            )

        except UnicodeEncodeError:
            # Header values must be ASCII; such keys can never authenticate.
            self._logger.warning(
                f"alpaca_{self._resource_name}_api_credentials_not_encodable",
                operation=operation,
                environment=self._request_builder.environment.value,
            )
            return Failure(
                error=AlpacaAuthenticationError(
                    code=ErrorCode.API_AUTHENTICATION_FAILED,
                    message="Alpaca API credentials contain non-ASCII characters",
                    operation=operation,
                )
            )

    def _check_error_response(
        self,
        response: httpx.Response,
        operation: str,
    ) -> Failure[AlpacaAPIError] | None:
        """Check HTTP response for errors and return appropriate AlpacaAPIError.

        Args:
            response: HTTP response to check.
            operation: Operation name for logging.

        Returns:
            Failure(AlpacaAPIError) if error detected, None if response is OK.
        """
        status = response.status_code

        # Success - no error
        if 200 <= status < 300:
            return None

        # Rate limiting (429)
        if status == 429:
            retry_after = response.headers.get("Retry-After")
            retry_seconds = int(retry_after) if retry_after and retry_after.isdigit() else None
            self._logger.warning(
                f"alpaca_{self._resource_name}_api_rate_limited",
                operation=operation,
                retry_after=retry_seconds,
            )
            return Failure(
                error=AlpacaRateLimitError(
                    code=ErrorCode.API_RATE_LIMITED,
                    message="Alpaca API rate limit exceeded",
                    operation=operation,
                    status_code=status,
                    retry_after=retry_seconds,
                )
            )

        # Authentication errors (401, 403)
        if status in (401, 403):
            self._logger.warning(
                f"alpaca_{self._resource_name}_api_auth_failed",
                operation=operation,
                status_code=status,
                environment=self._request_builder.environment.value,
            )
            return Failure(
                error=AlpacaAuthenticationError(
                    code=ErrorCode.API_AUTHENTICATION_FAILED,
                    message=(
                        "Alpaca API credentials are invalid"
                        if status == 401
                        else "Access denied to Alpaca resource"
                    ),
                    operation=operation,
                    status_code=status,
                )
            )

        # Not found (404)
        if status == 404:
            resource = _request_path(response)
            self._logger.warning(
                f"alpaca_{self._resource_name}_api_not_found",
                operation=operation,
                path=resource,
            )
            return Failure(
                error=AlpacaNotFoundError(
                    code=ErrorCode.RESOURCE_NOT_FOUND,
                    message="Alpaca resource not found",
                    operation=operation,
                    status_code=status,
                    resource=resource,
                )
            )

        # Server errors (5xx)
        if status >= 500:
            self._logger.warning(
                f"alpaca_{self._resource_name}_api_server_error",
                operation=operation,
                status_code=status,
            )
            return Failure(
                error=AlpacaUnavailableError(
                    code=ErrorCode.API_UNAVAILABLE,
                    message=f"Alpaca API server error: {status}",
                    operation=operation,
                    status_code=status,
                    is_transient=True,
                )
            )

        # Other client errors (400, 422, ...)
        if 400 <= status < 500:
            api_message = self._extract_api_message(response)
            self._logger.warning(
                f"alpaca_{self._resource_name}_api_request_rejected",
                operation=operation,
                status_code=status,
                api_message=api_message,
            )
            return Failure(
                error=AlpacaRequestRejectedError(
                    code=ErrorCode.API_REQUEST_REJECTED,
                    message=f"Alpaca API rejected the request: {api_message or status}",
                    operation=operation,
                    status_code=status,
                    api_message=api_message,
                )
            )

        # Unexpected status
        self._logger.warning(
            f"alpaca_{self._resource_name}_api_unexpected_status",
            operation=operation,
            status_code=status,
        )
        return Failure(
            error=AlpacaInvalidResponseError(
                code=ErrorCode.API_INVALID_RESPONSE,
                message=f"Unexpected response from Alpaca: {status}",
                operation=operation,
                status_code=status,
                response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
            )
        )

    def _parse_json(
        self,
        response: httpx.Response,
        operation: str,
        expected_type: type[dict[str, Any]] | type[list[Any]],
    ) -> Result[Any, AlpacaAPIError]:
        """Parse response as JSON of the expected type with error handling.

        Args:
            response: HTTP response to parse.
            operation: Operation name for logging.
            expected_type: ``dict`` for object endpoints, ``list`` for list endpoints.

        Returns:
            Success(dict | list): Parsed JSON.
            Failure(AlpacaAPIError): On HTTP error, invalid JSON or wrong shape.
        """
        # Check for HTTP errors first
        error_result = self._check_error_response(response, operation)
        if error_result is not None:
            return error_result

        # Parse JSON
        try:
            data = response.json()
        except ValueError as e:
            self._logger.error(
                f"alpaca_{self._resource_name}_api_invalid_json",
                operation=operation,
                error=str(e),
            )
            return self._invalid_response(
                response, operation, "Invalid JSON response from Alpaca"
            )

        # Validate type
        if not isinstance(data, expected_type):
            self._logger.warning(
                f"alpaca_{self._resource_name}_api_unexpected_format",
                operation=operation,
                data_type=type(data).__name__,
            )
            kind = "object" if expected_type is dict else "list"
            return self._invalid_response(
                response, operation, f"Expected {kind} response from Alpaca"
            )

        self._logger.debug(
            f"alpaca_{self._resource_name}_api_succeeded",
            operation=operation,
        )
        return Success(value=data)

    async def _execute_and_parse_object(
        self,
        *,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | None = None,
        operation: str,
    ) -> Result[dict[str, Any], AlpacaAPIError]:
        """Execute request and parse response as JSON object.

        Returns:
            Success(dict): Parsed JSON object.
            Failure(AlpacaAPIError): On any error.
        """
        result = await self._execute_request(
            method=method,
            path=path,
            params=params,
            json_data=json_data,
            operation=operation,
        )

        if isinstance(result, Failure):
            return result

        return self._parse_json(result.value, operation, dict)

    async def _execute_and_parse_list(
        self,
        *,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | None = None,
        operation: str,
    ) -> Result[list[dict[str, Any]], AlpacaAPIError]:
        """Execute request and parse response as JSON list.

        Returns:
            Success(list[dict]): Parsed JSON list.
            Failure(AlpacaAPIError): On any error.
        """
        result = await self._execute_request(
            method=method,
            path=path,
            params=params,
            json_data=json_data,
            operation=operation,
        )

        if isinstance(result, Failure):
            return result

        return self._parse_json(result.value, operation, list)

    async def _execute_without_body(
        self,
        *,
        method: str,
        path: str,
        operation: str,
    ) -> Result[None, AlpacaAPIError]:
        """Execute request whose response body is irrelevant (e.g., DELETE).

        Returns:
            Success(None): On any 2xx status.
            Failure(AlpacaAPIError): On any error.
        """
        result = await self._execute_request(
            method=method,
            path=path,
            operation=operation,
        )

        if isinstance(result, Failure):
            return result

        error_result = self._check_error_response(result.value, operation)
        if error_result is not None:
            return error_result

        self._logger.debug(
            f"alpaca_{self._resource_name}_api_succeeded",
            operation=operation,
        )
        return Success(value=None)

    def _map_object[M](
        self,
        result: Result[dict[str, Any], AlpacaAPIError],
        mapper: Callable[[dict[str, Any]], M | None],
        operation: str,
    ) -> Result[M, AlpacaAPIError]:
        """Map a parsed JSON object to a model.

        Args:
            result: Result of an ``_execute_and_parse_object`` call.
            mapper: Mapper returning None when data is unusable.
            operation: Operation name for logging.

        Returns:
            Success(model) or Failure(AlpacaAPIError).
        """
        if isinstance(result, Failure):
            return result

        model = mapper(result.value)
        if model is None:
            return self._mapping_failed(operation)
        return Success(value=model)

    def _map_list[M](
        self,
        result: Result[list[dict[str, Any]], AlpacaAPIError],
        mapper: Callable[[dict[str, Any]], M | None],
        operation: str,
    ) -> Result[list[M], AlpacaAPIError]:
        """Map every item of a parsed JSON list; one bad item fails the list.

        Returns:
            Success(list[model]) or Failure(AlpacaAPIError).
        """
        if isinstance(result, Failure):
            return result

        models: list[M] = []
        for item in result.value:
            model = mapper(item) if isinstance(item, dict) else None
            if model is None:
                return self._mapping_failed(operation)
            models.append(model)

        self._logger.debug(
            f"alpaca_{self._resource_name}_api_mapped",
            operation=operation,
            count=len(models),
        )
        return Success(value=models)

    def _mapping_failed(self, operation: str) -> Failure[AlpacaAPIError]:
        self._logger.warning(
            f"alpaca_{self._resource_name}_api_mapping_failed",
            operation=operation,
        )
        return Failure(
            error=AlpacaInvalidResponseError(
                code=ErrorCode.API_INVALID_RESPONSE,
                message="Alpaca response is missing required fields",
                operation=operation,
            )
        )

    def _invalid_response(
        self,
        response: httpx.Response,
        operation: str,
        message: str,
    ) -> Failure[AlpacaAPIError]:
        return Failure(
            error=AlpacaInvalidResponseError(
                code=ErrorCode.API_INVALID_RESPONSE,
                message=message,
                operation=operation,
                status_code=response.status_code,
                response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
            )
        )

    @staticmethod
    def _extract_api_message(response: httpx.Response) -> str | None:
        """Return the ``message`` field of an Alpaca error body, if present."""
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict) and isinstance(body.get("message"), str):
            return body["message"]
        return None


def _request_path(response: httpx.Response) -> str | None:
    try:
        return response.request.url.path
    except RuntimeError:
        # Response built without a request (e.g. in tests)
        return None
