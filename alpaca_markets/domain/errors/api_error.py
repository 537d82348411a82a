"""Alpaca API error types.

These errors describe every way an API call can fail. They are returned
inside ``Failure`` results, never raised, so callers can tell "not found"
apart from "server unavailable" or "bad credentials".

Architecture:
- Inherit from DomainError (core layer)
- Used in Result types (railway-oriented programming)
- Produced by BaseAlpacaAPIClient from transport and HTTP status outcomes

Usage:
    from alpaca_markets.domain.errors import AlpacaNotFoundError

    match await markets.get_asset("XYZ"):
        case Failure(error=AlpacaNotFoundError()):
            ...
"""

from dataclasses import dataclass

from alpaca_markets.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AlpacaAPIError(DomainError):
    """Base Alpaca API error.

    Attributes:
        code: ErrorCode.
        message: Human-readable message.
        operation: Operation that failed (e.g., "get_asset").
        status_code: HTTP status code, None for transport failures.
        details: Additional context.
    """

    operation: str
    status_code: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AlpacaAuthenticationError(AlpacaAPIError):
    """Credentials rejected (401) or access denied (403).

    Recovery: Update credentials or switch to the environment the keys
    were generated in.
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AlpacaNotFoundError(AlpacaAPIError):
    """Requested resource does not exist (404, or empty lookup).

    Attributes:
        resource: Path or identifier of the missing resource.
    """

    resource: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AlpacaUnavailableError(AlpacaAPIError):
    """Alpaca API is unreachable.

    Raised when:
    - Connection timeout occurs
    - Connection cannot be established
    - API returns 5xx errors

    Attributes:
        is_transient: Whether the error is likely transient.
    """

    is_transient: bool = True


@dataclass(frozen=True, slots=True, kw_only=True)
class AlpacaRateLimitError(AlpacaAPIError):
    """Rate limit exceeded (429).

    Attributes:
        retry_after: Seconds to wait before retrying (from Retry-After header).
    """

    retry_after: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AlpacaRequestRejectedError(AlpacaAPIError):
    """Request understood but refused (400, 422 and other 4xx).

    Attributes:
        api_message: The ``message`` field of Alpaca's error body, if any.
    """

    api_message: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AlpacaInvalidResponseError(AlpacaAPIError):
    """Response could not be decoded into the expected model.

    Raised when:
    - Response JSON is malformed
    - JSON has the wrong shape (object vs list)
    - Required fields are missing
    - Status code is outside every known category

    Attributes:
        response_body: Truncated raw response body for debugging.
    """

    response_body: str | None = None
