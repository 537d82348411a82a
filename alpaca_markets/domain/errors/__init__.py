"""Domain errors package.

Usage:
    from alpaca_markets.domain.errors import AlpacaAPIError, AlpacaNotFoundError
"""

from alpaca_markets.domain.errors.api_error import (
    AlpacaAPIError,
    AlpacaAuthenticationError,
    AlpacaInvalidResponseError,
    AlpacaNotFoundError,
    AlpacaRateLimitError,
    AlpacaRequestRejectedError,
    AlpacaUnavailableError,
)
from alpaca_markets.domain.errors.credentials_error import (
    CredentialsNotConfiguredError,
)

__all__ = [
    # API errors (returned in Failure)
    "AlpacaAPIError",
    "AlpacaAuthenticationError",
    "AlpacaInvalidResponseError",
    "AlpacaNotFoundError",
    "AlpacaRateLimitError",
    "AlpacaRequestRejectedError",
    "AlpacaUnavailableError",
    # Configuration errors (raised)
    "CredentialsNotConfiguredError",
]
