"""Centralized constants for internal implementation details.

This module holds fixed facts about the Alpaca Trading API contract and
internal limits. Anything a caller may want to override (base URLs,
timeout) is exposed through ``alpaca_markets.core.config.ClientConfig``,
which uses these values as its defaults.

Categories:
- Endpoints: Base URLs for each trading environment
- Headers: Authentication header names mandated by Alpaca
- Timeouts: Default timeout for API calls
- Limits: Truncation and safety limits

Reference:
    - https://docs.alpaca.markets/docs/authentication
"""

# =============================================================================
# Endpoints
# =============================================================================

LIVE_API_BASE_URL: str = "https://api.alpaca.markets"
"""Base URL of the live (real money) trading environment."""

PAPER_API_BASE_URL: str = "https://paper-api.alpaca.markets"
"""Base URL of the paper (simulated) trading environment."""

API_VERSION_DEFAULT: str = "v2"
"""Trading API version path segment."""


# =============================================================================
# Headers
# =============================================================================

API_KEY_ID_HEADER: str = "APCA-API-KEY-ID"
"""Header carrying the API key ID."""

API_SECRET_KEY_HEADER: str = "APCA-API-SECRET-KEY"
"""Header carrying the API secret key."""


# =============================================================================
# Timeouts
# =============================================================================

API_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout for Alpaca API calls in seconds."""


# =============================================================================
# Response Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum length for response body in error messages (truncation limit)."""
