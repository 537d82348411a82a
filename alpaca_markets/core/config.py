"""
Client configuration using Pydantic.

Configuration is an explicit, immutable object handed to one
``AlpacaMarkets`` instance. Nothing is read from environment variables or
files: credentials and endpoints are supplied by the caller.

Architecture:
- Flat structure (no nesting)
- Type validation via Pydantic
- Defaults come from core constants, never hard-coded here

Usage:
    from alpaca_markets.core.config import ClientConfig

    config = ClientConfig(timeout=10.0)
    markets = AlpacaMarkets(paper_api_key_id="PK...", paper_api_secret_key="...", config=config)
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from alpaca_markets.core.constants import (
    API_TIMEOUT_DEFAULT,
    API_VERSION_DEFAULT,
    LIVE_API_BASE_URL,
    PAPER_API_BASE_URL,
)
from alpaca_markets.core.enums import TradingEnvironment


class ClientConfig(BaseModel):
    """
    Alpaca client settings (flat structure).

    Returns:
        ClientConfig: Validated, frozen client configuration.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    live_base_url: str = Field(
        default=LIVE_API_BASE_URL,
        description="Base URL of the live trading environment",
    )
    paper_base_url: str = Field(
        default=PAPER_API_BASE_URL,
        description="Base URL of the paper trading environment",
    )
    api_version: str = Field(
        default=API_VERSION_DEFAULT,
        description="Trading API version path segment (e.g., v2)",
    )
    timeout: float = Field(
        default=API_TIMEOUT_DEFAULT,
        gt=0,
        description="HTTP request timeout in seconds",
    )

    @field_validator("live_base_url", "paper_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URLs so paths can be appended directly.

        Args:
            v: Base URL as provided.

        Returns:
            str: Base URL without trailing slash.

        Raises:
            ValueError: If the URL is empty or not http(s).
        """
        v = v.strip().rstrip("/")
        if not v.startswith(("https://", "http://")):
            raise ValueError(f"Base URL must start with http:// or https://: {v!r}")
        return v

    @field_validator("api_version")
    @classmethod
    def strip_slashes(cls, v: str) -> str:
        """Normalize the version segment (``/v2/`` -> ``v2``)."""
        v = v.strip().strip("/")
        if not v:
            raise ValueError("api_version cannot be empty")
        return v

    def base_url_for(self, environment: TradingEnvironment) -> str:
        """Return the base URL for a trading environment.

        Args:
            environment: Selected trading environment.

        Returns:
            str: Base URL without trailing slash.
        """
        if environment is TradingEnvironment.LIVE:
            return self.live_base_url
        return self.paper_base_url
