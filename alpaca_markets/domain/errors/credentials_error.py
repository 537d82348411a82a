"""Configuration error for missing credentials.

Unlike API errors, this one is raised: building a request for an
environment that has no credentials is a programming error, and sending
an unauthenticated request instead would only hide it.
"""

from alpaca_markets.core.enums import TradingEnvironment


class CredentialsNotConfiguredError(RuntimeError):
    """Raised when the selected trading environment has no credentials."""

    def __init__(self, environment: TradingEnvironment) -> None:
        """Initialize credentials error.

        Args:
            environment: Environment that was selected without credentials.
        """
        super().__init__(
            f"No credentials configured for {environment.value} trading; "
            f"call update_credentials(..., is_live={environment is TradingEnvironment.LIVE}) "
            "or switch environment"
        )
        self.environment = environment
