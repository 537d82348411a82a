"""In-memory credential store for the two trading environments.

Holds zero, one or two key pairs: one for live trading and one for paper
trading. Slots are replaced in place; nothing is persisted.
"""

import structlog

from alpaca_markets.core.enums import TradingEnvironment
from alpaca_markets.domain.value_objects import Credentials

logger = structlog.get_logger(__name__)


class CredentialStore:
    """Live and paper credential slots.

    Thread-safety: none. Credential updates are configuration changes and
    are expected to happen before request traffic, not concurrently with it.

    Example:
        >>> store = CredentialStore(paper=Credentials(key_id="PK", secret_key="s"))
        >>> store.has(TradingEnvironment.LIVE)
        False
        >>> store.default_environment()
        <TradingEnvironment.PAPER: 'paper'>
    """

    def __init__(
        self,
        *,
        live: Credentials | None = None,
        paper: Credentials | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            live: Credentials for the live environment.
            paper: Credentials for the paper environment.
        """
        self._slots: dict[TradingEnvironment, Credentials | None] = {
            TradingEnvironment.LIVE: live,
            TradingEnvironment.PAPER: paper,
        }

    def get(self, environment: TradingEnvironment) -> Credentials | None:
        """Return the credentials for an environment, or None if unset."""
        return self._slots[environment]

    def has(self, environment: TradingEnvironment) -> bool:
        """Return True if the environment has credentials."""
        return self._slots[environment] is not None

    def update(
        self,
        credentials: Credentials,
        environment: TradingEnvironment,
    ) -> None:
        """Replace the credentials of one environment.

        The other slot is left untouched.

        Args:
            credentials: New key pair.
            environment: Slot to replace.
        """
        self._slots[environment] = credentials
        logger.info(
            "alpaca_credentials_updated",
            environment=environment.value,
        )

    def default_environment(self) -> TradingEnvironment:
        """Environment to select when the caller has not chosen one.

        Live unless only paper credentials are present.
        """
        if not self.has(TradingEnvironment.LIVE) and self.has(TradingEnvironment.PAPER):
            return TradingEnvironment.PAPER
        return TradingEnvironment.LIVE
