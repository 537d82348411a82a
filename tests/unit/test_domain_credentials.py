"""Unit tests for Credentials and CredentialsNotConfiguredError."""

import pytest

from alpaca_markets.core.enums import TradingEnvironment
from alpaca_markets.domain.errors import CredentialsNotConfiguredError
from alpaca_markets.domain.value_objects import Credentials


@pytest.mark.unit
class TestCredentials:
    """Tests for the Credentials value object."""

    def test_equality_by_value(self):
        assert Credentials(key_id="PK", secret_key="s") == Credentials(
            key_id="PK", secret_key="s"
        )

    def test_repr_hides_secret(self):
        """The secret key never appears in repr (and thus in logs or tracebacks)."""
        credentials = Credentials(key_id="PKVISIBLE", secret_key="super-secret")

        assert "PKVISIBLE" in repr(credentials)
        assert "super-secret" not in repr(credentials)


@pytest.mark.unit
class TestCredentialsNotConfiguredError:
    """Tests for the raised configuration error."""

    def test_is_runtime_error(self):
        error = CredentialsNotConfiguredError(TradingEnvironment.PAPER)

        assert isinstance(error, RuntimeError)
        assert error.environment is TradingEnvironment.PAPER

    def test_message_names_environment(self):
        error = CredentialsNotConfiguredError(TradingEnvironment.LIVE)

        assert "live" in str(error)
        assert "is_live=True" in str(error)
