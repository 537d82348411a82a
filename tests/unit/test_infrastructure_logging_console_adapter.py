"""Unit tests for console logging setup and credential redaction.

Tests cover:
- redact_credentials processor (top-level keys and headers dicts)
- configure_console_logging renderer selection and level validation
- Library log events never carrying secret material
"""

from unittest.mock import patch

import pytest
import structlog
from structlog.testing import capture_logs

from alpaca_markets.core.enums import TradingEnvironment
from alpaca_markets.domain.value_objects import Credentials
from alpaca_markets.infrastructure.credential_store import CredentialStore
from alpaca_markets.infrastructure.logging import (
    configure_console_logging,
    redact_credentials,
)
from alpaca_markets.infrastructure.logging.console_adapter import REDACTED


@pytest.mark.unit
class TestRedactCredentials:
    """Test redact_credentials processor."""

    def test_masks_secret_keys(self):
        event = {"event": "x", "api_secret_key": "s3cret", "password": "p", "symbol": "AAPL"}

        result = redact_credentials(None, "info", event)

        assert result["api_secret_key"] == REDACTED
        assert result["password"] == REDACTED
        assert result["symbol"] == "AAPL"

    def test_masks_case_insensitively(self):
        result = redact_credentials(None, "info", {"Authorization": "Bearer abc"})

        assert result["Authorization"] == REDACTED

    def test_masks_inside_headers(self):
        event = {
            "headers": {
                "APCA-API-KEY-ID": "PK123",
                "APCA-API-SECRET-KEY": "s3cret",
            }
        }

        result = redact_credentials(None, "debug", event)

        assert result["headers"]["APCA-API-SECRET-KEY"] == REDACTED
        assert result["headers"]["APCA-API-KEY-ID"] == "PK123"

    def test_leaves_plain_events_untouched(self):
        event = {"event": "alpaca_assets_api_succeeded", "operation": "get_assets"}

        assert redact_credentials(None, "debug", dict(event)) == event


@pytest.mark.unit
class TestConfigureConsoleLogging:
    """Test configure_console_logging."""

    def test_console_renderer_by_default(self):
        with patch.object(structlog, "configure") as mock_configure:
            configure_console_logging()

        processors = mock_configure.call_args.kwargs["processors"]
        assert redact_credentials in processors
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_json_renderer(self):
        with patch.object(structlog, "configure") as mock_configure:
            configure_console_logging(use_json=True, level="debug")

        processors = mock_configure.call_args.kwargs["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_redaction_runs_before_rendering(self):
        with patch.object(structlog, "configure") as mock_configure:
            configure_console_logging(use_json=True)

        processors = mock_configure.call_args.kwargs["processors"]
        assert processors.index(redact_credentials) == len(processors) - 2

    def test_unknown_level_raises(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_console_logging(level="LOUD")


@pytest.mark.unit
class TestLibraryLogEvents:
    """Library events carry context but never credentials."""

    def test_credential_update_logs_environment_only(self):
        store = CredentialStore()

        with capture_logs() as logs:
            store.update(
                Credentials(key_id="PKSECRETID", secret_key="s3cret"),
                TradingEnvironment.PAPER,
            )

        assert logs == [
            {
                "event": "alpaca_credentials_updated",
                "environment": "paper",
                "log_level": "info",
            }
        ]
