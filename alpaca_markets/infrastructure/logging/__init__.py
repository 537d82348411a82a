"""Logging setup helpers."""

from alpaca_markets.infrastructure.logging.console_adapter import (
    configure_console_logging,
    redact_credentials,
)

__all__ = ["configure_console_logging", "redact_credentials"]
