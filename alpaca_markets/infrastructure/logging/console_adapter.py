"""Console logging setup for applications using the client.

The library itself only calls ``structlog.get_logger(__name__)`` and never
configures logging on import. Applications that want readable output can
call ``configure_console_logging`` once at startup:
- Development: human-readable console renderer with colors
- CI/production: JSON renderer for machine parsing

Both pipelines pass through ``redact_credentials`` so a key pair bound to a
log call by mistake never reaches the output.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

REDACTED = "[REDACTED]"

_SENSITIVE_KEY_FRAGMENTS = ("secret", "password", "token", "authorization")


def redact_credentials(
    logger: Any,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """structlog processor masking secret-looking values.

    Masks any key containing "secret", "password", "token" or
    "authorization" (case-insensitive), including inside a ``headers`` dict.

    Args:
        logger: Wrapped logger (unused).
        method_name: Log method name (unused).
        event_dict: Event being processed.

    Returns:
        The event dict with sensitive values replaced.
    """
    for key in list(event_dict):
        if _is_sensitive(key):
            event_dict[key] = REDACTED
        elif key == "headers" and isinstance(event_dict[key], dict):
            event_dict[key] = {
                name: REDACTED if _is_sensitive(name) else value
                for name, value in event_dict[key].items()
            }
    return event_dict


def _is_sensitive(key: str) -> bool:
    lowered = key.lower()
    return any(fragment in lowered for fragment in _SENSITIVE_KEY_FRAGMENTS)


def configure_console_logging(*, use_json: bool = False, level: str = "INFO") -> None:
    """Configure structlog to write to stdout.

    Args:
        use_json (bool): JSON output when True (CI/production), human-readable when False (dev).
        level (str): Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Raises:
        ValueError: If level is not a known level name.
    """
    level_value = logging.getLevelName(level.upper())
    if not isinstance(level_value, int):
        raise ValueError(f"Unknown log level: {level}")

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        redact_credentials,
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )
