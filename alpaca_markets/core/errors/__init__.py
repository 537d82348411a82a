"""Core errors package.

Usage:
    from alpaca_markets.core.errors import DomainError
"""

from alpaca_markets.core.errors.domain_error import DomainError

__all__ = ["DomainError"]
