"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from alpaca_markets.core.enums import ErrorCode, TradingEnvironment
"""

from alpaca_markets.core.enums.error_code import ErrorCode
from alpaca_markets.core.enums.trading_environment import TradingEnvironment

__all__ = ["ErrorCode", "TradingEnvironment"]
