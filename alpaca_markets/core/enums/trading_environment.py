"""Trading environment types.

Alpaca runs two independent environments with the same API shape. Each
has its own base URL and its own key pair.

Environments:
- LIVE: Production trading, orders have real financial effect
- PAPER: Simulated trading, no real financial effect
"""

from enum import Enum


class TradingEnvironment(str, Enum):
    """Alpaca trading environments."""

    LIVE = "live"
    PAPER = "paper"
