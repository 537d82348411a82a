"""Domain value objects."""

from alpaca_markets.domain.value_objects.credentials import Credentials

__all__ = ["Credentials"]
