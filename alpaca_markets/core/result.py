"""Result types for railway-oriented programming.

Every API operation returns a Result instead of raising: a ``Success``
carrying the decoded model, or a ``Failure`` carrying a typed API error.
Callers branch with ``isinstance`` or structural pattern matching.

Usage:
    result = await markets.get_asset("AAPL")
    match result:
        case Success(value=asset):
            print(asset.exchange)
        case Failure(error=AlpacaNotFoundError()):
            print("Unknown symbol")
        case Failure(error=error):
            print(f"Request failed: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The decoded response value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]


def unwrap_or_none[T, E](result: Result[T, E]) -> T | None:
    """Collapse a Result to its value, or None on failure.

    Used by the null-on-failure compatibility facade.

    Args:
        result: Result to unwrap.

    Returns:
        The success value, or None if the result is a Failure.
    """
    if isinstance(result, Success):
        return result.value
    return None
