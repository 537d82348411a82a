"""Asset model: static metadata of a tradable instrument."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class Asset:
    """Alpaca asset.

    Attributes:
        id: Asset UUID.
        symbol: Ticker symbol (e.g., "AAPL", "BTC/USD").
        name: Official name of the asset.
        asset_class: "us_equity", "us_option" or "crypto".
        exchange: Listing exchange (AMEX, ARCA, BATS, NYSE, NASDAQ, NYSEARCA, OTC).
        status: "active" or "inactive".
        tradable: Whether the asset is tradable on Alpaca.
        marginable: Whether the asset is marginable.
        shortable: Whether the asset is shortable.
        easy_to_borrow: Whether the asset is easy to borrow.
        fractionable: Whether fractional orders are allowed.
    """

    id: str
    symbol: str
    name: str = ""
    asset_class: str = "us_equity"
    exchange: str = ""
    status: str = "active"
    tradable: bool = False
    marginable: bool = False
    shortable: bool = False
    easy_to_borrow: bool = False
    fractionable: bool = False

    @property
    def is_active(self) -> bool:
        """Whether the asset is active."""
        return self.status == "active"
