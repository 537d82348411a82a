"""API key credentials value object.

Immutable pair of Alpaca API key ID and secret key for one trading
environment. Live and paper environments use separate key pairs, each
generated in its own environment.

Credentials only live in memory for the lifetime of the owning client;
they are never written anywhere.

Usage:
    from alpaca_markets.domain.value_objects import Credentials

    credentials = Credentials(key_id="PKXXXX", secret_key="secret")
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True, kw_only=True)
class Credentials:
    """Alpaca API key pair.

    Key format is not validated here: the API rejects bad keys with a 401,
    which surfaces as an authentication failure.

    Attributes:
        key_id: API key ID (sent as APCA-API-KEY-ID).
        secret_key: API secret key (sent as APCA-API-SECRET-KEY).

    Security:
        secret_key is excluded from repr so credentials can be logged or
        printed by accident without leaking the secret.

    Example:
        >>> creds = Credentials(key_id="PKTEST", secret_key="s3cret")
        >>> creds
        Credentials(key_id='PKTEST')
    """

    key_id: str
    secret_key: str = field(repr=False)
