"""Unit tests for alpaca_markets.core.config.ClientConfig."""

import pytest
from pydantic import ValidationError

from alpaca_markets.core.config import ClientConfig
from alpaca_markets.core.constants import (
    API_TIMEOUT_DEFAULT,
    LIVE_API_BASE_URL,
    PAPER_API_BASE_URL,
)
from alpaca_markets.core.enums import TradingEnvironment


@pytest.mark.unit
class TestClientConfigDefaults:
    """Default endpoints and timeout."""

    def test_default_endpoints(self):
        config = ClientConfig()

        assert config.live_base_url == "https://api.alpaca.markets"
        assert config.paper_base_url == "https://paper-api.alpaca.markets"
        assert config.api_version == "v2"
        assert config.timeout == API_TIMEOUT_DEFAULT

    def test_base_url_for_environment(self):
        config = ClientConfig()

        assert config.base_url_for(TradingEnvironment.LIVE) == LIVE_API_BASE_URL
        assert config.base_url_for(TradingEnvironment.PAPER) == PAPER_API_BASE_URL


@pytest.mark.unit
class TestClientConfigValidation:
    """Normalization and rejection of bad values."""

    def test_strips_trailing_slash(self):
        config = ClientConfig(paper_base_url="http://localhost:8080/")

        assert config.paper_base_url == "http://localhost:8080"

    def test_normalizes_api_version(self):
        assert ClientConfig(api_version="/v2/").api_version == "v2"

    def test_rejects_non_http_url(self):
        with pytest.raises(ValidationError):
            ClientConfig(live_base_url="api.alpaca.markets")

    def test_rejects_empty_api_version(self):
        with pytest.raises(ValidationError):
            ClientConfig(api_version="/")

    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_rejects_non_positive_timeout(self, timeout: float):
        with pytest.raises(ValidationError):
            ClientConfig(timeout=timeout)

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            ClientConfig(base_url="https://example.com")  # type: ignore[call-arg]

    def test_is_frozen(self):
        config = ClientConfig()

        with pytest.raises(ValidationError):
            config.timeout = 5.0  # type: ignore[misc]
