"""Unit tests for alpaca_markets.infrastructure.credential_store."""

import pytest

from alpaca_markets.core.enums import TradingEnvironment
from alpaca_markets.domain.value_objects import Credentials
from alpaca_markets.infrastructure.credential_store import CredentialStore


@pytest.mark.unit
class TestCredentialStore:
    """Tests for CredentialStore slots."""

    def test_empty_store(self):
        store = CredentialStore()

        assert store.get(TradingEnvironment.LIVE) is None
        assert store.has(TradingEnvironment.PAPER) is False

    def test_get_returns_slot(
        self, live_credentials: Credentials, paper_credentials: Credentials
    ):
        store = CredentialStore(live=live_credentials, paper=paper_credentials)

        assert store.get(TradingEnvironment.LIVE) == live_credentials
        assert store.get(TradingEnvironment.PAPER) == paper_credentials

    def test_update_replaces_only_one_slot(
        self, live_credentials: Credentials, paper_credentials: Credentials
    ):
        store = CredentialStore(live=live_credentials, paper=paper_credentials)
        new_paper = Credentials(key_id="PKNEW", secret_key="new-secret")

        store.update(new_paper, TradingEnvironment.PAPER)

        assert store.get(TradingEnvironment.PAPER) == new_paper
        assert store.get(TradingEnvironment.LIVE) == live_credentials


@pytest.mark.unit
class TestDefaultEnvironment:
    """Live is the default unless only paper credentials exist."""

    def test_no_credentials_defaults_to_live(self):
        assert CredentialStore().default_environment() is TradingEnvironment.LIVE

    def test_both_defaults_to_live(
        self, live_credentials: Credentials, paper_credentials: Credentials
    ):
        store = CredentialStore(live=live_credentials, paper=paper_credentials)

        assert store.default_environment() is TradingEnvironment.LIVE

    def test_paper_only_defaults_to_paper(self, paper_credentials: Credentials):
        store = CredentialStore(paper=paper_credentials)

        assert store.default_environment() is TradingEnvironment.PAPER
