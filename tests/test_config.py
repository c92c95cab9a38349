"""Tests for trade settings."""

import pytest

from tradedesk import config
from tradedesk.config import TradeSettings, get_settings, set_settings
from tradedesk.core.trades.evaluation import DEFAULT_TRADE_SETTINGS


@pytest.fixture(autouse=True)
def reset_settings():
    set_settings(None)
    yield
    set_settings(None)


class TestTradeSettings:

    def test_defaults(self, monkeypatch):
        for name in ("TRADEDESK_SALARY_DUMP_TRADES", "TRADEDESK_TRADE_REQUESTS",
                     "TRADEDESK_MAX_NEGOTIATION_ROUNDS"):
            monkeypatch.delenv(name, raising=False)

        settings = TradeSettings.from_env()
        assert settings.salary_dump_trades_enabled
        assert settings.trade_requests_enabled
        assert settings.max_negotiation_rounds == 3

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("TRADEDESK_SALARY_DUMP_TRADES", "false")
        monkeypatch.setenv("TRADEDESK_TRADE_REQUESTS", "0")
        monkeypatch.setenv("TRADEDESK_MAX_NEGOTIATION_ROUNDS", "5")

        settings = TradeSettings.from_env()
        assert not settings.salary_dump_trades_enabled
        assert not settings.trade_requests_enabled
        assert settings.max_negotiation_rounds == 5

    def test_bad_int_raises(self, monkeypatch):
        monkeypatch.setenv("TRADEDESK_MAX_NEGOTIATION_ROUNDS", "lots")
        with pytest.raises(ValueError, match="TRADEDESK_MAX_NEGOTIATION_ROUNDS"):
            TradeSettings.from_env()

    def test_validate(self):
        assert TradeSettings(max_negotiation_rounds=3).validate() == []
        assert TradeSettings(max_negotiation_rounds=0).validate() == [
            "max_negotiation_rounds must be at least 1",
        ]

    def test_default_evaluation_settings_ignore_environment(self, monkeypatch):
        monkeypatch.setenv("TRADEDESK_SALARY_DUMP_TRADES", "false")
        assert DEFAULT_TRADE_SETTINGS.salary_dump_trades_enabled


class TestGlobalSettings:

    def test_singleton(self):
        assert get_settings() is get_settings()

    def test_set_and_reset(self, monkeypatch):
        custom = TradeSettings(max_negotiation_rounds=7)
        set_settings(custom)
        assert get_settings() is custom

        set_settings(None)
        monkeypatch.setenv("TRADEDESK_MAX_NEGOTIATION_ROUNDS", "2")
        assert get_settings().max_negotiation_rounds == 2
        assert config._settings is not None
