"""Tests for the trade history log."""

from datetime import date

import pytest

from tradedesk.core.trades.history import TradeHistory
from tradedesk.core.trades.proposal import CompletedTrade

from conftest import make_pick


def _trade(trade_id, club_a, club_b, when, players_to_a=(), players_to_b=()):
    return CompletedTrade(
        id=trade_id,
        date=when,
        club_a=club_a,
        club_b=club_b,
        players_to_a=tuple(players_to_a),
        players_to_b=tuple(players_to_b),
    )


@pytest.fixture
def history() -> TradeHistory:
    log = TradeHistory(league_id="test-league")
    log.record(_trade("t3", "a", "c", date(2025, 10, 9), ["p5"], ["p6"]))
    log.record(_trade("t1", "a", "b", date(2024, 10, 2), ["p1"], ["p2"]))
    log.record(_trade("t2", "b", "a", date(2025, 10, 3), ["p3"], ["p1"]))
    return log


class TestTradeHistory:

    def test_sorted_by_date(self, history):
        assert [t.id for t in history.trades] == ["t1", "t2", "t3"]
        assert len(history) == 3

    def test_duplicate_rejected(self, history):
        with pytest.raises(ValueError):
            history.record(_trade("t1", "a", "b", date(2024, 10, 2)))

    def test_for_club(self, history):
        assert [t.id for t in history.for_club("b")] == ["t1", "t2"]
        assert [t.id for t in history.for_club("a", season=2025)] == ["t2", "t3"]
        assert history.for_club("z") == []

    def test_for_season(self, history):
        assert [t.id for t in history.for_season(2024)] == ["t1"]

    def test_between_either_direction(self, history):
        assert [t.id for t in history.between("b", "a")] == ["t1", "t2"]
        assert history.between("b", "c") == []

    def test_for_player(self, history):
        assert [t.id for t in history.for_player("p1")] == ["t1", "t2"]

    def test_get_and_recent(self, history):
        assert history.get("t2").club_a == "b"
        assert history.get("nope") is None
        assert [t.id for t in history.get_recent(2)] == ["t2", "t3"]

    def test_serialization(self, history):
        history.record(CompletedTrade(
            id="t4", date=date(2025, 10, 12), club_a="c", club_b="b",
            picks_to_a=(make_pick("b", 2026, 1, holder="c"),),
            salary_retained_by_a=100_000,
        ))
        restored = TradeHistory.from_dict(history.to_dict())

        assert restored == history
        assert restored.league_id == "test-league"
