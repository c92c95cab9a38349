"""Shared pytest fixtures for Tradedesk tests."""

from typing import Optional

import pytest

from tradedesk.config import TradeSettings
from tradedesk.core.draft.picks import DraftPick
from tradedesk.core.enums import Position
from tradedesk.core.models.club import (
    AIPersonality,
    Club,
    CompetitiveWindow,
    RiskTolerance,
    TradeActivity,
)
from tradedesk.core.models.player import Player, PlayerContract
from tradedesk.core.trades.proposal import TradeProposal


CURRENT_YEAR = 2025


# =============================================================================
# Helpers
# =============================================================================


class FixedRNG:
    """
    Random source that always draws the same value.

    ``chance(p)`` is true when the fixed value is below ``p``, so 0.0 takes
    every chance and 0.99 declines almost all of them.
    """

    def __init__(self, value: float = 0.5):
        self.value = value
        self.float_calls = 0
        self.chance_calls = 0

    def next(self) -> float:
        return self.value

    def next_float(self, low: float, high: float) -> float:
        self.float_calls += 1
        return low + self.value * (high - low)

    def next_int(self, low: int, high: int) -> int:
        return min(high, low + int(self.value * (high - low + 1)))

    def chance(self, probability: float) -> bool:
        self.chance_calls += 1
        return self.value < probability

    def pick(self, items):
        return items[0]

    def shuffle(self, items):
        return list(items)


def make_player(
    player_id: str,
    club_id: str,
    position: Position = Position.IM,
    age: int = 26,
    overall: int = 70,
    morale: int = 60,
    years: int = 2,
    aav: int = 0,
    is_rookie: bool = False,
) -> Player:
    """Create a test player with a simple contract."""
    return Player(
        id=player_id,
        first_name="Test",
        last_name=player_id.title(),
        club_id=club_id,
        age=age,
        position=position,
        overall=overall,
        morale=morale,
        contract=PlayerContract(years_remaining=years, aav=aav),
        is_rookie=is_rookie,
    )


def full_list(club_id: str, per_position: int = 3) -> dict[str, Player]:
    """A list with ``per_position`` players at every position (no needs)."""
    players = {}
    for position in Position:
        for i in range(per_position):
            player_id = f"{club_id}-{position.value.lower()}-{i}"
            players[player_id] = make_player(player_id, club_id, position)
    return players


def make_club(
    club_id: str,
    name: Optional[str] = None,
    window: CompetitiveWindow = CompetitiveWindow.BALANCED,
    risk: RiskTolerance = RiskTolerance.MODERATE,
    activity: TradeActivity = TradeActivity.MODERATE,
    picks: Optional[list[DraftPick]] = None,
) -> Club:
    return Club(
        id=club_id,
        name=name if name is not None else f"Club {club_id.upper()}",
        abbreviation=club_id.upper(),
        ai_personality=AIPersonality(
            competitive_window=window,
            risk_tolerance=risk,
            trade_activity=activity,
        ),
        draft_picks=picks or [],
    )


def make_pick(
    club_id: str,
    year: int = CURRENT_YEAR,
    round_num: int = 1,
    holder: Optional[str] = None,
    pick_number: Optional[int] = None,
) -> DraftPick:
    return DraftPick(
        year=year,
        round=round_num,
        original_club_id=club_id,
        current_club_id=holder or club_id,
        pick_number=pick_number,
    )


def values_fn(values: dict[str, float], default: float = 0.0):
    """Player value function backed by a fixed table."""
    return lambda player: values.get(player.id, default)


def make_proposal(
    players_offered: Optional[list[str]] = None,
    players_requested: Optional[list[str]] = None,
    picks_offered: Optional[list[DraftPick]] = None,
    picks_requested: Optional[list[DraftPick]] = None,
    proposing: str = "a",
    receiving: str = "b",
    salary_retained: int = 0,
    proposal_id: str = "trade_test",
) -> TradeProposal:
    return TradeProposal(
        id=proposal_id,
        proposing_club_id=proposing,
        receiving_club_id=receiving,
        players_offered=players_offered or [],
        players_requested=players_requested or [],
        picks_offered=picks_offered or [],
        picks_requested=picks_requested or [],
        salary_retained=salary_retained,
    )


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def settings() -> TradeSettings:
    """Everything switched on, three rounds."""
    return TradeSettings(
        salary_dump_trades_enabled=True,
        trade_requests_enabled=True,
        max_negotiation_rounds=3,
    )


@pytest.fixture
def players() -> dict[str, Player]:
    """
    Two clubs with full lists plus one tradeable player each.

    ``a-star`` (IM) belongs to club a, ``b-star`` (CHF) to club b.
    """
    snapshot = {}
    snapshot.update(full_list("a"))
    snapshot.update(full_list("b"))
    snapshot["a-star"] = make_player("a-star", "a", Position.IM, age=27, overall=75)
    snapshot["b-star"] = make_player("b-star", "b", Position.CHF, age=28, overall=82)
    return snapshot


@pytest.fixture
def clubs() -> dict[str, Club]:
    """Clubs a and b with default (balanced/moderate/moderate) personalities."""
    return {
        "a": make_club("a", "Adelaide", picks=[
            make_pick("a", CURRENT_YEAR, 1),
            make_pick("a", CURRENT_YEAR + 1, 2, pick_number=23),
            make_pick("a", CURRENT_YEAR, 3),
        ]),
        "b": make_club("b", "Brisbane", picks=[
            make_pick("b", CURRENT_YEAR, 1),
            make_pick("b", CURRENT_YEAR, 2),
        ]),
    }
