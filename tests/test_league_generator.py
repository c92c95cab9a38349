"""Tests for synthetic league generation."""

import pytest

from tradedesk.core.contracts.market_value import ELITE_SALARY_CEILING, MINIMUM_SALARY
from tradedesk.core.enums import Position
from tradedesk.core.rng import SeededRNG
from tradedesk.core.trades.needs import get_positional_needs
from tradedesk.generators.league import (
    LIST_TEMPLATE,
    LeagueSnapshot,
    find_player,
    generate_league,
)


@pytest.fixture(scope="module")
def league() -> LeagueSnapshot:
    return generate_league(SeededRNG(2025), num_clubs=4, start_year=2025)


class TestGenerateLeague:

    def test_sizes(self, league):
        assert len(league.clubs) == 4
        assert len(league.players) == 4 * len(LIST_TEMPLATE)
        for club_id in league.clubs:
            assert len(league.players_for(club_id)) == len(LIST_TEMPLATE)

    def test_same_seed_same_league(self, league):
        again = generate_league(SeededRNG(2025), num_clubs=4, start_year=2025)
        assert again.players == league.players
        assert again.clubs == league.clubs

    def test_picks(self, league):
        for club in league.clubs.values():
            assert len(club.owned_picks()) == 6
            assert {p.year for p in club.draft_picks} == {2025, 2026}

    def test_contracts_at_market_rate(self, league):
        for player in league.players.values():
            assert MINIMUM_SALARY <= player.contract.aav <= ELITE_SALARY_CEILING
            assert player.contract.years_remaining >= 1

    def test_needs_follow_list_template(self, league):
        thin = frozenset(p for p in Position if LIST_TEMPLATE.count(p) < 3)
        for club_id in league.clubs:
            assert get_positional_needs(club_id, league.players) == thin

    def test_club_count_validated(self):
        with pytest.raises(ValueError):
            generate_league(SeededRNG(1), num_clubs=1)
        with pytest.raises(ValueError):
            generate_league(SeededRNG(1), num_clubs=19)

    def test_find_player(self, league):
        club_id = next(iter(league.clubs))
        best = find_player(league, club_id)
        ruck = find_player(league, club_id, Position.RK)

        assert best.overall == max(p.overall for p in league.players_for(club_id))
        assert ruck.position == Position.RK
        assert find_player(league, "nobody") is None

    def test_snapshot_dict_round_trip(self, league):
        assert LeagueSnapshot.from_dict(league.to_dict()) == league
