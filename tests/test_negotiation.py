"""Tests for the bounded negotiation driver."""

import pytest

from tradedesk.config import TradeSettings
from tradedesk.core.trades.negotiation import negotiate
from tradedesk.core.trades.proposal import ProposalStatus

from conftest import CURRENT_YEAR, FixedRNG, make_pick, make_proposal, values_fn


def _negotiate(players, clubs, offered_value, **kwargs):
    values = values_fn({"a-star": offered_value, "b-star": 1_000_000})
    return negotiate(
        make_proposal(["a-star"], ["b-star"]),
        players, clubs, FixedRNG(0.5), CURRENT_YEAR, value_fn=values, **kwargs,
    )


class TestNegotiate:

    def test_immediate_acceptance(self, players, clubs):
        outcome = _negotiate(players, clubs, 2_000_000)

        assert outcome.agreed
        assert len(outcome.rounds) == 1
        assert outcome.agreed_proposal.status == ProposalStatus.ACCEPTED
        assert outcome.agreed_proposal.proposing_club_id == "a"

    def test_agreement_on_counter(self, players, clubs):
        """b counters asking for a's cheapest pick on top; a takes that deal."""
        outcome = _negotiate(players, clubs, 800_000)

        assert outcome.agreed
        assert len(outcome.rounds) == 2
        assert outcome.rounds[0].status == ProposalStatus.COUNTERED
        agreed = outcome.agreed_proposal
        assert agreed.proposing_club_id == "b"
        assert agreed.players_offered == ["b-star"]
        assert agreed.players_requested == ["a-star"]
        assert agreed.picks_requested == [make_pick("a", CURRENT_YEAR, 3)]
        assert not outcome.round_limit_reached

    def test_round_limit(self, players, clubs):
        outcome = _negotiate(players, clubs, 800_000, max_rounds=1)

        assert not outcome.agreed
        assert outcome.agreed_proposal is None
        assert outcome.round_limit_reached
        assert len(outcome.rounds) == 1
        assert outcome.final_result.counter_proposal is not None

    def test_round_limit_from_settings(self, players, clubs):
        settings = TradeSettings(
            salary_dump_trades_enabled=True, trade_requests_enabled=True, max_negotiation_rounds=1,
        )
        outcome = _negotiate(players, clubs, 800_000, settings=settings)

        assert outcome.round_limit_reached

    def test_hard_rejection_ends_talks(self, players, clubs):
        outcome = _negotiate(players, clubs, 100_000)

        assert len(outcome.rounds) == 1
        assert outcome.final_result.status == ProposalStatus.REJECTED
        assert not outcome.round_limit_reached

    def test_invalid_proposal_not_evaluated(self, players, clubs):
        outcome = negotiate(make_proposal(), players, clubs, FixedRNG(), CURRENT_YEAR)

        assert outcome.rounds == []
        assert outcome.final_result is None
        assert len(outcome.validation_errors) == 2
        assert not outcome.agreed

    def test_never_executes(self, players, clubs):
        _negotiate(players, clubs, 2_000_000)

        assert players["a-star"].club_id == "a"
        assert players["b-star"].club_id == "b"

    def test_max_rounds_must_be_positive(self, players, clubs):
        with pytest.raises(ValueError):
            _negotiate(players, clubs, 800_000, max_rounds=0)
