"""
Counter-proposal generation.

When an offer is rejected but close, the receiving club hands back a
restated deal: the same assets with the roles reversed, plus one extra
draft pick from the original proposer to close the gap.
"""

import logging
from typing import Mapping, Optional

from tradedesk.core.draft.picks import DraftPick, pick_value
from tradedesk.core.models.club import Club
from tradedesk.core.rng import SeededRNG
from tradedesk.core.trades.proposal import (
    ProposalStatus,
    TradeProposal,
    generate_trade_id,
)

logger = logging.getLogger(__name__)


COUNTER_MESSAGE = "Counter-proposal: we would need additional draft capital to make this work."


def find_counter_pick(
    original: TradeProposal,
    clubs: Mapping[str, Club],
    current_year: int,
) -> Optional[DraftPick]:
    """
    Lowest-valued pick held by the original proposer that isn't already in
    the deal. Ties go to the earliest pick in the club's list.
    """
    proposer = clubs.get(original.proposing_club_id)
    if proposer is None:
        return None

    in_deal = original.pick_keys
    eligible = [p for p in proposer.owned_picks() if p.key not in in_deal]
    if not eligible:
        return None

    return min(eligible, key=lambda p: pick_value(p, current_year))


def generate_counter_proposal(
    original: TradeProposal,
    clubs: Mapping[str, Club],
    rng: SeededRNG,
    current_year: int,
) -> TradeProposal:
    """
    Build the receiving club's counter to a proposal.

    The counter comes from the receiving club: what it was asked for it now
    offers, and what it was offered it now asks for, plus the cheapest
    extra pick the original proposer can give. Retained salary is dropped;
    the counter has to stand on its own.

    There is no round limit here. Callers bound the negotiation.
    """
    picks_requested = list(original.picks_offered)

    extra_pick = find_counter_pick(original, clubs, current_year)
    if extra_pick is not None:
        picks_requested.append(extra_pick)

    counter = TradeProposal(
        id=generate_trade_id(rng),
        proposing_club_id=original.receiving_club_id,
        receiving_club_id=original.proposing_club_id,
        players_offered=list(original.players_requested),
        players_requested=list(original.players_offered),
        picks_offered=list(original.picks_requested),
        picks_requested=picks_requested,
        salary_retained=0,
        status=ProposalStatus.PENDING,
        message=COUNTER_MESSAGE,
    )

    logger.debug(
        f"Counter {counter.id} to {original.id}: "
        f"{'added ' + str(extra_pick) if extra_pick else 'no extra pick available'}"
    )
    return counter
