"""
Trade execution.

Applies an accepted proposal to a player snapshot and produces the
immutable completed-trade record. Inputs are never modified; callers get
new snapshots back and must apply executions one at a time.
"""

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Mapping

from tradedesk.core.draft.picks import DraftPick
from tradedesk.core.models.club import Club
from tradedesk.core.models.player import Player
from tradedesk.core.trades.proposal import CompletedTrade, ProposalStatus, TradeProposal

logger = logging.getLogger(__name__)


@dataclass
class TradeExecution:
    """New player snapshot plus the record of what moved."""
    updated_players: dict[str, Player]
    completed_trade: CompletedTrade


def execute_trade(
    proposal: TradeProposal,
    players: Mapping[str, Player],
    current_date: date,
) -> TradeExecution:
    """
    Move the players in an accepted proposal to their new clubs.

    Offered players go to the receiving club and requested players to the
    proposing club, both decided from the original snapshot. The proposal
    is not re-validated or re-evaluated. Player ids missing from the
    snapshot are skipped with a warning.

    Raises:
        ValueError: if the proposal has not been accepted
    """
    if proposal.status != ProposalStatus.ACCEPTED:
        raise ValueError(
            f"Cannot execute trade {proposal.id} in {proposal.status.value} status"
        )

    moves: dict[str, str] = {}
    for player_id in proposal.players_offered:
        moves[player_id] = proposal.receiving_club_id
    for player_id in proposal.players_requested:
        moves[player_id] = proposal.proposing_club_id

    updated_players = dict(players)
    for player_id, club_id in moves.items():
        player = players.get(player_id)
        if player is None:
            logger.warning(
                f"Trade {proposal.id}: player {player_id} not found in snapshot, skipping"
            )
            continue
        updated_players[player_id] = replace(player, club_id=club_id)

    completed_trade = CompletedTrade(
        id=proposal.id,
        date=current_date,
        club_a=proposal.proposing_club_id,
        club_b=proposal.receiving_club_id,
        players_to_a=tuple(proposal.players_requested),
        players_to_b=tuple(proposal.players_offered),
        picks_to_a=tuple(proposal.picks_requested),
        picks_to_b=tuple(proposal.picks_offered),
        salary_retained_by_a=proposal.salary_retained,
        salary_retained_by_b=0,
    )

    logger.info(
        f"Trade {proposal.id} executed on {current_date.isoformat()}: "
        f"{len(completed_trade.players_to_b)} player(s) and {len(completed_trade.picks_to_b)} "
        f"pick(s) to {completed_trade.club_b}, {len(completed_trade.players_to_a)} player(s) "
        f"and {len(completed_trade.picks_to_a)} pick(s) to {completed_trade.club_a}"
    )

    return TradeExecution(updated_players=updated_players, completed_trade=completed_trade)


def _move_picks(
    clubs: dict[str, Club],
    picks: tuple[DraftPick, ...],
    from_club_id: str,
    to_club_id: str,
) -> None:
    giver = clubs.get(from_club_id)
    taker = clubs.get(to_club_id)
    keys = {p.key for p in picks}

    if giver is not None:
        clubs[from_club_id] = replace(
            giver,
            draft_picks=[p for p in giver.draft_picks if p.key not in keys],
        )
    if taker is not None:
        kept = [p for p in taker.draft_picks if p.key not in keys]
        clubs[to_club_id] = replace(
            taker,
            draft_picks=kept + [p.with_owner(to_club_id) for p in picks],
        )


def transfer_picks(trade: CompletedTrade, clubs: Mapping[str, Club]) -> dict[str, Club]:
    """
    New club snapshot with the traded picks moved to their new owners.

    Clubs not involved in the trade are carried over as-is.
    """
    updated = dict(clubs)
    _move_picks(updated, trade.picks_to_b, trade.club_a, trade.club_b)
    _move_picks(updated, trade.picks_to_a, trade.club_b, trade.club_a)
    return updated
