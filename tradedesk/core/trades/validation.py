"""
Proposal validation.

Structural and ownership checks run before a proposal is evaluated.
Problems come back as readable messages, never exceptions, so the caller
can fix the proposal and resubmit.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional

from tradedesk.core.models.club import Club
from tradedesk.core.models.player import Player
from tradedesk.core.trades.proposal import TradeProposal


@dataclass
class ValidationResult:
    """Validity flag plus ordered error messages."""
    valid: bool
    errors: list[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.valid


def _check_players(
    player_ids: list[str],
    players: Mapping[str, Player],
    expected_club_id: str,
    label: str,
    side: str,
) -> list[str]:
    errors = []
    for player_id in player_ids:
        player = players.get(player_id)
        if player is None:
            errors.append(f"{label} player {player_id} does not exist.")
        elif player.club_id != expected_club_id:
            errors.append(f"{player.full_name} does not belong to the {side} club.")
    return errors


def _repeated(items: list) -> list:
    """Items listed more than once, each reported once, in first-repeat order."""
    seen = set()
    repeated = []
    for item in items:
        if item in seen and item not in repeated:
            repeated.append(item)
        seen.add(item)
    return repeated


def validate_trade_proposal(
    proposal: TradeProposal,
    players: Mapping[str, Player],
    clubs: Optional[Mapping[str, Club]] = None,
) -> ValidationResult:
    """
    Check that a proposal is well formed.

    - At least one asset on each side
    - Offered players belong to the proposing club, requested players to
      the receiving club
    - Picks are held by the club giving them up
    - No player or pick appears twice on the same side
    - Two different clubs, both known when a club catalogue is given
    - Retained salary is not negative
    """
    errors: list[str] = []

    if proposal.offered_asset_count == 0:
        errors.append(
            "Trade must include at least one player or pick offered by the proposing club."
        )
    if proposal.requested_asset_count == 0:
        errors.append(
            "Trade must include at least one player or pick requested from the receiving club."
        )

    if proposal.proposing_club_id == proposal.receiving_club_id:
        errors.append("A club cannot trade with itself.")

    if clubs is not None:
        if proposal.proposing_club_id not in clubs:
            errors.append(f"Proposing club {proposal.proposing_club_id} does not exist.")
        if proposal.receiving_club_id not in clubs:
            errors.append(f"Receiving club {proposal.receiving_club_id} does not exist.")

    errors.extend(_check_players(
        proposal.players_offered, players, proposal.proposing_club_id, "Offered", "proposing",
    ))
    errors.extend(_check_players(
        proposal.players_requested, players, proposal.receiving_club_id, "Requested", "receiving",
    ))

    for pick in proposal.picks_offered:
        if pick.current_club_id != proposal.proposing_club_id:
            errors.append(f"Offered pick {pick} is not held by the proposing club.")
    for pick in proposal.picks_requested:
        if pick.current_club_id != proposal.receiving_club_id:
            errors.append(f"Requested pick {pick} is not held by the receiving club.")

    for side, player_ids, picks in (
        ("Offered", proposal.players_offered, proposal.picks_offered),
        ("Requested", proposal.players_requested, proposal.picks_requested),
    ):
        for player_id in _repeated(player_ids):
            errors.append(f"{side} player {player_id} is listed more than once.")
        by_key = {pick.key: pick for pick in picks}
        for key in _repeated([pick.key for pick in picks]):
            errors.append(f"{side} pick {by_key[key]} is listed more than once.")

    if proposal.salary_retained < 0:
        errors.append("Retained salary cannot be negative.")

    return ValidationResult(valid=not errors, errors=errors)
