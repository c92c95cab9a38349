"""
Trade rumours for the news feed.

Links an unhappy or out-of-contract player to a club with a need at his
position. Flavour only; nothing here affects trade decisions.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional

from tradedesk.config import TradeSettings
from tradedesk.core.models.club import Club
from tradedesk.core.models.player import Player
from tradedesk.core.rng import SeededRNG
from tradedesk.core.trades.needs import get_positional_needs


UNHAPPY_MORALE = 50
EXPIRING_YEARS = 1


@dataclass
class TradeRumour:
    headline: str
    body: str
    player_ids: list[str] = field(default_factory=list)
    club_ids: list[str] = field(default_factory=list)


def is_unhappy(player: Player) -> bool:
    return player.morale < UNHAPPY_MORALE


def is_expiring(player: Player) -> bool:
    return player.contract.years_remaining <= EXPIRING_YEARS


def _rumour_text(player: Player, current_club: str, linked_club: str) -> tuple[str, str]:
    name = player.full_name
    position = player.position.value

    if is_unhappy(player) and is_expiring(player):
        headline = f"{name} eyeing exit from {current_club}"
        body = (
            f"Sources close to {name} suggest the disgruntled {current_club} {position} "
            f"is unlikely to re-sign when his contract expires at the end of the season. "
            f"{linked_club} are believed to be monitoring the situation closely, with the "
            f"{player.age}-year-old seen as a key target."
        )
    elif is_unhappy(player):
        headline = f"{name} reportedly unsettled at {current_club}"
        body = (
            f"{name} is said to be unhappy at {current_club}, with speculation mounting "
            f"about a potential trade request. {linked_club} have been linked to the "
            f"{player.age}-year-old {position}, who could be available during the trade period."
        )
    else:
        headline = f"{linked_club} circling {current_club}'s {name}"
        body = (
            f"With {name}'s contract at {current_club} set to expire, {linked_club} are "
            f"understood to have expressed interest in the {player.age}-year-old {position}. "
            f"The club could look to secure a trade rather than risk losing him for nothing "
            f"in free agency."
        )
    return headline, body


def generate_trade_rumour(
    players: Mapping[str, Player],
    clubs: Mapping[str, Club],
    rng: SeededRNG,
    settings: Optional[TradeSettings] = None,
) -> Optional[TradeRumour]:
    """
    Generate a random trade rumour, or None when there is nothing to report.

    With trade requests switched off only out-of-contract players feature.
    """
    trade_requests = settings.trade_requests_enabled if settings else True

    candidates = [
        p for p in players.values()
        if is_expiring(p) or (trade_requests and is_unhappy(p))
    ]
    if not candidates:
        return None

    player = rng.pick(candidates)

    other_clubs = [c for c in clubs.values() if c.id != player.club_id]
    if not other_clubs:
        return None

    matching = [
        c for c in other_clubs
        if player.position in get_positional_needs(c.id, players)
    ]
    linked_club = rng.pick(matching or other_clubs)

    current = clubs.get(player.club_id)
    current_name = str(current) if current else "his club"

    headline, body = _rumour_text(player, current_name, str(linked_club))
    return TradeRumour(
        headline=headline,
        body=body,
        player_ids=[player.id],
        club_ids=[player.club_id, linked_club.id],
    )
