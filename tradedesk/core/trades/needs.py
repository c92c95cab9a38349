"""Positional need analysis."""

from collections import Counter
from typing import Mapping

from tradedesk.core.enums import Position
from tradedesk.core.models.player import Player


# A club "needs" a position with fewer primary-position players than this
POSITIONAL_NEED_THRESHOLD = 3


def count_positions(club_id: str, players: Mapping[str, Player]) -> Counter:
    """Players on the club's list by primary position (every position present)."""
    counts = Counter({position: 0 for position in Position})
    for player in players.values():
        if player.club_id == club_id:
            counts[player.position] += 1
    return counts


def get_positional_needs(club_id: str, players: Mapping[str, Player]) -> frozenset[Position]:
    """
    Positions where a club is thin on talent.

    Recomputed on every call from the snapshot it is given.
    """
    counts = count_positions(club_id, players)
    return frozenset(
        position for position, count in counts.items()
        if count < POSITIONAL_NEED_THRESHOLD
    )
