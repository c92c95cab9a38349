"""
Trade package valuation.

Player values come from an injected market-value function; pick values
from the tiered draft-pick scale. A package is worth the sum of its parts.
"""

from typing import Callable, Iterable, Mapping

from tradedesk.core.contracts.market_value import calculate_player_value
from tradedesk.core.draft.picks import DraftPick, pick_value
from tradedesk.core.models.player import Player


PlayerValueFn = Callable[[Player], float]


def players_value(
    player_ids: Iterable[str],
    players: Mapping[str, Player],
    value_fn: PlayerValueFn = calculate_player_value,
) -> float:
    """Sum of market values. Unknown ids contribute nothing."""
    total = 0.0
    for player_id in player_ids:
        player = players.get(player_id)
        if player is not None:
            total += value_fn(player)
    return total


def picks_value(picks: Iterable[DraftPick], current_year: int) -> float:
    return sum(pick_value(pick, current_year) for pick in picks)


def calculate_trade_value(
    player_ids: Iterable[str],
    picks: Iterable[DraftPick],
    players: Mapping[str, Player],
    current_year: int,
    value_fn: PlayerValueFn = calculate_player_value,
) -> float:
    """
    Total trade value of a package of players and draft picks, in dollars.
    """
    return players_value(player_ids, players, value_fn) + picks_value(picks, current_year)
