"""Draft pick ownership and valuation."""

from tradedesk.core.draft.picks import (
    FUTURE_PICK_DISCOUNT,
    PICKS_PER_ROUND,
    DraftPick,
    create_initial_picks_for_club,
    get_round_pick_value,
    get_round_position,
    pick_value,
)

__all__ = [
    "FUTURE_PICK_DISCOUNT",
    "PICKS_PER_ROUND",
    "DraftPick",
    "create_initial_picks_for_club",
    "get_round_pick_value",
    "get_round_position",
    "pick_value",
]
