"""Game enumerations."""

from tradedesk.core.enums.positions import PREMIUM_POSITIONS, Position

__all__ = [
    "PREMIUM_POSITIONS",
    "Position",
]
