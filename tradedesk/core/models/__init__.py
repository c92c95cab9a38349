"""Core league models."""

from tradedesk.core.models.club import (
    AIPersonality,
    Club,
    CompetitiveWindow,
    DraftPhilosophy,
    RiskTolerance,
    TradeActivity,
)
from tradedesk.core.models.player import Player, PlayerContract

__all__ = [
    "AIPersonality",
    "Club",
    "CompetitiveWindow",
    "DraftPhilosophy",
    "Player",
    "PlayerContract",
    "RiskTolerance",
    "TradeActivity",
]
