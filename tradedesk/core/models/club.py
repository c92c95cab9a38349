"""
Club model and AI personality.

The personality axes drive how an AI-controlled club weighs a trade:
- Competitive window: proven veterans vs youth and picks
- Risk tolerance: random swing on how good an offer looks
- Trade activity: how large a surplus the club demands
- Draft philosophy: used by draft AI only
"""

from dataclasses import dataclass, field
from enum import Enum

from tradedesk.core.draft.picks import DraftPick


class CompetitiveWindow(Enum):
    """The club's strategic posture."""
    WIN_NOW = "win-now"
    BALANCED = "balanced"
    REBUILDING = "rebuilding"


class RiskTolerance(Enum):
    """Willingness to gamble on a deal."""
    AGGRESSIVE = "aggressive"
    MODERATE = "moderate"
    CONSERVATIVE = "conservative"


class TradeActivity(Enum):
    """General willingness to transact."""
    ACTIVE = "active"
    MODERATE = "moderate"
    PASSIVE = "passive"


class DraftPhilosophy(Enum):
    """How the club approaches the draft."""
    BEST_AVAILABLE = "best-available"
    POSITIONAL_NEED = "positional-need"
    HIGH_UPSIDE = "high-upside"


@dataclass
class AIPersonality:
    """Read-only AI personality of a non-player club."""
    competitive_window: CompetitiveWindow = CompetitiveWindow.BALANCED
    risk_tolerance: RiskTolerance = RiskTolerance.MODERATE
    trade_activity: TradeActivity = TradeActivity.MODERATE
    draft_philosophy: DraftPhilosophy = DraftPhilosophy.BEST_AVAILABLE

    def to_dict(self) -> dict:
        return {
            "competitive_window": self.competitive_window.value,
            "risk_tolerance": self.risk_tolerance.value,
            "trade_activity": self.trade_activity.value,
            "draft_philosophy": self.draft_philosophy.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AIPersonality":
        return cls(
            competitive_window=CompetitiveWindow(data.get("competitive_window", "balanced")),
            risk_tolerance=RiskTolerance(data.get("risk_tolerance", "moderate")),
            trade_activity=TradeActivity(data.get("trade_activity", "moderate")),
            draft_philosophy=DraftPhilosophy(data.get("draft_philosophy", "best-available")),
        )


@dataclass
class Club:
    """A club in the league, with its AI personality and draft picks."""
    id: str
    name: str = ""
    abbreviation: str = ""
    ai_personality: AIPersonality = field(default_factory=AIPersonality)
    draft_picks: list[DraftPick] = field(default_factory=list)

    def owned_picks(self) -> list[DraftPick]:
        """Picks in the list that this club currently holds."""
        return [p for p in self.draft_picks if p.current_club_id == self.id]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "abbreviation": self.abbreviation,
            "ai_personality": self.ai_personality.to_dict(),
            "draft_picks": [p.to_dict() for p in self.draft_picks],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Club":
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            abbreviation=data.get("abbreviation", ""),
            ai_personality=AIPersonality.from_dict(data.get("ai_personality", {})),
            draft_picks=[DraftPick.from_dict(p) for p in data.get("draft_picks", [])],
        )

    def __str__(self) -> str:
        return self.name or self.id
