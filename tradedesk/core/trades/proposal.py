"""
Trade proposal, result and completed-trade records.

A proposal moves through a small state machine:

    PENDING -> ACCEPTED   (terminal, can be executed)
    PENDING -> REJECTED   (terminal)
    PENDING -> COUNTERED  (the counter-proposal is a new PENDING proposal
                           from the other club)
"""

from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import TYPE_CHECKING, Optional

from tradedesk.core.draft.picks import DraftPick

if TYPE_CHECKING:
    from tradedesk.core.rng import SeededRNG


TRADE_ID_PREFIX = "trade_"
TRADE_ID_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"
TRADE_ID_LENGTH = 12


class ProposalStatus(Enum):
    """Where a proposal is in its lifecycle."""
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    COUNTERED = "countered"


def generate_trade_id(rng: "SeededRNG") -> str:
    """Reproducible trade id drawn from the injected random source."""
    chars = [
        TRADE_ID_ALPHABET[rng.next_int(0, len(TRADE_ID_ALPHABET) - 1)]
        for _ in range(TRADE_ID_LENGTH)
    ]
    return TRADE_ID_PREFIX + "".join(chars)


@dataclass
class TradeProposal:
    """
    A proposed exchange between two clubs.

    Players are referenced by id; picks are carried whole. Salary retained
    is money the proposing club keeps paying on a departing player's
    contract.
    """
    id: str
    proposing_club_id: str
    receiving_club_id: str
    players_offered: list[str] = field(default_factory=list)
    players_requested: list[str] = field(default_factory=list)
    picks_offered: list[DraftPick] = field(default_factory=list)
    picks_requested: list[DraftPick] = field(default_factory=list)
    salary_retained: int = 0
    status: ProposalStatus = ProposalStatus.PENDING
    message: str = ""

    @property
    def offered_asset_count(self) -> int:
        return len(self.players_offered) + len(self.picks_offered)

    @property
    def requested_asset_count(self) -> int:
        return len(self.players_requested) + len(self.picks_requested)

    @property
    def pick_keys(self) -> set[tuple[int, int, str]]:
        """Keys of every pick on either side of the deal."""
        return {p.key for p in self.picks_offered} | {p.key for p in self.picks_requested}

    def with_status(self, status: ProposalStatus, message: Optional[str] = None) -> "TradeProposal":
        """Copy of this proposal with a new status (and optionally message)."""
        return replace(
            self,
            status=status,
            message=self.message if message is None else message,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "proposing_club_id": self.proposing_club_id,
            "receiving_club_id": self.receiving_club_id,
            "players_offered": list(self.players_offered),
            "players_requested": list(self.players_requested),
            "picks_offered": [p.to_dict() for p in self.picks_offered],
            "picks_requested": [p.to_dict() for p in self.picks_requested],
            "salary_retained": self.salary_retained,
            "status": self.status.value,
            "message": self.message,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TradeProposal":
        return cls(
            id=data["id"],
            proposing_club_id=data["proposing_club_id"],
            receiving_club_id=data["receiving_club_id"],
            players_offered=list(data.get("players_offered", [])),
            players_requested=list(data.get("players_requested", [])),
            picks_offered=[DraftPick.from_dict(p) for p in data.get("picks_offered", [])],
            picks_requested=[DraftPick.from_dict(p) for p in data.get("picks_requested", [])],
            salary_retained=data.get("salary_retained", 0),
            status=ProposalStatus(data.get("status", "pending")),
            message=data.get("message", ""),
        )


@dataclass(frozen=True)
class ValueBreakdown:
    """Every factor that went into an evaluation, in dollars."""
    raw_offered: float = 0.0
    raw_requested: float = 0.0
    positional_bonus: float = 0.0
    window_modifier: float = 0.0
    contract_discount: float = 0.0
    retention_bonus: float = 0.0
    risk_jitter: float = 0.0
    activity_multiplier: float = 1.0

    @property
    def adjusted_offered(self) -> float:
        return (
            self.raw_offered
            + self.positional_bonus
            + self.window_modifier
            + self.contract_discount
            + self.retention_bonus
            + self.risk_jitter
        )

    @property
    def adjusted_requested(self) -> float:
        return self.raw_requested * self.activity_multiplier

    @property
    def value_difference(self) -> float:
        """Positive = offer is worth more than what is asked."""
        return self.adjusted_offered - self.adjusted_requested

    @property
    def difference_ratio(self) -> float:
        if self.raw_requested <= 0:
            return 0.0
        return self.value_difference / self.raw_requested


@dataclass
class TradeResult:
    """Outcome of evaluating a proposal from the receiving club's side."""
    accepted: bool
    message: str
    counter_proposal: Optional[TradeProposal] = None
    proposal: Optional[TradeProposal] = None  # Evaluated proposal with its new status
    breakdown: Optional[ValueBreakdown] = None

    @property
    def status(self) -> ProposalStatus:
        if self.accepted:
            return ProposalStatus.ACCEPTED
        if self.counter_proposal is not None:
            return ProposalStatus.COUNTERED
        return ProposalStatus.REJECTED


@dataclass(frozen=True)
class CompletedTrade:
    """
    Immutable record of an executed trade.

    Club A is the proposing club, club B the receiving club.
    """
    id: str
    date: date
    club_a: str
    club_b: str
    players_to_a: tuple[str, ...] = ()
    players_to_b: tuple[str, ...] = ()
    picks_to_a: tuple[DraftPick, ...] = ()
    picks_to_b: tuple[DraftPick, ...] = ()
    salary_retained_by_a: int = 0
    salary_retained_by_b: int = 0

    @property
    def season(self) -> int:
        return self.date.year

    def involves(self, club_id: str) -> bool:
        return club_id in (self.club_a, self.club_b)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "club_a": self.club_a,
            "club_b": self.club_b,
            "players_to_a": list(self.players_to_a),
            "players_to_b": list(self.players_to_b),
            "picks_to_a": [p.to_dict() for p in self.picks_to_a],
            "picks_to_b": [p.to_dict() for p in self.picks_to_b],
            "salary_retained_by_a": self.salary_retained_by_a,
            "salary_retained_by_b": self.salary_retained_by_b,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CompletedTrade":
        return cls(
            id=data["id"],
            date=date.fromisoformat(data["date"]),
            club_a=data["club_a"],
            club_b=data["club_b"],
            players_to_a=tuple(data.get("players_to_a", [])),
            players_to_b=tuple(data.get("players_to_b", [])),
            picks_to_a=tuple(DraftPick.from_dict(p) for p in data.get("picks_to_a", [])),
            picks_to_b=tuple(DraftPick.from_dict(p) for p in data.get("picks_to_b", [])),
            salary_retained_by_a=data.get("salary_retained_by_a", 0),
            salary_retained_by_b=data.get("salary_retained_by_b", 0),
        )
