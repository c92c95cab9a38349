"""
Pydantic schemas for the trade engine's JSON boundary.

Used by the command line to load league snapshots and proposals from
files and to print results. Each schema converts to and from the domain
dataclasses; enums travel as their string values.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from tradedesk.core.draft.picks import DraftPick
from tradedesk.core.enums import Position
from tradedesk.core.models.club import (
    AIPersonality,
    Club,
    CompetitiveWindow,
    DraftPhilosophy,
    RiskTolerance,
    TradeActivity,
)
from tradedesk.core.models.player import Player, PlayerContract
from tradedesk.core.trades.grading import TradeGrade
from tradedesk.core.trades.proposal import (
    CompletedTrade,
    ProposalStatus,
    TradeProposal,
    TradeResult,
    ValueBreakdown,
)
from tradedesk.generators.league import LeagueSnapshot


# =============================================================================
# League
# =============================================================================


class DraftPickSchema(BaseModel):
    """A draft pick and who holds it."""
    year: int
    round: int = Field(ge=1)
    original_club_id: str
    current_club_id: str
    pick_number: Optional[int] = Field(default=None, ge=1)

    @classmethod
    def from_domain(cls, pick: DraftPick) -> "DraftPickSchema":
        return cls(**pick.to_dict())

    def to_domain(self) -> DraftPick:
        return DraftPick(**self.model_dump())


class PlayerContractSchema(BaseModel):
    years_remaining: int = Field(default=1, ge=0)
    aav: int = Field(default=0, ge=0)
    year_by_year: list[int] = []
    is_restricted: bool = False

    def to_domain(self) -> PlayerContract:
        return PlayerContract(**self.model_dump())


class PlayerSchema(BaseModel):
    """Player information."""
    id: str
    first_name: str = ""
    last_name: str = ""
    club_id: str
    age: int = Field(ge=15, le=50)
    position: Position
    secondary_positions: list[Position] = []
    overall: int = Field(ge=1, le=100)
    potential_ceiling: int = Field(default=60, ge=1, le=100)
    peak_age_start: int = 25
    peak_age_end: int = 29
    form: int = Field(default=50, ge=0, le=100)
    morale: int = Field(default=50, ge=0, le=100)
    contract: PlayerContractSchema = Field(default_factory=PlayerContractSchema)
    is_rookie: bool = False
    draft_year: Optional[int] = None

    @classmethod
    def from_domain(cls, player: Player) -> "PlayerSchema":
        return cls.model_validate(player.to_dict())

    def to_domain(self) -> Player:
        return Player.from_dict(self.model_dump(mode="json"))


class AIPersonalitySchema(BaseModel):
    competitive_window: CompetitiveWindow = CompetitiveWindow.BALANCED
    risk_tolerance: RiskTolerance = RiskTolerance.MODERATE
    trade_activity: TradeActivity = TradeActivity.MODERATE
    draft_philosophy: DraftPhilosophy = DraftPhilosophy.BEST_AVAILABLE

    def to_domain(self) -> AIPersonality:
        return AIPersonality.from_dict(self.model_dump(mode="json"))


class ClubSchema(BaseModel):
    """Club with its AI personality and picks."""
    id: str
    name: str = ""
    abbreviation: str = ""
    ai_personality: AIPersonalitySchema = Field(default_factory=AIPersonalitySchema)
    draft_picks: list[DraftPickSchema] = []

    @classmethod
    def from_domain(cls, club: Club) -> "ClubSchema":
        return cls.model_validate(club.to_dict())

    def to_domain(self) -> Club:
        return Club(
            id=self.id,
            name=self.name,
            abbreviation=self.abbreviation,
            ai_personality=self.ai_personality.to_domain(),
            draft_picks=[p.to_domain() for p in self.draft_picks],
        )


class LeagueSnapshotSchema(BaseModel):
    """Full league snapshot: every player and club."""
    current_year: int
    players: list[PlayerSchema] = []
    clubs: list[ClubSchema] = []

    @classmethod
    def from_domain(cls, league: LeagueSnapshot) -> "LeagueSnapshotSchema":
        return cls(
            current_year=league.current_year,
            players=[PlayerSchema.from_domain(p) for p in league.players.values()],
            clubs=[ClubSchema.from_domain(c) for c in league.clubs.values()],
        )

    def to_domain(self) -> LeagueSnapshot:
        players = [p.to_domain() for p in self.players]
        clubs = [c.to_domain() for c in self.clubs]
        return LeagueSnapshot(
            current_year=self.current_year,
            players={p.id: p for p in players},
            clubs={c.id: c for c in clubs},
        )


# =============================================================================
# Trades
# =============================================================================


class TradeProposalSchema(BaseModel):
    """A proposed trade between two clubs."""
    id: str
    proposing_club_id: str
    receiving_club_id: str
    players_offered: list[str] = []
    players_requested: list[str] = []
    picks_offered: list[DraftPickSchema] = []
    picks_requested: list[DraftPickSchema] = []
    salary_retained: int = Field(default=0, ge=0)
    status: ProposalStatus = ProposalStatus.PENDING
    message: str = ""

    @classmethod
    def from_domain(cls, proposal: TradeProposal) -> "TradeProposalSchema":
        return cls.model_validate(proposal.to_dict())

    def to_domain(self) -> TradeProposal:
        return TradeProposal.from_dict(self.model_dump(mode="json"))


class ValueBreakdownSchema(BaseModel):
    """Every value factor behind an evaluation, in dollars."""
    raw_offered: float
    raw_requested: float
    positional_bonus: float
    window_modifier: float
    contract_discount: float
    retention_bonus: float
    risk_jitter: float
    activity_multiplier: float
    adjusted_offered: float
    adjusted_requested: float
    value_difference: float
    difference_ratio: float

    @classmethod
    def from_domain(cls, breakdown: ValueBreakdown) -> "ValueBreakdownSchema":
        return cls(
            raw_offered=breakdown.raw_offered,
            raw_requested=breakdown.raw_requested,
            positional_bonus=breakdown.positional_bonus,
            window_modifier=breakdown.window_modifier,
            contract_discount=breakdown.contract_discount,
            retention_bonus=breakdown.retention_bonus,
            risk_jitter=breakdown.risk_jitter,
            activity_multiplier=breakdown.activity_multiplier,
            adjusted_offered=breakdown.adjusted_offered,
            adjusted_requested=breakdown.adjusted_requested,
            value_difference=breakdown.value_difference,
            difference_ratio=breakdown.difference_ratio,
        )


class TradeResultSchema(BaseModel):
    """Outcome of one evaluation."""
    accepted: bool
    status: ProposalStatus
    message: str
    counter_proposal: Optional[TradeProposalSchema] = None
    proposal: Optional[TradeProposalSchema] = None
    breakdown: Optional[ValueBreakdownSchema] = None

    @classmethod
    def from_domain(cls, result: TradeResult) -> "TradeResultSchema":
        return cls(
            accepted=result.accepted,
            status=result.status,
            message=result.message,
            counter_proposal=(
                TradeProposalSchema.from_domain(result.counter_proposal)
                if result.counter_proposal else None
            ),
            proposal=TradeProposalSchema.from_domain(result.proposal) if result.proposal else None,
            breakdown=ValueBreakdownSchema.from_domain(result.breakdown) if result.breakdown else None,
        )


class CompletedTradeSchema(BaseModel):
    """An executed trade."""
    id: str
    date: datetime.date
    club_a: str
    club_b: str
    players_to_a: list[str] = []
    players_to_b: list[str] = []
    picks_to_a: list[DraftPickSchema] = []
    picks_to_b: list[DraftPickSchema] = []
    salary_retained_by_a: int = 0
    salary_retained_by_b: int = 0

    @classmethod
    def from_domain(cls, trade: CompletedTrade) -> "CompletedTradeSchema":
        return cls.model_validate(trade.to_dict())

    def to_domain(self) -> CompletedTrade:
        return CompletedTrade.from_dict(self.model_dump(mode="json"))


class TradeGradeSchema(BaseModel):
    trade_id: str
    club_a_name: str
    club_b_name: str
    club_a_grade: str
    club_b_grade: str
    club_a_diff: float
    club_b_diff: float
    assessment: str

    @classmethod
    def from_domain(cls, grade: TradeGrade) -> "TradeGradeSchema":
        return cls(
            trade_id=grade.trade_id,
            club_a_name=grade.club_a_name,
            club_b_name=grade.club_b_name,
            club_a_grade=grade.club_a_grade,
            club_b_grade=grade.club_b_grade,
            club_a_diff=grade.club_a_diff,
            club_b_diff=grade.club_b_diff,
            assessment=grade.assessment,
        )
