"""Pydantic schemas for JSON input and output."""

from tradedesk.schemas.trades import (
    AIPersonalitySchema,
    ClubSchema,
    CompletedTradeSchema,
    DraftPickSchema,
    LeagueSnapshotSchema,
    PlayerContractSchema,
    PlayerSchema,
    TradeGradeSchema,
    TradeProposalSchema,
    TradeResultSchema,
    ValueBreakdownSchema,
)

__all__ = [
    # League schemas
    "AIPersonalitySchema",
    "ClubSchema",
    "DraftPickSchema",
    "LeagueSnapshotSchema",
    "PlayerContractSchema",
    "PlayerSchema",
    # Trade schemas
    "CompletedTradeSchema",
    "TradeGradeSchema",
    "TradeProposalSchema",
    "TradeResultSchema",
    "ValueBreakdownSchema",
]
