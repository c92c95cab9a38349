"""
Trade negotiation engine.

Validates, evaluates, counters and executes trades between clubs.
"""

from tradedesk.core.trades.counter import find_counter_pick, generate_counter_proposal
from tradedesk.core.trades.evaluation import (
    DEFAULT_TRADE_SETTINGS,
    compute_value_breakdown,
    evaluate_trade_proposal,
)
from tradedesk.core.trades.execution import TradeExecution, execute_trade, transfer_picks
from tradedesk.core.trades.grading import TradeGrade, grade_trade_retrospective
from tradedesk.core.trades.history import TradeHistory
from tradedesk.core.trades.needs import get_positional_needs
from tradedesk.core.trades.negotiation import NegotiationOutcome, negotiate
from tradedesk.core.trades.proposal import (
    CompletedTrade,
    ProposalStatus,
    TradeProposal,
    TradeResult,
    ValueBreakdown,
    generate_trade_id,
)
from tradedesk.core.trades.rumours import TradeRumour, generate_trade_rumour
from tradedesk.core.trades.validation import ValidationResult, validate_trade_proposal
from tradedesk.core.trades.valuation import calculate_trade_value

__all__ = [
    # Proposals
    "CompletedTrade",
    "ProposalStatus",
    "TradeProposal",
    "TradeResult",
    "ValueBreakdown",
    "generate_trade_id",
    # Valuation
    "calculate_trade_value",
    "get_positional_needs",
    # Pipeline
    "DEFAULT_TRADE_SETTINGS",
    "ValidationResult",
    "validate_trade_proposal",
    "compute_value_breakdown",
    "evaluate_trade_proposal",
    "find_counter_pick",
    "generate_counter_proposal",
    "TradeExecution",
    "execute_trade",
    "transfer_picks",
    "NegotiationOutcome",
    "negotiate",
    # History
    "TradeGrade",
    "grade_trade_retrospective",
    "TradeHistory",
    "TradeRumour",
    "generate_trade_rumour",
]
