"""
Bounded multi-round negotiation.

Drives the propose -> validate -> evaluate -> counter loop between two AI
clubs until a deal is agreed, someone walks away, or the round limit is
hit. Counter-proposals are not guaranteed to converge, so the limit is
always enforced here. Agreed deals are returned, not executed.
"""

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional

from tradedesk.config import TradeSettings
from tradedesk.core.contracts.market_value import calculate_player_value
from tradedesk.core.models.club import Club
from tradedesk.core.models.player import Player
from tradedesk.core.rng import SeededRNG
from tradedesk.core.trades.evaluation import DEFAULT_TRADE_SETTINGS, evaluate_trade_proposal
from tradedesk.core.trades.proposal import TradeProposal, TradeResult
from tradedesk.core.trades.validation import validate_trade_proposal
from tradedesk.core.trades.valuation import PlayerValueFn

logger = logging.getLogger(__name__)


@dataclass
class NegotiationOutcome:
    """Everything that happened in a negotiation."""
    rounds: list[TradeResult] = field(default_factory=list)
    validation_errors: list[str] = field(default_factory=list)
    round_limit_reached: bool = False

    @property
    def final_result(self) -> Optional[TradeResult]:
        return self.rounds[-1] if self.rounds else None

    @property
    def agreed(self) -> bool:
        return self.final_result is not None and self.final_result.accepted

    @property
    def agreed_proposal(self) -> Optional[TradeProposal]:
        """The accepted proposal, ready for execution."""
        if not self.agreed:
            return None
        return self.final_result.proposal


def negotiate(
    proposal: TradeProposal,
    players: Mapping[str, Player],
    clubs: Mapping[str, Club],
    rng: SeededRNG,
    current_year: int,
    settings: Optional[TradeSettings] = None,
    max_rounds: Optional[int] = None,
    value_fn: PlayerValueFn = calculate_player_value,
) -> NegotiationOutcome:
    """
    Run a negotiation starting from ``proposal``.

    Each round validates the proposal on the table and, if it is sound,
    lets the receiving club evaluate it. Stops on acceptance, on a
    rejection without a counter, on an invalid proposal, or after
    ``max_rounds`` evaluations (default from settings).

    Raises:
        ValueError: if max_rounds is less than 1
    """
    settings = settings or DEFAULT_TRADE_SETTINGS
    limit = settings.max_negotiation_rounds if max_rounds is None else max_rounds
    if limit < 1:
        raise ValueError(f"max_rounds must be at least 1, got {limit}")

    outcome = NegotiationOutcome()
    current: Optional[TradeProposal] = proposal

    while current is not None:
        validation = validate_trade_proposal(current, players, clubs)
        if not validation.valid:
            logger.debug(f"Negotiation stopped, {current.id} invalid: {validation.errors}")
            outcome.validation_errors = validation.errors
            break

        result = evaluate_trade_proposal(
            current, players, clubs, rng, current_year, settings, value_fn,
        )
        outcome.rounds.append(result)

        if result.counter_proposal is None:
            break

        if len(outcome.rounds) >= limit:
            outcome.round_limit_reached = True
            logger.debug(f"Negotiation stopped after {limit} round(s) without agreement")
            break

        current = result.counter_proposal

    return outcome
