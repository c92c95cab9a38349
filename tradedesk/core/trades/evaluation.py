"""
Trade Proposal Evaluation.

AI evaluation of a proposal from the receiving club's point of view.

The decision accounts for:
- Raw value difference between the two packages
- Positional needs: offered players at thin positions are worth more
- Competitive window: win-now clubs prefer proven veterans, rebuilding
  clubs prefer picks and young talent
- Contract burden: long or expensive contracts are an obligation, not
  just an asset (can be switched off)
- Salary retention by the proposing club (same switch)
- Trade activity: passive clubs demand a bigger surplus than active ones
- Risk tolerance: a small random swing for aggressive/conservative clubs

Each personality axis maps to a lookup table or a small function keyed by
the enum member, so each can be tested on its own.
"""

import logging
from typing import Callable, Mapping, Optional

from tradedesk.config import TradeSettings
from tradedesk.core.contracts.market_value import calculate_player_value
from tradedesk.core.draft.picks import pick_value
from tradedesk.core.models.club import (
    Club,
    CompetitiveWindow,
    RiskTolerance,
    TradeActivity,
)
from tradedesk.core.models.player import Player
from tradedesk.core.rng import SeededRNG
from tradedesk.core.trades.counter import generate_counter_proposal
from tradedesk.core.trades.needs import get_positional_needs
from tradedesk.core.trades.proposal import (
    ProposalStatus,
    TradeProposal,
    TradeResult,
    ValueBreakdown,
)
from tradedesk.core.trades.valuation import PlayerValueFn, calculate_trade_value

logger = logging.getLogger(__name__)


# Used when the caller passes no settings. Explicit values, never the environment.
DEFAULT_TRADE_SETTINGS = TradeSettings(
    salary_dump_trades_enabled=True,
    trade_requests_enabled=True,
    max_negotiation_rounds=3,
)

# Positional need
POSITIONAL_NEED_BONUS = 0.15

# Competitive window
VETERAN_MIN_AGE = 25
YOUTH_MAX_AGE = 23
WIN_NOW_VETERAN_WEIGHT = 0.10
WIN_NOW_PICK_DISCOUNT = 0.15
REBUILD_PICK_BONUS = 0.15
REBUILD_YOUTH_WEIGHT = 0.12

# Contract burden
LONG_CONTRACT_YEARS = 3
LONG_CONTRACT_RATE = 0.05      # Per excess year, as a share of AAV
HIGH_SALARY_THRESHOLD = 700_000
HIGH_SALARY_RATE = 0.10        # Share of the AAV above the threshold

# Retained salary counts at 50 cents on the dollar
RETENTION_CREDIT = 0.5

# Risk jitter is bounded by this share of the raw offered value
RISK_JITTER_FRACTION = 0.05

# Decision thresholds (ratio of value difference to raw requested value)
HARD_REJECT_RATIO = -0.25
COUNTER_RATIO = -0.15
BORDERLINE_ACCEPT_WEIGHT = 0.6


ACTIVITY_MULTIPLIERS = {
    TradeActivity.ACTIVE: 0.90,
    TradeActivity.MODERATE: 1.00,
    TradeActivity.PASSIVE: 1.15,
}

RISK_JITTER_DIRECTION = {
    RiskTolerance.AGGRESSIVE: 1,
    RiskTolerance.MODERATE: 0,
    RiskTolerance.CONSERVATIVE: -1,
}


# =============================================================================
# Factor Functions
# =============================================================================


def _known(player_ids: list[str], players: Mapping[str, Player]) -> list[Player]:
    return [players[pid] for pid in player_ids if pid in players]


def positional_bonus(
    proposal: TradeProposal,
    players: Mapping[str, Player],
    value_fn: PlayerValueFn = calculate_player_value,
) -> float:
    """Bonus for offered players who fill a hole on the receiving club's list."""
    needs = get_positional_needs(proposal.receiving_club_id, players)
    return sum(
        value_fn(player) * POSITIONAL_NEED_BONUS
        for player in _known(proposal.players_offered, players)
        if player.position in needs
    )


def is_proven(player: Player) -> bool:
    """Established senior player, the kind a win-now club pays for."""
    return player.age >= VETERAN_MIN_AGE and not player.is_rookie


def is_young(player: Player) -> bool:
    return player.age <= YOUTH_MAX_AGE


def _win_now_modifier(
    proposal: TradeProposal,
    players: Mapping[str, Player],
    current_year: int,
    value_fn: PlayerValueFn,
) -> float:
    modifier = 0.0
    for player in _known(proposal.players_offered, players):
        if is_proven(player):
            modifier += value_fn(player) * WIN_NOW_VETERAN_WEIGHT
    for player in _known(proposal.players_requested, players):
        if is_proven(player):
            modifier -= value_fn(player) * WIN_NOW_VETERAN_WEIGHT
    for pick in proposal.picks_offered:
        modifier -= pick_value(pick, current_year) * WIN_NOW_PICK_DISCOUNT
    return modifier


def _rebuilding_modifier(
    proposal: TradeProposal,
    players: Mapping[str, Player],
    current_year: int,
    value_fn: PlayerValueFn,
) -> float:
    modifier = 0.0
    for pick in proposal.picks_offered:
        modifier += pick_value(pick, current_year) * REBUILD_PICK_BONUS
    for player in _known(proposal.players_offered, players):
        if is_young(player):
            modifier += value_fn(player) * REBUILD_YOUTH_WEIGHT
    for player in _known(proposal.players_requested, players):
        if is_young(player):
            modifier -= value_fn(player) * REBUILD_YOUTH_WEIGHT
    return modifier


def _balanced_modifier(
    proposal: TradeProposal,
    players: Mapping[str, Player],
    current_year: int,
    value_fn: PlayerValueFn,
) -> float:
    return 0.0


WINDOW_MODIFIERS: dict[CompetitiveWindow, Callable[..., float]] = {
    CompetitiveWindow.WIN_NOW: _win_now_modifier,
    CompetitiveWindow.REBUILDING: _rebuilding_modifier,
    CompetitiveWindow.BALANCED: _balanced_modifier,
}


def window_modifier(
    window: CompetitiveWindow,
    proposal: TradeProposal,
    players: Mapping[str, Player],
    current_year: int,
    value_fn: PlayerValueFn = calculate_player_value,
) -> float:
    return WINDOW_MODIFIERS[window](proposal, players, current_year, value_fn)


def contract_burden(player: Player) -> float:
    """
    Cost of inheriting a player's contract.

    Years beyond three cost 5% of AAV each; AAV above $700k costs 10% of
    the excess.
    """
    years = player.contract.years_remaining
    aav = player.contract.aav
    burden = 0.0
    if years > LONG_CONTRACT_YEARS:
        burden += aav * (years - LONG_CONTRACT_YEARS) * LONG_CONTRACT_RATE
    if aav > HIGH_SALARY_THRESHOLD:
        burden += (aav - HIGH_SALARY_THRESHOLD) * HIGH_SALARY_RATE
    return burden


def contract_discount(proposal: TradeProposal, players: Mapping[str, Player]) -> float:
    """
    Net contract effect for the receiving club.

    Taking on burdensome contracts counts against the offer; shedding them
    counts in its favour.
    """
    taken_on = sum(contract_burden(p) for p in _known(proposal.players_offered, players))
    shed = sum(contract_burden(p) for p in _known(proposal.players_requested, players))
    return shed - taken_on


def retention_bonus(proposal: TradeProposal) -> float:
    return proposal.salary_retained * RETENTION_CREDIT


def activity_multiplier(activity: TradeActivity) -> float:
    return ACTIVITY_MULTIPLIERS[activity]


def risk_jitter(risk: RiskTolerance, raw_offered: float, rng: SeededRNG) -> float:
    """
    Random swing on the offer's value. Moderate clubs draw nothing.
    """
    direction = RISK_JITTER_DIRECTION[risk]
    if direction == 0:
        return 0.0
    return direction * rng.next_float(0, raw_offered * RISK_JITTER_FRACTION)


def borderline_accept_probability(ratio: float) -> float:
    """Chance of accepting a slightly short offer; zero at the counter threshold."""
    closeness = 1.0 - abs(ratio) / abs(COUNTER_RATIO)
    return BORDERLINE_ACCEPT_WEIGHT * max(0.0, closeness)


# =============================================================================
# Evaluation
# =============================================================================


def compute_value_breakdown(
    proposal: TradeProposal,
    players: Mapping[str, Player],
    club: Club,
    rng: SeededRNG,
    current_year: int,
    settings: TradeSettings,
    value_fn: PlayerValueFn = calculate_player_value,
) -> ValueBreakdown:
    """
    Every value factor for a proposal as the receiving ``club`` sees it.

    The only random draw is the risk jitter.
    """
    personality = club.ai_personality

    raw_offered = calculate_trade_value(
        proposal.players_offered, proposal.picks_offered, players, current_year, value_fn,
    )
    raw_requested = calculate_trade_value(
        proposal.players_requested, proposal.picks_requested, players, current_year, value_fn,
    )

    salary_dump = settings.salary_dump_trades_enabled

    return ValueBreakdown(
        raw_offered=raw_offered,
        raw_requested=raw_requested,
        positional_bonus=positional_bonus(proposal, players, value_fn),
        window_modifier=window_modifier(
            personality.competitive_window, proposal, players, current_year, value_fn,
        ),
        contract_discount=contract_discount(proposal, players) if salary_dump else 0.0,
        retention_bonus=retention_bonus(proposal) if salary_dump else 0.0,
        risk_jitter=risk_jitter(personality.risk_tolerance, raw_offered, rng),
        activity_multiplier=activity_multiplier(personality.trade_activity),
    )


def _reject(proposal: TradeProposal, message: str, breakdown: Optional[ValueBreakdown]) -> TradeResult:
    return TradeResult(
        accepted=False,
        message=message,
        counter_proposal=None,
        proposal=proposal.with_status(ProposalStatus.REJECTED, message),
        breakdown=breakdown,
    )


def _accept(proposal: TradeProposal, message: str, breakdown: ValueBreakdown) -> TradeResult:
    return TradeResult(
        accepted=True,
        message=message,
        counter_proposal=None,
        proposal=proposal.with_status(ProposalStatus.ACCEPTED, message),
        breakdown=breakdown,
    )


def _counter(
    proposal: TradeProposal,
    message: str,
    breakdown: ValueBreakdown,
    clubs: Mapping[str, Club],
    rng: SeededRNG,
    current_year: int,
) -> TradeResult:
    counter = generate_counter_proposal(proposal, clubs, rng, current_year)
    return TradeResult(
        accepted=False,
        message=message,
        counter_proposal=counter,
        proposal=proposal.with_status(ProposalStatus.COUNTERED, message),
        breakdown=breakdown,
    )


def evaluate_trade_proposal(
    proposal: TradeProposal,
    players: Mapping[str, Player],
    clubs: Mapping[str, Club],
    rng: SeededRNG,
    current_year: int,
    settings: Optional[TradeSettings] = None,
    value_fn: PlayerValueFn = calculate_player_value,
) -> TradeResult:
    """
    Decide whether the receiving club accepts, rejects or counters.

    Expects a proposal that already passed validation. Never raises for one.

    Args:
        proposal: The proposal to evaluate
        players: Player snapshot keyed by id
        clubs: Club snapshot keyed by id
        rng: Seeded random source (risk jitter, borderline calls, counter ids)
        current_year: Season used to discount future picks
        settings: Feature toggles; defaults to everything enabled
        value_fn: Player market value function

    Returns:
        TradeResult, with a counter-proposal when the offer was close
    """
    settings = settings or DEFAULT_TRADE_SETTINGS

    club = clubs.get(proposal.receiving_club_id)
    if club is None:
        return _reject(proposal, "Receiving club does not exist.", None)

    breakdown = compute_value_breakdown(
        proposal, players, club, rng, current_year, settings, value_fn,
    )
    diff = breakdown.value_difference
    ratio = breakdown.difference_ratio

    logger.debug(
        f"{club.id} evaluating {proposal.id}: offered {breakdown.raw_offered:,.0f} "
        f"(adj {breakdown.adjusted_offered:,.0f}), requested {breakdown.raw_requested:,.0f} "
        f"(adj {breakdown.adjusted_requested:,.0f}), diff {diff:,.0f}, ratio {ratio:.3f}"
    )

    if ratio < HARD_REJECT_RATIO:
        return _reject(
            proposal,
            f"{club} have rejected the trade. The offer does not come close to "
            f"matching the value of their players.",
            breakdown,
        )

    if ratio < COUNTER_RATIO:
        return _counter(
            proposal,
            f"{club} feel the offer undervalues their assets, but are open to further discussion.",
            breakdown, clubs, rng, current_year,
        )

    if diff >= 0:
        return _accept(proposal, f"{club} have agreed to the trade.", breakdown)

    # Short, but within 15%: the closer the gap, the likelier a yes
    if rng.chance(borderline_accept_probability(ratio)):
        return _accept(
            proposal, f"{club} have accepted the trade after deliberation.", breakdown,
        )

    return _counter(
        proposal,
        f"{club} have rejected the current offer but have made a counter-proposal.",
        breakdown, clubs, rng, current_year,
    )
