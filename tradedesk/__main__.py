"""Entry point for tradedesk package."""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from tradedesk.config import get_settings
from tradedesk.core.draft.picks import DraftPick
from tradedesk.core.rng import SeededRNG
from tradedesk.core.trades import (
    TradeProposal,
    execute_trade,
    generate_trade_id,
    grade_trade_retrospective,
    negotiate,
    transfer_picks,
)
from tradedesk.generators import LeagueSnapshot, find_player, generate_league
from tradedesk.schemas import (
    CompletedTradeSchema,
    LeagueSnapshotSchema,
    TradeGradeSchema,
    TradeProposalSchema,
    TradeResultSchema,
)

logger = logging.getLogger("tradedesk")

# Trades are executed during the October trade period
TRADE_PERIOD_MONTH = 10
TRADE_PERIOD_DAY = 1


def build_demo_proposal(league: LeagueSnapshot, rng: SeededRNG) -> TradeProposal:
    """
    Two random clubs swap their highest-rated players, the proposer
    adding its own next-year second-round pick.
    """
    proposer_id, receiver_id = rng.shuffle(sorted(league.clubs))[:2]

    offered = find_player(league, proposer_id)
    requested = find_player(league, receiver_id)

    picks: list[DraftPick] = [
        p for p in league.clubs[proposer_id].owned_picks()
        if p.round == 2 and p.is_future(league.current_year)
    ]

    return TradeProposal(
        id=generate_trade_id(rng),
        proposing_club_id=proposer_id,
        receiving_club_id=receiver_id,
        players_offered=[offered.id] if offered else [],
        players_requested=[requested.id] if requested else [],
        picks_offered=picks[:1],
    )


def load_league(path: str) -> LeagueSnapshot:
    return LeagueSnapshotSchema.model_validate_json(Path(path).read_text()).to_domain()


def load_proposal(path: str) -> TradeProposal:
    return TradeProposalSchema.model_validate_json(Path(path).read_text()).to_domain()


def run_negotiation(
    league: LeagueSnapshot,
    proposal: TradeProposal,
    rng: SeededRNG,
    max_rounds: Optional[int],
    as_json: bool,
) -> int:
    """Negotiate a proposal and, if agreed, execute it. Returns the exit code."""
    settings = get_settings()
    outcome = negotiate(
        proposal,
        league.players,
        league.clubs,
        rng,
        league.current_year,
        settings=settings,
        max_rounds=max_rounds,
    )

    if outcome.validation_errors:
        print("Proposal is invalid:")
        for error in outcome.validation_errors:
            print(f"  - {error}")
        return 1

    for i, result in enumerate(outcome.rounds, start=1):
        if as_json:
            print(TradeResultSchema.from_domain(result).model_dump_json(indent=2))
            continue
        current = result.proposal
        breakdown = result.breakdown
        print(f"Round {i}: {current.proposing_club_id} -> {current.receiving_club_id} [{result.status.value}]")
        if breakdown is not None:
            print(
                f"  Offered ${breakdown.adjusted_offered:,.0f} vs requested "
                f"${breakdown.adjusted_requested:,.0f} (ratio {breakdown.difference_ratio:+.3f})"
            )
        print(f"  {result.message}")

    if outcome.round_limit_reached:
        print(f"No agreement after {len(outcome.rounds)} round(s).")

    agreed = outcome.agreed_proposal
    if agreed is None:
        return 0

    trade_date = date(league.current_year, TRADE_PERIOD_MONTH, TRADE_PERIOD_DAY)
    execution = execute_trade(agreed, league.players, trade_date)
    clubs = transfer_picks(execution.completed_trade, league.clubs)

    grade = grade_trade_retrospective(execution.completed_trade, execution.updated_players, clubs)

    if as_json:
        print(CompletedTradeSchema.from_domain(execution.completed_trade).model_dump_json(indent=2))
        print(TradeGradeSchema.from_domain(grade).model_dump_json(indent=2))
    else:
        print()
        print(f"Trade {agreed.id} completed on {trade_date.isoformat()}")
        print(f"  {grade.club_a_name}: {grade.club_a_grade}   {grade.club_b_name}: {grade.club_b_grade}")
        print(f"  {grade.assessment}")

    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the tradedesk command line."""
    parser = argparse.ArgumentParser(
        description="Tradedesk - AI trade negotiation for a football league",
        prog="tradedesk",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Generate a seeded league and negotiate a random trade",
    )
    parser.add_argument(
        "--league",
        type=str,
        help="League snapshot JSON file",
    )
    parser.add_argument(
        "--proposal",
        type=str,
        help="Trade proposal JSON file",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed (default: 42)",
    )
    parser.add_argument(
        "--year",
        type=int,
        default=None,
        help="Current season (default: the league's, or 2025 for the demo)",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=None,
        help="Maximum negotiation rounds (default: from settings)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every evaluation",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    errors = get_settings().validate()
    if errors:
        parser.error("; ".join(errors))
    if args.rounds is not None and args.rounds < 1:
        parser.error("--rounds must be at least 1")

    rng = SeededRNG(args.seed)

    if args.demo:
        league = generate_league(rng, start_year=args.year or 2025)
        proposal = build_demo_proposal(league, rng)
        if not args.json:
            print("Tradedesk - Trade Negotiation (Demo Mode)")
            print("=" * 50)
    elif args.league and args.proposal:
        try:
            league = load_league(args.league)
            proposal = load_proposal(args.proposal)
        except (OSError, ValidationError) as e:
            logger.error(f"Could not load input: {e}")
            return 2
        if args.year is not None:
            league.current_year = args.year
    else:
        parser.error("either --demo or both --league and --proposal are required")

    return run_negotiation(league, proposal, rng, args.rounds, args.json)


if __name__ == "__main__":
    sys.exit(main())
