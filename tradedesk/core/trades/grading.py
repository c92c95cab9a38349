"""
Retrospective trade grades.

Looks back at a completed trade using the players' current ratings. What
one club gained the other lost, so the two grades always mirror each
other.
"""

from dataclasses import dataclass
from typing import Iterable, Mapping

from tradedesk.core.models.club import Club
from tradedesk.core.models.player import Player
from tradedesk.core.trades.proposal import CompletedTrade


# (minimum value difference, letter), best first
GRADE_THRESHOLDS = [
    (15, "A+"),
    (8, "A"),
    (3, "B+"),
    (-3, "B"),
    (-8, "C"),
    (-15, "D"),
]
FAILING_GRADE = "F"

# Differences smaller than this read as an even trade
BALANCED_MARGIN = 3


@dataclass(frozen=True)
class TradeGrade:
    trade_id: str
    club_a_grade: str
    club_b_grade: str
    club_a_name: str
    club_b_name: str
    club_a_diff: float
    assessment: str

    @property
    def club_b_diff(self) -> float:
        return -self.club_a_diff


def age_factor(age: int) -> float:
    if age < 25:
        return 1.3
    if age <= 30:
        return 1.0
    return 0.7


def grade_from_diff(diff: float) -> str:
    for threshold, letter in GRADE_THRESHOLDS:
        if diff >= threshold:
            return letter
    return FAILING_GRADE


def _received_value(player_ids: Iterable[str], players: Mapping[str, Player]) -> float:
    return sum(
        players[pid].overall * age_factor(players[pid].age)
        for pid in player_ids
        if pid in players
    )


def grade_trade_retrospective(
    trade: CompletedTrade,
    players: Mapping[str, Player],
    clubs: Mapping[str, Club],
) -> TradeGrade:
    """Grade both sides of a trade on current overall, weighted by age."""
    diff_a = _received_value(trade.players_to_a, players) - _received_value(trade.players_to_b, players)

    club_a = clubs.get(trade.club_a)
    club_b = clubs.get(trade.club_b)
    club_a_name = club_a.name if club_a and club_a.name else trade.club_a
    club_b_name = club_b.name if club_b and club_b.name else trade.club_b

    if abs(diff_a) < BALANCED_MARGIN:
        assessment = "A balanced trade that worked out fairly for both sides."
    elif diff_a > 0:
        assessment = f"{club_a_name} got the better end of this deal."
    else:
        assessment = f"{club_b_name} got the better end of this deal."

    return TradeGrade(
        trade_id=trade.id,
        club_a_grade=grade_from_diff(diff_a),
        club_b_grade=grade_from_diff(-diff_a),
        club_a_name=club_a_name,
        club_b_name=club_b_name,
        club_a_diff=diff_a,
        assessment=assessment,
    )
