"""
Draft Pick Tracking and Valuation.

Tracks:
- Pick ownership (original club, current club)
- Pick value for trade evaluation
- Draft pick lists per club
"""

from dataclasses import dataclass, replace
from typing import Optional


# Each round is valued across an 18-pick span (one pick per club)
PICKS_PER_ROUND = 18

# Value bands by round: (ceiling at first pick, floor at last pick), dollars
ROUND_VALUE_BANDS = {
    1: (800_000, 500_000),
    2: (400_000, 200_000),
}
LATE_ROUND_VALUE_BAND = (150_000, 80_000)  # Round 3 onwards

# Position within the round assumed before the draft order is set
PLACEHOLDER_ROUND_POSITION = {1: 10}
DEFAULT_PLACEHOLDER_POSITION = 9

# Picks in a future draft are worth this fraction of a current-year pick
FUTURE_PICK_DISCOUNT = 0.80


def get_round_position(round_num: int, pick_number: Optional[int]) -> int:
    """
    Position of a pick within its round (1 = first selection of the round).

    Uses a fixed mid-round placeholder when the draft order isn't known yet.
    """
    if pick_number is None:
        return PLACEHOLDER_ROUND_POSITION.get(round_num, DEFAULT_PLACEHOLDER_POSITION)
    return pick_number - (round_num - 1) * PICKS_PER_ROUND


def get_round_pick_value(round_num: int, round_position: int) -> float:
    """
    Current-year value of a pick, linearly interpolated within its round band.

    Positions outside 1-18 are clamped to the ends of the band.
    """
    ceiling, floor = ROUND_VALUE_BANDS.get(round_num, LATE_ROUND_VALUE_BAND)
    t = (round_position - 1) / (PICKS_PER_ROUND - 1)
    t = min(1.0, max(0.0, t))
    return ceiling - t * (ceiling - floor)


@dataclass(frozen=True)
class DraftPick:
    """
    A draft pick that can be owned and traded.

    ``pick_number`` is the overall selection number, assigned once the
    draft order is set.
    """
    year: int = 0
    round: int = 1

    # Ownership
    original_club_id: str = ""
    current_club_id: str = ""

    pick_number: Optional[int] = None

    @property
    def key(self) -> tuple[int, int, str]:
        """Identity of the pick inside a deal."""
        return (self.year, self.round, self.original_club_id)

    @property
    def is_owned_by_original(self) -> bool:
        """Does the original club still own this pick?"""
        return self.original_club_id == self.current_club_id

    def is_future(self, current_year: int) -> bool:
        return self.year > current_year

    def with_owner(self, club_id: str) -> "DraftPick":
        """Copy of this pick held by another club."""
        return replace(self, current_club_id=club_id)

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "round": self.round,
            "original_club_id": self.original_club_id,
            "current_club_id": self.current_club_id,
            "pick_number": self.pick_number,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DraftPick":
        return cls(
            year=data["year"],
            round=data["round"],
            original_club_id=data["original_club_id"],
            current_club_id=data.get("current_club_id", data["original_club_id"]),
            pick_number=data.get("pick_number"),
        )

    def __str__(self) -> str:
        owner = "own" if self.is_owned_by_original else f"via {self.original_club_id}"
        number = f" #{self.pick_number}" if self.pick_number else ""
        return f"{self.year} R{self.round}{number} ({owner})"


def pick_value(pick: DraftPick, current_year: int) -> float:
    """
    Trade value of a single draft pick in dollars.

    Round 1 picks are valued $500k-$800k, round 2 $200k-$400k and round 3
    onwards $80k-$150k, earlier selections worth more. Picks in a future
    draft are discounted to 80% of their current-year value.
    """
    position = get_round_position(pick.round, pick.pick_number)
    value = get_round_pick_value(pick.round, position)

    if pick.is_future(current_year):
        value *= FUTURE_PICK_DISCOUNT

    return value


def create_initial_picks_for_club(
    club_id: str,
    start_year: int,
    years_ahead: int = 1,
    rounds: int = 3,
) -> list[DraftPick]:
    """
    Create a club's own picks for the current year plus future years.
    """
    picks = []
    for year in range(start_year, start_year + years_ahead + 1):
        for round_num in range(1, rounds + 1):
            picks.append(DraftPick(
                year=year,
                round=round_num,
                original_club_id=club_id,
                current_club_id=club_id,
            ))
    return picks
