"""Player model."""

from dataclasses import dataclass, field
from typing import Optional
from uuid import uuid4

from tradedesk.core.enums import Position


@dataclass
class PlayerContract:
    """
    A player's current contract.

    All monetary values are whole dollars.
    """
    years_remaining: int = 1
    aav: int = 0  # Average annual value
    year_by_year: list[int] = field(default_factory=list)
    is_restricted: bool = False  # Restricted free agent when contract expires

    def to_dict(self) -> dict:
        return {
            "years_remaining": self.years_remaining,
            "aav": self.aav,
            "year_by_year": list(self.year_by_year),
            "is_restricted": self.is_restricted,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PlayerContract":
        return cls(
            years_remaining=data.get("years_remaining", 1),
            aav=data.get("aav", 0),
            year_by_year=list(data.get("year_by_year", [])),
            is_restricted=data.get("is_restricted", False),
        )


@dataclass
class Player:
    """
    A listed player.

    The trade engine reads everything here but only ever changes
    ``club_id``, and always on a copy.
    """

    id: str = field(default_factory=lambda: str(uuid4()))
    first_name: str = ""
    last_name: str = ""
    club_id: str = ""
    age: int = 22

    position: Position = Position.IM
    secondary_positions: list[Position] = field(default_factory=list)

    # Ratings (1-100)
    overall: int = 50
    potential_ceiling: int = 60
    peak_age_start: int = 25
    peak_age_end: int = 29
    form: int = 50
    morale: int = 50

    contract: PlayerContract = field(default_factory=PlayerContract)
    is_rookie: bool = False  # On the rookie/development list
    draft_year: Optional[int] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "club_id": self.club_id,
            "age": self.age,
            "position": self.position.value,
            "secondary_positions": [p.value for p in self.secondary_positions],
            "overall": self.overall,
            "potential_ceiling": self.potential_ceiling,
            "peak_age_start": self.peak_age_start,
            "peak_age_end": self.peak_age_end,
            "form": self.form,
            "morale": self.morale,
            "contract": self.contract.to_dict(),
            "is_rookie": self.is_rookie,
            "draft_year": self.draft_year,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Player":
        return cls(
            id=data["id"],
            first_name=data.get("first_name", ""),
            last_name=data.get("last_name", ""),
            club_id=data.get("club_id", ""),
            age=data.get("age", 22),
            position=Position(data.get("position", "IM")),
            secondary_positions=[Position(p) for p in data.get("secondary_positions", [])],
            overall=data.get("overall", 50),
            potential_ceiling=data.get("potential_ceiling", 60),
            peak_age_start=data.get("peak_age_start", 25),
            peak_age_end=data.get("peak_age_end", 29),
            form=data.get("form", 50),
            morale=data.get("morale", 50),
            contract=PlayerContract.from_dict(data.get("contract", {})),
            is_rookie=data.get("is_rookie", False),
            draft_year=data.get("draft_year"),
        )

    def __str__(self) -> str:
        return f"{self.full_name} ({self.position.value}, {self.overall} OVR)"
