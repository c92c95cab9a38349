"""
League Generation.

Builds a synthetic league snapshot (clubs with AI personalities and draft
picks, players with market-rate contracts) for demos and tests. Every draw
comes from the SeededRNG passed in, so a seed always produces the same
league.
"""

from dataclasses import dataclass, field
from typing import Optional

from tradedesk.core.contracts.market_value import generate_contract
from tradedesk.core.draft.picks import create_initial_picks_for_club
from tradedesk.core.enums import Position
from tradedesk.core.models.club import (
    AIPersonality,
    Club,
    CompetitiveWindow,
    DraftPhilosophy,
    RiskTolerance,
    TradeActivity,
)
from tradedesk.core.models.player import Player
from tradedesk.core.rng import SeededRNG


CLUB_NAMES = [
    ("Harbour City Hawks", "HCH"),
    ("Northside Magpies", "NTH"),
    ("Riverbend Swans", "RIV"),
    ("Eastport Dockers", "EAS"),
    ("Westvale Tigers", "WST"),
    ("Southbank Lions", "STH"),
    ("Coastal Suns", "CST"),
    ("Goldfields Miners", "GLD"),
    ("Ironbark Giants", "IRN"),
    ("Bayside Sharks", "BAY"),
    ("Highland Eagles", "HGL"),
    ("Sandridge Blues", "SND"),
    ("Port Kembla Power", "PKP"),
    ("Valley Demons", "VAL"),
    ("Lakeside Saints", "LAK"),
    ("Redgum Crows", "RED"),
    ("Summit Bombers", "SUM"),
    ("Granite Cats", "GRA"),
]

FIRST_NAMES = [
    "Jack", "Tom", "Sam", "Josh", "Lachie", "Harry", "Will", "Max", "Riley",
    "Zac", "Callum", "Charlie", "Darcy", "Nick", "Luke", "Marcus", "Jordan",
    "Bailey", "Hayden", "Mitch", "Toby", "Cooper", "Ollie", "Jai", "Isaac",
]

LAST_NAMES = [
    "Smith", "Brown", "Wilson", "Taylor", "Martin", "Kelly", "Ryan", "Walsh",
    "Murphy", "Cameron", "Daniher", "Hogan", "Bontempelli", "Petracca",
    "Macrae", "Cripps", "Oliver", "Merrett", "Heeney", "Walters", "Curnow",
    "McKay", "Naughton", "Lyons", "Rowell", "Serong", "Butters", "Daicos",
]

# Primary positions for a 36-player list, roughly how clubs stack them
LIST_TEMPLATE = [
    Position.BP, Position.BP, Position.BP,
    Position.FB, Position.FB,
    Position.HBF, Position.HBF, Position.HBF, Position.HBF,
    Position.CHB, Position.CHB,
    Position.W, Position.W, Position.W,
    Position.IM, Position.IM, Position.IM, Position.IM, Position.IM,
    Position.OM, Position.OM, Position.OM,
    Position.RK, Position.RK,
    Position.HFF, Position.HFF, Position.HFF, Position.HFF,
    Position.CHF, Position.CHF,
    Position.FP, Position.FP, Position.FP,
    Position.FF, Position.FF, Position.FF,
]


@dataclass
class LeagueSnapshot:
    """Players and clubs for one league, keyed by id."""
    current_year: int
    players: dict[str, Player] = field(default_factory=dict)
    clubs: dict[str, Club] = field(default_factory=dict)

    def players_for(self, club_id: str) -> list[Player]:
        return [p for p in self.players.values() if p.club_id == club_id]

    def to_dict(self) -> dict:
        return {
            "current_year": self.current_year,
            "players": [p.to_dict() for p in self.players.values()],
            "clubs": [c.to_dict() for c in self.clubs.values()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LeagueSnapshot":
        players = [Player.from_dict(p) for p in data.get("players", [])]
        clubs = [Club.from_dict(c) for c in data.get("clubs", [])]
        return cls(
            current_year=data["current_year"],
            players={p.id: p for p in players},
            clubs={c.id: c for c in clubs},
        )


def generate_personality(rng: SeededRNG) -> AIPersonality:
    return AIPersonality(
        competitive_window=rng.pick(list(CompetitiveWindow)),
        risk_tolerance=rng.pick(list(RiskTolerance)),
        trade_activity=rng.pick(list(TradeActivity)),
        draft_philosophy=rng.pick(list(DraftPhilosophy)),
    )


def generate_player(
    rng: SeededRNG,
    club_id: str,
    position: Position,
    current_year: int,
    overall_range: tuple[int, int] = (45, 85),
    player_id: Optional[str] = None,
) -> Player:
    """
    Generate a listed player with a market-rate contract.

    Younger players carry more upside between their rating and ceiling.
    """
    age = rng.next_int(18, 33)
    overall = rng.next_int(*overall_range)
    upside = max(0, 28 - age) * rng.next_int(0, 3)
    potential = min(99, overall + upside)

    peak_start = rng.next_int(24, 26)
    is_rookie = age <= 20

    player = Player(
        id=player_id or f"{club_id}-{rng.next_int(0, 10**8):08d}",
        first_name=rng.pick(FIRST_NAMES),
        last_name=rng.pick(LAST_NAMES),
        club_id=club_id,
        age=age,
        position=position,
        overall=overall,
        potential_ceiling=potential,
        peak_age_start=peak_start,
        peak_age_end=peak_start + rng.next_int(3, 5),
        form=rng.next_int(30, 80),
        morale=rng.next_int(30, 90),
        is_rookie=is_rookie,
        draft_year=current_year - (age - 18) if is_rookie else None,
    )
    player.contract = generate_contract(player, rng)
    return player


def generate_league(
    rng: SeededRNG,
    num_clubs: int = 18,
    players_per_club: int = len(LIST_TEMPLATE),
    start_year: int = 2025,
    picks_years_ahead: int = 1,
    overall_range: tuple[int, int] = (45, 85),
) -> LeagueSnapshot:
    """
    Generate a complete league.

    Args:
        rng: Seeded random source for every draw
        num_clubs: Number of clubs (2-18)
        players_per_club: List size per club; positions cycle through a
            standard list template
        start_year: Current season; clubs get their own picks for this
            year and ``picks_years_ahead`` years after
        picks_years_ahead: Future drafts to create picks for
        overall_range: Range for player overall ratings

    Raises:
        ValueError: If num_clubs is out of range
    """
    if not 2 <= num_clubs <= len(CLUB_NAMES):
        raise ValueError(f"num_clubs must be between 2 and {len(CLUB_NAMES)}, got {num_clubs}")

    league = LeagueSnapshot(current_year=start_year)

    for name, abbreviation in CLUB_NAMES[:num_clubs]:
        club_id = abbreviation.lower()
        league.clubs[club_id] = Club(
            id=club_id,
            name=name,
            abbreviation=abbreviation,
            ai_personality=generate_personality(rng),
            draft_picks=create_initial_picks_for_club(club_id, start_year, picks_years_ahead),
        )

        for i in range(players_per_club):
            position = LIST_TEMPLATE[i % len(LIST_TEMPLATE)]
            player = generate_player(
                rng, club_id, position, start_year, overall_range,
                player_id=f"{club_id}-{i + 1:02d}",
            )
            league.players[player.id] = player

    return league


def find_player(
    league: LeagueSnapshot,
    club_id: str,
    position: Optional[Position] = None,
) -> Optional[Player]:
    """Highest-rated player at a club, optionally at one position."""
    candidates = [
        p for p in league.players_for(club_id)
        if position is None or p.position == position
    ]
    if not candidates:
        return None
    return max(candidates, key=lambda p: (p.overall, p.id))
