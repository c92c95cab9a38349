"""
Trade history.

Append-only log of completed trades for a league, with simple queries.
Records are immutable; the log only ever grows.
"""

from dataclasses import dataclass, field
from typing import Optional

from tradedesk.core.trades.proposal import CompletedTrade


@dataclass
class TradeHistory:
    """Every completed trade in a league, oldest first."""
    league_id: str = ""
    trades: list[CompletedTrade] = field(default_factory=list)

    def record(self, trade: CompletedTrade) -> None:
        """Add a completed trade to the log."""
        if any(t.id == trade.id for t in self.trades):
            raise ValueError(f"Trade {trade.id} is already recorded")
        self.trades.append(trade)
        # Keep sorted by date; same-day trades stay in the order recorded
        self.trades.sort(key=lambda t: t.date)

    def get(self, trade_id: str) -> Optional[CompletedTrade]:
        for trade in self.trades:
            if trade.id == trade_id:
                return trade
        return None

    def for_club(self, club_id: str, season: Optional[int] = None) -> list[CompletedTrade]:
        """All trades a club took part in."""
        results = [t for t in self.trades if t.involves(club_id)]
        if season is not None:
            results = [t for t in results if t.season == season]
        return results

    def for_season(self, season: int) -> list[CompletedTrade]:
        return [t for t in self.trades if t.season == season]

    def for_player(self, player_id: str) -> list[CompletedTrade]:
        """Trades that moved a given player."""
        return [
            t for t in self.trades
            if player_id in t.players_to_a or player_id in t.players_to_b
        ]

    def between(self, club_a: str, club_b: str) -> list[CompletedTrade]:
        """Trades between two clubs, in either direction."""
        pair = {club_a, club_b}
        return [t for t in self.trades if {t.club_a, t.club_b} == pair]

    def get_recent(self, count: int = 10) -> list[CompletedTrade]:
        return self.trades[-count:]

    def __len__(self) -> int:
        return len(self.trades)

    def to_dict(self) -> dict:
        return {
            "league_id": self.league_id,
            "trades": [t.to_dict() for t in self.trades],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TradeHistory":
        return cls(
            league_id=data.get("league_id", ""),
            trades=[CompletedTrade.from_dict(t) for t in data.get("trades", [])],
        )
