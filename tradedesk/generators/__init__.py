"""Synthetic league generation."""

from tradedesk.generators.league import (
    LeagueSnapshot,
    find_player,
    generate_league,
    generate_personality,
    generate_player,
)

__all__ = [
    "LeagueSnapshot",
    "find_player",
    "generate_league",
    "generate_personality",
    "generate_player",
]
