"""
Contracts module.

Provides the default market valuation for players and market-rate
contract generation.
"""

from tradedesk.core.contracts.market_value import (
    ELITE_SALARY_CEILING,
    MINIMUM_SALARY,
    build_year_by_year,
    calculate_player_value,
    generate_contract,
    round_salary,
)

__all__ = [
    "ELITE_SALARY_CEILING",
    "MINIMUM_SALARY",
    "build_year_by_year",
    "calculate_player_value",
    "generate_contract",
    "round_salary",
]
