"""
Market Value Calculator.

Estimates a player's market value as an annual salary (AAV) based on:
- Overall rating (power curve - elite players worth disproportionately more)
- Age trajectory (potential premium before peak, decline after)
- Position premium (midfielders and key forwards)
- Form and morale

This is the default player valuation handed to the trade engine. Any other
function with the same signature can be injected instead.
"""

from typing import TYPE_CHECKING

from tradedesk.core.enums import PREMIUM_POSITIONS, Position
from tradedesk.core.models.player import PlayerContract

if TYPE_CHECKING:
    from tradedesk.core.models.player import Player
    from tradedesk.core.rng import SeededRNG


MINIMUM_SALARY = 110_000
ELITE_SALARY_CEILING = 1_200_000

# Contracts are not specified to the dollar
SALARY_ROUNDING = 5_000

RUCK_PREMIUM = 1.04
POSITION_PREMIUM = 1.08


def round_salary(value: float) -> int:
    """Round a salary to the nearest $5,000."""
    return int(round(value / SALARY_ROUNDING)) * SALARY_ROUNDING


def age_curve_multiplier(player: "Player") -> float:
    """
    Age multiplier for market value.

    Young players whose potential exceeds their current rating get a
    premium that fades out by the start of their peak. Peak years are
    full value. Each year past peak costs 10%, floored at 0.4.
    """
    age = player.age

    if age < player.peak_age_start:
        overall = max(1, player.overall)
        potential_ratio = min(1.35, max(1.0, player.potential_ceiling / overall))
        youth_span = max(1, player.peak_age_start - 18)
        youth_factor = (player.peak_age_start - age) / youth_span
        return 0.75 + 0.25 * youth_factor * potential_ratio

    if age <= player.peak_age_end:
        return 1.0

    years_post_peak = age - player.peak_age_end
    return max(0.4, 1.0 - years_post_peak * 0.1)


def position_multiplier(position: Position) -> float:
    if position in PREMIUM_POSITIONS:
        return POSITION_PREMIUM
    if position == Position.RK:
        return RUCK_PREMIUM
    return 1.0


def form_morale_multiplier(player: "Player") -> float:
    """Form swings value by up to 10%, morale by up to 5%."""
    form_factor = (player.form - 50) / 500
    morale_factor = (player.morale - 50) / 1000
    return 1.0 + form_factor + morale_factor


def calculate_player_value(player: "Player") -> int:
    """
    Market value of a player as an annual salary, in dollars.

    Always within [MINIMUM_SALARY, ELITE_SALARY_CEILING].
    """
    # Anything below 30 overall is minimum-salary territory
    normalised = max(0.0, (player.overall - 30) / 70)
    base_salary = MINIMUM_SALARY + normalised ** 2.2 * (ELITE_SALARY_CEILING - MINIMUM_SALARY)

    value = (
        base_salary
        * age_curve_multiplier(player)
        * position_multiplier(player.position)
        * form_morale_multiplier(player)
    )

    return round_salary(min(ELITE_SALARY_CEILING, max(MINIMUM_SALARY, value)))


def build_year_by_year(aav: int, years: int, escalation_rate: float = 0.04) -> list[int]:
    """
    Year-by-year salaries that escalate annually but average out to ``aav``.
    """
    if years <= 0:
        return []
    if years == 1:
        return [round_salary(aav)]

    rate = 1 + escalation_rate
    series_sum = (rate ** years - 1) / (rate - 1)
    base_salary = aav * years / series_sum

    return [round_salary(base_salary * rate ** i) for i in range(years)]


def generate_contract(player: "Player", rng: "SeededRNG") -> PlayerContract:
    """
    Market-rate contract for a player, used when building synthetic leagues.

    Older players get short deals; young, highly rated players get long ones.
    """
    if player.age >= 31:
        years = rng.next_int(1, 2)
    elif player.age >= 28:
        years = rng.next_int(1, 3)
    elif player.overall >= 75:
        years = rng.next_int(3, 6)
    else:
        years = rng.next_int(1, 4)

    aav = calculate_player_value(player)
    return PlayerContract(
        years_remaining=years,
        aav=aav,
        year_by_year=build_year_by_year(aav, years),
        is_restricted=player.age < 26,
    )
