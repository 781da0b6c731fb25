# footix_manager/core/salary.py
# Salary and market-value projections used by bid validation and finance routes.

from footix_manager.core.config import (
    MARKET_VALUE_BASE_OVERALL,
    OVERALL_ADJUSTMENT_PER_POINT,
    POTENTIAL_ADJUSTMENT_PER_POINT,
)
from footix_manager.models.club_model import ClubSnapshot
from footix_manager.models.player_model import PlayerSnapshot


def projected_salary(bid_amount: float, market_value_multiplier: float) -> float:
    """
    Salary implied by paying bid_amount for a player.
    The multiplier is always positive on stored players; callers must not pass 0.
    """
    return bid_amount / market_value_multiplier


def market_value(player: PlayerSnapshot) -> float:
    """
    Estimate a player's transfer value from the current contract.

    base      = salary * market_value_multiplier
    overall   = 1 + (overall - 70) * 0.02       (+2% per point above 70)
    potential = 1 + (potential - overall) * 0.03 (+3% per point of growth left)

    The overall factor is not clamped and goes negative for very low ratings.
    """
    base_value = player.contract.salary * player.market_value_multiplier
    overall_adjustment = 1 + (player.overall - MARKET_VALUE_BASE_OVERALL) * OVERALL_ADJUSTMENT_PER_POINT
    potential_adjustment = 1 + (player.potential - player.overall) * POTENTIAL_ADJUSTMENT_PER_POINT
    return base_value * overall_adjustment * potential_adjustment


def current_salary_total(club: ClubSnapshot) -> float:
    return sum(player.contract.salary for player in club.players)


def salary_cap_room(club: ClubSnapshot) -> float:
    """Remaining room under the salary cap (negative when already over)."""
    return club.salary_cap - current_salary_total(club)
