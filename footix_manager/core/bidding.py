# footix_manager/core/bidding.py
"""
Bid rules applied before a bid is recorded.

Each rule reports on its own so the caller decides what blocks and what only
warns. Balance, market-value band and multi-bid ceiling block; the salary-cap
projection is advisory. Nothing here touches balances or bid history.
"""

from typing import List, Optional, Sequence
from pydantic import BaseModel

from footix_manager.core.config import (
    BALANCE_BUFFER_RATIO,
    MARKET_VALUE_MIN_RATIO,
    MARKET_VALUE_MAX_RATIO,
    MULTI_BID_BALANCE_RATIO,
    BASE_BID_INCREMENT,
    BID_INCREMENT_STEP,
    MAX_INCREMENT_MULTIPLIER,
)
from footix_manager.core.salary import projected_salary, current_salary_total, market_value
from footix_manager.models.auction_model import BidRecord
from footix_manager.models.club_model import ClubSnapshot
from footix_manager.models.player_model import PlayerSnapshot


# ==========================================
# RULE RESULTS
# ==========================================

class BalanceCheck(BaseModel):
    passed: bool
    balance: float
    buffer: float
    available: float


class MarketValueCheck(BaseModel):
    passed: bool
    market_value: float
    min_allowed: float
    max_allowed: float


class SalaryCapCheck(BaseModel):
    exceeds: bool
    projected_salary: float
    projected_total: float
    difference: float


class MultipleBidsCheck(BaseModel):
    passed: bool
    existing_total: float
    projected_total: float
    max_allowed: float


class BidValidationResult(BaseModel):
    bid_amount: float
    balance: BalanceCheck
    market_value: MarketValueCheck
    salary_cap: SalaryCapCheck
    multiple_bids: Optional[MultipleBidsCheck] = None  # Only set for a club's follow-up bids

    @property
    def blocking_errors(self) -> List[str]:
        errors = []
        if not self.balance.passed:
            errors.append("INSUFFICIENT_BALANCE")
        if not self.market_value.passed:
            errors.append("BID_OUT_OF_MARKET_RANGE")
        if self.multiple_bids is not None and not self.multiple_bids.passed:
            errors.append("BID_LIMIT_EXCEEDED")
        return errors

    @property
    def is_valid(self) -> bool:
        return not self.blocking_errors

    @property
    def warnings(self) -> dict:
        if not self.salary_cap.exceeds:
            return {}
        return {
            "salary_cap": {
                "message": "Projected salary exceeds the salary cap",
                "projected_total": self.salary_cap.projected_total,
                "difference": self.salary_cap.difference,
            }
        }


# ==========================================
# INDIVIDUAL RULES
# ==========================================

def check_balance(club: ClubSnapshot, bid_amount: float) -> BalanceCheck:
    """
    20% of the balance stays reserved for other operations.
    Earlier bids by the same club are not deducted here.
    """
    buffer = club.balance * BALANCE_BUFFER_RATIO
    available = club.balance - buffer
    return BalanceCheck(
        passed=available >= bid_amount,
        balance=club.balance,
        buffer=buffer,
        available=available,
    )


def check_market_value(player: PlayerSnapshot, bid_amount: float) -> MarketValueCheck:
    value = market_value(player)
    min_allowed = value * MARKET_VALUE_MIN_RATIO
    max_allowed = value * MARKET_VALUE_MAX_RATIO
    return MarketValueCheck(
        passed=min_allowed <= bid_amount <= max_allowed,
        market_value=value,
        min_allowed=min_allowed,
        max_allowed=max_allowed,
    )


def check_salary_cap(club: ClubSnapshot, player: PlayerSnapshot, bid_amount: float) -> SalaryCapCheck:
    salary = projected_salary(bid_amount, player.market_value_multiplier)
    projected_total = current_salary_total(club) + salary
    return SalaryCapCheck(
        exceeds=projected_total > club.salary_cap,
        projected_salary=salary,
        projected_total=projected_total,
        difference=projected_total - club.salary_cap,
    )


def check_multiple_bids(club: ClubSnapshot, own_bids: Sequence[BidRecord], new_bid_amount: float) -> MultipleBidsCheck:
    existing_total = sum(bid.bid_amount for bid in own_bids)
    projected_total = existing_total + new_bid_amount
    max_allowed = club.balance * MULTI_BID_BALANCE_RATIO
    return MultipleBidsCheck(
        passed=projected_total <= max_allowed,
        existing_total=existing_total,
        projected_total=projected_total,
        max_allowed=max_allowed,
    )


# ==========================================
# FULL VALIDATION
# ==========================================

def validate_bid(
    club: ClubSnapshot,
    player: PlayerSnapshot,
    bid_amount: float,
    bid_history: Sequence[BidRecord] = (),
) -> BidValidationResult:
    """
    Run every bid rule for club bidding bid_amount on player.
    bid_history is the auction's bid list; the multi-bid ceiling only applies
    when it already holds bids from this club.
    """
    own_bids = [bid for bid in bid_history if bid.club_id == club.id]

    return BidValidationResult(
        bid_amount=bid_amount,
        balance=check_balance(club, bid_amount),
        market_value=check_market_value(player, bid_amount),
        salary_cap=check_salary_cap(club, player, bid_amount),
        multiple_bids=check_multiple_bids(club, own_bids, bid_amount) if own_bids else None,
    )


def next_bid_amount(current_bid: float, bid_count: int) -> float:
    """
    Suggested next bid: the base increment grows 10% per bid already placed,
    up to twice the base. Not enforced as a minimum.
    """
    multiplier = min(1 + bid_count * BID_INCREMENT_STEP, MAX_INCREMENT_MULTIPLIER)
    return current_bid + BASE_BID_INCREMENT * multiplier
