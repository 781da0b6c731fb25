# footix_manager/core/loans.py
# Loan pricing: the monthly rate scales with club reputation.

from dataclasses import dataclass

from footix_manager.core.config import (
    LOAN_BASE_INTEREST_RATE,
    LOAN_MIN_REPUTATION_FACTOR,
    LOAN_MAX_REPUTATION_FACTOR,
)


@dataclass(frozen=True)
class LoanQuote:
    amount: int
    duration_months: int
    interest_rate: float
    total_amount: float
    monthly_installment: float


def reputation_factor(reputation: int) -> float:
    """reputation / 100, kept within [0.5, 1.5]."""
    return max(LOAN_MIN_REPUTATION_FACTOR, min(LOAN_MAX_REPUTATION_FACTOR, reputation / 100))


def monthly_interest_rate(reputation: int) -> float:
    return LOAN_BASE_INTEREST_RATE * reputation_factor(reputation)


def quote_loan(amount: int, duration_months: int, reputation: int) -> LoanQuote:
    """Simple (non-compounding) interest over the whole duration."""
    rate = monthly_interest_rate(reputation)
    total = amount * (1 + rate * duration_months)
    return LoanQuote(
        amount=amount,
        duration_months=duration_months,
        interest_rate=rate,
        total_amount=total,
        monthly_installment=total / duration_months,
    )
