# footix_manager/models/loan_model.py
# Club loans: principal, monthly interest and the total owed.

from typing import Optional
from datetime import datetime
from enum import Enum
from pydantic import BaseModel
from sqlmodel import SQLModel, Field

from footix_manager.core.config import LOAN_MIN_DURATION_MONTHS, LOAN_MAX_DURATION_MONTHS
from footix_manager.core.countdown import utc_now


class LoanStatus(str, Enum):
    ACTIVE = "active"
    PAID = "paid"


class Loan(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    club_id: int = Field(foreign_key="club.id")
    amount: int
    interest_rate: float = Field(description="Monthly interest rate")
    duration_months: int
    total_amount: float
    monthly_payment: float
    remaining_months: int
    status: LoanStatus = Field(default=LoanStatus.ACTIVE)
    created_at: datetime = Field(default_factory=utc_now)


class LoanRequest(BaseModel):
    """Schema for quoting or requesting a loan"""
    amount: int = Field(gt=0)
    duration_months: int = Field(ge=LOAN_MIN_DURATION_MONTHS, le=LOAN_MAX_DURATION_MONTHS)


class LoanPaymentRequest(BaseModel):
    """Pay the next installment of an active loan"""
    loan_id: int
