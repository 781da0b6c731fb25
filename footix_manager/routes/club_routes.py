# club_routes.py
# Defines API routes for club finances (salary cap overview and loans)

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from footix_manager.core.database import get_session
from footix_manager.core.errors import ApiError
from footix_manager.core.finance import finance_overview
from footix_manager.core.loans import quote_loan
from footix_manager.models.club_model import Club
from footix_manager.models.loan_model import Loan, LoanPaymentRequest, LoanRequest, LoanStatus
from footix_manager.services.snapshots import club_snapshot

logger = logging.getLogger(__name__)

router = APIRouter()


def get_club_or_404(session: Session, club_id: int) -> Club:
    club = session.get(Club, club_id)
    if not club:
        raise ApiError(message="Club not found", code="CLUB_NOT_FOUND")
    return club


@router.get("/{club_id}/finance/salary")
def get_salary_overview(club_id: int, session: Session = Depends(get_session)):
    """
    Salary total against the cap, plus the spending limits the bid rules imply.
    """
    club = get_club_or_404(session, club_id)
    return finance_overview(club_snapshot(session, club))


@router.post("/{club_id}/finance/loan/quote")
def get_loan_quote(club_id: int, request: LoanRequest, session: Session = Depends(get_session)):
    """Price a loan without taking it. The rate depends on club reputation."""
    club = get_club_or_404(session, club_id)
    quote = quote_loan(request.amount, request.duration_months, club.reputation)
    return {"club_id": club.id, "reputation": club.reputation, **asdict(quote)}


@router.post("/{club_id}/finance/loan/request")
def request_loan(club_id: int, request: LoanRequest, session: Session = Depends(get_session)):
    """
    Take a loan: the principal is credited to the balance right away.
    A club can only have one active loan.
    """
    club = get_club_or_404(session, club_id)

    active_loans = session.exec(
        select(Loan).where(Loan.club_id == club_id, Loan.status == LoanStatus.ACTIVE)
    ).all()
    if active_loans:
        raise ApiError(message="Club already has an active loan", code="ACTIVE_LOANS_EXIST")

    quote = quote_loan(request.amount, request.duration_months, club.reputation)
    loan = Loan(
        club_id=club.id,
        amount=quote.amount,
        interest_rate=quote.interest_rate,
        duration_months=quote.duration_months,
        total_amount=quote.total_amount,
        monthly_payment=quote.monthly_installment,
        remaining_months=quote.duration_months,
    )
    club.balance += request.amount

    try:
        session.add(loan)
        session.add(club)
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception("Loan creation failed for club %s", club_id)
        raise ApiError(message="Could not create the loan", code="TRANSACTION_ERROR", details=str(e))

    session.refresh(loan)
    logger.info("Club %s took a loan of %s over %s months", club.id, quote.amount, quote.duration_months)

    return {
        "message": "Loan granted",
        "data": {
            "loan_id": loan.id,
            "amount": loan.amount,
            "interest_rate": loan.interest_rate,
            "duration_months": loan.duration_months,
            "total_amount": loan.total_amount,
            "monthly_installment": loan.monthly_payment,
            "remaining_months": loan.remaining_months,
            "new_balance": club.balance,
        },
    }


@router.post("/{club_id}/finance/loan/pay")
def pay_loan_installment(club_id: int, request: LoanPaymentRequest, session: Session = Depends(get_session)):
    """
    Pay one monthly installment. The loan is marked paid once no months remain,
    which frees the club to take a new one.
    """
    club = get_club_or_404(session, club_id)

    loan = session.exec(
        select(Loan).where(
            Loan.id == request.loan_id,
            Loan.club_id == club_id,
            Loan.status == LoanStatus.ACTIVE,
        )
    ).first()
    if not loan:
        raise ApiError(message="Loan not found or already paid off", code="LOAN_NOT_FOUND")

    payment = round(loan.monthly_payment)
    if club.balance < payment:
        raise ApiError(
            message="Insufficient balance to pay the installment",
            code="INSUFFICIENT_BALANCE",
            details={"balance": club.balance, "payment": payment},
        )

    club.balance -= payment
    loan.remaining_months -= 1
    if loan.remaining_months == 0:
        loan.status = LoanStatus.PAID

    try:
        session.add(club)
        session.add(loan)
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception("Loan payment failed for club %s", club_id)
        raise ApiError(message="Could not pay the installment", code="TRANSACTION_ERROR", details=str(e))

    logger.info(
        "Club %s paid %s on loan %s (%s months left)",
        club.id, payment, loan.id, loan.remaining_months,
    )

    return {
        "message": "Installment paid",
        "data": {
            "loan_id": loan.id,
            "payment": payment,
            "remaining_months": loan.remaining_months,
            "status": loan.status,
            "new_balance": club.balance,
        },
    }
