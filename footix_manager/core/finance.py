# footix_manager/core/finance.py
# Salary-cap summary and transfer spending guidance for a club.

from footix_manager.core.config import BALANCE_BUFFER_RATIO, MULTI_BID_BALANCE_RATIO
from footix_manager.core.salary import current_salary_total, salary_cap_room
from footix_manager.models.club_model import ClubSnapshot


def salary_summary(club: ClubSnapshot) -> dict:
    total = current_salary_total(club)
    return {
        "total_salaries": total,
        "salary_cap": club.salary_cap,
        "cap_room": salary_cap_room(club),
        "over_cap": total > club.salary_cap,
        "players_under_contract": len(club.players),
    }


def spending_guidance(club: ClubSnapshot) -> dict:
    """
    Limits implied by the bid rules:
    - reserved_buffer: part of the balance a single bid may never touch
    - max_single_bid: largest bid the balance rule accepts
    - max_total_bids_per_auction: ceiling for one club's bids in one auction
    """
    reserved = club.balance * BALANCE_BUFFER_RATIO
    return {
        "balance": club.balance,
        "reserved_buffer": reserved,
        "max_single_bid": club.balance - reserved,
        "max_total_bids_per_auction": club.balance * MULTI_BID_BALANCE_RATIO,
    }


def finance_overview(club: ClubSnapshot) -> dict:
    summary = salary_summary(club)
    if summary["over_cap"]:
        status = "over_cap"
    elif summary["cap_room"] < club.salary_cap * 0.1:
        status = "tight"
    else:
        status = "healthy"

    return {
        "club_id": club.id,
        "club_name": club.name,
        "salaries": summary,
        "spending": spending_guidance(club),
        "salary_status": status,
    }
