# footix_manager/routes/competition_routes.py
from typing import Optional

from fastapi import APIRouter, Depends
from sqlmodel import Session, select

from footix_manager.core.database import get_session
from footix_manager.core.errors import ApiError
from footix_manager.core.standings import rank_standings, group_standings, DEFAULT_TIE_BREAK_ORDER
from footix_manager.models.club_model import Club
from footix_manager.models.competition_model import (
    Competition, CompetitionClub, CompetitionRead, StandingRow
)

router = APIRouter()


def serialize_table(rows, clubs_by_id: dict) -> list:
    """Ranked rows with position and club details for the UI."""
    table = []
    for position, row in enumerate(rows, start=1):
        club = clubs_by_id.get(row.club_id)
        entry = row.model_dump()
        entry["position"] = position
        entry["club_name"] = club.name if club else "Unknown club"
        entry["club_logo"] = club.logo_url if club else None
        table.append(entry)
    return table


# =========================================
# GET COMPETITION STANDINGS
# =========================================
@router.get("/{competition_id}/standings")
def get_standings(
    competition_id: int,
    group: Optional[str] = None,
    session: Session = Depends(get_session)
):
    """
    Standings of a competition, ordered by points and then by the
    competition's own tie-break order. Grouped competitions also get
    one table per group.
    """
    competition = session.get(Competition, competition_id)
    if not competition:
        raise ApiError(message="Competition not found", code="COMPETITION_NOT_FOUND")

    query = select(CompetitionClub).where(CompetitionClub.competition_id == competition_id)
    if group:
        query = query.where(CompetitionClub.group == group)
    counters = session.exec(query.order_by(CompetitionClub.id)).all()

    rows = [StandingRow.model_validate(c) for c in counters]
    tie_break_order = competition.tie_break_order or DEFAULT_TIE_BREAK_ORDER

    club_ids = [row.club_id for row in rows]
    clubs = session.exec(select(Club).where(Club.id.in_(club_ids))).all() if club_ids else []
    clubs_by_id = {club.id: club for club in clubs}

    grouped = group_standings(rows, tie_break_order)

    return {
        "competition": CompetitionRead.model_validate(competition),
        "standings": serialize_table(rank_standings(rows, tie_break_order), clubs_by_id),
        "groups": {
            label: serialize_table(members, clubs_by_id)
            for label, members in grouped.items()
            if label
        },
    }
