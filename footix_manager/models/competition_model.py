# footix_manager/models/competition_model.py
# Competitions and the per-club standing counters they accumulate.

from typing import Optional, List
from datetime import datetime
from enum import Enum
from pydantic import BaseModel, computed_field
from sqlmodel import SQLModel, Field, JSON, Column

from footix_manager.core.config import DEFAULT_POINTS_WIN, DEFAULT_POINTS_DRAW
from footix_manager.core.countdown import utc_now


class CompetitionType(str, Enum):
    LEAGUE = "league"
    CUP = "cup"
    ELITE = "elite"


class Competition(SQLModel, table=True):
    """A league, cup or elite competition running on one server."""
    id: Optional[int] = Field(default=None, primary_key=True)
    server_id: int = Field(foreign_key="server.id")
    name: str
    type: CompetitionType = Field(default=CompetitionType.LEAGUE)
    season: int = Field(default=1)
    points_win: int = Field(default=DEFAULT_POINTS_WIN)
    points_draw: int = Field(default=DEFAULT_POINTS_DRAW)
    tie_break_order: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    created_at: datetime = Field(default_factory=utc_now)


class CompetitionClub(SQLModel, table=True):
    """
    Standing counters of one club inside one competition.
    Maintained by match processing; only read and ranked here.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    competition_id: int = Field(foreign_key="competition.id")
    club_id: int = Field(foreign_key="club.id")
    group: Optional[str] = Field(default=None)
    points: int = Field(default=0)
    goals_for: int = Field(default=0)
    goals_against: int = Field(default=0)
    wins: int = Field(default=0)
    draws: int = Field(default=0)
    losses: int = Field(default=0)


# -------------------------------
# Standing row ranked by the core
# -------------------------------
class StandingRow(BaseModel):
    club_id: int
    group: Optional[str] = None
    points: int = 0
    goals_for: int = 0
    goals_against: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0

    class Config:
        from_attributes = True

    @computed_field
    @property
    def goal_difference(self) -> int:
        return self.goals_for - self.goals_against

    @computed_field
    @property
    def matches_played(self) -> int:
        return self.wins + self.draws + self.losses


class CompetitionRead(BaseModel):
    id: int
    name: str
    type: CompetitionType
    season: int
    tie_break_order: List[str]

    class Config:
        from_attributes = True
