# footix_manager/models/club_model.py
# Defines the Club table and the read-only club snapshot used by the rules core.

from typing import Optional, List, TYPE_CHECKING
from datetime import datetime
from pydantic import BaseModel
from sqlmodel import SQLModel, Field, Relationship

from footix_manager.core.countdown import utc_now
from footix_manager.models.player_model import PlayerSnapshot

if TYPE_CHECKING:
    from .player_model import Player


class Club(SQLModel, table=True):
    """
    A managed football club, owned by one manager within one server.
    Balance and roster only change through transactional routes (bids, loans).
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    server_id: int = Field(foreign_key="server.id")
    name: str
    balance: int = Field(default=0, description="Cash balance in game currency")
    salary_cap: int = Field(default=0, description="Advisory ceiling for total roster salaries")
    reputation: int = Field(default=50, ge=0, le=200)
    logo_url: Optional[str] = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now)

    players: List["Player"] = Relationship(back_populates="club")


# -------------------------------
# Snapshot consumed by core rules
# -------------------------------
class ClubSnapshot(BaseModel):
    """Club state at the moment of a single validation/projection call."""
    id: int
    name: str
    balance: float
    salary_cap: float
    players: List[PlayerSnapshot] = []
    reputation: int = 50
    logo_url: Optional[str] = None

    class Config:
        from_attributes = True


class ClubSummary(BaseModel):
    """Minimal club info embedded in other responses"""
    id: int
    name: str
    logo_url: Optional[str] = None

    class Config:
        from_attributes = True
