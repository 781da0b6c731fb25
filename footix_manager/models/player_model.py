# footix_manager/models/player_model.py
from typing import Optional, TYPE_CHECKING
from datetime import date
from pydantic import BaseModel
from sqlmodel import SQLModel, Field, Relationship

if TYPE_CHECKING:
    from .club_model import Club


class Player(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    server_id: int = Field(foreign_key="server.id")
    name: str
    position: str
    overall: int = Field(ge=0, le=100)
    potential: int = Field(ge=0, le=100)
    nationality: str
    age: int
    market_value_multiplier: float = Field(gt=0, description="Converts salary into a transfer valuation")

    # Contract terms (one active contract per player)
    salary: int = Field(default=0)
    clause_value: int = Field(default=0)
    contract_start: Optional[date] = Field(default=None)
    contract_end: Optional[date] = Field(default=None)

    club_id: Optional[int] = Field(default=None, foreign_key="club.id")
    club: Optional["Club"] = Relationship(back_populates="players")


# -------------------------------
# Snapshots consumed by core rules
# -------------------------------
class ContractTerms(BaseModel):
    salary: float
    clause_value: float = 0
    contract_start: Optional[date] = None
    contract_end: Optional[date] = None


class PlayerSnapshot(BaseModel):
    """Player state at the moment of a single ranking/bid computation."""
    id: int
    name: str
    position: str
    overall: int
    potential: int
    nationality: str = ""
    age: int = 0
    market_value_multiplier: float
    contract: ContractTerms


# -------------------------------
# Pydantic schemas for API responses
# -------------------------------
class MarketValueRead(BaseModel):
    """Schema for returning a player's valuation and the accepted bid band."""
    player_id: int
    name: str
    salary: float
    market_value_multiplier: float
    market_value: float
    min_bid: float
    max_bid: float
