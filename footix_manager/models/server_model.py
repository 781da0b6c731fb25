# footix_manager/models/server_model.py
# A server is an isolated game instance (its own season, clubs and market).

from typing import Optional
from datetime import datetime
from sqlmodel import SQLModel, Field

from footix_manager.core.countdown import utc_now

class Server(SQLModel, table=True):
    """Database model representing a game server (league instance)."""
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    season: int = Field(default=1)
    max_members: int = Field(default=64, description="Maximum number of clubs on this server")
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now)
