# footix_manager/models/auction_model.py
# Defines auctions, their bid history, and the schemas exchanged with the API

from typing import Optional, List
from datetime import datetime
from enum import Enum
from pydantic import BaseModel
from sqlmodel import SQLModel, Field

from footix_manager.core.countdown import utc_now
from footix_manager.models.player_model import PlayerSnapshot


class AuctionStatus(str, Enum):
    """Auction lifecycle. Transitions happen outside the rules core."""
    SCHEDULED = "scheduled"       # Waiting for its start time
    ACTIVE = "active"             # Running, accepting bids
    COMPLETED = "completed"       # Finished, winner determined
    CANCELLED = "cancelled"       # Cancelled by seller or admin

# ==========================================
# AUCTION MODEL
# ==========================================

class Auction(SQLModel, table=True):
    """
    A timed bidding process for transferring a player between clubs.
    The countdown starts at scheduled_start_time and lasts countdown_minutes.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    server_id: int = Field(foreign_key="server.id")
    player_id: int = Field(foreign_key="player.id")
    seller_club_id: Optional[int] = Field(default=None, foreign_key="club.id")

    status: AuctionStatus = Field(default=AuctionStatus.SCHEDULED)
    starting_bid: int
    current_bid: int = Field(default=0, description="Current highest bid")
    current_bidder_id: Optional[int] = Field(default=None, foreign_key="club.id")

    scheduled_start_time: datetime
    countdown_minutes: int = Field(default=60)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

# ==========================================
# AUCTION BID MODEL
# ==========================================

class AuctionBid(SQLModel, table=True):
    """Individual bid placed on an auction. Append-only."""
    id: Optional[int] = Field(default=None, primary_key=True)
    auction_id: int = Field(foreign_key="auction.id")
    club_id: int = Field(foreign_key="club.id")
    bid_amount: int
    created_at: datetime = Field(default_factory=utc_now)

# ==========================================
# SNAPSHOTS FOR CORE RULES
# ==========================================

class BidRecord(BaseModel):
    id: int
    club_id: int
    auction_id: int
    bid_amount: float
    created_at: datetime

    class Config:
        from_attributes = True


class AuctionSnapshot(BaseModel):
    id: int
    status: AuctionStatus
    starting_bid: float
    current_bid: float
    scheduled_start_time: datetime
    countdown_minutes: int
    player: PlayerSnapshot
    seller_club_id: Optional[int] = None
    current_bidder_id: Optional[int] = None
    bids: List[BidRecord] = []

# ==========================================
# PYDANTIC SCHEMAS FOR API
# ==========================================

class PlaceBidRequest(BaseModel):
    """Schema for placing (or dry-running) a bid on an auction"""
    club_id: int
    amount: int = Field(gt=0, description="Bid amount, must be positive")


class BidRead(BaseModel):
    id: int
    club_id: int
    bid_amount: int
    created_at: datetime

    class Config:
        from_attributes = True


class AuctionCountdownRead(BaseModel):
    hours: int
    minutes: int
    seconds: int
    is_started: bool
    is_finished: bool
    formatted_time: str
    end_time: datetime


class AuctionAnalyticsRead(BaseModel):
    total_bids: int
    unique_bidders: int
    average_bid_increment: float
    bid_frequency: float
    price_volatility: float


class AuctionRead(BaseModel):
    """Schema for returning auction information"""
    id: int
    server_id: int
    player_id: int
    player_name: str
    seller_club_id: Optional[int]
    status: AuctionStatus
    starting_bid: int
    current_bid: int
    current_bidder_id: Optional[int]
    bid_count: int
    next_bid_suggestion: float
    countdown: AuctionCountdownRead
