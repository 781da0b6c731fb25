# footix_manager/core/auction_stats.py
# Read-only analytics over an auction's ordered bid history.

import math
from dataclasses import dataclass
from typing import List, Sequence

from footix_manager.models.auction_model import AuctionSnapshot, BidRecord


@dataclass(frozen=True)
class AuctionAnalytics:
    total_bids: int
    unique_bidders: int
    average_bid_increment: float
    bid_frequency: float
    price_volatility: float


def _increments(bids: Sequence[BidRecord]) -> List[float]:
    return [current.bid_amount - previous.bid_amount for previous, current in zip(bids, bids[1:])]


def unique_bidders(bids: Sequence[BidRecord]) -> int:
    return len({bid.club_id for bid in bids})


def average_bid_increment(bids: Sequence[BidRecord]) -> float:
    if len(bids) < 2:
        return 0
    increments = _increments(bids)
    return sum(increments) / len(increments)


def bid_frequency(bids: Sequence[BidRecord]) -> float:
    """Bids per minute between the first and the last bid."""
    if len(bids) < 2:
        return 0
    minutes = (bids[-1].created_at - bids[0].created_at).total_seconds() / 60
    if minutes <= 0:
        return 0
    return len(bids) / minutes


def price_volatility(bids: Sequence[BidRecord]) -> float:
    """Population standard deviation of the increments."""
    if len(bids) < 2:
        return 0
    increments = _increments(bids)
    mean = sum(increments) / len(increments)
    variance = sum((increment - mean) ** 2 for increment in increments) / len(increments)
    return math.sqrt(variance)


def analyze_auction_history(auction: AuctionSnapshot) -> AuctionAnalytics:
    bids = list(auction.bids)
    return AuctionAnalytics(
        total_bids=len(bids),
        unique_bidders=unique_bidders(bids),
        average_bid_increment=average_bid_increment(bids),
        bid_frequency=bid_frequency(bids),
        price_volatility=price_volatility(bids),
    )
