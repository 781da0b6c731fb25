# footix_manager/routes/auction_routes.py
# API routes for server auctions: listing, details, bid validation and bidding

import logging
from dataclasses import asdict
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from footix_manager.core.auction_stats import analyze_auction_history
from footix_manager.core.bidding import validate_bid, next_bid_amount
from footix_manager.core.config import BID_HISTORY_LIMIT
from footix_manager.core.countdown import compute_countdown, utc_now
from footix_manager.core.database import get_session
from footix_manager.core.errors import ApiError
from footix_manager.models.auction_model import (
    Auction, AuctionBid, AuctionStatus, PlaceBidRequest, BidRead,
    AuctionCountdownRead, AuctionAnalyticsRead, AuctionRead
)
from footix_manager.models.club_model import Club, ClubSummary
from footix_manager.models.player_model import Player
from footix_manager.services.snapshots import (
    auction_bids, auction_snapshot, bid_records, club_snapshot, player_snapshot
)

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------
# Helpers
# ---------------------------------------------
def get_server_auction(session: Session, server_id: int, auction_id: int) -> Auction:
    auction = session.get(Auction, auction_id)
    if not auction or auction.server_id != server_id:
        raise ApiError(message="Auction not found", code="AUCTION_NOT_FOUND")
    return auction


def get_server_club(session: Session, server_id: int, club_id: int) -> Club:
    club = session.get(Club, club_id)
    if not club or club.server_id != server_id:
        raise ApiError(message="You need a club on this server to bid", code="CLUB_NOT_FOUND")
    return club


def countdown_read(auction: Auction) -> AuctionCountdownRead:
    countdown = compute_countdown(auction.scheduled_start_time, auction.countdown_minutes)
    return AuctionCountdownRead(**asdict(countdown))


def auction_read(session: Session, auction: Auction) -> AuctionRead:
    player = session.get(Player, auction.player_id)
    bid_count = len(auction_bids(session, auction.id))
    return AuctionRead(
        id=auction.id,
        server_id=auction.server_id,
        player_id=auction.player_id,
        player_name=player.name if player else "Unknown player",
        seller_club_id=auction.seller_club_id,
        status=auction.status,
        starting_bid=auction.starting_bid,
        current_bid=auction.current_bid,
        current_bidder_id=auction.current_bidder_id,
        bid_count=bid_count,
        next_bid_suggestion=next_bid_amount(auction.current_bid or auction.starting_bid, bid_count),
        countdown=countdown_read(auction),
    )


def minimum_bid(auction: Auction, has_bids: bool) -> int:
    """
    The first bid may equal the starting bid, so an auction can sell at its
    opening price. Every later bid must beat the current one.
    """
    return auction.current_bid + 1 if has_bids else auction.starting_bid


# =========================================
# LIST AUCTIONS
# =========================================
@router.get("/{server_id}/auctions", response_model=List[AuctionRead])
def list_auctions(
    server_id: int,
    status: Optional[AuctionStatus] = None,
    session: Session = Depends(get_session)
):
    """
    All auctions on a server, optionally filtered by status.
    Sorted by scheduled start time (soonest first).
    """
    query = select(Auction).where(Auction.server_id == server_id)
    if status:
        query = query.where(Auction.status == status)

    auctions = session.exec(query.order_by(Auction.scheduled_start_time, Auction.id)).all()
    return [auction_read(session, auction) for auction in auctions]


# =========================================
# AUCTION DETAILS
# =========================================
@router.get("/{server_id}/auctions/{auction_id}")
def get_auction_details(
    server_id: int,
    auction_id: int,
    session: Session = Depends(get_session)
):
    """
    Auction details: player, recent bids (newest first), countdown,
    history analytics and the suggested next bid.
    """
    auction = get_server_auction(session, server_id, auction_id)
    snapshot = auction_snapshot(session, auction)
    analytics = analyze_auction_history(snapshot)

    seller = session.get(Club, auction.seller_club_id) if auction.seller_club_id else None
    bidder = session.get(Club, auction.current_bidder_id) if auction.current_bidder_id else None
    recent_bids = list(reversed(auction_bids(session, auction.id)))[:BID_HISTORY_LIMIT]

    return {
        "auction": auction_read(session, auction),
        "player": snapshot.player,
        "seller_club": ClubSummary.model_validate(seller) if seller else None,
        "current_bidder": ClubSummary.model_validate(bidder) if bidder else None,
        "bids": [BidRead.model_validate(bid) for bid in recent_bids],
        "analytics": AuctionAnalyticsRead(**asdict(analytics)),
    }


@router.get("/{server_id}/auctions/{auction_id}/stats", response_model=AuctionAnalyticsRead)
def get_auction_stats(
    server_id: int,
    auction_id: int,
    session: Session = Depends(get_session)
):
    """Bid history analytics only."""
    auction = get_server_auction(session, server_id, auction_id)
    analytics = analyze_auction_history(auction_snapshot(session, auction))
    return AuctionAnalyticsRead(**asdict(analytics))


# =========================================
# BID VALIDATION (DRY RUN)
# =========================================
@router.post("/{server_id}/auctions/{auction_id}/bid/validate")
def validate_auction_bid(
    server_id: int,
    auction_id: int,
    request: PlaceBidRequest,
    session: Session = Depends(get_session)
):
    """
    Run every bid rule without placing the bid.
    Returns each rule's outcome so the UI can show blocking errors and warnings.
    """
    auction = get_server_auction(session, server_id, auction_id)
    club = get_server_club(session, server_id, request.club_id)
    player = session.get(Player, auction.player_id)
    if not player:
        raise ApiError(message="Player not found", code="PLAYER_NOT_FOUND")

    history = auction_bids(session, auction.id)
    result = validate_bid(
        club_snapshot(session, club),
        player_snapshot(player),
        request.amount,
        bid_records(history),
    )

    return {
        "valid": result.is_valid,
        "blocking_errors": result.blocking_errors,
        "warnings": result.warnings,
        "checks": result.model_dump(),
        "next_bid_suggestion": next_bid_amount(auction.current_bid or auction.starting_bid, len(history)),
    }


# =========================================
# PLACE BID
# =========================================
@router.post("/{server_id}/auctions/{auction_id}/bid")
def place_bid(
    server_id: int,
    auction_id: int,
    request: PlaceBidRequest,
    session: Session = Depends(get_session)
):
    """
    Place a bid on an active auction.
    Hard rule failures reject the bid; a salary-cap overrun is returned as a warning.
    """
    auction = get_server_auction(session, server_id, auction_id)

    if auction.status != AuctionStatus.ACTIVE:
        raise ApiError(message="This auction is not active", code="AUCTION_NOT_ACTIVE")

    history = auction_bids(session, auction.id)
    min_bid = minimum_bid(auction, has_bids=bool(history))
    if request.amount < min_bid:
        raise ApiError(
            message=f"Bid must be at least {min_bid:,}",
            code="BID_TOO_LOW",
            details={"min_bid_amount": min_bid},
        )

    club = get_server_club(session, server_id, request.club_id)

    if auction.seller_club_id == club.id:
        raise ApiError(message="You cannot bid on your own auction", code="OWN_AUCTION_BID")

    if auction.current_bidder_id == club.id:
        raise ApiError(message="You already hold the highest bid", code="ALREADY_HIGHEST_BID")

    player = session.get(Player, auction.player_id)
    if not player:
        raise ApiError(message="Player not found", code="PLAYER_NOT_FOUND")

    result = validate_bid(
        club_snapshot(session, club),
        player_snapshot(player),
        request.amount,
        bid_records(history),
    )

    if not result.is_valid:
        logger.warning(
            "Bid of %s by club %s on auction %s rejected: %s",
            request.amount, club.id, auction.id, ", ".join(result.blocking_errors),
        )
        raise ApiError(
            message="Bid rejected by auction rules",
            code=result.blocking_errors[0],
            details={"blocking_errors": result.blocking_errors, "checks": result.model_dump()},
        )

    # Record the bid and move the auction forward in one commit
    bid = AuctionBid(auction_id=auction.id, club_id=club.id, bid_amount=request.amount)
    auction.current_bid = request.amount
    auction.current_bidder_id = club.id
    auction.updated_at = utc_now()

    try:
        session.add(bid)
        session.add(auction)
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception("Failed to record bid on auction %s", auction.id)
        raise ApiError(
            message="Could not place the bid. Try again later.",
            code="TRANSACTION_ERROR",
            details=str(e),
        )

    session.refresh(bid)
    logger.info("Club %s bid %s on auction %s", club.id, request.amount, auction.id)

    recent_bids = list(reversed(auction_bids(session, auction.id)))[:BID_HISTORY_LIMIT]
    response = {
        "success": True,
        "message": "Bid placed successfully",
        "data": {
            "bid_id": bid.id,
            "current_bid": auction.current_bid,
            "current_bidder": {"id": club.id, "name": club.name},
            "bid_history": [BidRead.model_validate(b) for b in recent_bids],
            "next_bid_suggestion": next_bid_amount(auction.current_bid, len(history) + 1),
        },
    }
    if result.warnings:
        response["warnings"] = result.warnings

    return response
