# footix_manager/services/snapshots.py
# Converts stored rows into the read-only snapshots the rules core works on.

from typing import Iterable, List

from sqlmodel import Session, select

from footix_manager.core.errors import ApiError
from footix_manager.models.auction_model import Auction, AuctionBid, AuctionSnapshot, BidRecord
from footix_manager.models.club_model import Club, ClubSnapshot
from footix_manager.models.player_model import Player, PlayerSnapshot, ContractTerms


def player_snapshot(player: Player) -> PlayerSnapshot:
    return PlayerSnapshot(
        id=player.id,
        name=player.name,
        position=player.position,
        overall=player.overall,
        potential=player.potential,
        nationality=player.nationality,
        age=player.age,
        market_value_multiplier=player.market_value_multiplier,
        contract=ContractTerms(
            salary=player.salary,
            clause_value=player.clause_value,
            contract_start=player.contract_start,
            contract_end=player.contract_end,
        ),
    )


def club_snapshot(session: Session, club: Club) -> ClubSnapshot:
    """Club with its current roster."""
    roster = session.exec(select(Player).where(Player.club_id == club.id)).all()
    return ClubSnapshot(
        id=club.id,
        name=club.name,
        balance=club.balance,
        salary_cap=club.salary_cap,
        players=[player_snapshot(p) for p in roster],
        reputation=club.reputation,
        logo_url=club.logo_url,
    )


def bid_records(bids: Iterable[AuctionBid]) -> List[BidRecord]:
    return [BidRecord.model_validate(bid) for bid in bids]


def auction_bids(session: Session, auction_id: int) -> List[AuctionBid]:
    """Bid history, oldest first."""
    return session.exec(
        select(AuctionBid)
        .where(AuctionBid.auction_id == auction_id)
        .order_by(AuctionBid.created_at, AuctionBid.id)
    ).all()


def auction_snapshot(session: Session, auction: Auction) -> AuctionSnapshot:
    player = session.get(Player, auction.player_id)
    if not player:
        raise ApiError(message="Player not found", code="PLAYER_NOT_FOUND")
    return AuctionSnapshot(
        id=auction.id,
        status=auction.status,
        starting_bid=auction.starting_bid,
        current_bid=auction.current_bid,
        scheduled_start_time=auction.scheduled_start_time,
        countdown_minutes=auction.countdown_minutes,
        player=player_snapshot(player),
        seller_club_id=auction.seller_club_id,
        current_bidder_id=auction.current_bidder_id,
        bids=bid_records(auction_bids(session, auction.id)),
    )
