from fastapi import APIRouter, Depends
from sqlmodel import Session

from footix_manager.core.bidding import check_market_value
from footix_manager.core.database import get_session
from footix_manager.core.errors import ApiError
from footix_manager.models.player_model import Player, MarketValueRead
from footix_manager.services.snapshots import player_snapshot

router = APIRouter()


@router.get("/{player_id}/market-value", response_model=MarketValueRead)
def get_player_market_value(player_id: int, session: Session = Depends(get_session)):
    """Market value of a player and the bid band auctions accept for the player."""
    player = session.get(Player, player_id)
    if not player:
        raise ApiError(message="Player not found", code="PLAYER_NOT_FOUND")

    # The band does not depend on the bid amount
    band = check_market_value(player_snapshot(player), 0)
    return MarketValueRead(
        player_id=player.id,
        name=player.name,
        salary=player.salary,
        market_value_multiplier=player.market_value_multiplier,
        market_value=band.market_value,
        min_bid=band.min_allowed,
        max_bid=band.max_allowed,
    )
