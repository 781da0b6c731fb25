"""
Pytest configuration and shared fixtures.

Provides:
- An in-memory SQLite session shared with the FastAPI app
- A TestClient wired to that session
- Snapshot factories for the pure rules tests
- A small auction world (server, clubs, player, active auction)
"""

import os
import tempfile

# Keep the app's default database file out of the source tree
os.environ.setdefault("FOOTIX_DATABASE_PATH", os.path.join(tempfile.gettempdir(), "footix_test.db"))

from datetime import datetime, timedelta  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel, Session, create_engine  # noqa: E402

from footix_manager.core.countdown import utc_now  # noqa: E402
from footix_manager.core.database import get_session  # noqa: E402
from footix_manager.main import app  # noqa: E402
from footix_manager.models import (  # noqa: E402
    Auction, AuctionStatus, BidRecord, Club, ClubSnapshot, ContractTerms,
    Player, PlayerSnapshot, Server,
)


# ============================================================================
# DATABASE FIXTURES
# ============================================================================

@pytest.fixture
def session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as s:
        yield s
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def client(session):
    def override_get_session():
        yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


# ============================================================================
# SNAPSHOT FACTORIES
# ============================================================================

@pytest.fixture
def make_player():
    def _make(id=1, salary=50_000, multiplier=24, overall=80, potential=85, **kwargs):
        return PlayerSnapshot(
            id=id,
            name=kwargs.pop("name", f"Player {id}"),
            position=kwargs.pop("position", "ST"),
            overall=overall,
            potential=potential,
            nationality=kwargs.pop("nationality", "FR"),
            age=kwargs.pop("age", 24),
            market_value_multiplier=multiplier,
            contract=ContractTerms(salary=salary, clause_value=salary * 40),
        )
    return _make


@pytest.fixture
def make_club(make_player):
    def _make(id=1, balance=2_000_000, salary_cap=120_000, salaries=(100_000,)):
        roster = [make_player(id=100 + i, salary=s) for i, s in enumerate(salaries)]
        return ClubSnapshot(
            id=id,
            name=f"Club {id}",
            balance=balance,
            salary_cap=salary_cap,
            players=roster,
        )
    return _make


@pytest.fixture
def make_bid():
    start = datetime(2026, 1, 1, 12, 0, 0)

    def _make(club_id, amount, minute=0, id=None, auction_id=1):
        return BidRecord(
            id=id if id is not None else int(minute * 100 + club_id),
            club_id=club_id,
            auction_id=auction_id,
            bid_amount=amount,
            created_at=start + timedelta(minutes=minute),
        )
    return _make


# ============================================================================
# AUCTION WORLD
# ============================================================================

@pytest.fixture
def world(session):
    """
    Seller FC auctions a striker worth 1,656,000 (bid band 1,159,200 - 2,484,000).
    Buyer FC: balance 2,000,000, cap 120,000, one player on 100,000.
    Rival FC: rich, plenty of cap room.
    Poor FC: balance 1,000,000.
    """
    server = Server(name="Test Server")
    session.add(server)
    session.commit()
    session.refresh(server)

    seller = Club(server_id=server.id, name="Seller FC", balance=5_000_000, salary_cap=1_000_000)
    buyer = Club(server_id=server.id, name="Buyer FC", balance=2_000_000, salary_cap=120_000, reputation=100)
    rival = Club(server_id=server.id, name="Rival FC", balance=10_000_000, salary_cap=10_000_000)
    poor = Club(server_id=server.id, name="Poor FC", balance=1_000_000, salary_cap=10_000_000)
    for club in (seller, buyer, rival, poor):
        session.add(club)
    session.commit()
    for club in (seller, buyer, rival, poor):
        session.refresh(club)

    striker = Player(
        server_id=server.id, club_id=seller.id, name="Kylian Martin", position="ST",
        overall=80, potential=85, nationality="FR", age=23,
        market_value_multiplier=24, salary=50_000, clause_value=2_000_000,
    )
    veteran = Player(
        server_id=server.id, club_id=buyer.id, name="Hugo Roux", position="CB",
        overall=74, potential=74, nationality="FR", age=31,
        market_value_multiplier=12, salary=100_000, clause_value=1_000_000,
    )
    session.add(striker)
    session.add(veteran)
    session.commit()
    session.refresh(striker)

    auction = Auction(
        server_id=server.id,
        player_id=striker.id,
        seller_club_id=seller.id,
        status=AuctionStatus.ACTIVE,
        starting_bid=1_200_000,
        current_bid=1_200_000,
        scheduled_start_time=utc_now() - timedelta(minutes=10),
        countdown_minutes=60,
    )
    session.add(auction)
    session.commit()
    session.refresh(auction)

    return {
        "server": server,
        "seller": seller,
        "buyer": buyer,
        "rival": rival,
        "poor": poor,
        "striker": striker,
        "auction": auction,
    }


@pytest.fixture
def bid_url(world):
    return f"/servers/{world['server'].id}/auctions/{world['auction'].id}/bid"
