# seed_all.py
# Populates an empty database with one demo server: clubs, players, a league and auctions.

import logging
import random
from datetime import date, timedelta

from sqlmodel import select

from footix_manager.core.countdown import utc_now
from footix_manager.core.database import get_sync_session
from footix_manager.core.standings import DEFAULT_TIE_BREAK_ORDER
from footix_manager.models.auction_model import Auction, AuctionStatus
from footix_manager.models.club_model import Club
from footix_manager.models.competition_model import Competition, CompetitionClub
from footix_manager.models.player_model import Player
from footix_manager.models.server_model import Server

logger = logging.getLogger(__name__)

CLUB_NAMES = [
    "Olympique Footix", "Racing Lumière", "AS Mistral", "FC Garonne",
    "Stade Armor", "US Cévennes", "Sporting Vosges", "Union Camargue",
]
POSITIONS = ["GK", "CB", "LB", "RB", "CDM", "CM", "CAM", "LW", "RW", "ST"]
NATIONALITIES = ["FR", "BR", "AR", "PT", "ES", "SN", "CI", "BE"]
FIRST_NAMES = ["Lucas", "Mathis", "Enzo", "Hugo", "Théo", "Nolan", "Rayan", "Yanis", "Kylian", "Adam"]
LAST_NAMES = ["Martin", "Bernard", "Dubois", "Moreau", "Laurent", "Simon", "Michel", "Lefebvre", "Roux", "Fournier"]

PLAYERS_PER_CLUB = 14
FREE_AGENTS = 6


def make_player(server_id: int, club_id=None) -> Player:
    overall = random.randint(55, 88)
    salary = random.randint(10, 120) * 1_000
    start = date.today() - timedelta(days=random.randint(0, 700))
    return Player(
        server_id=server_id,
        club_id=club_id,
        name=f"{random.choice(FIRST_NAMES)} {random.choice(LAST_NAMES)}",
        position=random.choice(POSITIONS),
        overall=overall,
        potential=min(99, overall + random.randint(0, 12)),
        nationality=random.choice(NATIONALITIES),
        age=random.randint(17, 35),
        market_value_multiplier=round(random.uniform(12, 36), 1),
        salary=salary,
        clause_value=salary * 40,
        contract_start=start,
        contract_end=start + timedelta(days=365 * random.randint(1, 5)),
    )


def seed_all(seed: int = 42):
    random.seed(seed)
    logger.info("Starting demo database seeding")

    with get_sync_session() as session:
        if session.exec(select(Server)).first():
            logger.info("Database already seeded, skipping")
            return

        # Step 1: server
        server = Server(name="Footix Demo", season=1)
        session.add(server)
        session.commit()
        session.refresh(server)

        # Step 2: clubs with rosters
        clubs = []
        for name in CLUB_NAMES:
            club = Club(
                server_id=server.id,
                name=name,
                balance=random.randint(20, 80) * 1_000_000,
                salary_cap=1_500_000,
                reputation=random.randint(40, 120),
            )
            session.add(club)
            clubs.append(club)
        session.commit()

        for club in clubs:
            session.refresh(club)
            for _ in range(PLAYERS_PER_CLUB):
                session.add(make_player(server.id, club.id))
        logger.info("Seeded %s clubs with %s players each", len(clubs), PLAYERS_PER_CLUB)

        # Step 3: league with two groups
        league = Competition(
            server_id=server.id,
            name="Ligue Footix",
            season=server.season,
            tie_break_order=list(DEFAULT_TIE_BREAK_ORDER),
        )
        session.add(league)
        session.commit()
        session.refresh(league)

        for index, club in enumerate(clubs):
            wins, draws, losses = random.randint(0, 10), random.randint(0, 5), random.randint(0, 10)
            session.add(CompetitionClub(
                competition_id=league.id,
                club_id=club.id,
                group="A" if index % 2 == 0 else "B",
                points=wins * league.points_win + draws * league.points_draw,
                goals_for=random.randint(5, 40),
                goals_against=random.randint(5, 40),
                wins=wins,
                draws=draws,
                losses=losses,
            ))

        # Step 4: auctions for free agents, one already running
        now = utc_now()
        for index in range(FREE_AGENTS):
            player = make_player(server.id)
            session.add(player)
            session.commit()
            session.refresh(player)

            starting_bid = int(player.salary * player.market_value_multiplier)
            running = index == 0
            session.add(Auction(
                server_id=server.id,
                player_id=player.id,
                status=AuctionStatus.ACTIVE if running else AuctionStatus.SCHEDULED,
                starting_bid=starting_bid,
                current_bid=starting_bid,
                scheduled_start_time=now if running else now + timedelta(hours=index),
                countdown_minutes=60,
            ))

        session.commit()

    logger.info("Demo database seeding complete")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    seed_all()
