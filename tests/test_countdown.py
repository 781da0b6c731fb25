"""
Unit tests for the auction countdown.
"""

from datetime import datetime, timedelta, timezone

from footix_manager.core.countdown import compute_countdown, auction_end_time, utc_now
from footix_manager.models import Auction, AuctionStatus, Player, Server

START = datetime(2026, 1, 1, 12, 0, 0)


class TestCountdown:
    def test_before_start_counts_to_start(self):
        countdown = compute_countdown(START, 60, now=datetime(2026, 1, 1, 10, 29, 15))

        assert not countdown.is_started
        assert not countdown.is_finished
        assert (countdown.hours, countdown.minutes, countdown.seconds) == (1, 30, 45)
        assert countdown.formatted_time == "01:30:45"

    def test_running_counts_to_end(self):
        countdown = compute_countdown(START, 60, now=datetime(2026, 1, 1, 12, 15, 0))

        assert countdown.is_started
        assert not countdown.is_finished
        assert countdown.formatted_time == "00:45:00"

    def test_finished(self):
        countdown = compute_countdown(START, 60, now=datetime(2026, 1, 1, 13, 0, 0))

        assert countdown.is_started
        assert countdown.is_finished
        assert countdown.formatted_time == "00:00:00"

    def test_end_time(self):
        end = auction_end_time(START, 90)

        assert end == datetime(2026, 1, 1, 13, 30, tzinfo=timezone.utc)
        assert compute_countdown(START, 90, now=START).end_time == end

    def test_aware_and_naive_times_mix(self):
        now = datetime(2026, 1, 1, 12, 30, 0, tzinfo=timezone.utc)

        assert compute_countdown(START, 60, now=now).formatted_time == "00:30:00"


class TestStoredTimestamps:
    def test_utc_now_is_aware(self):
        assert utc_now().tzinfo is not None

    def test_stored_start_time_reads_back_into_countdown(self, session):
        server = Server(name="Clock Server")
        session.add(server)
        session.commit()
        session.refresh(server)

        player = Player(
            server_id=server.id, name="Enzo Simon", position="CM", overall=70, potential=75,
            nationality="FR", age=22, market_value_multiplier=20, salary=30_000, clause_value=600_000,
        )
        session.add(player)
        session.commit()
        session.refresh(player)

        start = utc_now() - timedelta(minutes=15)
        auction = Auction(
            server_id=server.id,
            player_id=player.id,
            status=AuctionStatus.ACTIVE,
            starting_bid=600_000,
            current_bid=600_000,
            scheduled_start_time=start,
            countdown_minutes=60,
        )
        session.add(auction)
        session.commit()
        session.expire_all()

        stored = session.get(Auction, auction.id)
        countdown = compute_countdown(
            stored.scheduled_start_time, stored.countdown_minutes, now=start + timedelta(minutes=15)
        )

        assert server.created_at is not None
        assert countdown.is_started and not countdown.is_finished
        assert countdown.formatted_time == "00:45:00"
