# footix_manager/core/countdown.py
"""
Auction countdown.

An auction opens at its scheduled start time and closes countdown_minutes later.
Before it opens the countdown runs towards the start; while it is open it runs
towards the end; afterwards it sits at 00:00:00 and is finished.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional


def utc_now() -> datetime:
    """Timezone-aware UTC timestamp."""
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    # SQLite may hand back naive values; they were written as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class AuctionCountdown:
    hours: int
    minutes: int
    seconds: int
    is_started: bool
    is_finished: bool
    formatted_time: str
    end_time: datetime


def _split(diff: timedelta):
    total = max(0, int(diff.total_seconds()))
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return hours, minutes, seconds


def auction_end_time(scheduled_start_time: datetime, countdown_minutes: int) -> datetime:
    return _as_utc(scheduled_start_time) + timedelta(minutes=countdown_minutes)


def compute_countdown(
    scheduled_start_time: datetime,
    countdown_minutes: int,
    now: Optional[datetime] = None,
) -> AuctionCountdown:
    start = _as_utc(scheduled_start_time)
    end = auction_end_time(scheduled_start_time, countdown_minutes)
    now = _as_utc(now) if now is not None else datetime.now(timezone.utc)

    if now < start:
        hours, minutes, seconds = _split(start - now)
        started, finished = False, False
    elif now >= end:
        hours, minutes, seconds = 0, 0, 0
        started, finished = True, True
    else:
        hours, minutes, seconds = _split(end - now)
        started, finished = True, False

    return AuctionCountdown(
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        is_started=started,
        is_finished=finished,
        formatted_time=f"{hours:02d}:{minutes:02d}:{seconds:02d}",
        end_time=end,
    )
