"""Vote leaderboard over a time window."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from loguru import logger

from ..core.time import utcnow
from ..store import DocumentStore


@dataclass(frozen=True)
class LeaderboardEntry:
    user_name: str
    total_votes: int
    debates_participated: int


def _start_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def _one_month_earlier(day: datetime) -> datetime:
    year, month = (day.year, day.month - 1) if day.month > 1 else (day.year - 1, 12)
    last_day = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, last_day))


def window_start(filter_name: Optional[str], now: Optional[datetime] = None) -> Optional[datetime]:
    """Lower bound for ``filter_name``; ``None`` means no bound.

    Windows start at midnight, counted in calendar days/months from ``now``.
    Unknown filters behave like ``all``.
    """

    today = _start_of_day(now or utcnow())
    if filter_name == "weekly":
        return today - timedelta(days=7)
    if filter_name == "monthly":
        return _one_month_earlier(today)
    return None


def leaderboard(
    store: DocumentStore, filter_name: Optional[str] = "all", now: Optional[datetime] = None
) -> List[LeaderboardEntry]:
    """Rank users by votes received within the filter window."""

    since = window_start(filter_name, now)
    totals = store.vote_totals(since)
    logger.debug("Leaderboard {} since {}: {} users", filter_name or "all", since, len(totals))
    return [
        LeaderboardEntry(
            user_name=total.user_name,
            total_votes=total.total_votes,
            debates_participated=total.debates_participated,
        )
        for total in totals
    ]


def entry_to_dict(entry: LeaderboardEntry) -> Dict[str, Any]:
    return {
        "_id": entry.user_name,
        "userName": entry.user_name,
        "totalVotes": entry.total_votes,
        "debatesParticipated": entry.debates_participated,
    }


__all__ = ["LeaderboardEntry", "entry_to_dict", "leaderboard", "window_start"]
