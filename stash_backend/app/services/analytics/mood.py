# stash_backend/app/services/analytics/mood.py
from __future__ import annotations

from typing import Iterable

from stash_backend.app.schemas import Mood, MoodTrend, Session

TREND_LIMIT = 10


def _label(s: Session) -> str:
    d = s.date_time_used
    return f"{d:%b} {d.day}"

def mood_trend(sessions: Iterable[Session], limit: int = TREND_LIMIT) -> MoodTrend:
    """Before/after mood scores of the latest `limit` sessions, oldest first."""
    ordered = sorted(sessions, key=lambda s: s.date_time_used)
    recent = ordered[-limit:] if limit > 0 else []
    return MoodTrend(
        labels=[_label(s) for s in recent],
        before=[Mood.score_of(s.mood_before) for s in recent],
        after=[Mood.score_of(s.mood_after) for s in recent],
    )
