# stash_backend/app/services/analytics/usage.py
from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Optional

from stash_backend.app.schemas import CategoryStat, Product, Session, WeeklyUsage, as_utc, utc_now
from .common import resolved

WINDOW_DAYS = 7
_DAY_S = 24 * 60 * 60
_WEEKDAY_LETTERS = ("M", "T", "W", "T", "F", "S", "S")  # Monday first, like date.weekday()


def weekly_usage(sessions: Iterable[Session], now: Optional[datetime] = None) -> WeeklyUsage:
    """
    Session counts for today and the six days before it; counts[6] is today.
    The bucket is the whole-day distance from `now`, so anything 7+ days
    away falls out.
    """
    now = as_utc(now or utc_now())
    counts = [0] * WINDOW_DAYS
    for s in sessions:
        diff_days = math.floor(abs((now - s.date_time_used).total_seconds()) / _DAY_S)
        if diff_days < WINDOW_DAYS:
            counts[WINDOW_DAYS - 1 - diff_days] += 1

    labels = [
        _WEEKDAY_LETTERS[(now - timedelta(days=i)).weekday()]
        for i in range(WINDOW_DAYS - 1, -1, -1)
    ]
    return WeeklyUsage(counts=counts, labels=labels)


def category_breakdown(products: Iterable[Product], sessions: Iterable[Session]) -> List[CategoryStat]:
    counts: Dict[str, int] = {}
    total = 0
    for _, p in resolved(products, sessions):
        counts[p.category.value] = counts.get(p.category.value, 0) + 1
        total += 1

    rows = [
        CategoryStat(category=cat, count=n, percentage=n / total * 100)
        for cat, n in counts.items()
    ]
    rows.sort(key=lambda r: r.count, reverse=True)
    return rows
