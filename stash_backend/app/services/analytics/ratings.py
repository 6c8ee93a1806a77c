# stash_backend/app/services/analytics/ratings.py
from __future__ import annotations

from typing import Iterable, Optional

from stash_backend.app.schemas import Session
from .common import mean, round1

NO_RATINGS = "no ratings"


def product_average_rating(product_id: str, sessions: Iterable[Session]) -> Optional[float]:
    """
    Mean overall_rating of one product's sessions, one decimal.
    None when the product has no sessions.
    """
    avg = mean([s.overall_rating for s in sessions if s.product_id == product_id])
    return None if avg is None else round1(avg)

def overall_average_rating(sessions: Iterable[Session]) -> Optional[float]:
    avg = mean([s.overall_rating for s in sessions])
    return None if avg is None else round1(avg)

def rating_label(avg: Optional[float]) -> str:
    return NO_RATINGS if avg is None else f"{avg:.1f}"
