# stash_backend/app/services/analytics/compounds.py
from __future__ import annotations

from typing import Dict, Iterable, List

from stash_backend.app.schemas import CompoundCount, Product, Session
from .common import resolved

COMPOUND_LIMIT = 5
HIGH_RATING = 8


def top_compounds(products: Iterable[Product], sessions: Iterable[Session],
                  limit: int = COMPOUND_LIMIT, min_rating: int = HIGH_RATING) -> List[CompoundCount]:
    """
    Terpene names most often present on products behind sessions rated
    `min_rating`+. One count per terpene entry per qualifying session.
    """
    high = [s for s in sessions if s.overall_rating >= min_rating]
    counts: Dict[str, int] = {}
    for _, p in resolved(products, high):
        for t in p.terpenes:
            counts[t.name] = counts.get(t.name, 0) + 1

    # sorted() is stable, so equal counts keep first-seen order
    ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    return [CompoundCount(name=name, count=n) for name, n in ranked[:limit]]
