# stash_backend/app/services/analytics/tags.py
"""
Tag rankings.

`tag_effectiveness` ranks tags by the mean rating of every session logged
against any product carrying the tag, and names the best product per tag.
`recommendations` picks, per tag, the best product outright and keeps the
ones averaging 7 or more.

Both break ties by iteration order (first product / first tag seen wins),
and neither can emit a tag/product pair with zero sessions.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from stash_backend.app.schemas import Product, Recommendation, Session, TagStat
from .common import index_products, resolved

TAG_LIMIT = 5
RECOMMENDATION_LIMIT = 4
RECOMMEND_MIN_RATING = 7.0


class _Acc:
    __slots__ = ("total", "count")

    def __init__(self) -> None:
        self.total = 0.0
        self.count = 0

    def add(self, rating: float) -> None:
        self.total += rating
        self.count += 1

    @property
    def avg(self) -> float:
        return self.total / self.count


def _best(per_product: Dict[str, _Acc]) -> Tuple[Optional[str], float]:
    # strictly greater: the first product reaching the top mean keeps it
    best_id: Optional[str] = None
    best_avg = 0.0
    for pid, acc in per_product.items():
        if acc.count and acc.avg > best_avg:
            best_id, best_avg = pid, acc.avg
    return best_id, best_avg


def tag_effectiveness(products: Iterable[Product], sessions: Iterable[Session],
                      limit: int = TAG_LIMIT) -> List[TagStat]:
    products = list(products)
    by_id = index_products(products)

    stats: Dict[str, _Acc] = {}
    per_tag_products: Dict[str, Dict[str, _Acc]] = {}
    for s, p in resolved(products, sessions):
        # tags are not deduplicated; a repeated tag counts the session twice
        for tag in p.tags:
            stats.setdefault(tag, _Acc()).add(s.overall_rating)
            per_tag_products.setdefault(tag, {}).setdefault(p.id, _Acc()).add(s.overall_rating)

    rows: List[TagStat] = []
    for tag, acc in stats.items():
        best_id, _ = _best(per_tag_products[tag])
        rows.append(TagStat(
            tag=tag,
            avg=acc.avg,
            count=acc.count,
            top_product=by_id.get(best_id) if best_id else None,
        ))
    rows.sort(key=lambda r: r.avg, reverse=True)
    return rows[:limit]


def recommendations(products: Iterable[Product], sessions: Iterable[Session],
                    limit: int = RECOMMENDATION_LIMIT,
                    min_rating: float = RECOMMEND_MIN_RATING) -> List[Recommendation]:
    products = list(products)
    sessions = list(sessions)

    per_product: Dict[str, _Acc] = {}
    for s in sessions:
        per_product.setdefault(s.product_id, _Acc()).add(s.overall_rating)

    all_tags: List[str] = []
    seen = set()
    for p in products:
        for tag in p.tags:
            if tag not in seen:
                seen.add(tag)
                all_tags.append(tag)

    recs: List[Recommendation] = []
    for tag in all_tags:
        best: Optional[Product] = None
        best_avg = 0.0
        best_count = 0
        for p in products:
            if tag not in p.tags:
                continue
            acc = per_product.get(p.id)
            if acc is None or acc.count == 0:
                continue
            if acc.avg > best_avg:
                best, best_avg, best_count = p, acc.avg, acc.count
        if best is not None and best_avg >= min_rating:
            recs.append(Recommendation(tag=tag, product=best, avg_rating=best_avg, session_count=best_count))

    recs.sort(key=lambda r: r.avg_rating, reverse=True)
    return recs[:limit]
