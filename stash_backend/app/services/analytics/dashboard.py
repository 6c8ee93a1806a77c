# stash_backend/app/services/analytics/dashboard.py
from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from stash_backend.app.config import analytics_min_sessions
from stash_backend.app.schemas import Dashboard, Product, ProductDetail, Session
from .compounds import top_compounds
from .mood import mood_trend
from .ratings import overall_average_rating, product_average_rating, rating_label
from .tags import recommendations, tag_effectiveness
from .usage import category_breakdown, weekly_usage


def build_dashboard(products: Iterable[Product], sessions: Iterable[Session],
                    now: Optional[datetime] = None, min_sessions: Optional[int] = None) -> Dashboard:
    """
    Every aggregate over one snapshot. Below `min_sessions` nothing is
    computed and a not-ready placeholder comes back instead.
    """
    products = list(products)
    sessions = list(sessions)
    required = analytics_min_sessions() if min_sessions is None else min_sessions

    if len(sessions) < required:
        return Dashboard(ready=False, session_count=len(sessions), required_sessions=required)

    return Dashboard(
        ready=True,
        session_count=len(sessions),
        required_sessions=required,
        avg_rating=overall_average_rating(sessions),
        recommendations=recommendations(products, sessions),
        weekly_usage=weekly_usage(sessions, now=now),
        mood_trend=mood_trend(sessions),
        tag_stats=tag_effectiveness(products, sessions),
        top_compounds=top_compounds(products, sessions),
        categories=category_breakdown(products, sessions),
    )


def product_detail(product: Product, sessions: Iterable[Session]) -> ProductDetail:
    mine = sorted((s for s in sessions if s.product_id == product.id),
                  key=lambda s: s.date_time_used, reverse=True)
    avg = product_average_rating(product.id, mine)
    return ProductDetail(product=product, sessions=mine, avg_rating=avg, rating_label=rating_label(avg))
