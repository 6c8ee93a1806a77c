# stash_backend/app/services/analytics/__init__.py
"""
Pure aggregations over a (products, sessions) snapshot.

Nothing here touches storage; callers load both collections and pass them
in. Sessions whose product_id does not resolve are dropped from anything
that needs product data.
"""

from __future__ import annotations

from .ratings import (  # noqa: F401
    NO_RATINGS,
    product_average_rating,
    overall_average_rating,
    rating_label,
)
from .tags import tag_effectiveness, recommendations  # noqa: F401
from .usage import weekly_usage, category_breakdown  # noqa: F401
from .mood import mood_trend  # noqa: F401
from .compounds import top_compounds  # noqa: F401
from .dashboard import build_dashboard, product_detail  # noqa: F401

__all__ = [
    "NO_RATINGS", "product_average_rating", "overall_average_rating", "rating_label",
    "tag_effectiveness", "recommendations",
    "weekly_usage", "category_breakdown",
    "mood_trend",
    "top_compounds",
    "build_dashboard", "product_detail",
]
