# stash_backend/app/services/analytics/common.py
from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from stash_backend.app.schemas import Product, Session


def index_products(products: Iterable[Product]) -> Dict[str, Product]:
    """id -> product; on duplicate ids the first one wins."""
    out: Dict[str, Product] = {}
    for p in products:
        out.setdefault(p.id, p)
    return out

def resolved(products: Iterable[Product], sessions: Iterable[Session]) -> List[Tuple[Session, Product]]:
    """Pair each session with its product, dropping orphans."""
    by_id = index_products(products)
    out: List[Tuple[Session, Product]] = []
    for s in sessions:
        p = by_id.get(s.product_id)
        if p is not None:
            out.append((s, p))
    return out

def mean(values: Sequence[float]) -> Optional[float]:
    if not values:
        return None
    return sum(values) / len(values)

def round1(x: float) -> float:
    """One decimal, half-up (2.25 -> 2.3)."""
    return float(Decimal(repr(x)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
