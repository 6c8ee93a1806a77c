from __future__ import annotations
from typing import Any, Dict
from fastapi import APIRouter, Depends

from stash_backend.app.services.analytics import build_dashboard, product_average_rating, rating_label
from stash_backend.app.services.data_stores import (
    KeyValueStore,
    list_products as _list_products,
    list_sessions as _list_sessions,
)
from .deps import get_store

router = APIRouter(prefix="/analytics", tags=["analytics"])

# What it does: liveness for dashboards.
@router.get("/")
def probe() -> dict[str, str]:
    return {"ok": "analytics"}

# What it does: every aggregate over the current snapshot, or a not-ready placeholder.
@router.get("/dashboard")
def dashboard(store: KeyValueStore = Depends(get_store)) -> dict[str, Any]:
    return build_dashboard(_list_products(store), _list_sessions(store)).model_dump(mode="json")

# What it does: one product's mean rating; "no ratings" when it has no sessions.
@router.get("/products/{product_id}/rating")
def product_rating(product_id: str, store: KeyValueStore = Depends(get_store)) -> Dict[str, Any]:
    avg = product_average_rating(product_id, _list_sessions(store, product_id))
    return {"product_id": product_id, "avg_rating": avg, "label": rating_label(avg)}
