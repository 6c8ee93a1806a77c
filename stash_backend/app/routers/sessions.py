# app/routers/sessions.py
from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException

from stash_backend.app.schemas import SessionDraft
from stash_backend.app.services.data_stores import (
    KeyValueStore,
    append_session as _append,
    get_product as _get_product,
    list_sessions as _list,
)
from stash_backend.app.services.router_helpers.sessions_helpers import build_session
from .deps import get_store

router = APIRouter(prefix="/sessions", tags=["sessions"])


# Newest first; optionally one product's sessions only.
@router.get("")
def list_user_sessions(product_id: Optional[str] = None,
                       store: KeyValueStore = Depends(get_store)) -> Dict[str, Any]:
    return {"sessions": [s.model_dump(mode="json") for s in _list(store, product_id)]}

@router.post("")
def log_session(draft: SessionDraft, store: KeyValueStore = Depends(get_store)) -> Dict[str, Any]:
    product = _get_product(store, draft.product_id)
    if product is None:
        raise HTTPException(404, "product not found")
    try:
        session = _append(store, build_session(draft, product))
    except ValueError as e:
        raise HTTPException(409, str(e))
    return {"session": session.model_dump(mode="json")}
