from __future__ import annotations
from typing import Any, Dict
from fastapi import APIRouter, Depends

# Keep routers skinny; all persistence lives in the data stores.
from stash_backend.app.schemas import UserProfile
from stash_backend.app.services.data_stores import (
    KeyValueStore,
    get_user_profile as _get,
    save_user_profile as _save,
)
from .deps import get_store

router = APIRouter(prefix="/profile", tags=["profile"])

# --- root GET/PUT ---
@router.get("")
def get_profile(store: KeyValueStore = Depends(get_store)) -> Dict[str, Any]:
    return {"profile": _get(store).model_dump(mode="json")}

@router.put("")
def put_profile(profile: UserProfile, store: KeyValueStore = Depends(get_store)) -> Dict[str, Any]:
    """
    Whole-record overwrite: accepts the full profile object and persists it.
    """
    return {"profile": _save(store, profile).model_dump(mode="json")}
