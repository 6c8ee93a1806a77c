# stash_backend/app/services/data_stores/profiles.py
from __future__ import annotations

import logging

from pydantic import ValidationError

from stash_backend.app.config import USER_KEY
from stash_backend.app.schemas import UserProfile
from .io_utils import dumps, loads_or
from .kv import KeyValueStore

log = logging.getLogger("stash.store")


def get_default_profile_template() -> UserProfile:
    return UserProfile(
        name="Guest User",
        email="",
        preferences={"dosageUnit": "mg", "dateFormat": "MM/DD/YYYY", "privateProfile": True},
    )

def get_user_profile(store: KeyValueStore) -> UserProfile:
    """Stored profile, or the default template when absent/corrupt (not persisted)."""
    raw = loads_or(store.get(USER_KEY), default=None)
    if not isinstance(raw, dict):
        return get_default_profile_template()
    try:
        return UserProfile.model_validate(raw)
    except ValidationError as e:
        log.warning("[store] bad user profile, using defaults: %s", e.errors()[:1])
        return get_default_profile_template()

def save_user_profile(store: KeyValueStore, profile: UserProfile) -> UserProfile:
    """Full overwrite."""
    store.set(USER_KEY, dumps(profile.model_dump(mode="json")))
    return profile
