# stash_backend/app/services/data_stores/__init__.py
"""
Unified export surface for data store helpers.

Import from here in routers/analytics code, e.g.:
    from stash_backend.app.services.data_stores import (
        # Port
        KeyValueStore, JsonDirStore, MemoryStore, default_store,
        # Products
        list_products, get_product, save_product, delete_product,
        # Sessions
        list_sessions, append_session,
        # Profile
        get_user_profile, save_user_profile,
    )
"""

from __future__ import annotations

# ---- Persistence port ----
from .kv import KeyValueStore, JsonDirStore, MemoryStore, default_store  # noqa: F401

# ---- Products store ----
from .products import (  # noqa: F401
    list_products,
    get_product,
    save_product,
    delete_product,
)

# ---- Sessions store (note: no edit/delete) ----
from .sessions import (  # noqa: F401
    list_sessions,
    append_session,
)

# ---- Profile store ----
from .profiles import (  # noqa: F401
    get_user_profile,
    save_user_profile,
    get_default_profile_template,
)

__all__ = [
    # kv
    "KeyValueStore", "JsonDirStore", "MemoryStore", "default_store",
    # products
    "list_products", "get_product", "save_product", "delete_product",
    # sessions
    "list_sessions", "append_session",
    # profile
    "get_user_profile", "save_user_profile", "get_default_profile_template",
]
