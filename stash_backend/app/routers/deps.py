# stash_backend/app/routers/deps.py
from __future__ import annotations

from typing import Any, Optional

from stash_backend.app.services.data_stores import KeyValueStore, default_store


def get_store() -> KeyValueStore:
    """Store under the current DATA_DIR; override in tests via app.dependency_overrides."""
    return default_store()

def get_enrich_client() -> Optional[Any]:
    """None means: build a Gemini client from GEMINI_API_KEY at call time."""
    return None
