# stash_backend/app/config/manifest.py
from __future__ import annotations

import os
from typing import List

# ---- Storage keys (one JSON document per key) ----
PRODUCTS_KEY = "my_stash_products"
SESSIONS_KEY = "my_stash_sessions"
USER_KEY = "my_stash_user"

DEFAULT_ENRICH_MODEL = "gemini-2.5-flash"
DEFAULT_MIN_SESSIONS = 3


def _flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip() not in ("", "0", "false", "False", "no")


# Getters read the environment per call; tests flip these with monkeypatch.
def gemini_api_key() -> str:
    return (os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY") or "").strip()

def enrich_model() -> str:
    return os.getenv("STASH_ENRICH_MODEL", DEFAULT_ENRICH_MODEL).strip() or DEFAULT_ENRICH_MODEL

def analytics_min_sessions() -> int:
    try:
        return int(os.getenv("STASH_ANALYTICS_MIN_SESSIONS", str(DEFAULT_MIN_SESSIONS)))
    except ValueError:
        return DEFAULT_MIN_SESSIONS

def seed_demo_enabled() -> bool:
    return _flag("STASH_SEED_DEMO")

def cors_origins() -> List[str]:
    raw = os.getenv("STASH_CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173")
    return [o.strip() for o in raw.split(",") if o.strip()]


__all__ = [
    "PRODUCTS_KEY", "SESSIONS_KEY", "USER_KEY",
    "DEFAULT_ENRICH_MODEL", "DEFAULT_MIN_SESSIONS",
    "gemini_api_key", "enrich_model", "analytics_min_sessions",
    "seed_demo_enabled", "cors_origins",
]
