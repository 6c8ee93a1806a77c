# stash_backend/app/config/__init__.py
from __future__ import annotations

# Re-export config surface expected by callers across the app.

# Env-driven settings live in manifest.py
from .manifest import (
    PRODUCTS_KEY,
    SESSIONS_KEY,
    USER_KEY,
    gemini_api_key,
    enrich_model,
    analytics_min_sessions,
    seed_demo_enabled,
    cors_origins,
)

# Path helpers live in paths.py
from .paths import get_data_dir

__all__ = [
    # manifest
    "PRODUCTS_KEY",
    "SESSIONS_KEY",
    "USER_KEY",
    "gemini_api_key",
    "enrich_model",
    "analytics_min_sessions",
    "seed_demo_enabled",
    "cors_origins",
    # paths
    "get_data_dir",
]
