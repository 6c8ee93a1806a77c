from __future__ import annotations

"""
Central path resolution for the stash backend.

Env overrides:
    DATA_DIR

Defaults:
    <repo_root>/data

DATA_DIR is read on every call (not frozen at import) so tests and embedding
callers can point the store somewhere else with a plain env change.
"""

import os
from pathlib import Path

# ──────────────────────────────────────────────────────────────────────────────
_THIS_FILE = Path(__file__).resolve()

def _resolve_repo_root() -> Path:
    p = _THIS_FILE
    for _ in range(6):
        if (p.parent / "stash_backend" / "app").exists():
            return p.parent
        p = p.parent
    return _THIS_FILE.parents[3]

REPO_ROOT: Path = _resolve_repo_root()

def _clean_env(value: str | None) -> str | None:
    if value is None:
        return None
    v = value.strip().strip('"').strip("'")
    return v or None

def _env_path(name: str) -> Path | None:
    raw = _clean_env(os.getenv(name))
    if not raw:
        return None
    return Path(raw).expanduser().resolve()

_default_data = REPO_ROOT / "data"

def get_data_dir() -> Path:
    return (_env_path("DATA_DIR") or _default_data).resolve()

__all__ = ["REPO_ROOT", "get_data_dir"]
