# stash_backend/app/services/data_stores/kv.py
"""
Key-value persistence port.

Every collection lives as one JSON document under a fixed key. Callers read
the whole document, mutate it in memory and write the whole document back.
Last write wins; there is no cross-process locking.
"""
from __future__ import annotations

import logging
import re
from pathlib import Path
from threading import RLock
from typing import Dict, Optional, Protocol

from stash_backend.app.config.paths import get_data_dir
from .io_utils import atomic_write

log = logging.getLogger("stash.store")
if not log.handlers:
    log.addHandler(logging.StreamHandler())
    log.setLevel(logging.INFO)

_key_pat = re.compile(r"[^A-Za-z0-9_.-]+")


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...
    def set(self, key: str, value: str) -> None: ...
    def delete(self, key: str) -> None: ...


class JsonDirStore:
    """One `<key>.json` file per key under a directory (default DATA_DIR/stash)."""

    def __init__(self, root: Optional[Path] = None):
        self.root = Path(root) if root is not None else get_data_dir() / "stash"
        self._lock = RLock()

    def _path(self, key: str) -> Path:
        safe = _key_pat.sub("_", key).strip("._") or "_"
        return self.root / f"{safe}.json"

    def get(self, key: str) -> Optional[str]:
        p = self._path(key)
        with self._lock:
            if not p.exists():
                return None
            try:
                return p.read_text(encoding="utf-8")
            except OSError as e:
                log.warning("[store] unreadable %s: %s", p, e)
                return None

    def set(self, key: str, value: str) -> None:
        with self._lock:
            atomic_write(self._path(key), value)

    def delete(self, key: str) -> None:
        with self._lock:
            self._path(key).unlink(missing_ok=True)


class MemoryStore:
    """Dict-backed store for tests and embedding."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)


def default_store() -> KeyValueStore:
    """Store rooted at the current DATA_DIR (resolved per call)."""
    return JsonDirStore()
