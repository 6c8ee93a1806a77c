# stash_backend/app/services/data_stores/sessions.py
from __future__ import annotations

from typing import List, Optional

from stash_backend.app.config import SESSIONS_KEY
from stash_backend.app.schemas import Session
from .kv import KeyValueStore
from .records import load_raw, load_records, raw_id, save_raw, to_raw


def list_sessions(store: KeyValueStore, product_id: Optional[str] = None) -> List[Session]:
    """
    All sessions (or one product's), newest `date_time_used` first.
    """
    out = load_records(store, SESSIONS_KEY, Session)
    if product_id:
        out = [s for s in out if s.product_id == product_id]
    out.sort(key=lambda s: s.date_time_used, reverse=True)
    return out

def append_session(store: KeyValueStore, session: Session) -> Session:
    """
    Append-only log. Raises ValueError if the id is already taken.
    Existing entries are written back as stored, including unreadable ones.
    """
    raw = load_raw(store, SESSIONS_KEY)
    if any(raw_id(item) == session.id for item in raw):
        raise ValueError(f"session id already exists: {session.id}")
    raw.append(to_raw(session))
    save_raw(store, SESSIONS_KEY, raw)
    return session
