# stash_backend/app/services/data_stores/records.py
"""
Whole-collection access for list-shaped keys.

Reads validate each entry and skip the ones that fail. Writes go through the
raw list instead, so an entry the current models reject (or keys they don't
know about) is carried over untouched on the next write.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .io_utils import dumps, loads_or
from .kv import KeyValueStore

log = logging.getLogger("stash.store")

M = TypeVar("M", bound=BaseModel)


def load_raw(store: KeyValueStore, key: str) -> List[Any]:
    """Raw entries of a collection; absent, corrupt or non-list payloads read as []."""
    raw = loads_or(store.get(key), default=[])
    if not isinstance(raw, list):
        log.warning("[store] %s is not a list (%s); treating as empty", key, type(raw).__name__)
        return []
    return raw

def save_raw(store: KeyValueStore, key: str, items: List[Any]) -> None:
    store.set(key, dumps(items))

def parse_records(key: str, raw: List[Any], model: Type[M]) -> List[M]:
    out: List[M] = []
    for i, item in enumerate(raw):
        try:
            out.append(model.model_validate(item))
        except ValidationError as e:
            log.warning("[store] skip bad %s record #%d: %s", key, i, e.errors()[:1])
    return out

def load_records(store: KeyValueStore, key: str, model: Type[M]) -> List[M]:
    return parse_records(key, load_raw(store, key), model)

def raw_id(item: Any) -> Any:
    return item.get("id") if isinstance(item, dict) else None

def to_raw(record: BaseModel) -> Dict[str, Any]:
    return record.model_dump(mode="json")
