# stash_backend/app/services/data_stores/products.py
from __future__ import annotations

import logging
from typing import Any, List, Optional

from stash_backend.app.config import PRODUCTS_KEY, seed_demo_enabled
from stash_backend.app.schemas import Product
from .kv import KeyValueStore
from .records import load_raw, parse_records, raw_id, save_raw, to_raw
from .seed import seed_products

log = logging.getLogger("stash.store")


def _raw_products(store: KeyValueStore) -> List[Any]:
    if store.get(PRODUCTS_KEY) is None and seed_demo_enabled():
        seeded = [to_raw(p) for p in seed_products()]
        save_raw(store, PRODUCTS_KEY, seeded)
        log.info("[store] seeded %d demo products", len(seeded))
        return seeded
    return load_raw(store, PRODUCTS_KEY)

def list_products(store: KeyValueStore) -> List[Product]:
    return parse_records(PRODUCTS_KEY, _raw_products(store), Product)

def get_product(store: KeyValueStore, product_id: str) -> Optional[Product]:
    for p in list_products(store):
        if p.id == product_id:
            return p
    return None

def save_product(store: KeyValueStore, product: Product) -> Product:
    """Upsert by id: replace in place when present, else append."""
    raw = _raw_products(store)
    doc = to_raw(product)
    for i, item in enumerate(raw):
        if raw_id(item) == product.id:
            raw[i] = doc
            break
    else:
        raw.append(doc)
    save_raw(store, PRODUCTS_KEY, raw)
    return product

def delete_product(store: KeyValueStore, product_id: str) -> bool:
    """
    Remove by id. Returns True if removed, False if not found.
    Sessions pointing at the product are left alone.
    """
    raw = _raw_products(store)
    kept = [item for item in raw if raw_id(item) != product_id]
    if len(kept) == len(raw):
        return False
    save_raw(store, PRODUCTS_KEY, kept)
    return True
