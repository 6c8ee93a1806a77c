# app/routers/products.py
from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from stash_backend.app.schemas import ProductDraft
from stash_backend.app.services.analytics import product_detail
from stash_backend.app.services.data_stores import (
    KeyValueStore,
    delete_product as _delete,
    get_product as _get,
    list_products as _list,
    list_sessions as _list_sessions,
    save_product as _save,
)
from stash_backend.app.services.router_helpers.product_helpers import (
    ALL_CATEGORIES,
    ANY_EXPERIENCE,
    all_experiences,
    build_product,
    filter_products,
)
from .deps import get_store

logger = logging.getLogger("uvicorn.error")

router = APIRouter(prefix="/products", tags=["products"])


@router.get("")
def list_user_products(category: str = ALL_CATEGORIES, search: str = "",
                       experience: str = ANY_EXPERIENCE,
                       store: KeyValueStore = Depends(get_store)) -> Dict[str, Any]:
    items = filter_products(_list(store), category=category, search=search, experience=experience)
    return {"products": [p.model_dump(mode="json") for p in items]}

# What it does: distinct tags across the stash, for the experience filter.
@router.get("/experiences")
def list_experiences(store: KeyValueStore = Depends(get_store)) -> Dict[str, Any]:
    return {"experiences": all_experiences(_list(store))}

@router.post("")
def create_product(draft: ProductDraft, store: KeyValueStore = Depends(get_store)) -> Dict[str, Any]:
    product = _save(store, build_product(draft))
    logger.info("Saved product %s (%s)", product.id, product.product_name)
    return {"product": product.model_dump(mode="json")}

@router.get("/{product_id}")
def get_user_product(product_id: str, store: KeyValueStore = Depends(get_store)) -> Dict[str, Any]:
    product = _get(store, product_id)
    if product is None:
        raise HTTPException(404, "product not found")
    detail = product_detail(product, _list_sessions(store, product_id))
    return detail.model_dump(mode="json")

@router.put("/{product_id}")
def update_product(product_id: str, draft: ProductDraft,
                   store: KeyValueStore = Depends(get_store)) -> Dict[str, Any]:
    existing = _get(store, product_id)
    if existing is None:
        raise HTTPException(404, "product not found")
    product = _save(store, build_product(draft, existing=existing))
    return {"product": product.model_dump(mode="json")}

@router.delete("/{product_id}")
def delete_user_product(product_id: str, store: KeyValueStore = Depends(get_store)) -> Dict[str, Any]:
    if not _delete(store, product_id):
        raise HTTPException(404, "product not found")
    logger.info("Deleted product %s", product_id)
    return {"ok": True}
