from __future__ import annotations
from typing import Any, Dict, Optional
from fastapi import APIRouter, Depends

from stash_backend.app.schemas import EnrichRequest, ProductDraft
from stash_backend.app.services.enrichment import enrich_draft, enrich_product, enrichment_inputs
from .deps import get_enrich_client

router = APIRouter(prefix="/enrich", tags=["enrich"])

# Failures answer 200 with ok=false so the caller keeps what it has.

@router.post("")
def enrich(req: EnrichRequest, client: Optional[Any] = Depends(get_enrich_client)) -> Dict[str, Any]:
    inputs = enrichment_inputs(req.brand, req.productName, req.category)
    if inputs is None:
        return {"ok": False, "data": None}
    brand, product_name = inputs
    data = enrich_product(brand, product_name, req.variant, client=client)
    return {"ok": data is not None, "data": data.model_dump(mode="json") if data else None}

@router.post("/draft")
def enrich_product_draft(draft: ProductDraft,
                         client: Optional[Any] = Depends(get_enrich_client)) -> Dict[str, Any]:
    merged, ok = enrich_draft(draft, client=client)
    return {"ok": ok, "draft": merged.model_dump(mode="json")}
