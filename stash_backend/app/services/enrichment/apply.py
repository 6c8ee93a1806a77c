# stash_backend/app/services/enrichment/apply.py
from __future__ import annotations

from typing import Any, Optional, Tuple

from stash_backend.app.schemas import EnrichedProduct, ProductCategory, ProductDraft, TerpeneDraft
from .gemini_client import enrich_product

GENERIC_BRAND = "Generic"


def enrichment_inputs(brand: Optional[str], product_name: Optional[str],
                      category: Optional[ProductCategory] = None) -> Optional[Tuple[str, str]]:
    """
    (brand, product) to send, or None when the lookup should not run:
    no product name, or no brand outside the psychedelic category.
    """
    is_psych = category == ProductCategory.PSYCHEDELIC_OTHER
    brand = (brand or "").strip()
    product_name = (product_name or "").strip()
    if not product_name:
        return None
    if not brand and not is_psych:
        return None
    return (brand or GENERIC_BRAND), product_name


def apply_enrichment(draft: ProductDraft, enriched: Optional[EnrichedProduct]) -> ProductDraft:
    """Overlay an enrichment result on a draft. None leaves the draft untouched."""
    if enriched is None:
        return draft
    return draft.model_copy(update={
        "strain_type": enriched.strain_type,
        "thc_mg_per_unit": enriched.typical_thc_percentage,
        "cbd_mg_per_unit": enriched.typical_cbd_percentage,
        "terpenes": [
            TerpeneDraft(name=t.name, percentage=t.percentage, description=t.effects)
            for t in enriched.dominant_terpenes
        ],
        "tags": list(enriched.suggested_tags),
        "dosage_description": enriched.description_summary,
    })


def enrich_draft(draft: ProductDraft, client: Any = None) -> Tuple[ProductDraft, bool]:
    """Run the lookup for a draft; returns (draft, whether anything came back)."""
    inputs = enrichment_inputs(draft.brand_name, draft.product_name, draft.category)
    if inputs is None:
        return draft, False
    brand, product_name = inputs
    enriched = enrich_product(brand, product_name, draft.flavor_or_variant, client=client)
    return apply_enrichment(draft, enriched), enriched is not None
