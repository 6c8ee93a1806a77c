# stash_backend/app/services/router_helpers/product_helpers.py
from __future__ import annotations

from typing import Iterable, List, Optional

from stash_backend.app.schemas import (
    Product, ProductCategory, ProductDraft, StrainType, Terpene, new_id, utc_now,
)

ALL_CATEGORIES = "All"
ANY_EXPERIENCE = "Any"
UNKNOWN_SOURCE = "Unknown Source"


def build_product(draft: ProductDraft, existing: Optional[Product] = None) -> Product:
    """
    Turn a submitted draft into a stored record.
    New drafts get a fresh id; edits keep id and created_at and refresh updated_at.
    Unset fields fall back to fixed defaults.
    """
    is_psych = draft.category == ProductCategory.PSYCHEDELIC_OTHER
    now = utc_now()

    form_factor = draft.form_factor or ("Capsule" if is_psych else "Unknown")

    return Product(
        id=existing.id if existing else new_id(),
        category=draft.category,
        brand_name=draft.brand_name or (UNKNOWN_SOURCE if is_psych else ""),
        product_name=draft.product_name,
        flavor_or_variant=draft.flavor_or_variant,
        form_factor=form_factor,
        thc_mg_per_unit=draft.thc_mg_per_unit,
        cbd_mg_per_unit=draft.cbd_mg_per_unit,
        dosage_description=draft.dosage_description,
        strain_type=draft.strain_type or StrainType.UNKNOWN,
        tags=[t.strip() for t in (draft.tags or []) if t and t.strip()],
        source=draft.source,
        terpenes=[Terpene(**t.model_dump()) for t in (draft.terpenes or []) if t.name.strip()],
        created_at=existing.created_at if existing else now,
        updated_at=now,
    )


def filter_products(products: Iterable[Product], category: str = ALL_CATEGORIES,
                    search: str = "", experience: str = ANY_EXPERIENCE) -> List[Product]:
    q = (search or "").strip().lower()
    out: List[Product] = []
    for p in products:
        if category and category != ALL_CATEGORIES and p.category.value != category:
            continue
        if q and q not in p.product_name.lower() and q not in p.brand_name.lower():
            continue
        if experience and experience != ANY_EXPERIENCE and experience not in p.tags:
            continue
        out.append(p)
    return out


def all_experiences(products: Iterable[Product]) -> List[str]:
    return sorted({t for p in products for t in p.tags})
