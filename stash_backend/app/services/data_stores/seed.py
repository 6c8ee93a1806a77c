# stash_backend/app/services/data_stores/seed.py
from __future__ import annotations

from typing import List

from stash_backend.app.schemas import Product, ProductCategory, StrainType, Terpene, utc_now


def seed_products() -> List[Product]:
    """Two demo products written on first read when STASH_SEED_DEMO is on."""
    now = utc_now()
    return [
        Product(
            id="1",
            category=ProductCategory.FLOWER,
            brand_name="Blue River",
            product_name="Blue Dream",
            form_factor="Flower",
            strain_type=StrainType.SATIVA,
            thc_mg_per_unit=18,
            tags=["Creative", "Social", "Daytime"],
            terpenes=[
                Terpene(name="Myrcene", percentage=0.8, description="Relaxing"),
                Terpene(name="Pinene", percentage=0.3, description="Alertness"),
            ],
            created_at=now,
            updated_at=now,
        ),
        Product(
            id="2",
            category=ProductCategory.EDIBLE,
            brand_name="Wyld",
            product_name="Elderberry Gummies",
            flavor_or_variant="Elderberry",
            form_factor="Gummy",
            thc_mg_per_unit=10,
            cbd_mg_per_unit=5,
            strain_type=StrainType.INDICA,
            tags=["Sleep", "Relax", "Body-High"],
            terpenes=[Terpene(name="Linalool", description="Calming")],
            created_at=now,
            updated_at=now,
        ),
    ]
