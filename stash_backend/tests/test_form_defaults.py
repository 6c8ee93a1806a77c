# tests/test_form_defaults.py
# Purpose:
# Drafts fall back to fixed defaults; edits keep identity; catalog filters.

from stash_backend.app.schemas import ProductDraft, SessionDraft, StrainType
from stash_backend.app.services.router_helpers.product_helpers import (
    all_experiences,
    build_product,
    filter_products,
)
from stash_backend.app.services.router_helpers.sessions_helpers import build_session, default_method


def test_session_draft_defaults(product_factory):
    flower = product_factory("p1", form_factor="Flower")
    s = build_session(SessionDraft(product_id="p1"), flower)
    assert s.dose_amount == "Standard"
    assert s.setting == "Home"
    assert s.method == "Smoked"
    assert s.overall_rating == 5 and s.intensity_rating == 5
    assert s.mood_before == "Neutral" and s.mood_after == "Good"
    assert s.id and s.date_time_used is not None

def test_default_method_by_product(product_factory):
    assert default_method(product_factory("e", category="Edible", form_factor="Gummy")) == "Eaten"
    assert default_method(product_factory("v", category="Vape", form_factor="Cart")) == "Vaped"
    assert default_method(None) == "Unknown"

def test_session_draft_values_win(product_factory, now):
    s = build_session(SessionDraft(product_id="p1", dose_amount="2 puffs", method="Dab",
                                   overall_rating=9, mood_after="Great", date_time_used=now),
                      product_factory("p1"))
    assert (s.dose_amount, s.method, s.overall_rating, s.mood_after) == ("2 puffs", "Dab", 9, "Great")
    assert s.date_time_used == now

def test_new_product_gets_fresh_id_and_defaults():
    p = build_product(ProductDraft(product_name="Blue Dream"))
    assert p.id
    assert p.brand_name == "" and p.form_factor == "Unknown"
    assert p.strain_type == StrainType.UNKNOWN
    assert p.tags == [] and p.terpenes == []
    assert build_product(ProductDraft(product_name="Blue Dream")).id != p.id

def test_psychedelic_defaults():
    p = build_product(ProductDraft(product_name="Golden Teacher", category="Psychedelic (Other)"))
    assert p.brand_name == "Unknown Source"
    assert p.form_factor == "Capsule"

def test_psychedelic_defaults_apply_on_edit_too(product_factory):
    existing = product_factory("p1", category="Psychedelic (Other)", form_factor="Capsule")
    p = build_product(ProductDraft(product_name="Golden Teacher", category="Psychedelic (Other)"), existing=existing)
    assert p.id == "p1"
    assert p.form_factor == "Capsule" and p.brand_name == "Unknown Source"

def test_edit_keeps_identity_and_refreshes_updated_at(product_factory):
    existing = product_factory("p1", created_at="2020-01-01T00:00:00Z", updated_at="2020-01-01T00:00:00Z")
    p = build_product(ProductDraft(product_name="New name", tags=[" Sleep ", ""]), existing=existing)
    assert p.id == "p1"
    assert p.created_at == existing.created_at
    assert p.updated_at > existing.updated_at
    assert p.tags == ["Sleep"]

def test_catalog_filters(product_factory):
    products = [
        product_factory("a", category="Flower", product_name="Blue Dream", brand_name="Blue River", tags=["Creative"]),
        product_factory("b", category="Edible", product_name="Gummies", brand_name="Wyld", tags=["Sleep", "Relax"]),
    ]
    assert [p.id for p in filter_products(products)] == ["a", "b"]
    assert [p.id for p in filter_products(products, category="Edible")] == ["b"]
    assert [p.id for p in filter_products(products, search="RIVER")] == ["a"]
    assert [p.id for p in filter_products(products, experience="Sleep")] == ["b"]
    assert filter_products(products, category="Vape") == []
    assert all_experiences(products) == ["Creative", "Relax", "Sleep"]
