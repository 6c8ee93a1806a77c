# stash_backend/app/services/router_helpers/sessions_helpers.py
from __future__ import annotations

from typing import Optional

from stash_backend.app.schemas import (
    Mood, Product, ProductCategory, Session, SessionDraft, new_id, utc_now,
)

DEFAULT_RATING = 5
DEFAULT_DOSE = "Standard"
DEFAULT_SETTING = "Home"
DEFAULT_METHOD = "Unknown"


def default_method(product: Optional[Product]) -> str:
    """Pre-filled consumption method for a product."""
    if product is None:
        return DEFAULT_METHOD
    if product.form_factor == "Flower":
        return "Smoked"
    if product.category == ProductCategory.EDIBLE:
        return "Eaten"
    return "Vaped"


def build_session(draft: SessionDraft, product: Optional[Product] = None) -> Session:
    """
    New log entry from a draft. Blank fields fall back to fixed defaults
    (rating 5, dose "Standard", setting "Home", method from the product).
    """
    now = utc_now()
    return Session(
        id=new_id(),
        product_id=draft.product_id,
        date_time_used=draft.date_time_used or now,
        dose_amount=(draft.dose_amount or "").strip() or DEFAULT_DOSE,
        setting=(draft.setting or "").strip() or DEFAULT_SETTING,
        method=(draft.method or "").strip() or default_method(product),
        onset_minutes=draft.onset_minutes,
        duration_minutes=draft.duration_minutes,
        intensity_rating=draft.intensity_rating or DEFAULT_RATING,
        overall_rating=draft.overall_rating or DEFAULT_RATING,
        mood_before=(draft.mood_before or Mood.NEUTRAL).value,
        mood_after=(draft.mood_after or Mood.GOOD).value,
        notes=draft.notes,
        created_at=now,
    )
