# stash_backend/app/services/enrichment/gemini_client.py
"""
Best-effort product lookup through Gemini.

Given brand / product / variant, ask the model for a typical profile
(strain type, potency, dominant terpenes, tags, one-line summary) as JSON.

Fail-closed: no key, transport or auth error, empty or malformed reply all
come back as None. Nothing raises to the caller. No retry, no timeout.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Optional

from google import genai
from google.genai import types as genai_types
from pydantic import ValidationError

from stash_backend.app.config import enrich_model, gemini_api_key
from stash_backend.app.schemas import EnrichedProduct, StrainType

logger = logging.getLogger("stash.enrichment")

ENRICH_TEMPERATURE = 0.2

PROMPT_TEMPLATE = """
Analyze this cannabis or psychedelic product and provide a best-effort estimation of its profile based on common market data.
Brand: {brand}
Product: {product}
Variant/Flavor: {variant}

Return JSON data.
""".strip()


def _response_schema() -> genai_types.Schema:
    T = genai_types.Type
    return genai_types.Schema(
        type=T.OBJECT,
        properties={
            "strain_type": genai_types.Schema(type=T.STRING, enum=[s.value for s in StrainType]),
            "typical_thc_percentage": genai_types.Schema(
                type=T.NUMBER, description="Estimated THC percentage (0-100)"),
            "typical_cbd_percentage": genai_types.Schema(
                type=T.NUMBER, description="Estimated CBD percentage (0-100)"),
            "dominant_terpenes": genai_types.Schema(
                type=T.ARRAY,
                items=genai_types.Schema(
                    type=T.OBJECT,
                    properties={
                        "name": genai_types.Schema(type=T.STRING),
                        "percentage": genai_types.Schema(
                            type=T.NUMBER, description="Estimated percentage if known, else approximate"),
                        "effects": genai_types.Schema(
                            type=T.STRING, description="Short description of effects (e.g. 'Calming')"),
                    },
                    required=["name", "effects"],
                ),
            ),
            "suggested_tags": genai_types.Schema(
                type=T.ARRAY,
                items=genai_types.Schema(type=T.STRING),
                description="3-5 short tags like 'Sleepy', 'Social', 'Pain Relief'",
            ),
            "description_summary": genai_types.Schema(
                type=T.STRING,
                description="A 1-sentence summary of what this strain/product is known for."),
        },
        required=["strain_type", "dominant_terpenes", "suggested_tags", "description_summary"],
    )


def build_prompt(brand: str, product_name: str, variant: Optional[str] = None) -> str:
    return PROMPT_TEMPLATE.format(brand=brand, product=product_name, variant=variant or "N/A")


def _default_client() -> Optional[Any]:
    key = gemini_api_key()
    if not key:
        logger.warning("No API key found for Gemini enrichment.")
        return None
    return genai.Client(api_key=key)


def _response_text(response: Any) -> str:
    text = getattr(response, "text", None)
    return text if isinstance(text, str) else ""


def enrich_product(brand: str, product_name: str, variant: Optional[str] = None,
                   client: Any = None) -> Optional[EnrichedProduct]:
    """
    Ask Gemini for a product profile. Returns None on any failure.

    `client` is anything exposing `models.generate_content(...)` (a
    google.genai.Client by default, built from GEMINI_API_KEY).
    """
    try:
        client = client if client is not None else _default_client()
        if client is None:
            return None

        config = genai_types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=_response_schema(),
            temperature=ENRICH_TEMPERATURE,
        )
        response = client.models.generate_content(
            model=enrich_model(),
            contents=build_prompt(brand, product_name, variant),
            config=config,
        )
        data = json.loads(_response_text(response) or "{}")
        if not isinstance(data, dict):
            logger.warning("Gemini enrichment: expected object, got %s", type(data).__name__)
            return None
        return EnrichedProduct.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as exc:
        logger.warning("Gemini enrichment returned unusable JSON: %s", exc)
        return None
    except Exception as exc:
        logger.warning("Gemini enrichment failed: %s", exc)
        return None
