# stash_backend/app/services/enrichment/__init__.py
from __future__ import annotations

from .gemini_client import enrich_product, build_prompt  # noqa: F401
from .apply import enrichment_inputs, apply_enrichment, enrich_draft  # noqa: F401

__all__ = ["enrich_product", "build_prompt", "enrichment_inputs", "apply_enrichment", "enrich_draft"]
