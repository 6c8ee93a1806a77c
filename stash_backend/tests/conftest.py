from __future__ import annotations
import json
from datetime import datetime, timezone
import pytest
from fastapi.testclient import TestClient
from stash_backend.app.main import app
from stash_backend.app.routers.deps import get_enrich_client, get_store
from stash_backend.app.schemas import Product, Session, Terpene
from stash_backend.app.services.data_stores import JsonDirStore, MemoryStore

NOW = datetime(2026, 10, 19, 18, 0, tzinfo=timezone.utc)  # a Monday


# --- Data tree override: every test gets its own DATA_DIR ---
@pytest.fixture(autouse=True)
def tmp_data_tree(tmp_path, monkeypatch):
    tmp = tmp_path / "data_tree"
    monkeypatch.setenv("DATA_DIR", str(tmp))
    monkeypatch.delenv("STASH_SEED_DEMO", raising=False)
    monkeypatch.delenv("STASH_ANALYTICS_MIN_SESSIONS", raising=False)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("API_KEY", raising=False)
    return tmp

@pytest.fixture
def store():
    return MemoryStore()

@pytest.fixture
def file_store(tmp_data_tree):
    return JsonDirStore(tmp_data_tree / "stash")

# --- HTTP client wired to a file store under the tmp DATA_DIR ---
@pytest.fixture
def client(file_store):
    app.dependency_overrides[get_store] = lambda: file_store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()

@pytest.fixture
def now():
    return NOW


# --- Record builders ---
def make_product(pid, tags=(), category="Flower", terpenes=(), **kw):
    return Product(
        id=pid,
        category=category,
        brand_name=kw.pop("brand_name", "Brand"),
        product_name=kw.pop("product_name", f"Product {pid}"),
        tags=list(tags),
        terpenes=[Terpene(name=t) for t in terpenes],
        **kw,
    )

def make_session(sid, product_id, rating=5, when=NOW, mood_before="Neutral", mood_after="Good", **kw):
    return Session(
        id=sid,
        product_id=product_id,
        date_time_used=when,
        overall_rating=rating,
        mood_before=mood_before,
        mood_after=mood_after,
        **kw,
    )

@pytest.fixture
def product_factory():
    return make_product

@pytest.fixture
def session_factory():
    return make_session


# --- Fake Gemini client: mimics client.models.generate_content(...) ---
class _FakeResponse:
    def __init__(self, text):
        self.text = text

class FakeGemini:
    def __init__(self, payload=None, raises=None):
        self.payload = payload
        self.raises = raises
        self.calls = []
        self.models = self

    def generate_content(self, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.raises is not None:
            raise self.raises
        text = self.payload if isinstance(self.payload, str) else json.dumps(self.payload)
        return _FakeResponse(text)

ENRICHED_PAYLOAD = {
    "strain_type": "Indica",
    "typical_thc_percentage": 21.5,
    "typical_cbd_percentage": 0.4,
    "dominant_terpenes": [
        {"name": "Myrcene", "percentage": 0.9, "effects": "Sedating"},
        {"name": "Caryophyllene", "effects": "Calming"},
    ],
    "suggested_tags": ["Sleep", "Relax", "Body-High"],
    "description_summary": "A heavy evening strain known for deep relaxation.",
}

@pytest.fixture
def fake_gemini():
    return FakeGemini

@pytest.fixture
def enriched_payload():
    return json.loads(json.dumps(ENRICHED_PAYLOAD))

@pytest.fixture
def enrich_client_override():
    def _install(fake):
        app.dependency_overrides[get_enrich_client] = lambda: fake
        return fake
    return _install
