# tests/test_storage.py
# Purpose:
# Whole-collection stores: upsert, append-only sessions, profile defaults,
# and tolerance for missing/corrupt documents.
import json
from datetime import timedelta
import pytest

from stash_backend.app.config import PRODUCTS_KEY, SESSIONS_KEY, USER_KEY
from stash_backend.app.services.data_stores import (
    JsonDirStore,
    append_session,
    delete_product,
    get_product,
    get_user_profile,
    list_products,
    list_sessions,
    save_product,
    save_user_profile,
)
from stash_backend.app.schemas import UserProfile


def test_missing_keys_read_as_empty(store):
    assert list_products(store) == []
    assert list_sessions(store) == []

def test_save_product_upserts_by_id(store, product_factory):
    save_product(store, product_factory("p1", product_name="First"))
    save_product(store, product_factory("p2"))
    save_product(store, product_factory("p1", product_name="Renamed"))
    items = list_products(store)
    # same id replaced in place, order kept
    assert [p.id for p in items] == ["p1", "p2"]
    assert items[0].product_name == "Renamed"
    assert get_product(store, "p2").id == "p2"
    assert get_product(store, "nope") is None

def test_delete_product_keeps_sessions(store, product_factory, session_factory):
    save_product(store, product_factory("p1"))
    append_session(store, session_factory("s1", "p1"))
    assert delete_product(store, "p1") is True
    assert delete_product(store, "p1") is False
    assert list_products(store) == []
    # orphaned sessions stay in the raw collection
    assert [s.id for s in list_sessions(store)] == ["s1"]

def test_sessions_sorted_newest_first_and_filtered(store, session_factory, now):
    append_session(store, session_factory("old", "p1", when=now - timedelta(days=2)))
    append_session(store, session_factory("new", "p1", when=now))
    append_session(store, session_factory("other", "p2", when=now - timedelta(days=1)))
    assert [s.id for s in list_sessions(store)] == ["new", "other", "old"]
    assert [s.id for s in list_sessions(store, "p1")] == ["new", "old"]

def test_session_ids_stay_unique(store, session_factory):
    append_session(store, session_factory("s1", "p1"))
    with pytest.raises(ValueError):
        append_session(store, session_factory("s1", "p1"))
    assert len(list_sessions(store)) == 1

def test_profile_default_and_overwrite(store):
    prof = get_user_profile(store)
    assert prof.model_dump(mode="json") == {
        "name": "Guest User",
        "email": "",
        "preferences": {"dosageUnit": "mg", "dateFormat": "MM/DD/YYYY", "privateProfile": True},
    }
    # default is not persisted on read
    assert store.get(USER_KEY) is None

    save_user_profile(store, UserProfile(name="Sam", email="sam@example.com",
                                         preferences={"dosageUnit": "g", "dateFormat": "DD/MM/YYYY",
                                                      "privateProfile": False}))
    again = get_user_profile(store)
    assert again.name == "Sam"
    assert again.preferences.dosageUnit.value == "g"

def test_corrupt_documents_fall_back(store, product_factory):
    store.set(PRODUCTS_KEY, "{not json")
    store.set(SESSIONS_KEY, '{"an": "object"}')
    store.set(USER_KEY, "[]")
    assert list_products(store) == []
    assert list_sessions(store) == []
    assert get_user_profile(store).name == "Guest User"

def test_bad_records_are_skipped(store):
    store.set(PRODUCTS_KEY, '[{"id": "ok", "category": "Vape", "product_name": "Pen"}, {"id": "bad"}]')
    assert [p.id for p in list_products(store)] == ["ok"]

def test_naive_timestamps_read_as_utc(store):
    store.set(SESSIONS_KEY, '[{"id": "s1", "product_id": "p1", "date_time_used": "2026-10-18T10:00:00"}]')
    s = list_sessions(store)[0]
    assert s.date_time_used.utcoffset() == timedelta(0)

def test_json_dir_store_round_trips_through_disk(tmp_path, product_factory):
    s1 = JsonDirStore(tmp_path / "stash")
    save_product(s1, product_factory("p1", tags=["Sleep"]))
    # a second store over the same directory simulates a restart
    s2 = JsonDirStore(tmp_path / "stash")
    assert list_products(s2)[0].tags == ["Sleep"]
    assert (tmp_path / "stash" / f"{PRODUCTS_KEY}.json").exists()
    s2.delete(PRODUCTS_KEY)
    assert list_products(s2) == []

def test_demo_seed_is_opt_in(store, monkeypatch):
    assert list_products(store) == []
    store.delete(PRODUCTS_KEY)
    monkeypatch.setenv("STASH_SEED_DEMO", "1")
    seeded = list_products(store)
    assert [p.product_name for p in seeded] == ["Blue Dream", "Elderberry Gummies"]
    # seed is written once, later reads come from the store
    assert store.get(PRODUCTS_KEY) is not None

def test_unreadable_records_survive_writes(store, product_factory, session_factory):
    store.set(SESSIONS_KEY, json.dumps([{"id": "legacy", "product_id": "p1",
                                         "date_time_used": "2026-10-01T10:00:00Z", "overall_rating": 7.5}]))
    store.set(PRODUCTS_KEY, json.dumps([{"id": "old", "category": "Tincture", "product_name": "Drops",
                                         "lab_notes": "keep me"}]))
    # neither entry passes validation, so reads skip them
    assert list_sessions(store) == [] and list_products(store) == []

    append_session(store, session_factory("s2", "p2"))
    save_product(store, product_factory("p2"))
    raw_sessions = json.loads(store.get(SESSIONS_KEY))
    raw_products = json.loads(store.get(PRODUCTS_KEY))
    assert [s["id"] for s in raw_sessions] == ["legacy", "s2"]
    assert raw_sessions[0]["overall_rating"] == 7.5
    assert [p["id"] for p in raw_products] == ["old", "p2"]
    assert raw_products[0] == {"id": "old", "category": "Tincture", "product_name": "Drops",
                               "lab_notes": "keep me"}

    # an unreadable entry still claims its id
    with pytest.raises(ValueError):
        append_session(store, session_factory("legacy", "p1"))

def test_unknown_keys_kept_on_untouched_records(store, product_factory):
    store.set(PRODUCTS_KEY, json.dumps([{"id": "p1", "category": "Vape", "product_name": "Pen",
                                         "legacy_field": 1}]))
    save_product(store, product_factory("p2"))
    assert json.loads(store.get(PRODUCTS_KEY))[0]["legacy_field"] == 1
    assert delete_product(store, "p2") is True
    assert json.loads(store.get(PRODUCTS_KEY))[0]["legacy_field"] == 1
