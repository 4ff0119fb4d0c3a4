"""Unit tests for app/database/memory.py"""

import pytest

from app.database.memory import InMemoryGameStore
from app.exceptions import StoreError


def test_set_and_get(store: InMemoryGameStore, catan: dict) -> None:
    store.set("catan", catan)
    assert store.get("catan") == catan
    assert store.get("unknown") is None


def test_returned_documents_are_copies(store: InMemoryGameStore, catan: dict) -> None:
    """Mutating what the store hands out must not change what it holds."""
    store.set("catan", catan)
    document = store.get("catan")
    document["players"]["max"] = 6
    assert store.get("catan")["players"]["max"] == 4


def test_update_merges_top_level_fields(store: InMemoryGameStore, catan: dict) -> None:
    store.set("catan", catan)
    store.update("catan", {"publisher": "Catan Studio"})
    assert store.get("catan") == {**catan, "publisher": "Catan Studio"}


def test_update_missing_document(store: InMemoryGameStore) -> None:
    with pytest.raises(StoreError):
        store.update("unknown", {"name": "Anything"})


def test_delete(store: InMemoryGameStore, catan: dict) -> None:
    store.set("catan", catan)
    store.delete("catan")
    assert store.get("catan") is None
    # deleting again is a no-op
    store.delete("catan")


def test_set_many_and_get_all(store: InMemoryGameStore, catan: dict, seafarers: dict) -> None:
    written = store.set_many([("catan", catan), ("catan-seafarers", seafarers)])
    assert written == 2
    assert sorted(document["id"] for document in store.get_all()) == ["catan", "catan-seafarers"]


def test_new_ids_are_unique(store: InMemoryGameStore) -> None:
    ids = {store.new_id() for _ in range(100)}
    assert len(ids) == 100
