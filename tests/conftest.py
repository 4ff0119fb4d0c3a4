"""
Pytest will auto-discover / import this file called 'conftest.py'.
Fixtures shared by the store, service and HTTP layer tests.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from app.database.memory import InMemoryGameStore
from app.exceptions import StoreError
from app.main import create_app



class FailingStore:
    """Every call fails the way an unreachable document store would."""

    def new_id(self) -> str:
        return "generated-id"

    def get_all(self) -> list[dict]:
        raise StoreError("deadline exceeded")

    def get(self, game_id: str) -> dict | None:
        raise StoreError("deadline exceeded")

    def set(self, game_id: str, document: dict) -> None:
        raise StoreError("deadline exceeded")

    def update(self, game_id: str, fields: dict) -> None:
        raise StoreError("deadline exceeded")

    def delete(self, game_id: str) -> None:
        raise StoreError("deadline exceeded")

    def set_many(self, documents) -> int:
        raise StoreError("deadline exceeded")


@pytest.fixture
def catan() -> dict:
    return {
        "id": "catan",
        "name": "Catan",
        "releaseYear": 1995,
        "players": {"min": 3, "max": 4},
        "publisher": "Kosmos",
        "expansions": ["catan-seafarers"],
        "type": "BaseGame",
    }


@pytest.fixture
def seafarers() -> dict:
    return {
        "id": "catan-seafarers",
        "name": "Catan: Seafarers",
        "releaseYear": 1997,
        "players": {"min": 3, "max": 4},
        "publisher": "Kosmos",
        "baseGame": "catan",
        "standalone": False,
        "type": "Expansion",
    }


@pytest.fixture
def store() -> Generator[InMemoryGameStore, None, None]:
    """Empty in-memory store, cleared at teardown so tests stay independent."""
    repo = InMemoryGameStore()
    try:
        yield repo
    finally:
        repo.clear()


@pytest.fixture
def seeded_store(store: InMemoryGameStore, catan: dict, seafarers: dict) -> InMemoryGameStore:
    store.set(catan["id"], catan)
    store.set(seafarers["id"], seafarers)
    return store


@pytest.fixture
def client(seeded_store: InMemoryGameStore) -> Generator[TestClient, None, None]:
    with TestClient(create_app(store=seeded_store)) as test_client:
        yield test_client


@pytest.fixture
def failing_client() -> Generator[TestClient, None, None]:
    with TestClient(create_app(store=FailingStore()), raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def failing_store() -> FailingStore:
    return FailingStore()
