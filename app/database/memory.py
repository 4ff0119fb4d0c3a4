# app/database/memory.py
from copy import deepcopy
from threading import Lock
from typing import Iterable, Optional, Tuple
from uuid import uuid4

from app.exceptions import StoreError


class InMemoryGameStore:
    """Games kept in a dict, for local development and tests"""

    def __init__(self, documents: Optional[dict[str, dict]] = None):
        self._documents: dict[str, dict] = deepcopy(documents) if documents else {}
        self._lock = Lock()

    def new_id(self) -> str:
        return uuid4().hex[:20]

    def get_all(self) -> list[dict]:
        with self._lock:
            return [deepcopy(document) for document in self._documents.values()]

    def get(self, game_id: str) -> Optional[dict]:
        with self._lock:
            document = self._documents.get(game_id)
            return deepcopy(document) if document is not None else None

    def set(self, game_id: str, document: dict) -> None:
        with self._lock:
            self._documents[game_id] = deepcopy(document)

    def update(self, game_id: str, fields: dict) -> None:
        with self._lock:
            if game_id not in self._documents:
                raise StoreError(f"No document to update: {game_id}")
            self._documents[game_id].update(deepcopy(fields))

    def delete(self, game_id: str) -> None:
        with self._lock:
            self._documents.pop(game_id, None)

    def set_many(self, documents: Iterable[Tuple[str, dict]]) -> int:
        count = 0
        with self._lock:
            for game_id, document in documents:
                self._documents[game_id] = deepcopy(document)
                count += 1
        return count

    def clear(self) -> None:
        with self._lock:
            self._documents.clear()
