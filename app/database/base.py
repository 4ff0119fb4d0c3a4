# app/database/base.py
from typing import Iterable, Optional, Protocol, Tuple

from fastapi import Request


class GameStore(Protocol):
    """Access to the games collection. Documents are plain dicts keyed by game id."""

    def new_id(self) -> str:
        """Generate a fresh unique document id."""
        ...

    def get_all(self) -> list[dict]:
        ...

    def get(self, game_id: str) -> Optional[dict]:
        """Document with the given id, or None if it does not exist."""
        ...

    def set(self, game_id: str, document: dict) -> None:
        """Write the whole document, replacing any existing one."""
        ...

    def update(self, game_id: str, fields: dict) -> None:
        """Overwrite only the given top-level fields of an existing document."""
        ...

    def delete(self, game_id: str) -> None:
        ...

    def set_many(self, documents: Iterable[Tuple[str, dict]]) -> int:
        """Batch write documents keyed by id, returns the number written."""
        ...


def get_store(request: Request) -> GameStore:
    return request.app.state.store
