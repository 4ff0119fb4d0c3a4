# app/crud/game.py
import logging
from typing import Iterable, List

from pydantic import ValidationError

from app.database.base import GameStore
from app.exceptions import (
    BadRequestError,
    ConflictError,
    InternalError,
    NotFoundError,
    StoreError,
    validation_details,
)
from app.schemas.game import DeleteResult, Game, GameCreate, GameUpdate
from app.serializers.game import deserialize_game, serialize_changes, serialize_game

logger = logging.getLogger(__name__)


def list_games(store: GameStore) -> List[Game]:
    try:
        documents = store.get_all()
    except StoreError as e:
        logger.error(f"Error fetching games: {e}")
        raise InternalError("Error while fetching games", {"originalError": str(e)})

    games = []
    for document in documents:
        try:
            games.append(deserialize_game(document))
        except ValidationError as e:
            logger.error(f"Skipping invalid stored game {document.get('id')}: {e}")
    return games


def check_store(store: GameStore) -> None:
    """Raise InternalError when the games collection cannot be read"""
    try:
        store.get_all()
    except StoreError as e:
        logger.error(f"Games store is unavailable: {e}")
        raise InternalError("Games store is unavailable", {"originalError": str(e)})


def get_game(store: GameStore, game_id: str) -> Game:
    document = _fetch_document(store, game_id, "Error while fetching game")
    return _to_game(document)


def create_game(store: GameStore, game: GameCreate) -> Game:
    try:
        if game.id:
            if store.get(game.id) is not None:
                logger.warning(f"Game with ID {game.id} already exists")
                raise ConflictError(f"Game with ID {game.id} already exists", {"gameId": game.id})
            game_id = game.id
        else:
            game_id = store.new_id()

        document = serialize_game(game)
        document["id"] = game_id
        store.set(game_id, document)
    except StoreError as e:
        logger.error(f"Error creating game: {e}")
        raise InternalError(
            "Error while creating game",
            {"originalError": str(e), "gameId": game.id},
        )

    return _to_game(document)


def update_game(store: GameStore, game_id: str, changes: GameUpdate) -> Game:
    existing = _fetch_document(store, game_id, "Error while updating game")

    if changes.id is not None and changes.id != game_id:
        logger.warning(f"Attempt to change ID of game {game_id} to {changes.id}")
        raise BadRequestError("Cannot change game ID", {"gameId": game_id})

    fields = serialize_changes(changes)
    fields["id"] = game_id

    # the merged document must still be a valid game of its type
    try:
        merged = deserialize_game({**existing, **fields})
    except ValidationError as e:
        logger.warning(f"Rejected update of game {game_id}: {e.error_count()} validation errors")
        raise BadRequestError("Invalid game data", validation_details(e.errors()))

    allowed = {field.alias or name for name, field in type(merged).model_fields.items()}
    foreign = sorted(set(fields) - allowed)
    if foreign:
        logger.warning(f"Rejected update of game {game_id}: fields {foreign} do not belong to {merged.type}")
        raise BadRequestError(
            f"Fields not allowed for {merged.type}: {', '.join(foreign)}",
            {"gameId": game_id, "fields": foreign},
        )

    try:
        store.update(game_id, fields)
        document = store.get(game_id)
    except StoreError as e:
        logger.error(f"Error updating game {game_id}: {e}")
        raise InternalError(
            "Error while updating game",
            {"originalError": str(e), "gameId": game_id},
        )

    if document is None:
        # deleted between the write and the read back
        raise NotFoundError(f"Game with ID {game_id} not found", {"gameId": game_id})
    return _to_game(document)


def delete_game(store: GameStore, game_id: str) -> DeleteResult:
    _fetch_document(store, game_id, "Error while deleting game")

    try:
        store.delete(game_id)
    except StoreError as e:
        logger.error(f"Error deleting game {game_id}: {e}")
        raise InternalError(
            "Error while deleting game",
            {"originalError": str(e), "gameId": game_id},
        )

    return DeleteResult(success=True, id=game_id)


def seed_games(store: GameStore, games: Iterable[Game]) -> int:
    """Write fixture games keyed by their id, overwriting existing documents"""
    try:
        return store.set_many((game.id, serialize_game(game)) for game in games)
    except StoreError as e:
        logger.error(f"Error seeding games: {e}")
        raise InternalError("Error while seeding games", {"originalError": str(e)})


def _fetch_document(store: GameStore, game_id: str, failure_message: str) -> dict:
    try:
        document = store.get(game_id)
    except StoreError as e:
        logger.error(f"{failure_message} {game_id}: {e}")
        raise InternalError(failure_message, {"originalError": str(e), "gameId": game_id})

    if document is None:
        logger.warning(f"Game with ID {game_id} not found")
        raise NotFoundError(f"Game with ID {game_id} not found", {"gameId": game_id})
    return document


def _to_game(document: dict) -> Game:
    try:
        return deserialize_game(document)
    except ValidationError as e:
        logger.error(f"Stored game {document.get('id')} is invalid: {e}")
        raise InternalError("Stored game is invalid", {"gameId": document.get("id")})
