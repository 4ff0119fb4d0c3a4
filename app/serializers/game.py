from pydantic import BaseModel, TypeAdapter

from app.schemas.game import Game

game_adapter = TypeAdapter(Game)
games_adapter = TypeAdapter(list[Game])


def serialize_game(game: BaseModel) -> dict:
    """Document body as stored: camelCase keys, unset optionals left out"""
    return game.model_dump(mode="json", by_alias=True, exclude_none=True)


def serialize_changes(changes: BaseModel) -> dict:
    return changes.model_dump(mode="json", by_alias=True, exclude_unset=True)


def deserialize_game(document: dict) -> Game:
    return game_adapter.validate_python(document)
