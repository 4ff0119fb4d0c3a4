# app/admin/form.py
from copy import deepcopy
from typing import Any, Dict, List, Optional

from pydantic import TypeAdapter, ValidationError

from app.exceptions import validation_details
from app.schemas.game import Game, GameCreate, GameType
from app.serializers.game import serialize_game

game_create_adapter = TypeAdapter(GameCreate)

COMMON_REQUIRED = ("name", "type", "players")
EXPANSION_ONLY = ("baseGame", "standalone")
BASE_GAME_ONLY = ("expansions",)


class FormError(Exception):
    def __init__(self, message: str, details: Optional[List[dict]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or []


class GameForm:
    """
    State of the create / edit form.

    Values are kept in wire format (camelCase keys) so the payload can be
    sent to the API as is.
    """

    def __init__(self, values: Dict[str, Any], editing_id: Optional[str] = None):
        self.values = values
        self.editing_id = editing_id

    @classmethod
    def new(cls) -> "GameForm":
        return cls({"type": GameType.BASE_GAME.value, "players": {"min": 2, "max": 4}})

    @classmethod
    def edit(cls, game: Game) -> "GameForm":
        return cls(serialize_game(game), editing_id=game.id)

    @property
    def game_type(self) -> GameType:
        return GameType(self.values["type"])

    @property
    def title(self) -> str:
        if self.editing_id:
            return f"Edit Game: {self.values.get('name', '')}"
        return "Add New Game"

    def set_type(self, game_type: GameType) -> None:
        """Switch variant and drop the fields that belong to the other one"""
        match GameType(game_type):
            case GameType.BASE_GAME:
                cleared = EXPANSION_ONLY
            case GameType.EXPANSION:
                cleared = BASE_GAME_ONLY
        for field in cleared:
            self.values.pop(field, None)
        self.values["type"] = GameType(game_type).value

    def set_field(self, name: str, value: Any) -> None:
        if name == "id":
            raise FormError("Game ID cannot be changed")
        if name == "type":
            self.set_type(value)
            return
        if name in EXPANSION_ONLY and self.game_type is not GameType.EXPANSION:
            raise FormError(f"{name} only applies to expansions")
        if name in BASE_GAME_ONLY and self.game_type is not GameType.BASE_GAME:
            raise FormError(f"{name} only applies to base games")
        if value is None:
            self.values.pop(name, None)
        else:
            self.values[name] = value

    def set_players(self, min_players: Optional[int] = None, max_players: Optional[int] = None) -> None:
        players = dict(self.values.get("players") or {})
        if min_players is not None:
            players["min"] = min_players
        if max_players is not None:
            players["max"] = max_players
        self.values["players"] = players

    def required_fields(self) -> List[str]:
        match self.game_type:
            case GameType.BASE_GAME:
                return list(COMMON_REQUIRED)
            case GameType.EXPANSION:
                return list(COMMON_REQUIRED + EXPANSION_ONLY)

    def missing_fields(self) -> List[str]:
        return [field for field in self.required_fields() if self.values.get(field) in (None, "")]

    def to_payload(self) -> dict:
        """Validated form values, plus the id when editing"""
        missing = self.missing_fields()
        if missing:
            raise FormError(f"Missing required fields: {', '.join(missing)}")

        payload = deepcopy(self.values)
        if self.editing_id:
            payload["id"] = self.editing_id

        try:
            game_create_adapter.validate_python(payload)
        except ValidationError as e:
            raise FormError("Invalid game data", validation_details(e.errors()))
        return payload
