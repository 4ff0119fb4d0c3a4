# app/schemas/game.py
from enum import Enum
from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class GameType(str, Enum):
    BASE_GAME = "BaseGame"
    EXPANSION = "Expansion"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Players(CamelModel):
    min: int = Field(ge=1)
    max: int = Field(ge=1)

    @model_validator(mode="after")
    def check_range(self):
        if self.max < self.min:
            raise ValueError("Max players must be greater than or equal to min players")
        return self


class GameFields(CamelModel):
    name: str = Field(..., min_length=1)
    release_year: Optional[int] = None
    players: Players
    publisher: Optional[str] = None


class BaseGameFields(GameFields):
    type: Literal["BaseGame"]
    expansions: Optional[List[str]] = None


class ExpansionFields(GameFields):
    type: Literal["Expansion"]
    base_game: str = Field(..., min_length=1)
    standalone: bool


class BaseGame(BaseGameFields):
    id: str


class Expansion(ExpansionFields):
    id: str


class BaseGameCreate(BaseGameFields):
    id: Optional[str] = None


class ExpansionCreate(ExpansionFields):
    id: Optional[str] = None


Game = Annotated[Union[BaseGame, Expansion], Field(discriminator="type")]
GameCreate = Annotated[Union[BaseGameCreate, ExpansionCreate], Field(discriminator="type")]


class GameUpdate(CamelModel):
    """Partial game. Only the fields that were actually sent get written."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    id: Optional[str] = None
    type: Optional[GameType] = None
    name: Optional[str] = Field(None, min_length=1)
    release_year: Optional[int] = None
    players: Optional[Players] = None
    publisher: Optional[str] = None
    expansions: Optional[List[str]] = None
    base_game: Optional[str] = None
    standalone: Optional[bool] = None


class DeleteResult(BaseModel):
    success: bool
    id: str


class ErrorResponse(CamelModel):
    error: str
    status_code: Optional[int] = None
    details: Optional[Any] = None
