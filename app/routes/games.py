from fastapi import APIRouter, Body, Depends, status
from typing import Annotated, List, Union

from app.database.base import GameStore, get_store
from app.crud.game import (
    get_game,
    list_games,
    create_game,
    update_game,
    delete_game
)
from app.schemas.game import (
    BaseGameCreate,
    DeleteResult,
    ErrorResponse,
    ExpansionCreate,
    Game,
    GameUpdate,
)

router = APIRouter(
    prefix="/v1/games",
    tags=["games"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.get("", response_model=List[Game], response_model_exclude_none=True)
def read_games(store: GameStore = Depends(get_store)):
    return list_games(store)


@router.get("/{game_id}", response_model=Game, response_model_exclude_none=True)
def read_game(game_id: str, store: GameStore = Depends(get_store)):
    return get_game(store, game_id)


@router.post(
    "",
    response_model=Game,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
)
def create_game_endpoint(
        game: Annotated[Union[BaseGameCreate, ExpansionCreate], Body(discriminator="type")],
        store: GameStore = Depends(get_store),
):
    return create_game(store, game)


@router.put("/{game_id}", response_model=Game, response_model_exclude_none=True)
def update_game_endpoint(game_id: str, changes: GameUpdate, store: GameStore = Depends(get_store)):
    return update_game(store, game_id, changes)


@router.delete("/{game_id}", response_model=DeleteResult)
def delete_game_endpoint(game_id: str, store: GameStore = Depends(get_store)):
    return delete_game(store, game_id)
