from fastapi import APIRouter, Depends

from app.crud.game import check_store
from app.database.base import GameStore, get_store

router = APIRouter()


@router.get("/healthcheck", response_model=dict[str, str])
def healthcheck(store: GameStore = Depends(get_store)):
    check_store(store)
    return dict(status="ok")
