# player_routes.py
# Player listing (optionally by team or name) and admin-only player management.

from typing import Optional

from fastapi import APIRouter, Depends, Query

from football_backend.core.pagination import Page
from football_backend.core.security import require_admin
from football_backend.models import PlayerCreate, PlayerRead, PlayerUpdate
from football_backend.repositories.record_store import SqlRecordStore, get_record_store
from football_backend.services.player_service import PlayerService

router = APIRouter()


@router.get("", response_model=Page[PlayerRead])
def list_players(
    page: int = Query(1),
    limit: int = Query(10),
    team_id: Optional[int] = Query(None),
    search: Optional[str] = Query(None),
    store: SqlRecordStore = Depends(get_record_store),
):
    service = PlayerService(store)
    if team_id is not None:
        items, total, page, limit = service.list_by_team(team_id, page, limit)
    elif search:
        items, total, page, limit = service.search(search, page, limit)
    else:
        items, total, page, limit = service.list(page, limit)
    return Page.build([PlayerRead.model_validate(p) for p in items], total, page, limit)


@router.get("/{player_id}", response_model=PlayerRead)
def get_player(player_id: int, store: SqlRecordStore = Depends(get_record_store)):
    return PlayerRead.model_validate(PlayerService(store).get_with_team(player_id))


@router.post("", response_model=PlayerRead, status_code=201, dependencies=[Depends(require_admin)])
def create_player(data: PlayerCreate, store: SqlRecordStore = Depends(get_record_store)):
    return PlayerRead.model_validate(PlayerService(store).create(data))


@router.put("/{player_id}", response_model=PlayerRead, dependencies=[Depends(require_admin)])
def update_player(player_id: int, data: PlayerUpdate, store: SqlRecordStore = Depends(get_record_store)):
    return PlayerRead.model_validate(PlayerService(store).update(player_id, data))


@router.delete("/{player_id}", dependencies=[Depends(require_admin)])
def delete_player(player_id: int, store: SqlRecordStore = Depends(get_record_store)):
    PlayerService(store).delete(player_id)
    return {"message": "Player deleted successfully"}
