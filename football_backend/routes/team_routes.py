# team_routes.py
# Team listing and detail are public; writes need an admin token.

from typing import Optional

from fastapi import APIRouter, Depends, Query

from football_backend.core.pagination import Page
from football_backend.core.security import require_admin
from football_backend.models import (
    PlayerRead,
    TeamCreate,
    TeamRead,
    TeamUpdate,
    TeamWithPlayersRead,
)
from football_backend.repositories.record_store import SqlRecordStore, get_record_store
from football_backend.services.team_service import TeamService

router = APIRouter()


@router.get("", response_model=Page[TeamRead])
def list_teams(
    page: int = Query(1),
    limit: int = Query(10),
    search: Optional[str] = Query(None),
    store: SqlRecordStore = Depends(get_record_store),
):
    service = TeamService(store)
    if search:
        items, total, page, limit = service.search(search, page, limit)
    else:
        items, total, page, limit = service.list(page, limit)
    return Page.build([TeamRead.model_validate(t) for t in items], total, page, limit)


@router.get("/{team_id}", response_model=TeamWithPlayersRead)
def get_team(team_id: int, store: SqlRecordStore = Depends(get_record_store)):
    team, players = TeamService(store).get_with_players(team_id)
    return TeamWithPlayersRead(
        **TeamRead.model_validate(team).model_dump(),
        players=[PlayerRead.model_validate(p) for p in players],
    )


@router.post("", response_model=TeamRead, status_code=201, dependencies=[Depends(require_admin)])
def create_team(data: TeamCreate, store: SqlRecordStore = Depends(get_record_store)):
    return TeamService(store).create(data)


@router.put("/{team_id}", response_model=TeamRead, dependencies=[Depends(require_admin)])
def update_team(team_id: int, data: TeamUpdate, store: SqlRecordStore = Depends(get_record_store)):
    return TeamService(store).update(team_id, data)


@router.delete("/{team_id}", dependencies=[Depends(require_admin)])
def delete_team(team_id: int, store: SqlRecordStore = Depends(get_record_store)):
    TeamService(store).delete(team_id)
    return {"message": "Team deleted successfully"}
