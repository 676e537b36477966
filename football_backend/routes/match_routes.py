# match_routes.py
# Fixture scheduling, status changes and result recording.
# Every write goes through MatchService so the status table and goal replacement always apply.

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from football_backend.core.errors import ValidationError
from football_backend.core.pagination import Page
from football_backend.core.security import require_admin
from football_backend.models import (
    MatchCreate,
    MatchDetailRead,
    MatchRead,
    MatchResultCreate,
    MatchUpdate,
)
from football_backend.repositories.record_store import SqlRecordStore, get_record_store
from football_backend.services.match_service import MatchService

router = APIRouter()


@router.get("", response_model=Page[MatchRead])
def list_matches(
    page: int = Query(1),
    limit: int = Query(10),
    team_id: Optional[int] = Query(None),
    status: Optional[str] = Query(None),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    store: SqlRecordStore = Depends(get_record_store),
):
    service = MatchService(store)

    if (start_date is None) != (end_date is None):
        raise ValidationError("start_date and end_date must be given together")

    if team_id is not None:
        items, total, page, limit = service.list_by_team(team_id, page, limit)
    elif status:
        items, total, page, limit = service.list_by_status(status, page, limit)
    elif start_date is not None:
        items, total, page, limit = service.list_by_date_range(start_date, end_date, page, limit)
    else:
        items, total, page, limit = service.list(page, limit)
    return Page.build([MatchRead.from_match(m) for m in items], total, page, limit)


@router.get("/{match_id}", response_model=MatchDetailRead)
def get_match(match_id: int, store: SqlRecordStore = Depends(get_record_store)):
    return MatchDetailRead.from_details(MatchService(store).get_with_details(match_id))


@router.post("", response_model=MatchRead, status_code=201, dependencies=[Depends(require_admin)])
def create_match(data: MatchCreate, store: SqlRecordStore = Depends(get_record_store)):
    match = MatchService(store).create(
        data.match_date, data.match_time, data.home_team_id, data.away_team_id, data.status
    )
    return MatchRead.from_match(match)


@router.put("/{match_id}", response_model=MatchRead, dependencies=[Depends(require_admin)])
def update_match(match_id: int, data: MatchUpdate, store: SqlRecordStore = Depends(get_record_store)):
    match = MatchService(store).update(
        match_id,
        match_date=data.match_date,
        match_time=data.match_time,
        home_team_id=data.home_team_id,
        away_team_id=data.away_team_id,
        status=data.status,
        force=data.force,
    )
    return MatchRead.from_match(match)


@router.delete("/{match_id}", dependencies=[Depends(require_admin)])
def delete_match(match_id: int, store: SqlRecordStore = Depends(get_record_store)):
    MatchService(store).delete(match_id)
    return {"message": "Match deleted successfully"}


@router.post("/{match_id}/result", response_model=MatchDetailRead, dependencies=[Depends(require_admin)])
def record_result(match_id: int, data: MatchResultCreate, store: SqlRecordStore = Depends(get_record_store)):
    details = MatchService(store).record_result(match_id, data.home_score, data.away_score, data.goals)
    return MatchDetailRead.from_details(details)
