# report_routes.py
# Public, read-only reports.

from typing import List

from fastapi import APIRouter, Depends, Query

from football_backend.core.pagination import Page
from football_backend.models import MatchRead
from football_backend.models.report_model import MatchReportRead, TeamRecordRead, TopScorerRead
from football_backend.repositories.record_store import SqlRecordStore, get_record_store
from football_backend.services.report_service import ReportService

router = APIRouter()


@router.get("/matches", response_model=Page[MatchReportRead])
def all_match_reports(
    page: int = Query(1),
    limit: int = Query(10),
    store: SqlRecordStore = Depends(get_record_store),
):
    items, total, page, limit = ReportService(store).get_all_match_reports(page, limit)
    return Page.build(items, total, page, limit)


@router.get("/matches/{match_id}", response_model=MatchReportRead)
def match_report(match_id: int, store: SqlRecordStore = Depends(get_record_store)):
    return ReportService(store).get_match_report(match_id)


@router.get("/top-scorers", response_model=List[TopScorerRead])
def top_scorers(limit: int = Query(10), store: SqlRecordStore = Depends(get_record_store)):
    return ReportService(store).get_top_scorers(limit)


@router.get("/completed", response_model=Page[MatchRead])
def completed_matches(
    page: int = Query(1),
    limit: int = Query(10),
    store: SqlRecordStore = Depends(get_record_store),
):
    items, total, page, limit = ReportService(store).get_completed_matches(page, limit)
    return Page.build(items, total, page, limit)


@router.get("/teams/{team_id}", response_model=TeamRecordRead)
def team_record(team_id: int, store: SqlRecordStore = Depends(get_record_store)):
    return ReportService(store).get_team_record(team_id)
