# report_service.py
# Read-only aggregations over recorded results. Nothing in here writes.

import logging
from typing import List

from football_backend.core.errors import TeamNotFound
from football_backend.core.pagination import normalize_pagination
from football_backend.models import MatchRead, TeamSummary
from football_backend.models.report_model import (
    GoalEventRead,
    MatchReportRead,
    TeamRecordRead,
    TopScorerRead,
)
from football_backend.repositories.match_repository import MatchDetails
from football_backend.repositories.protocols import RecordStore
from football_backend.services.match_service import MatchService

logger = logging.getLogger(__name__)


def build_match_report(details: MatchDetails) -> MatchReportRead:
    match = details.match
    events = [
        GoalEventRead(
            minute=goal.minute,
            player_id=goal.player_id,
            player_name=goal.player.name if goal.player else None,
            team_id=goal.team_id,
            team_name=goal.team.name if goal.team else None,
            is_own_goal=goal.is_own_goal,
        )
        for goal in details.goals
    ]
    return MatchReportRead(
        match_id=match.id,
        match_date=match.match_date,
        match_time=match.match_time,
        status=match.status,
        home_team=TeamSummary.model_validate(details.home_team) if details.home_team else None,
        away_team=TeamSummary.model_validate(details.away_team) if details.away_team else None,
        home_score=match.home_score,
        away_score=match.away_score,
        result=match.result,
        result_display=match.result_display,
        home_goal_events=sum(1 for e in events if e.team_id == match.home_team_id),
        away_goal_events=sum(1 for e in events if e.team_id == match.away_team_id),
        goals=events,
    )


class ReportService:
    def __init__(self, store: RecordStore):
        self.store = store
        self.matches = MatchService(store)

    def get_top_scorers(self, limit: int = 10) -> List[TopScorerRead]:
        _, limit = normalize_pagination(1, limit)
        return self.store.goals.get_top_scorers(limit)

    def get_match_report(self, match_id: int) -> MatchReportRead:
        return build_match_report(self.matches.get_with_details(match_id))

    def get_all_match_reports(self, page: int = 1, limit: int = 10):
        page, limit = normalize_pagination(page, limit)
        matches, total = self.store.matches.list(page, limit)
        reports = [
            build_match_report(self.store.matches.find_by_id_with_details(m.id))
            for m in matches
        ]
        return reports, total, page, limit

    def get_completed_matches(self, page: int = 1, limit: int = 10):
        page, limit = normalize_pagination(page, limit)
        matches, total = self.store.matches.get_completed_matches(page, limit)
        return [MatchRead.from_match(m) for m in matches], total, page, limit

    def get_team_record(self, team_id: int) -> TeamRecordRead:
        team = self.store.teams.find_by_id(team_id)
        if team is None:
            raise TeamNotFound()

        record = TeamRecordRead(team=TeamSummary.model_validate(team))
        for match in self.store.matches.list_completed_by_team(team_id):
            if not match.has_result:
                continue
            at_home = match.home_team_id == team_id
            scored = match.home_score if at_home else match.away_score
            conceded = match.away_score if at_home else match.home_score

            record.played += 1
            record.goals_for += scored
            record.goals_against += conceded
            if scored > conceded:
                record.wins += 1
            elif scored < conceded:
                record.losses += 1
            else:
                record.draws += 1

        record.home_wins = self.store.matches.get_team_win_count(team_id, is_home=True)
        record.away_wins = self.store.matches.get_team_win_count(team_id, is_home=False)
        logger.debug("Team %s record: %s", team_id, record)
        return record
