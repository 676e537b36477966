from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Tuple

from sqlalchemy import func, or_
from sqlmodel import col, select

from football_backend.models import Goal, Match, MatchStatus, Team
from football_backend.repositories.base_repository import SqlRepository, live


@dataclass
class MatchDetails:
    """A match with its teams and live goals loaded."""
    match: Match
    home_team: Optional[Team] = None
    away_team: Optional[Team] = None
    goals: List[Goal] = field(default_factory=list)


class SqlMatchRepository(SqlRepository):
    model = Match

    def _ordered(self, stmt):
        # Most recent fixtures first
        return stmt.order_by(
            col(Match.match_date).desc(), col(Match.match_time).desc(), col(Match.id).desc()
        )

    def exists(self, match_id: int) -> bool:
        return self._exists(match_id)

    def find_by_id(self, match_id: int) -> Optional[Match]:
        return self._find_live(match_id)

    def find_by_id_with_details(self, match_id: int) -> Optional[MatchDetails]:
        match = self._find_live(match_id)
        if match is None:
            return None
        goals = self.session.exec(
            select(Goal)
            .where(live(Goal), col(Goal.match_id) == match_id)
            .order_by(col(Goal.minute), col(Goal.id))
        ).all()
        for goal in goals:
            # load scorer and team names while the session is open
            _ = goal.player, goal.team
        return MatchDetails(
            match=match,
            home_team=self.session.get(Team, match.home_team_id),
            away_team=self.session.get(Team, match.away_team_id),
            goals=list(goals),
        )

    def create(self, match: Match) -> Match:
        return self._save(match)

    def update(self, match: Match) -> Match:
        return self._touch_and_save(match)

    def delete(self, match_id: int) -> None:
        self._soft_delete(match_id)

    def list(self, page: int, limit: int) -> Tuple[List[Match], int]:
        return self._paginate(self._ordered(self._live_select()), [], page, limit)

    def list_by_date_range(
        self, start_date: date, end_date: date, page: int, limit: int
    ) -> Tuple[List[Match], int]:
        conditions = [col(Match.match_date) >= start_date, col(Match.match_date) <= end_date]
        stmt = self._ordered(self._live_select().where(*conditions))
        return self._paginate(stmt, conditions, page, limit)

    def list_by_team(self, team_id: int, page: int, limit: int) -> Tuple[List[Match], int]:
        condition = or_(col(Match.home_team_id) == team_id, col(Match.away_team_id) == team_id)
        stmt = self._ordered(self._live_select().where(condition))
        return self._paginate(stmt, [condition], page, limit)

    def list_by_status(self, status: MatchStatus, page: int, limit: int) -> Tuple[List[Match], int]:
        condition = col(Match.status) == status
        stmt = self._ordered(self._live_select().where(condition))
        return self._paginate(stmt, [condition], page, limit)

    def get_completed_matches(self, page: int, limit: int) -> Tuple[List[Match], int]:
        return self.list_by_status(MatchStatus.COMPLETED, page, limit)

    def list_completed_by_team(self, team_id: int) -> List[Match]:
        stmt = self._ordered(
            self._live_select().where(
                col(Match.status) == MatchStatus.COMPLETED,
                or_(col(Match.home_team_id) == team_id, col(Match.away_team_id) == team_id),
            )
        )
        return list(self.session.exec(stmt).all())

    def get_team_win_count(self, team_id: int, is_home: bool) -> int:
        """Completed matches the team won while playing at home (or away)."""
        if is_home:
            conditions = [
                col(Match.home_team_id) == team_id,
                col(Match.home_score) > col(Match.away_score),
            ]
        else:
            conditions = [
                col(Match.away_team_id) == team_id,
                col(Match.away_score) > col(Match.home_score),
            ]
        stmt = (
            select(func.count())
            .select_from(Match)
            .where(live(Match), col(Match.status) == MatchStatus.COMPLETED, *conditions)
        )
        return self.session.exec(stmt).one()
