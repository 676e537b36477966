from typing import List, Optional, Sequence

from sqlalchemy import func
from sqlmodel import col, select

from football_backend.core.clock import utc_now
from football_backend.models import Goal, Player, Team
from football_backend.models.report_model import TopScorerRead
from football_backend.repositories.base_repository import SqlRepository, live


class SqlGoalRepository(SqlRepository):
    model = Goal

    def create(self, goal: Goal) -> Goal:
        return self._save(goal)

    def create_batch(self, goals: Sequence[Goal]) -> List[Goal]:
        """Insert every goal in one flush; nothing is written if the flush fails."""
        goals = list(goals)
        if not goals:
            return []
        self.session.add_all(goals)
        self.session.flush()
        return goals

    def find_by_id(self, goal_id: int) -> Optional[Goal]:
        return self._find_live(goal_id)

    def find_by_match_id(self, match_id: int) -> List[Goal]:
        stmt = (
            self._live_select()
            .where(col(Goal.match_id) == match_id)
            .order_by(col(Goal.minute), col(Goal.id))
        )
        return list(self.session.exec(stmt).all())

    def find_by_player_id(self, player_id: int) -> List[Goal]:
        stmt = (
            self._live_select()
            .where(col(Goal.player_id) == player_id)
            .order_by(col(Goal.match_id), col(Goal.minute), col(Goal.id))
        )
        return list(self.session.exec(stmt).all())

    def delete_by_match_id(self, match_id: int) -> int:
        """Soft-delete every live goal of a match. Returns the number of goals removed."""
        now = utc_now()
        goals = self.find_by_match_id(match_id)
        for goal in goals:
            goal.deleted_at = now
            goal.updated_at = now
            self.session.add(goal)
        self.session.flush()
        return len(goals)

    def get_top_scorers(self, limit: int) -> List[TopScorerRead]:
        goal_count = func.count(Goal.id).label("goal_count")
        stmt = (
            select(col(Player.id), col(Player.name), col(Team.id), col(Team.name), goal_count)
            .select_from(Goal)
            .join(Player, col(Player.id) == col(Goal.player_id))
            .join(Team, col(Team.id) == col(Player.team_id))
            .where(live(Goal), live(Player))
            .group_by(col(Player.id), col(Player.name), col(Team.id), col(Team.name))
            .order_by(goal_count.desc(), col(Player.id))
            .limit(limit)
        )
        return [
            TopScorerRead(
                player_id=player_id,
                player_name=player_name,
                team_id=team_id,
                team_name=team_name,
                goal_count=count,
            )
            for player_id, player_name, team_id, team_name, count in self.session.exec(stmt).all()
        ]
