from typing import List, Optional, Tuple

from sqlalchemy import or_
from sqlmodel import col, select

from football_backend.models import Player, Team
from football_backend.repositories.base_repository import SqlRepository, live


class SqlTeamRepository(SqlRepository):
    model = Team

    def exists(self, team_id: int) -> bool:
        return self._exists(team_id)

    def find_by_id(self, team_id: int) -> Optional[Team]:
        return self._find_live(team_id)

    def find_by_id_with_players(self, team_id: int) -> Optional[Tuple[Team, List[Player]]]:
        team = self._find_live(team_id)
        if team is None:
            return None
        players = self.session.exec(
            self._players_of(team_id).order_by(col(Player.jersey_number))
        ).all()
        return team, list(players)

    def _players_of(self, team_id: int):
        return select(Player).where(live(Player), col(Player.team_id) == team_id)

    def create(self, team: Team) -> Team:
        return self._save(team)

    def update(self, team: Team) -> Team:
        return self._touch_and_save(team)

    def delete(self, team_id: int) -> None:
        self._soft_delete(team_id)

    def list(self, page: int, limit: int) -> Tuple[List[Team], int]:
        stmt = self._live_select().order_by(col(Team.created_at).desc(), col(Team.id).desc())
        return self._paginate(stmt, [], page, limit)

    def search(self, query: str, page: int, limit: int) -> Tuple[List[Team], int]:
        pattern = f"%{query}%"
        condition = or_(col(Team.name).ilike(pattern), col(Team.city).ilike(pattern))
        stmt = (
            self._live_select()
            .where(condition)
            .order_by(col(Team.created_at).desc(), col(Team.id).desc())
        )
        return self._paginate(stmt, [condition], page, limit)
