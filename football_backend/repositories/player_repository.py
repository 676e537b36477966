from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlmodel import col, select

from football_backend.models import Goal, Player
from football_backend.repositories.base_repository import SqlRepository, live


class SqlPlayerRepository(SqlRepository):
    model = Player

    def exists(self, player_id: int) -> bool:
        return self._exists(player_id)

    def find_by_id(self, player_id: int) -> Optional[Player]:
        return self._find_live(player_id)

    def find_by_id_with_team(self, player_id: int) -> Optional[Player]:
        player = self._find_live(player_id)
        if player is not None:
            _ = player.team  # load the relationship while the session is open
        return player

    def create(self, player: Player) -> Player:
        return self._save(player)

    def update(self, player: Player) -> Player:
        return self._touch_and_save(player)

    def delete(self, player_id: int) -> None:
        self._soft_delete(player_id)

    def list(self, page: int, limit: int) -> Tuple[List[Player], int]:
        stmt = self._live_select().order_by(col(Player.created_at).desc(), col(Player.id).desc())
        return self._paginate(stmt, [], page, limit)

    def list_by_team(self, team_id: int, page: int, limit: int) -> Tuple[List[Player], int]:
        condition = col(Player.team_id) == team_id
        stmt = (
            self._live_select()
            .where(condition)
            .order_by(col(Player.jersey_number), col(Player.id))
        )
        return self._paginate(stmt, [condition], page, limit)

    def search(self, query: str, page: int, limit: int) -> Tuple[List[Player], int]:
        condition = col(Player.name).ilike(f"%{query}%")
        stmt = (
            self._live_select()
            .where(condition)
            .order_by(col(Player.created_at).desc(), col(Player.id).desc())
        )
        return self._paginate(stmt, [condition], page, limit)

    def is_jersey_number_taken(
        self, team_id: int, jersey_number: int, exclude_player_id: Optional[int] = None
    ) -> bool:
        conditions = [col(Player.team_id) == team_id, col(Player.jersey_number) == jersey_number]
        if exclude_player_id is not None:
            conditions.append(col(Player.id) != exclude_player_id)
        return self._count(*conditions) > 0

    def get_top_scorers(self, limit: int) -> List[Tuple[Player, int]]:
        """Players ordered by live goal count, most first; ties broken by player id."""
        goal_count = func.count(Goal.id).label("goal_count")
        stmt = (
            select(Player, goal_count)
            .join(Goal, col(Goal.player_id) == col(Player.id))
            .where(live(Goal), live(Player))
            .group_by(col(Player.id))
            .order_by(goal_count.desc(), col(Player.id))
            .limit(limit)
        )
        return [(player, count) for player, count in self.session.exec(stmt).all()]
