import logging

from football_backend.core.errors import TeamNotFound
from football_backend.core.pagination import normalize_pagination
from football_backend.models import Team, TeamCreate, TeamUpdate
from football_backend.repositories.protocols import RecordStore

logger = logging.getLogger(__name__)


class TeamService:
    def __init__(self, store: RecordStore):
        self.store = store

    def create(self, data: TeamCreate) -> Team:
        team = Team(**data.model_dump())
        with self.store.transaction():
            self.store.teams.create(team)
        logger.info("Team %s created: %s", team.id, team.name)
        return team

    def get(self, team_id: int) -> Team:
        team = self.store.teams.find_by_id(team_id)
        if team is None:
            raise TeamNotFound()
        return team

    def get_with_players(self, team_id: int):
        found = self.store.teams.find_by_id_with_players(team_id)
        if found is None:
            raise TeamNotFound()
        return found

    def update(self, team_id: int, data: TeamUpdate) -> Team:
        team = self.get(team_id)
        for key, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(team, key, value)
        with self.store.transaction():
            self.store.teams.update(team)
        logger.info("Team %s updated", team_id)
        return team

    def delete(self, team_id: int) -> None:
        if not self.store.teams.exists(team_id):
            raise TeamNotFound()
        with self.store.transaction():
            self.store.teams.delete(team_id)
        logger.info("Team %s deleted", team_id)

    def list(self, page: int = 1, limit: int = 10):
        page, limit = normalize_pagination(page, limit)
        items, total = self.store.teams.list(page, limit)
        return items, total, page, limit

    def search(self, query: str, page: int = 1, limit: int = 10):
        page, limit = normalize_pagination(page, limit)
        items, total = self.store.teams.search(query, page, limit)
        return items, total, page, limit
