import logging
from typing import Optional

from football_backend.core.errors import (
    InvalidJerseyNumber,
    InvalidPosition,
    JerseyNumberTaken,
    PlayerNotFound,
    TeamNotFound,
)
from football_backend.core.pagination import normalize_pagination
from football_backend.models import Player, PlayerCreate, PlayerUpdate
from football_backend.models.player_model import is_valid_jersey_number, is_valid_position
from football_backend.repositories.protocols import RecordStore

logger = logging.getLogger(__name__)


class PlayerService:
    def __init__(self, store: RecordStore):
        self.store = store

    def _validate(self, team_id: int, position: str, jersey_number: int,
                  exclude_player_id: Optional[int] = None) -> None:
        """
        Checks shared by create and update, in order:
        team exists, position is known, jersey in 1-99, jersey free in the team.
        """
        if not self.store.teams.exists(team_id):
            raise TeamNotFound()
        if not is_valid_position(position):
            raise InvalidPosition()
        if not is_valid_jersey_number(jersey_number):
            raise InvalidJerseyNumber()
        if self.store.players.is_jersey_number_taken(team_id, jersey_number, exclude_player_id):
            raise JerseyNumberTaken()

    def create(self, data: PlayerCreate) -> Player:
        position = data.position.strip().lower()
        self._validate(data.team_id, position, data.jersey_number)

        player = Player(**data.model_dump(exclude={"position"}), position=position)
        with self.store.transaction():
            self.store.players.create(player)
        logger.info("Player %s created on team %s (#%s)", player.id, player.team_id, player.jersey_number)
        return player

    def get(self, player_id: int) -> Player:
        player = self.store.players.find_by_id(player_id)
        if player is None:
            raise PlayerNotFound()
        return player

    def get_with_team(self, player_id: int) -> Player:
        player = self.store.players.find_by_id_with_team(player_id)
        if player is None:
            raise PlayerNotFound()
        return player

    def update(self, player_id: int, data: PlayerUpdate) -> Player:
        player = self.get(player_id)
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if "position" in changes:
            changes["position"] = changes["position"].strip().lower()

        # Re-validate the merged state, excluding this player from the jersey check
        self._validate(
            changes.get("team_id", player.team_id),
            changes.get("position", player.position),
            changes.get("jersey_number", player.jersey_number),
            exclude_player_id=player_id,
        )

        for key, value in changes.items():
            setattr(player, key, value)
        with self.store.transaction():
            self.store.players.update(player)
        logger.info("Player %s updated", player_id)
        return player

    def delete(self, player_id: int) -> None:
        if not self.store.players.exists(player_id):
            raise PlayerNotFound()
        with self.store.transaction():
            self.store.players.delete(player_id)
        logger.info("Player %s deleted", player_id)

    def list(self, page: int = 1, limit: int = 10):
        page, limit = normalize_pagination(page, limit)
        items, total = self.store.players.list(page, limit)
        return items, total, page, limit

    def list_by_team(self, team_id: int, page: int = 1, limit: int = 10):
        if not self.store.teams.exists(team_id):
            raise TeamNotFound()
        page, limit = normalize_pagination(page, limit)
        items, total = self.store.players.list_by_team(team_id, page, limit)
        return items, total, page, limit

    def search(self, query: str, page: int = 1, limit: int = 10):
        page, limit = normalize_pagination(page, limit)
        items, total = self.store.players.search(query, page, limit)
        return items, total, page, limit

    def is_jersey_number_taken(self, team_id: int, jersey_number: int,
                               exclude_player_id: Optional[int] = None) -> bool:
        return self.store.players.is_jersey_number_taken(team_id, jersey_number, exclude_player_id)
