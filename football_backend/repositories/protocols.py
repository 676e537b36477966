"""Record Store contracts.

The services depend only on these ``Protocol`` interfaces. The SQLModel
implementations live beside this module (``*_repository.py`` and
``record_store.py``); tests and alternative back ends can provide their own.

Conventions shared by every repository:

- Soft-deleted rows (``deleted_at`` set) are invisible to ``exists`` /
  ``find_*`` / ``list_*``.
- Paginated listings take an already-clamped ``page``/``limit`` and return
  ``(items, total)`` where ``total`` ignores pagination.
- Write methods flush but never commit; committing belongs to
  ``RecordStore.transaction()``.
"""

from datetime import date
from typing import ContextManager, List, Optional, Protocol, Sequence, Tuple

from football_backend.models import Goal, Match, MatchStatus, Player, Team, User
from football_backend.models.report_model import TopScorerRead


class TeamRepository(Protocol):
    def exists(self, team_id: int) -> bool: ...
    def find_by_id(self, team_id: int) -> Optional[Team]: ...
    def find_by_id_with_players(self, team_id: int) -> Optional[Tuple[Team, List[Player]]]: ...
    def create(self, team: Team) -> Team: ...
    def update(self, team: Team) -> Team: ...
    def delete(self, team_id: int) -> None: ...
    def list(self, page: int, limit: int) -> Tuple[List[Team], int]: ...
    def search(self, query: str, page: int, limit: int) -> Tuple[List[Team], int]: ...


class PlayerRepository(Protocol):
    def exists(self, player_id: int) -> bool: ...
    def find_by_id(self, player_id: int) -> Optional[Player]: ...
    def find_by_id_with_team(self, player_id: int) -> Optional[Player]: ...
    def create(self, player: Player) -> Player: ...
    def update(self, player: Player) -> Player: ...
    def delete(self, player_id: int) -> None: ...
    def list(self, page: int, limit: int) -> Tuple[List[Player], int]: ...
    def list_by_team(self, team_id: int, page: int, limit: int) -> Tuple[List[Player], int]: ...
    def search(self, query: str, page: int, limit: int) -> Tuple[List[Player], int]: ...
    def is_jersey_number_taken(
        self, team_id: int, jersey_number: int, exclude_player_id: Optional[int] = None
    ) -> bool: ...
    def get_top_scorers(self, limit: int) -> List[Tuple[Player, int]]: ...


class MatchRepository(Protocol):
    def exists(self, match_id: int) -> bool: ...
    def find_by_id(self, match_id: int) -> Optional[Match]: ...
    def find_by_id_with_details(self, match_id: int): ...
    def create(self, match: Match) -> Match: ...
    def update(self, match: Match) -> Match: ...
    def delete(self, match_id: int) -> None: ...
    def list(self, page: int, limit: int) -> Tuple[List[Match], int]: ...
    def list_by_date_range(
        self, start_date: date, end_date: date, page: int, limit: int
    ) -> Tuple[List[Match], int]: ...
    def list_by_team(self, team_id: int, page: int, limit: int) -> Tuple[List[Match], int]: ...
    def list_by_status(self, status: MatchStatus, page: int, limit: int) -> Tuple[List[Match], int]: ...
    def get_completed_matches(self, page: int, limit: int) -> Tuple[List[Match], int]: ...
    def list_completed_by_team(self, team_id: int) -> List[Match]: ...
    def get_team_win_count(self, team_id: int, is_home: bool) -> int: ...


class GoalRepository(Protocol):
    def create(self, goal: Goal) -> Goal: ...
    def create_batch(self, goals: Sequence[Goal]) -> List[Goal]: ...
    def find_by_id(self, goal_id: int) -> Optional[Goal]: ...
    def find_by_match_id(self, match_id: int) -> List[Goal]: ...
    def find_by_player_id(self, player_id: int) -> List[Goal]: ...
    def delete_by_match_id(self, match_id: int) -> int: ...
    def get_top_scorers(self, limit: int) -> List[TopScorerRead]: ...


class UserRepository(Protocol):
    def create(self, user: User) -> User: ...
    def find_by_id(self, user_id: int) -> Optional[User]: ...
    def find_by_email(self, email: str) -> Optional[User]: ...


class RecordStore(Protocol):
    """Bundle of repositories sharing one unit of work."""
    teams: TeamRepository
    players: PlayerRepository
    matches: MatchRepository
    goals: GoalRepository
    users: UserRepository

    def transaction(self) -> ContextManager["RecordStore"]: ...
