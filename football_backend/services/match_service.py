# match_service.py
# Match lifecycle: creation, updates through the status state machine, deletion,
# listings, and the result-recording transaction that replaces a match's goals.

import logging
from datetime import date
from typing import List, Optional, Sequence, Tuple

from football_backend.core.errors import (
    InvalidMatchStatus,
    InvalidStatusTransition,
    MatchNotFound,
    PlayerNotFound,
    SameTeamMatch,
    TeamNotFound,
)
from football_backend.core.pagination import normalize_pagination
from football_backend.models import Goal, GoalCreate, Match, MatchStatus
from football_backend.models.match_model import (
    RESULT_RECORDABLE_STATUSES,
    is_transition_allowed,
)
from football_backend.repositories.protocols import RecordStore

logger = logging.getLogger(__name__)

# Statuses a match may be created in; COMPLETED needs a result
INITIAL_STATUSES = {MatchStatus.SCHEDULED, MatchStatus.ONGOING, MatchStatus.CANCELLED}


def parse_status(value) -> MatchStatus:
    """Coerce a raw status literal; unknown values raise InvalidMatchStatus."""
    if isinstance(value, MatchStatus):
        return value
    try:
        return MatchStatus(str(value).strip().lower())
    except ValueError:
        raise InvalidMatchStatus(f"Invalid match status: {value!r}")


class MatchService:
    def __init__(self, store: RecordStore):
        self.store = store

    # =========================================
    # Validation helpers
    # =========================================
    def _validate_teams(self, home_team_id: int, away_team_id: int) -> None:
        """Same-team check first, then both teams must resolve to live teams."""
        if home_team_id == away_team_id:
            raise SameTeamMatch()
        if not self.store.teams.exists(home_team_id):
            raise TeamNotFound("Home team not found")
        if not self.store.teams.exists(away_team_id):
            raise TeamNotFound("Away team not found")

    def _get_or_raise(self, match_id: int) -> Match:
        match = self.store.matches.find_by_id(match_id)
        if match is None:
            raise MatchNotFound()
        return match

    # =========================================
    # Create / read / update / delete
    # =========================================
    def create(
        self,
        match_date: date,
        match_time: str,
        home_team_id: int,
        away_team_id: int,
        status=None,
    ) -> Match:
        self._validate_teams(home_team_id, away_team_id)

        # Missing or blank status means a fresh fixture
        if status is None or (isinstance(status, str) and not status.strip()):
            initial = MatchStatus.SCHEDULED
        else:
            initial = parse_status(status)
        if initial not in INITIAL_STATUSES:
            raise InvalidStatusTransition(MatchStatus.SCHEDULED.value, initial.value)

        match = Match(
            match_date=match_date,
            match_time=match_time,
            home_team_id=home_team_id,
            away_team_id=away_team_id,
            status=initial,
        )
        with self.store.transaction():
            self.store.matches.create(match)

        logger.info(
            "Match %s created: team %s vs team %s on %s %s",
            match.id, home_team_id, away_team_id, match_date, match_time,
        )
        return match

    def get(self, match_id: int) -> Match:
        return self._get_or_raise(match_id)

    def get_with_details(self, match_id: int):
        details = self.store.matches.find_by_id_with_details(match_id)
        if details is None:
            raise MatchNotFound()
        return details

    def update(
        self,
        match_id: int,
        match_date: Optional[date] = None,
        match_time: Optional[str] = None,
        home_team_id: Optional[int] = None,
        away_team_id: Optional[int] = None,
        status=None,
        force: bool = False,
    ) -> Match:
        """
        Apply the supplied fields and re-run full validation.

        Status changes follow ALLOWED_STATUS_TRANSITIONS unless force=True.
        Moving a completed match back to another status clears its result
        and soft-deletes its goals. Entering COMPLETED is only possible when
        the match already carries a result (use record_result otherwise).
        """
        match = self._get_or_raise(match_id)

        new_home = match.home_team_id if home_team_id is None else home_team_id
        new_away = match.away_team_id if away_team_id is None else away_team_id
        self._validate_teams(new_home, new_away)

        current = MatchStatus(match.status)
        requested = current if status is None else parse_status(status)
        if requested != current:
            if not force and not is_transition_allowed(current, requested):
                logger.warning(
                    "Rejected status change for match %s: %s -> %s",
                    match_id, current.value, requested.value,
                )
                raise InvalidStatusTransition(current.value, requested.value)
            if requested == MatchStatus.COMPLETED and not match.has_result:
                raise InvalidStatusTransition(current.value, requested.value)

        if match_date is not None:
            match.match_date = match_date
        if match_time is not None:
            match.match_time = match_time
        match.home_team_id = new_home
        match.away_team_id = new_away

        reopened = current == MatchStatus.COMPLETED and requested != MatchStatus.COMPLETED
        with self.store.transaction():
            if reopened:
                removed = self.store.goals.delete_by_match_id(match_id)
                match.home_score = None
                match.away_score = None
                logger.info("Match %s reopened as %s; cleared result and %d goals",
                            match_id, requested.value, removed)
            match.status = requested
            self.store.matches.update(match)

        logger.info("Match %s updated", match_id)
        return match

    def delete(self, match_id: int) -> None:
        self._get_or_raise(match_id)
        with self.store.transaction():
            self.store.goals.delete_by_match_id(match_id)
            self.store.matches.delete(match_id)
        logger.info("Match %s deleted", match_id)

    # =========================================
    # Listings (all paginated, page/limit clamped)
    # =========================================
    def list(self, page: int = 1, limit: int = 10) -> Tuple[List[Match], int, int, int]:
        page, limit = normalize_pagination(page, limit)
        items, total = self.store.matches.list(page, limit)
        return items, total, page, limit

    def list_by_date_range(self, start_date: date, end_date: date, page: int = 1, limit: int = 10):
        page, limit = normalize_pagination(page, limit)
        items, total = self.store.matches.list_by_date_range(start_date, end_date, page, limit)
        return items, total, page, limit

    def list_by_team(self, team_id: int, page: int = 1, limit: int = 10):
        if not self.store.teams.exists(team_id):
            raise TeamNotFound()
        page, limit = normalize_pagination(page, limit)
        items, total = self.store.matches.list_by_team(team_id, page, limit)
        return items, total, page, limit

    def list_by_status(self, status, page: int = 1, limit: int = 10):
        status = parse_status(status)
        page, limit = normalize_pagination(page, limit)
        items, total = self.store.matches.list_by_status(status, page, limit)
        return items, total, page, limit

    def list_completed(self, page: int = 1, limit: int = 10):
        page, limit = normalize_pagination(page, limit)
        items, total = self.store.matches.get_completed_matches(page, limit)
        return items, total, page, limit

    # =========================================
    # Result recording
    # =========================================
    def record_result(
        self,
        match_id: int,
        home_score: int,
        away_score: int,
        goals: Sequence[GoalCreate] = (),
    ):
        """
        Record (or correct) the final score of a match and replace its goals.

        1. The match must exist and must not be cancelled.
        2. Every scorer must resolve to a live player; this is checked before
           anything is written, so a bad goal leaves the match untouched.
        3. In one transaction: drop the previous goals if the match was
           already completed, set both scores and COMPLETED, insert the new
           goals as a batch.
        4. Return the match re-fetched with teams and goals.
        """
        details = self.get_with_details(match_id)
        match = details.match

        current = MatchStatus(match.status)
        if current not in RESULT_RECORDABLE_STATUSES:
            logger.warning("Refused to record a result for %s match %s", current.value, match_id)
            raise InvalidStatusTransition(current.value, MatchStatus.COMPLETED.value)

        for goal in goals:
            if not self.store.players.exists(goal.player_id):
                logger.warning("Result for match %s references unknown player %s",
                               match_id, goal.player_id)
                raise PlayerNotFound(f"Player {goal.player_id} not found")

        is_correction = current == MatchStatus.COMPLETED
        new_goals = [
            Goal(
                match_id=match_id,
                player_id=g.player_id,
                team_id=g.team_id,
                minute=g.minute,
                is_own_goal=g.is_own_goal,
            )
            for g in goals
        ]

        with self.store.transaction():
            if is_correction:
                removed = self.store.goals.delete_by_match_id(match_id)
                logger.info("Match %s result corrected; replaced %d goals", match_id, removed)
            match.home_score = home_score
            match.away_score = away_score
            match.status = MatchStatus.COMPLETED
            self.store.matches.update(match)
            self.store.goals.create_batch(new_goals)

        logger.info(
            "Result recorded for match %s: %d-%d (%d goals)",
            match_id, home_score, away_score, len(new_goals),
        )
        return self.get_with_details(match_id)
