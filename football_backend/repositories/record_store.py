# record_store.py
# SQLModel-backed Record Store: every repository shares the request's Session,
# and transaction() is the single commit/rollback boundary.

import logging
from contextlib import contextmanager

from fastapi import Depends
from sqlmodel import Session

from football_backend.core.database import get_session
from football_backend.repositories.goal_repository import SqlGoalRepository
from football_backend.repositories.match_repository import SqlMatchRepository
from football_backend.repositories.player_repository import SqlPlayerRepository
from football_backend.repositories.team_repository import SqlTeamRepository
from football_backend.repositories.user_repository import SqlUserRepository

logger = logging.getLogger(__name__)


class SqlRecordStore:
    def __init__(self, session: Session):
        self.session = session
        self.teams = SqlTeamRepository(session)
        self.players = SqlPlayerRepository(session)
        self.matches = SqlMatchRepository(session)
        self.goals = SqlGoalRepository(session)
        self.users = SqlUserRepository(session)

    @contextmanager
    def transaction(self):
        """Commit everything written inside the block, or roll all of it back."""
        try:
            yield self
            self.session.commit()
        except Exception:
            logger.warning("Rolling back record store transaction", exc_info=True)
            self.session.rollback()
            raise


def get_record_store(session: Session = Depends(get_session)) -> SqlRecordStore:
    return SqlRecordStore(session)
