# seed_all.py
# Startup seeding: the default admin account always, demo teams/players/fixture in TEST_MODE.

import logging
from datetime import date, timedelta

from sqlmodel import Session, func, select

from football_backend.core.config import ADMIN_EMAIL, ADMIN_PASSWORD, TEST_MODE
from football_backend.core.database import get_sync_session
from football_backend.models import MatchStatus, PlayerCreate, Team, TeamCreate
from football_backend.repositories.record_store import SqlRecordStore
from football_backend.services.auth_service import AuthService
from football_backend.services.match_service import MatchService
from football_backend.services.player_service import PlayerService
from football_backend.services.team_service import TeamService

logger = logging.getLogger(__name__)

DEMO_TEAMS = [
    {"name": "Riverside United", "founded_year": 1902, "city": "Riverside", "address": "1 Stadium Road"},
    {"name": "Hillcrest Athletic", "founded_year": 1921, "city": "Hillcrest", "address": "Park Lane"},
]

# (team index, name, position, jersey)
DEMO_PLAYERS = [
    (0, "Tom Keller", "goalkeeper", 1),
    (0, "Marco Diaz", "defender", 4),
    (0, "Lukas Brandt", "midfielder", 8),
    (0, "Sam Okafor", "forward", 9),
    (1, "Pieter Janssen", "goalkeeper", 1),
    (1, "Ali Hassan", "defender", 5),
    (1, "Jonas Berg", "midfielder", 10),
    (1, "Rui Costa", "forward", 11),
]


def seed_default_admin(session: Session = None):
    """Ensure the configured admin account exists."""
    own_session = session is None
    session = session or get_sync_session()
    try:
        return AuthService(SqlRecordStore(session)).ensure_default_admin(ADMIN_EMAIL, ADMIN_PASSWORD)
    finally:
        if own_session:
            session.close()


def seed_demo_data(session: Session = None) -> bool:
    """
    Two teams, a squad of four each and one upcoming fixture.
    Skipped when any team already exists. Returns True if data was written.
    """
    own_session = session is None
    session = session or get_sync_session()
    try:
        team_count = session.exec(select(func.count()).select_from(Team)).one()
        if team_count > 0:
            logger.info("Teams already present (%d); skipping demo data", team_count)
            return False

        store = SqlRecordStore(session)
        teams = [TeamService(store).create(TeamCreate(**data)) for data in DEMO_TEAMS]

        players = PlayerService(store)
        for team_index, name, position, jersey in DEMO_PLAYERS:
            players.create(PlayerCreate(
                team_id=teams[team_index].id,
                name=name,
                height=180.0,
                weight=75.0,
                position=position,
                jersey_number=jersey,
            ))

        MatchService(store).create(
            match_date=date.today() + timedelta(days=7),
            match_time="15:00",
            home_team_id=teams[0].id,
            away_team_id=teams[1].id,
            status=MatchStatus.SCHEDULED,
        )
        logger.info("Demo data seeded: %d teams, %d players, 1 fixture", len(teams), len(DEMO_PLAYERS))
        return True
    finally:
        if own_session:
            session.close()


def seed_all():
    seed_default_admin()
    if TEST_MODE:
        seed_demo_data()


if __name__ == "__main__":
    from football_backend.core.database import init_db
    from football_backend.core.logging_config import setup_logging

    setup_logging()
    init_db()
    seed_all()
