"""
Pytest configuration and shared fixtures.

Provides:
- An in-memory SQLite engine shared across threads (StaticPool)
- A Session / SqlRecordStore per test
- A FastAPI TestClient with get_session overridden
- Small factories for teams, players and matches
- Admin and regular user auth headers
"""

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from football_backend.core.database import get_session, init_db
from football_backend.core.security import create_access_token
from football_backend.main import app
from football_backend.models import PlayerCreate, TeamCreate, UserRegister
from football_backend.repositories.record_store import SqlRecordStore
from football_backend.services.auth_service import AuthService
from football_backend.services.match_service import MatchService
from football_backend.services.player_service import PlayerService
from football_backend.services.team_service import TeamService


# ============================================================================
# DATABASE FIXTURES
# ============================================================================

@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def store(session):
    return SqlRecordStore(session)


@pytest.fixture
def client(session):
    def override_get_session():
        yield session

    app.dependency_overrides[get_session] = override_get_session
    # No context manager: startup seeding would hit the configured database
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()


# ============================================================================
# FACTORIES
# ============================================================================

@pytest.fixture
def make_team(store):
    counter = {"n": 0}

    def _make_team(name=None, city="Springfield"):
        counter["n"] += 1
        return TeamService(store).create(TeamCreate(
            name=name or f"Team {counter['n']}",
            founded_year=1900 + counter["n"],
            city=city,
        ))

    return _make_team


@pytest.fixture
def make_player(store):
    def _make_player(team, jersey_number, name=None, position="forward"):
        return PlayerService(store).create(PlayerCreate(
            team_id=team.id,
            name=name or f"Player {jersey_number}",
            height=180.0,
            weight=75.0,
            position=position,
            jersey_number=jersey_number,
        ))

    return _make_player


@pytest.fixture
def make_match(store):
    def _make_match(home, away, match_date=date(2024, 5, 1), match_time="15:00", status=None):
        return MatchService(store).create(match_date, match_time, home.id, away.id, status)

    return _make_match


# ============================================================================
# AUTH FIXTURES
# ============================================================================

@pytest.fixture
def admin_headers(store):
    admin = AuthService(store).ensure_default_admin("admin@test.local", "secret123")
    token = create_access_token(admin.id, admin.email, "admin")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers(store):
    response = AuthService(store).register(
        UserRegister(name="Regular User", email="user@test.local", password="secret123")
    )
    return {"Authorization": f"Bearer {response.access_token}"}
