from datetime import date

import pytest

from football_backend.core.errors import (
    InvalidMatchStatus,
    InvalidStatusTransition,
    MatchNotFound,
    PlayerNotFound,
    SameTeamMatch,
    TeamNotFound,
)
from football_backend.models import GoalCreate, MatchResult, MatchStatus
from football_backend.services.match_service import MatchService


@pytest.fixture
def service(store):
    return MatchService(store)


@pytest.fixture
def teams(make_team):
    return make_team("Alpha FC"), make_team("Beta FC")


# =========================================
# Create
# =========================================
def test_create_match_defaults_to_scheduled(service, teams):
    home, away = teams
    match = service.create(date(2024, 5, 1), "15:00", home.id, away.id)

    assert match.id is not None
    assert match.status == MatchStatus.SCHEDULED
    assert match.home_score is None and match.away_score is None


def test_create_same_team_fails_even_for_unknown_team(service):
    with pytest.raises(SameTeamMatch):
        service.create(date(2024, 5, 1), "15:00", 999, 999)


def test_create_same_team_fails_for_existing_team(service, teams):
    home, _ = teams
    with pytest.raises(SameTeamMatch):
        service.create(date(2024, 5, 1), "15:00", home.id, home.id)


def test_create_with_missing_team(service, teams):
    home, _ = teams
    with pytest.raises(TeamNotFound):
        service.create(date(2024, 5, 1), "15:00", home.id, 999)


def test_create_rejects_unknown_and_completed_status(service, teams):
    home, away = teams
    with pytest.raises(InvalidMatchStatus):
        service.create(date(2024, 5, 1), "15:00", home.id, away.id, status="postponed")
    with pytest.raises(InvalidStatusTransition):
        service.create(date(2024, 5, 1), "15:00", home.id, away.id, status="completed")


# =========================================
# Record result
# =========================================
def test_end_to_end_result(service, teams, make_player, store):
    home, away = teams
    striker = make_player(home, 9)
    match = service.create(date(2024, 5, 1), "15:00", home.id, away.id)

    details = service.record_result(
        match.id, 2, 1, [GoalCreate(player_id=striker.id, team_id=home.id, minute=34)]
    )

    assert details.match.status == MatchStatus.COMPLETED
    assert details.match.result == MatchResult.HOME_WIN
    assert len(details.goals) == 1
    assert details.goals[0].player.name == striker.name
    assert len(store.goals.find_by_player_id(striker.id)) == 1


def test_recording_twice_replaces_goals(service, teams, make_player, store):
    home, away = teams
    p1 = make_player(home, 9)
    p2 = make_player(away, 10)
    match = service.create(date(2024, 5, 1), "15:00", home.id, away.id)

    service.record_result(match.id, 2, 0, [
        GoalCreate(player_id=p1.id, team_id=home.id, minute=10),
        GoalCreate(player_id=p1.id, team_id=home.id, minute=80),
    ])
    details = service.record_result(match.id, 0, 1, [
        GoalCreate(player_id=p2.id, team_id=away.id, minute=55),
    ])

    assert (details.match.home_score, details.match.away_score) == (0, 1)
    assert details.match.result == MatchResult.AWAY_WIN
    assert [g.player_id for g in details.goals] == [p2.id]
    assert store.goals.find_by_player_id(p1.id) == []


def test_record_result_with_unknown_player_writes_nothing(service, teams, make_player, store):
    home, away = teams
    p1 = make_player(home, 9)
    match = service.create(date(2024, 5, 1), "15:00", home.id, away.id)

    with pytest.raises(PlayerNotFound):
        service.record_result(match.id, 2, 0, [
            GoalCreate(player_id=p1.id, team_id=home.id, minute=10),
            GoalCreate(player_id=9999, team_id=home.id, minute=20),
        ])

    unchanged = store.matches.find_by_id(match.id)
    assert unchanged.status == MatchStatus.SCHEDULED
    assert unchanged.home_score is None
    assert store.goals.find_by_match_id(match.id) == []


def test_record_result_on_cancelled_match_is_refused(service, teams):
    home, away = teams
    match = service.create(date(2024, 5, 1), "15:00", home.id, away.id, status="cancelled")

    with pytest.raises(InvalidStatusTransition):
        service.record_result(match.id, 1, 0, [])


def test_record_result_for_missing_match(service):
    with pytest.raises(MatchNotFound):
        service.record_result(12345, 1, 0, [])


# =========================================
# Status transitions
# =========================================
def test_allowed_status_changes(service, teams):
    home, away = teams
    match = service.create(date(2024, 5, 1), "15:00", home.id, away.id)

    assert service.update(match.id, status="ongoing").status == MatchStatus.ONGOING
    assert service.update(match.id, status="cancelled").status == MatchStatus.CANCELLED
    assert service.update(match.id, status="scheduled").status == MatchStatus.SCHEDULED


def test_illegal_status_changes(service, teams):
    home, away = teams
    match = service.create(date(2024, 5, 1), "15:00", home.id, away.id, status="cancelled")

    with pytest.raises(InvalidStatusTransition):
        service.update(match.id, status="ongoing")

    other = service.create(date(2024, 5, 2), "15:00", home.id, away.id)
    with pytest.raises(InvalidStatusTransition):
        service.update(other.id, status="completed")
    with pytest.raises(InvalidStatusTransition):
        service.update(other.id, status="completed", force=True)


def test_completed_match_needs_force_to_reopen(service, teams, make_player, store):
    home, away = teams
    p1 = make_player(home, 9)
    match = service.create(date(2024, 5, 1), "15:00", home.id, away.id)
    service.record_result(match.id, 1, 0, [GoalCreate(player_id=p1.id, team_id=home.id, minute=5)])

    with pytest.raises(InvalidStatusTransition):
        service.update(match.id, status="scheduled")

    reopened = service.update(match.id, status="scheduled", force=True)
    assert reopened.status == MatchStatus.SCHEDULED
    assert reopened.home_score is None and reopened.away_score is None
    assert store.goals.find_by_match_id(match.id) == []


def test_update_revalidates_teams(service, teams):
    home, away = teams
    match = service.create(date(2024, 5, 1), "15:00", home.id, away.id)

    with pytest.raises(SameTeamMatch):
        service.update(match.id, away_team_id=home.id)

    moved = service.update(match.id, match_date=date(2024, 6, 1), match_time="18:30")
    assert moved.match_date == date(2024, 6, 1)
    assert moved.match_time == "18:30"


# =========================================
# Delete and listings
# =========================================
def test_delete_hides_match_and_goals(service, teams, make_player, store):
    home, away = teams
    p1 = make_player(home, 9)
    match = service.create(date(2024, 5, 1), "15:00", home.id, away.id)
    service.record_result(match.id, 1, 0, [GoalCreate(player_id=p1.id, team_id=home.id, minute=5)])

    service.delete(match.id)

    with pytest.raises(MatchNotFound):
        service.get(match.id)
    assert store.goals.find_by_player_id(p1.id) == []
    with pytest.raises(MatchNotFound):
        service.delete(match.id)


def test_listings(service, teams, make_team):
    home, away = teams
    third = make_team("Gamma FC")
    service.create(date(2024, 5, 1), "15:00", home.id, away.id)
    service.create(date(2024, 5, 8), "15:00", away.id, third.id)
    service.create(date(2024, 6, 1), "15:00", third.id, home.id, status="cancelled")

    items, total, _, _ = service.list()
    assert total == 3
    assert items[0].match_date == date(2024, 6, 1)

    _, total, _, _ = service.list_by_team(home.id)
    assert total == 2

    items, total, _, _ = service.list_by_date_range(date(2024, 5, 1), date(2024, 5, 8))
    assert total == 2

    items, total, _, _ = service.list_by_status("cancelled")
    assert total == 1 and items[0].home_team_id == third.id

    with pytest.raises(InvalidMatchStatus):
        service.list_by_status("unknown")

    with pytest.raises(TeamNotFound):
        service.list_by_team(999)


def test_failed_correction_rolls_back_everything(service, teams, make_player, store, monkeypatch):
    home, away = teams
    p1 = make_player(home, 9)
    match = service.create(date(2024, 5, 1), "15:00", home.id, away.id)
    service.record_result(match.id, 1, 0, [GoalCreate(player_id=p1.id, team_id=home.id, minute=5)])

    def failing_batch(goals):
        raise RuntimeError("insert failed")

    monkeypatch.setattr(store.goals, "create_batch", failing_batch)
    with pytest.raises(RuntimeError):
        service.record_result(match.id, 3, 3, [GoalCreate(player_id=p1.id, team_id=home.id, minute=60)])

    unchanged = store.matches.find_by_id(match.id)
    assert unchanged.status == MatchStatus.COMPLETED
    assert (unchanged.home_score, unchanged.away_score) == (1, 0)
    assert [g.minute for g in store.goals.find_by_match_id(match.id)] == [5]


@pytest.mark.parametrize("blank", ["", "   "])
def test_blank_status_means_scheduled(service, teams, blank):
    home, away = teams
    match = service.create(date(2024, 5, 1), "15:00", home.id, away.id, status=blank)
    assert match.status == MatchStatus.SCHEDULED
