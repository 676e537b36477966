# match_model.py
# Defines the Match model (fixtures and results), its status state machine,
# and the derived MatchResult which is never stored.

from typing import Optional, List, Dict, Set
from datetime import datetime, date
from enum import Enum
from football_backend.core.clock import utc_now
from sqlmodel import SQLModel, Field


class MatchStatus(str, Enum):
    SCHEDULED = "scheduled"
    ONGOING = "ongoing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


STATUS_DISPLAY_NAMES: Dict[MatchStatus, str] = {
    MatchStatus.SCHEDULED: "Scheduled",
    MatchStatus.ONGOING: "Ongoing",
    MatchStatus.COMPLETED: "Completed",
    MatchStatus.CANCELLED: "Cancelled",
}

# Status changes an ordinary update may perform. Entering COMPLETED is reserved
# for result recording; leaving COMPLETED or CANCELLED->ONGOING needs force=True.
ALLOWED_STATUS_TRANSITIONS: Dict[MatchStatus, Set[MatchStatus]] = {
    MatchStatus.SCHEDULED: {MatchStatus.ONGOING, MatchStatus.CANCELLED},
    MatchStatus.ONGOING: {MatchStatus.SCHEDULED, MatchStatus.CANCELLED},
    MatchStatus.COMPLETED: set(),
    MatchStatus.CANCELLED: {MatchStatus.SCHEDULED},
}

# Statuses from which a result may be recorded (COMPLETED means correction)
RESULT_RECORDABLE_STATUSES: Set[MatchStatus] = {
    MatchStatus.SCHEDULED,
    MatchStatus.ONGOING,
    MatchStatus.COMPLETED,
}


def is_transition_allowed(current: MatchStatus, requested: MatchStatus) -> bool:
    if current == requested:
        return True
    return requested in ALLOWED_STATUS_TRANSITIONS[current]


class MatchResult(str, Enum):
    HOME_WIN = "home_win"
    AWAY_WIN = "away_win"
    DRAW = "draw"
    NOT_PLAYED = "not_played"


RESULT_DISPLAY_NAMES: Dict[MatchResult, str] = {
    MatchResult.HOME_WIN: "Home Team Win",
    MatchResult.AWAY_WIN: "Away Team Win",
    MatchResult.DRAW: "Draw",
    MatchResult.NOT_PLAYED: "Not Played",
}


def get_result(home_score: Optional[int], away_score: Optional[int]) -> MatchResult:
    """Pure function of the two scores; NOT_PLAYED unless both are present."""
    if home_score is None or away_score is None:
        return MatchResult.NOT_PLAYED
    if home_score > away_score:
        return MatchResult.HOME_WIN
    if away_score > home_score:
        return MatchResult.AWAY_WIN
    return MatchResult.DRAW


class Match(SQLModel, table=True):
    """
    A scheduled match between two teams.
    home_score/away_score stay None until a result is recorded and are always set together.
    """
    id: Optional[int] = Field(default=None, primary_key=True)

    match_date: date = Field(index=True)
    match_time: str = Field(max_length=10)                  # HH:MM

    home_team_id: int = Field(foreign_key="team.id", index=True)
    away_team_id: int = Field(foreign_key="team.id", index=True)

    # Results (populated by result recording)
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    status: MatchStatus = Field(default=MatchStatus.SCHEDULED, index=True)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    deleted_at: Optional[datetime] = Field(default=None, index=True)

    @property
    def has_result(self) -> bool:
        return self.home_score is not None and self.away_score is not None

    @property
    def result(self) -> MatchResult:
        return get_result(self.home_score, self.away_score)

    @property
    def result_display(self) -> str:
        return RESULT_DISPLAY_NAMES[self.result]


# -------------------------------
# Pydantic schemas for API requests/responses
# -------------------------------
from pydantic import BaseModel
from pydantic import Field as SchemaField
from football_backend.models.team_model import TeamSummary
from football_backend.models.goal_model import GoalRead

MATCH_TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class MatchCreate(BaseModel):
    match_date: date
    match_time: str = SchemaField(pattern=MATCH_TIME_PATTERN)
    home_team_id: int
    away_team_id: int
    status: Optional[str] = None   # defaults to "scheduled"


class MatchUpdate(BaseModel):
    """Only supplied fields are applied; force bypasses the status transition table."""
    match_date: Optional[date] = None
    match_time: Optional[str] = SchemaField(default=None, pattern=MATCH_TIME_PATTERN)
    home_team_id: Optional[int] = None
    away_team_id: Optional[int] = None
    status: Optional[str] = None
    force: bool = False


class GoalCreate(BaseModel):
    player_id: int
    team_id: int
    minute: int = SchemaField(ge=1, le=120)
    is_own_goal: bool = False


class MatchResultCreate(BaseModel):
    home_score: int = SchemaField(ge=0)
    away_score: int = SchemaField(ge=0)
    goals: List[GoalCreate] = []


class MatchRead(BaseModel):
    id: int
    match_date: date
    match_time: str
    home_team_id: int
    away_team_id: int
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    status: MatchStatus
    status_name: str
    result: MatchResult
    result_display: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_match(cls, match: Match) -> "MatchRead":
        return cls(
            id=match.id,
            match_date=match.match_date,
            match_time=match.match_time,
            home_team_id=match.home_team_id,
            away_team_id=match.away_team_id,
            home_score=match.home_score,
            away_score=match.away_score,
            status=match.status,
            status_name=STATUS_DISPLAY_NAMES[MatchStatus(match.status)],
            result=match.result,
            result_display=match.result_display,
            created_at=match.created_at,
            updated_at=match.updated_at,
        )


class MatchDetailRead(MatchRead):
    home_team: Optional[TeamSummary] = None
    away_team: Optional[TeamSummary] = None
    goals: List[GoalRead] = []

    @classmethod
    def from_details(cls, details) -> "MatchDetailRead":
        """Build from a repositories.match_repository.MatchDetails bundle."""
        base = MatchRead.from_match(details.match).model_dump()
        return cls(
            **base,
            home_team=TeamSummary.model_validate(details.home_team) if details.home_team else None,
            away_team=TeamSummary.model_validate(details.away_team) if details.away_team else None,
            goals=[GoalRead.from_goal(g) for g in details.goals],
        )
