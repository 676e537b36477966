# report_model.py
# Read-only projections produced by the report service. Nothing here is persisted.

from typing import Optional, List
from datetime import date
from pydantic import BaseModel, computed_field

from football_backend.models.team_model import TeamSummary
from football_backend.models.match_model import MatchStatus, MatchResult


class TopScorerRead(BaseModel):
    player_id: int
    player_name: str
    team_id: int
    team_name: str
    goal_count: int


class GoalEventRead(BaseModel):
    minute: int
    player_id: int
    player_name: Optional[str] = None
    team_id: int
    team_name: Optional[str] = None
    is_own_goal: bool


class MatchReportRead(BaseModel):
    match_id: int
    match_date: date
    match_time: str
    status: MatchStatus
    home_team: Optional[TeamSummary] = None
    away_team: Optional[TeamSummary] = None
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    result: MatchResult
    result_display: str
    home_goal_events: int = 0    # goals credited to the home side
    away_goal_events: int = 0
    goals: List[GoalEventRead] = []


class TeamRecordRead(BaseModel):
    """Win/draw/loss summary over a team's completed matches."""
    team: TeamSummary
    played: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    goals_for: int = 0
    goals_against: int = 0
    home_wins: int = 0
    away_wins: int = 0

    @computed_field
    @property
    def goal_difference(self) -> int:
        return self.goals_for - self.goals_against
