# goal_model.py
# A Goal belongs to exactly one Match and is only written by result recording.
# Re-recording a result soft-deletes the previous goals and inserts the new set.

from typing import Optional, TYPE_CHECKING
from datetime import datetime
from football_backend.core.clock import utc_now
from sqlmodel import SQLModel, Field, Relationship

if TYPE_CHECKING:
    from .player_model import Player
    from .team_model import Team


class Goal(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)

    match_id: int = Field(foreign_key="match.id", index=True)
    player_id: int = Field(foreign_key="player.id", index=True)
    team_id: int = Field(foreign_key="team.id", index=True)   # scoring side, differs from player's team on own goals

    minute: int                                                # 1-120
    is_own_goal: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    deleted_at: Optional[datetime] = Field(default=None, index=True)

    player: Optional["Player"] = Relationship()
    team: Optional["Team"] = Relationship()


# -------------------------------
# Pydantic schemas for API responses
# -------------------------------
from pydantic import BaseModel


class GoalRead(BaseModel):
    id: int
    match_id: int
    player_id: int
    player_name: Optional[str] = None
    team_id: int
    team_name: Optional[str] = None
    minute: int
    is_own_goal: bool

    @classmethod
    def from_goal(cls, goal: Goal) -> "GoalRead":
        return cls(
            id=goal.id,
            match_id=goal.match_id,
            player_id=goal.player_id,
            player_name=goal.player.name if goal.player else None,
            team_id=goal.team_id,
            team_name=goal.team.name if goal.team else None,
            minute=goal.minute,
            is_own_goal=goal.is_own_goal,
        )
