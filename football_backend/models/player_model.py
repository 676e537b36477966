# football_backend/models/player_model.py
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime
from enum import Enum
from football_backend.core.clock import utc_now
from sqlmodel import SQLModel, Field, Relationship

if TYPE_CHECKING:
    from .team_model import Team


class PlayerPosition(str, Enum):
    FORWARD = "forward"
    MIDFIELDER = "midfielder"
    DEFENDER = "defender"
    GOALKEEPER = "goalkeeper"


def is_valid_position(position) -> bool:
    return position in {p.value for p in PlayerPosition}


JERSEY_NUMBER_MIN = 1
JERSEY_NUMBER_MAX = 99


def is_valid_jersey_number(number: int) -> bool:
    return JERSEY_NUMBER_MIN <= number <= JERSEY_NUMBER_MAX


class Player(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    team_id: int = Field(foreign_key="team.id", index=True)

    name: str = Field(index=True, max_length=255)
    height: float            # cm
    weight: float            # kg
    position: str            # one of PlayerPosition
    jersey_number: int       # unique per team among live players

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    deleted_at: Optional[datetime] = Field(default=None, index=True)

    team: Optional["Team"] = Relationship()


# -------------------------------
# Pydantic schemas for API requests/responses
# -------------------------------
from pydantic import BaseModel
from pydantic import Field as SchemaField
from football_backend.models.team_model import TeamRead, TeamSummary


class PlayerCreate(BaseModel):
    # position and jersey_number are checked by the service so the API reports
    # InvalidPosition / InvalidJerseyNumber instead of a generic 422
    team_id: int
    name: str = SchemaField(min_length=2, max_length=255)
    height: float = SchemaField(gt=0, le=300)
    weight: float = SchemaField(gt=0, le=300)
    position: str
    jersey_number: int


class PlayerUpdate(BaseModel):
    team_id: Optional[int] = None
    name: Optional[str] = SchemaField(default=None, min_length=2, max_length=255)
    height: Optional[float] = SchemaField(default=None, gt=0, le=300)
    weight: Optional[float] = SchemaField(default=None, gt=0, le=300)
    position: Optional[str] = None
    jersey_number: Optional[int] = None


class PlayerRead(BaseModel):
    id: int
    team_id: int
    name: str
    height: float
    weight: float
    position: str
    jersey_number: int
    team: Optional[TeamSummary] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class TeamWithPlayersRead(TeamRead):
    """Team detail view including its live squad ordered by jersey number."""
    players: List[PlayerRead] = []
