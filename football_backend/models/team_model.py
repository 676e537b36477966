# team_model.py
# Defines the Team table plus the request/response schemas used by the team routes.

from typing import Optional
from datetime import datetime
from football_backend.core.clock import utc_now
from sqlmodel import SQLModel, Field


class Team(SQLModel, table=True):
    """A football team. Soft-deleted rows keep deleted_at set and are hidden from default queries."""
    id: Optional[int] = Field(default=None, primary_key=True)

    name: str = Field(index=True, max_length=255)
    logo: Optional[str] = Field(default=None, max_length=500)   # URL to the crest
    founded_year: int
    address: Optional[str] = Field(default=None, max_length=500)
    city: str = Field(index=True, max_length=100)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    deleted_at: Optional[datetime] = Field(default=None, index=True)


# -------------------------------
# Pydantic schemas for API requests/responses
# -------------------------------
from pydantic import BaseModel
from pydantic import Field as SchemaField


class TeamCreate(BaseModel):
    name: str = SchemaField(min_length=2, max_length=255)
    logo: Optional[str] = SchemaField(default=None, max_length=500)
    founded_year: int = SchemaField(ge=1800, le=2100)
    address: Optional[str] = SchemaField(default=None, max_length=500)
    city: str = SchemaField(min_length=2, max_length=100)


class TeamUpdate(BaseModel):
    """Only supplied fields are applied."""
    name: Optional[str] = SchemaField(default=None, min_length=2, max_length=255)
    logo: Optional[str] = SchemaField(default=None, max_length=500)
    founded_year: Optional[int] = SchemaField(default=None, ge=1800, le=2100)
    address: Optional[str] = SchemaField(default=None, max_length=500)
    city: Optional[str] = SchemaField(default=None, min_length=2, max_length=100)


class TeamSummary(BaseModel):
    """Minimal team info embedded in player, match and goal responses."""
    id: int
    name: str
    logo: Optional[str] = None
    city: str

    class Config:
        from_attributes = True


class TeamRead(BaseModel):
    id: int
    name: str
    logo: Optional[str] = None
    founded_year: int
    address: Optional[str] = None
    city: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
