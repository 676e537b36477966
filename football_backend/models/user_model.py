from typing import Optional
from datetime import datetime
from enum import Enum
from football_backend.core.clock import utc_now
from sqlmodel import SQLModel, Field


class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    name: str = Field(max_length=255)
    password_hash: str
    role: UserRole = Field(default=UserRole.USER)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


# -------------------------------
# Pydantic schemas for auth requests/responses
# -------------------------------
from pydantic import BaseModel
from pydantic import Field as SchemaField

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class UserRegister(BaseModel):
    name: str = SchemaField(min_length=2, max_length=255)
    email: str = SchemaField(pattern=EMAIL_PATTERN, max_length=255)
    password: str = SchemaField(min_length=6, max_length=72)


class UserLogin(BaseModel):
    email: str
    password: str


class UserRead(BaseModel):
    id: int
    email: str
    name: str
    role: UserRole
    created_at: datetime

    class Config:
        from_attributes = True


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserRead
