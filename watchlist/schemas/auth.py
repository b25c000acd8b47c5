"""Authentication schemas."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from watchlist.schemas.base import CamelModel


class UserRegister(BaseModel):
    """User registration request."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=6)


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1)


class TokenPayload(BaseModel):
    """Identity claims carried by a session token."""

    id: int
    email: str
    name: str


class UserResponse(CamelModel):
    """User information response. Never includes the password hash."""

    id: int
    name: str
    email: str
    avatar_url: str | None = None
    created_at: datetime
    updated_at: datetime


class AuthResponse(BaseModel):
    """Authentication response with token and user info."""

    token: str
    user: UserResponse
