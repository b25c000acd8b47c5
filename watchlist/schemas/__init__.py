"""Pydantic schemas for API requests and responses."""

from watchlist.schemas.auth import AuthResponse, TokenPayload, UserLogin, UserRegister, UserResponse
from watchlist.schemas.entry import (
    EntryCreate,
    EntryListResponse,
    EntryResponse,
    EntryUpdate,
    Pagination,
)
from watchlist.schemas.user import ProfileUpdate

__all__ = [
    "UserRegister",
    "UserLogin",
    "TokenPayload",
    "UserResponse",
    "AuthResponse",
    "ProfileUpdate",
    "EntryCreate",
    "EntryUpdate",
    "EntryResponse",
    "EntryListResponse",
    "Pagination",
]
