"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from watchlist.api.dependencies import CurrentSession, get_user_service
from watchlist.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from watchlist.services.auth import create_access_token
from watchlist.services.user_service import UserService

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Register a new user."""
    user = users.register(user_data.name, user_data.email, user_data.password)

    return AuthResponse(
        token=create_access_token(user),
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Login with email and password."""
    user = users.authenticate(credentials.email, credentials.password)

    return AuthResponse(
        token=create_access_token(user),
        user=UserResponse.model_validate(user),
    )


@router.get("/me", response_model=UserResponse)
def get_me(
    session: CurrentSession,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Get current user information."""
    return users.get_by_id(session.id)
