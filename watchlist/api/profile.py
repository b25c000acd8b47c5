"""Profile API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from watchlist.api.dependencies import CurrentSession, get_current_session, get_user_service
from watchlist.schemas.auth import UserResponse
from watchlist.schemas.user import ProfileUpdate
from watchlist.services.user_service import UserService

router = APIRouter(
    prefix="/api/profile",
    tags=["profile"],
    dependencies=[Depends(get_current_session)],
)


@router.get("/profile", response_model=UserResponse)
def get_profile(
    session: CurrentSession,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Get the current user's profile."""
    return users.get_by_id(session.id)


@router.put("/profile", response_model=UserResponse)
def update_profile(
    changes: ProfileUpdate,
    session: CurrentSession,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Update the current user's name and/or avatar."""
    return users.update_profile(session.id, changes)
