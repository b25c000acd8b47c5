"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from watchlist.database import get_db
from watchlist.exceptions import UnauthorizedError
from watchlist.schemas.auth import TokenPayload
from watchlist.services.auth import decode_access_token
from watchlist.services.entry_service import EntryService
from watchlist.services.user_service import UserService

security = HTTPBearer(auto_error=False)


def get_current_session(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> TokenPayload:
    """Verify the bearer token and return its identity claims.

    Verification is stateless: the user row is not loaded.
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise UnauthorizedError("Missing or invalid Authorization header")

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise UnauthorizedError("Invalid or expired token")

    return payload


CurrentSession = Annotated[TokenPayload, Depends(get_current_session)]


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
) -> UserService:
    """Get user service bound to the request's session."""
    return UserService(db)


def get_entry_service(
    db: Annotated[Session, Depends(get_db)],
) -> EntryService:
    """Get entry service bound to the request's session."""
    return EntryService(db)
