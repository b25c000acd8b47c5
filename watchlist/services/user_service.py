"""Credential store: registration, login and profile updates."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from watchlist.exceptions import BadRequestError, ConflictError, NotFoundError, UnauthorizedError
from watchlist.models.user import User
from watchlist.schemas.user import ProfileUpdate
from watchlist.services.auth import DUMMY_PASSWORD_HASH, get_password_hash, verify_password

logger = logging.getLogger(__name__)


class UserService:
    """Service for user accounts."""

    def __init__(self, db: Session):
        self.db = db

    def register(self, name: str, email: str, password: str) -> User:
        """Create a user. Raises ConflictError if the email is taken."""
        user = User(name=name, email=email, password_hash=get_password_hash(password))
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError("User already exists") from None
        self.db.refresh(user)
        logger.info(f"Registered user {user.id}")
        return user

    def authenticate(self, email: str, password: str) -> User:
        """Return the user for a valid email/password pair."""
        user = self.get_by_email(email)
        if user is None:
            verify_password(password, DUMMY_PASSWORD_HASH)
            logger.warning("Login failed: unknown email")
            raise UnauthorizedError("Invalid credentials")
        if not verify_password(password, user.password_hash):
            logger.warning(f"Login failed: bad password for user {user.id}")
            raise UnauthorizedError("Invalid credentials")
        return user

    def get_by_email(self, email: str) -> User | None:
        return self.db.scalars(select(User).where(User.email == email)).first()

    def get_by_id(self, user_id: int) -> User:
        user = self.db.get(User, user_id)
        if user is None:
            raise NotFoundError("User")
        return user

    def update_profile(self, user_id: int, changes: ProfileUpdate) -> User:
        """Apply the provided profile fields. Email and password are not editable here."""
        data = changes.model_dump(exclude_unset=True)
        updates = {}
        if data.get("name") is not None:
            updates["name"] = data["name"]
        if "avatar_url" in data:
            updates["avatar_url"] = data["avatar_url"] or None

        if not updates:
            raise BadRequestError("No valid fields to update")

        user = self.get_by_id(user_id)
        for field, value in updates.items():
            setattr(user, field, value)
        self.db.commit()
        self.db.refresh(user)
        return user
