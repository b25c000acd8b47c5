"""User model."""

from sqlalchemy import Column, Integer, String

from watchlist.database import Base
from watchlist.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and entry ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    avatar_url = Column(String(512), nullable=True)  # URL or /uploads/ path
