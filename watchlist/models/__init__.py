"""SQLAlchemy models."""

from watchlist.models.entry import Entry
from watchlist.models.user import User

__all__ = [
    "User",
    "Entry",
]
