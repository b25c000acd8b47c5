"""Watchlist entry model."""

from sqlalchemy import Column, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship

from watchlist.database import Base
from watchlist.models.mixins import TimestampMixin


class Entry(Base, TimestampMixin):
    """A movie or TV show on a user's watchlist."""

    __tablename__ = "entries"
    __table_args__ = (Index("ix_entries_user_id_created_at", "user_id", "created_at"),)

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    type = Column(String(50), nullable=False)  # EntryType value
    director = Column(String(255), nullable=False)
    budget = Column(String(100), nullable=False)  # free text, e.g. "$160M" or "TBD"
    location = Column(String(255), nullable=False)
    duration = Column(String(100), nullable=False)
    year_time = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    image_url = Column(String(512), nullable=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Relationships
    owner = relationship("User", backref="entries")
