"""Enums for model fields."""

from enum import Enum


class EntryType(str, Enum):
    """Kinds of watchlist entries."""

    MOVIE = "Movie"
    TV_SHOW = "TV Show"

    @classmethod
    def _missing_(cls, value):
        # "TVShow" is accepted as input and stored as "TV Show"
        if isinstance(value, str) and value.replace(" ", "").lower() == "tvshow":
            return cls.TV_SHOW
        return None
