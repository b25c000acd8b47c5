"""Profile schemas."""

from pydantic import Field

from watchlist.schemas.base import CamelModel


class ProfileUpdate(CamelModel):
    """Update the current user's profile. An empty avatar_url clears the avatar."""

    name: str | None = Field(None, min_length=1, max_length=255)
    avatar_url: str | None = Field(None, max_length=512)
