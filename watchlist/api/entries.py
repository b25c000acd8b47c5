"""Entry API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from watchlist.api.dependencies import CurrentSession, get_current_session, get_entry_service
from watchlist.schemas.entry import (
    EntryCreate,
    EntryListResponse,
    EntryResponse,
    EntryUpdate,
    Pagination,
)
from watchlist.services.entry_service import EntryService

router = APIRouter(
    prefix="/api/entries",
    tags=["entries"],
    dependencies=[Depends(get_current_session)],
)


@router.get("", response_model=EntryListResponse)
def list_entries(
    session: CurrentSession,
    entries: Annotated[EntryService, Depends(get_entry_service)],
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1)] = 10,
):
    """Get the current user's entries, newest first."""
    result = entries.list(session.id, page=page, limit=limit)

    return EntryListResponse(
        data=[EntryResponse.model_validate(entry) for entry in result.items],
        pagination=Pagination(
            page=result.page,
            limit=result.limit,
            total=result.total,
            has_more=result.has_more,
        ),
    )


@router.get("/{entry_id}", response_model=EntryResponse)
def get_entry(
    entry_id: int,
    session: CurrentSession,
    entries: Annotated[EntryService, Depends(get_entry_service)],
):
    """Get a single entry."""
    return entries.get(session.id, entry_id)


@router.post("", response_model=EntryResponse, status_code=status.HTTP_201_CREATED)
def create_entry(
    entry_data: EntryCreate,
    session: CurrentSession,
    entries: Annotated[EntryService, Depends(get_entry_service)],
):
    """Create a new entry owned by the current user."""
    return entries.create(session.id, entry_data)


@router.put("/{entry_id}", response_model=EntryResponse)
def update_entry(
    entry_id: int,
    entry_data: EntryUpdate,
    session: CurrentSession,
    entries: Annotated[EntryService, Depends(get_entry_service)],
):
    """Update an entry. Only the fields sent are changed."""
    return entries.update(session.id, entry_id, entry_data)


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_entry(
    entry_id: int,
    session: CurrentSession,
    entries: Annotated[EntryService, Depends(get_entry_service)],
):
    """Permanently delete an entry."""
    entries.delete(session.id, entry_id)
