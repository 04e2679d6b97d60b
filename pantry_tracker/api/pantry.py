"""Pantry API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from pantry_tracker.api.dependencies import get_current_identity, get_pantry_service
from pantry_tracker.models.enums import (
    DATE_LABEL_TYPE_LABELS,
    DEFAULT_PANTRY_SORT,
    PANTRY_SORT_LABELS,
    PANTRY_UNIT_LABELS,
)
from pantry_tracker.schemas.pantry import (
    OptionResponse,
    PantryEntryCreate,
    PantryEntryResponse,
    PantryOptionsResponse,
    PantrySectionsResponse,
)
from pantry_tracker.services.auth import Identity
from pantry_tracker.services.errors import (
    InvalidInput,
    NotFound,
    PantryError,
    Unauthorized,
    ValidationError,
)
from pantry_tracker.services.pantry_service import PantryEntryService

router = APIRouter(prefix="/api/v1/pantry", tags=["pantry"])

ERROR_STATUS_CODES: dict[type[PantryError], int] = {
    Unauthorized: status.HTTP_401_UNAUTHORIZED,
    InvalidInput: status.HTTP_400_BAD_REQUEST,
    NotFound: status.HTTP_404_NOT_FOUND,
    ValidationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def to_http_error(error: PantryError) -> HTTPException:
    """Translate a service error into the HTTP response for it."""
    status_code = ERROR_STATUS_CODES.get(type(error), status.HTTP_400_BAD_REQUEST)
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(error, Unauthorized) else None
    return HTTPException(status_code=status_code, detail=error.message, headers=headers)


@router.get("", response_model=list[PantryEntryResponse])
def list_pantry_entries(
    identity: Annotated[Identity | None, Depends(get_current_identity)],
    service: Annotated[PantryEntryService, Depends(get_pantry_service)],
):
    """List all active pantry entries for the current user."""
    try:
        return service.list_entries(identity)
    except PantryError as e:
        raise to_http_error(e) from None


@router.get("/sections", response_model=PantrySectionsResponse)
def list_pantry_sections(
    identity: Annotated[Identity | None, Depends(get_current_identity)],
    service: Annotated[PantryEntryService, Depends(get_pantry_service)],
    sort: Annotated[str | None, Query()] = None,
):
    """List active entries split into dated and undated sections.

    Unknown sort values fall back to newest added first.
    """
    try:
        sections = service.list_sections(identity, sort)
    except PantryError as e:
        raise to_http_error(e) from None
    return PantrySectionsResponse(
        sort=sections.sort,
        with_date=[PantryEntryResponse.model_validate(e) for e in sections.with_date],
        no_date=[PantryEntryResponse.model_validate(e) for e in sections.no_date],
    )


@router.get("/options", response_model=PantryOptionsResponse)
def get_pantry_options():
    """Get the units, date labels and sort options for pantry forms."""
    return PantryOptionsResponse(
        units=[OptionResponse(value=k.value, label=v) for k, v in PANTRY_UNIT_LABELS.items()],
        date_label_types=[
            OptionResponse(value=k.value, label=v) for k, v in DATE_LABEL_TYPE_LABELS.items()
        ],
        sort_options=[OptionResponse(value=k.value, label=v) for k, v in PANTRY_SORT_LABELS.items()],
        default_sort=DEFAULT_PANTRY_SORT,
    )


@router.post("", response_model=PantryEntryResponse, status_code=status.HTTP_201_CREATED)
def create_pantry_entry(
    entry_data: PantryEntryCreate,
    identity: Annotated[Identity | None, Depends(get_current_identity)],
    service: Annotated[PantryEntryService, Depends(get_pantry_service)],
):
    """Add an entry to the current user's pantry."""
    try:
        return service.submit_new_entry(identity, entry_data.model_dump())
    except PantryError as e:
        raise to_http_error(e) from None


@router.get("/{entry_id}", response_model=PantryEntryResponse)
def get_pantry_entry(
    entry_id: int,
    identity: Annotated[Identity | None, Depends(get_current_identity)],
    service: Annotated[PantryEntryService, Depends(get_pantry_service)],
):
    """Get a specific active pantry entry."""
    try:
        return service.get_entry(identity, entry_id)
    except PantryError as e:
        raise to_http_error(e) from None


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pantry_entry(
    entry_id: int,
    identity: Annotated[Identity | None, Depends(get_current_identity)],
    service: Annotated[PantryEntryService, Depends(get_pantry_service)],
):
    """Remove an entry from the pantry (marks it discarded)."""
    try:
        service.remove_entry(identity, entry_id)
    except PantryError as e:
        raise to_http_error(e) from None
