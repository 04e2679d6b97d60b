"""Pantry schemas."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

from pantry_tracker.models.enums import DateLabelType, PantrySort, PantryStatus, PantryUnit


class PantryEntryCreate(BaseModel):
    """Create a pantry entry.

    Fields accept any JSON value; the service validates them after the caller
    is authenticated and reports which one failed.
    """

    name: Any = None
    quantity: Any = None
    unit: Any = None
    purchase_date: Any = None
    date_label_type: Any = None
    date_on_package: Any = None


class PantryEntryResponse(BaseModel):
    """Pantry entry response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    quantity: float
    unit: PantryUnit
    purchase_date: date | None
    date_label_type: DateLabelType | None
    date_on_package: date | None
    status: PantryStatus
    package_date_line: str
    created_at: datetime
    updated_at: datetime


class PantrySectionsResponse(BaseModel):
    """Active entries split into dated and undated sections."""

    sort: PantrySort
    with_date: list[PantryEntryResponse]
    no_date: list[PantryEntryResponse]


class OptionResponse(BaseModel):
    """A selectable value with its display label."""

    value: str
    label: str


class PantryOptionsResponse(BaseModel):
    """Vocabulary used to build pantry forms and sort menus."""

    units: list[OptionResponse]
    date_label_types: list[OptionResponse]
    sort_options: list[OptionResponse]
    default_sort: PantrySort
