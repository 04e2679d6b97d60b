"""Enums for pantry entry fields and list presentation."""

from datetime import date, datetime
from enum import Enum
from typing import Any


class PantryUnit(str, Enum):
    """Units a pantry quantity can be recorded in."""

    COUNT = "count"
    GRAM = "g"
    OUNCE = "oz"
    MILLILITER = "ml"


class PantryStatus(str, Enum):
    """Lifecycle status of a pantry entry.

    ACTIVE is the only status an entry is created with; DISCARDED is set by
    delete. CONSUMED is reserved and never set.
    """

    ACTIVE = "ACTIVE"
    CONSUMED = "CONSUMED"
    DISCARDED = "DISCARDED"


class DateLabelType(str, Enum):
    """What the date printed on a package means."""

    BEST_IF_USED_BY = "best_if_used_by"
    BEST_BEFORE = "best_before"
    USE_BY = "use_by"
    SELL_BY = "sell_by"
    EXPIRATION_DATE = "expiration_date"
    NOT_SURE = "not_sure"


class PantrySort(str, Enum):
    """Sort options offered when displaying the pantry."""

    PACKAGE_DATE_NEWEST = "packageDateNewest"
    PACKAGE_DATE_OLDEST = "packageDateOldest"
    ADDED_DATE_NEWEST = "addedDateNewest"
    ADDED_DATE_OLDEST = "addedDateOldest"
    NAME_AZ = "nameAZ"
    NAME_ZA = "nameZA"


PANTRY_UNITS: list[str] = [unit.value for unit in PantryUnit]
PANTRY_STATUSES: list[str] = [status.value for status in PantryStatus]
DATE_LABEL_TYPES: list[str] = [label.value for label in DateLabelType]
PANTRY_SORT_OPTIONS: list[str] = [option.value for option in PantrySort]

DEFAULT_PANTRY_SORT = PantrySort.PACKAGE_DATE_NEWEST

PANTRY_UNIT_LABELS: dict[PantryUnit, str] = {
    PantryUnit.COUNT: "Count",
    PantryUnit.GRAM: "Grams (g)",
    PantryUnit.OUNCE: "Ounces (oz)",
    PantryUnit.MILLILITER: "Milliliters (ml)",
}

DATE_LABEL_TYPE_LABELS: dict[DateLabelType, str] = {
    DateLabelType.BEST_IF_USED_BY: "Best if used by",
    DateLabelType.BEST_BEFORE: "Best before",
    DateLabelType.USE_BY: "Use by",
    DateLabelType.SELL_BY: "Sell by",
    DateLabelType.EXPIRATION_DATE: "Expiration date",
    DateLabelType.NOT_SURE: "Not sure",
}

PANTRY_SORT_LABELS: dict[PantrySort, str] = {
    PantrySort.PACKAGE_DATE_NEWEST: "Package Date: Newest",
    PantrySort.PACKAGE_DATE_OLDEST: "Package Date: Oldest",
    PantrySort.ADDED_DATE_NEWEST: "Added Date: Newest",
    PantrySort.ADDED_DATE_OLDEST: "Added Date: Oldest",
    PantrySort.NAME_AZ: "Name: A-Z",
    PantrySort.NAME_ZA: "Name: Z-A",
}


def is_pantry_unit(value: Any) -> bool:
    """Check whether a raw value is a supported unit."""
    return isinstance(value, str) and value in PANTRY_UNITS


def is_pantry_status(value: Any) -> bool:
    """Check whether a raw value is a known entry status."""
    return isinstance(value, str) and value in PANTRY_STATUSES


def is_date_label_type(value: Any) -> bool:
    """Check whether a raw value is a known package date label."""
    return isinstance(value, str) and value in DATE_LABEL_TYPES


def is_pantry_sort(value: Any) -> bool:
    """Check whether a raw value is a known sort option."""
    return isinstance(value, str) and value in PANTRY_SORT_OPTIONS


def format_package_date_line(label_type: str | None, date_on_package: date | None) -> str:
    """Render the package date line shown next to an entry.

    Returns ``"-"`` when there is no package date. A label type without a
    date has no effect.
    """
    if date_on_package is None:
        return "-"
    if isinstance(date_on_package, datetime):
        date_on_package = date_on_package.date()
    label = (
        DATE_LABEL_TYPE_LABELS[DateLabelType(label_type)]
        if is_date_label_type(label_type)
        else "Date on package"
    )
    return f"{label} · {date_on_package.isoformat()}"
