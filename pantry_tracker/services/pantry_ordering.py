"""Partition and sort pantry entries for display."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Protocol, assert_never

from pantry_tracker.models.enums import DEFAULT_PANTRY_SORT, PantrySort


class SortableEntry(Protocol):
    """The fields ordering reads from an entry."""

    name: str
    date_on_package: date | None
    created_at: datetime | None


@dataclass
class PantrySections:
    """Entries split into the two display sections, each already sorted."""

    sort: PantrySort
    with_date: list[Any] = field(default_factory=list)
    no_date: list[Any] = field(default_factory=list)


def resolve_sort_option(value: PantrySort | str | None) -> PantrySort:
    """Map a raw sort value to a known option.

    ``None`` selects the default; anything unrecognized falls back to newest
    added first.
    """
    if value is None or value == "":
        return DEFAULT_PANTRY_SORT
    try:
        return PantrySort(value)
    except ValueError:
        return PantrySort.ADDED_DATE_NEWEST


def _created_key(entry: SortableEntry) -> float:
    created_at = entry.created_at
    return created_at.timestamp() if created_at else 0.0


def _package_date_key(entry: SortableEntry) -> int:
    value = entry.date_on_package
    if isinstance(value, datetime):
        value = value.date()
    return value.toordinal() if value else 0


def _name_key(entry: SortableEntry) -> str:
    return (entry.name or "").casefold()


def _sort_key(option: PantrySort, has_date: bool) -> tuple[Callable[[Any], Any], bool]:
    """Return ``(key, reverse)`` for one section."""
    match option:
        case PantrySort.PACKAGE_DATE_NEWEST:
            return (_package_date_key if has_date else _created_key), True
        case PantrySort.PACKAGE_DATE_OLDEST:
            return (_package_date_key if has_date else _created_key), False
        case PantrySort.ADDED_DATE_NEWEST:
            return _created_key, True
        case PantrySort.ADDED_DATE_OLDEST:
            return _created_key, False
        case PantrySort.NAME_AZ:
            return _name_key, False
        case PantrySort.NAME_ZA:
            return _name_key, True
        case _:
            assert_never(option)


def order_entries(
    entries: Iterable[SortableEntry],
    sort_option: PantrySort | str | None = DEFAULT_PANTRY_SORT,
) -> PantrySections:
    """Split entries by package date presence and sort each section.

    Sorting is stable, so entries that tie keep their input order (``sorted``
    with ``reverse=True`` preserves it too).
    """
    option = resolve_sort_option(sort_option)
    entries = list(entries)

    with_date = [e for e in entries if e.date_on_package]
    no_date = [e for e in entries if not e.date_on_package]

    key, reverse = _sort_key(option, has_date=True)
    with_date = sorted(with_date, key=key, reverse=reverse)

    key, reverse = _sort_key(option, has_date=False)
    no_date = sorted(no_date, key=key, reverse=reverse)

    return PantrySections(sort=option, with_date=with_date, no_date=no_date)
