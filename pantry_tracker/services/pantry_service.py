"""Pantry service: request validation and ownership in front of the store."""

import logging
import math
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

from pantry_tracker.models.enums import (
    DEFAULT_PANTRY_SORT,
    PantrySort,
    is_date_label_type,
    is_pantry_unit,
)
from pantry_tracker.models.pantry import NAME_MAX_LENGTH, PantryEntry
from pantry_tracker.services.auth import Identity
from pantry_tracker.services.errors import InvalidInput, NotFound, Unauthorized
from pantry_tracker.services.pantry_ordering import PantrySections, order_entries
from pantry_tracker.services.pantry_store import PantryEntryStore

logger = logging.getLogger(__name__)


def to_date_or_none(value: Any) -> date | None:
    """Normalize a date-like value to a ``date`` or None.

    Accepts ``date``/``datetime`` objects and ISO-8601 date or datetime
    strings. Empty and unparseable values become None rather than errors.
    """
    if not value:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def parse_quantity(value: Any) -> float | None:
    """Parse a positive finite quantity, or return None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        quantity = float(value)
    elif isinstance(value, str):
        try:
            quantity = float(value.strip())
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(quantity) or quantity <= 0:
        return None
    return quantity


class PantryEntryService:
    """Service for pantry entry operations on behalf of a caller."""

    def __init__(self, store: PantryEntryStore):
        self.store = store

    @staticmethod
    def _require_caller(caller: Identity | None) -> Identity:
        if caller is None:
            raise Unauthorized()
        return caller

    def submit_new_entry(self, caller: Identity | None, raw_input: Mapping[str, Any]) -> PantryEntry:
        """Validate a creation request and store the new entry.

        Raises:
            Unauthorized: if there is no caller.
            InvalidInput: if name, quantity, unit or date_label_type is invalid.
        """
        caller = self._require_caller(caller)

        raw_name = raw_input.get("name")
        if isinstance(raw_name, bool) or not isinstance(raw_name, str | int | float | None):
            raise InvalidInput("name", "Name must be text")
        name = str(raw_name).strip() if raw_name is not None else ""
        if not name:
            raise InvalidInput("name", "Name is required")
        if len(name) > NAME_MAX_LENGTH:
            raise InvalidInput("name", f"Name must be at most {NAME_MAX_LENGTH} characters")

        quantity = parse_quantity(raw_input.get("quantity"))
        if quantity is None:
            logger.info(f"Rejected quantity {raw_input.get('quantity')!r} from user {caller.user_id}")
            raise InvalidInput("quantity", "Quantity must be a number > 0")

        unit = raw_input.get("unit")
        if not is_pantry_unit(unit):
            raise InvalidInput("unit", "Invalid unit")

        date_label_type = raw_input.get("date_label_type")
        if date_label_type in (None, ""):
            date_label_type = None
        elif not is_date_label_type(date_label_type):
            raise InvalidInput("date_label_type", "Invalid date label type")

        entry = self.store.create(
            caller.user_id,
            name=name,
            quantity=quantity,
            unit=unit,
            purchase_date=to_date_or_none(raw_input.get("purchase_date")),
            date_label_type=date_label_type,
            date_on_package=to_date_or_none(raw_input.get("date_on_package")),
        )
        logger.info(f"Created pantry entry {entry.id} '{entry.name}' for user {caller.user_id}")
        return entry

    def list_entries(self, caller: Identity | None) -> list[PantryEntry]:
        """List the caller's ACTIVE entries in store order."""
        caller = self._require_caller(caller)
        return self.store.list_active(caller.user_id)

    def list_sections(
        self,
        caller: Identity | None,
        sort_option: PantrySort | str | None = DEFAULT_PANTRY_SORT,
    ) -> PantrySections:
        """List the caller's ACTIVE entries split and sorted for display."""
        return order_entries(self.list_entries(caller), sort_option)

    def get_entry(self, caller: Identity | None, entry_id: int) -> PantryEntry:
        """Get one ACTIVE entry owned by the caller."""
        caller = self._require_caller(caller)
        entry = self.store.get_active(caller.user_id, entry_id)
        if entry is None:
            raise NotFound()
        return entry

    def remove_entry(self, caller: Identity | None, entry_id: int) -> None:
        """Soft-delete one of the caller's ACTIVE entries.

        Raises:
            NotFound: whether the entry never existed, was already removed,
                or belongs to another user.
        """
        caller = self._require_caller(caller)
        if not self.store.soft_delete(caller.user_id, entry_id):
            raise NotFound()
        logger.info(f"Discarded pantry entry {entry_id} for user {caller.user_id}")
