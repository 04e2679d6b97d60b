"""Persistence for pantry entries, always scoped by owner."""

import logging
import math
from datetime import date

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pantry_tracker.models.enums import PantryStatus, is_date_label_type, is_pantry_unit
from pantry_tracker.models.pantry import NAME_MAX_LENGTH, PantryEntry
from pantry_tracker.services.errors import ValidationError

logger = logging.getLogger(__name__)


class PantryEntryStore:
    """Store for pantry entries backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def create(
        self,
        user_id: int,
        *,
        name: str,
        quantity: float,
        unit: str,
        purchase_date: date | None = None,
        date_label_type: str | None = None,
        date_on_package: date | None = None,
    ) -> PantryEntry:
        """Insert a new ACTIVE entry and return it with id and timestamps loaded.

        Raises:
            ValidationError: if the fields break an entry invariant. Nothing
                is written in that case.
        """
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Entry name must not be empty")
        if len(name.strip()) > NAME_MAX_LENGTH:
            raise ValidationError(f"Entry name must be at most {NAME_MAX_LENGTH} characters")
        if isinstance(quantity, bool) or not isinstance(quantity, int | float):
            raise ValidationError("Entry quantity must be a number")
        if not math.isfinite(quantity) or quantity <= 0:
            raise ValidationError("Entry quantity must be greater than 0")
        if not is_pantry_unit(unit):
            raise ValidationError(f"Unsupported unit: {unit!r}")
        if date_label_type is not None and not is_date_label_type(date_label_type):
            raise ValidationError(f"Unsupported date label type: {date_label_type!r}")

        entry = PantryEntry(
            user_id=user_id,
            name=name.strip(),
            quantity=float(quantity),
            unit=str(getattr(unit, "value", unit)),
            purchase_date=purchase_date,
            date_label_type=(
                str(getattr(date_label_type, "value", date_label_type))
                if date_label_type is not None
                else None
            ),
            date_on_package=date_on_package,
            status=PantryStatus.ACTIVE.value,
        )
        self.db.add(entry)
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(entry)
        return entry

    def list_active(self, user_id: int) -> list[PantryEntry]:
        """Return the owner's ACTIVE entries.

        The query order (soonest package date, then newest) is only a hint;
        display order comes from ``order_entries``.
        """
        return (
            self.db.query(PantryEntry)
            .filter(
                PantryEntry.user_id == user_id,
                PantryEntry.status == PantryStatus.ACTIVE.value,
            )
            .order_by(PantryEntry.date_on_package.asc().nullslast(), PantryEntry.created_at.desc())
            .all()
        )

    def get_active(self, user_id: int, entry_id: int) -> PantryEntry | None:
        """Return one ACTIVE entry owned by the user, or None."""
        return (
            self.db.query(PantryEntry)
            .filter(
                PantryEntry.id == entry_id,
                PantryEntry.user_id == user_id,
                PantryEntry.status == PantryStatus.ACTIVE.value,
            )
            .first()
        )

    def soft_delete(self, user_id: int, entry_id: int) -> bool:
        """Mark an owned ACTIVE entry as DISCARDED.

        Runs as a single conditional UPDATE so concurrent calls for the same
        entry see exactly one success. Returns whether a row was changed.
        """
        result = self.db.execute(
            update(PantryEntry)
            .where(
                PantryEntry.id == entry_id,
                PantryEntry.user_id == user_id,
                PantryEntry.status == PantryStatus.ACTIVE.value,
            )
            .values(status=PantryStatus.DISCARDED.value)
            .execution_options(synchronize_session=False)
        )
        self.db.commit()
        affected = result.rowcount
        logger.debug(f"Soft delete of entry {entry_id} for user {user_id} affected {affected} row(s)")
        return affected == 1
