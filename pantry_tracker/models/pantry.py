"""Pantry entry model for tracking food items at home."""

from sqlalchemy import CheckConstraint, Column, Date, Float, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from pantry_tracker.database import Base
from pantry_tracker.models.enums import PantryStatus, format_package_date_line
from pantry_tracker.models.mixins import TimestampMixin

NAME_MAX_LENGTH = 255


class PantryEntry(Base, TimestampMixin):
    """One inventory record owned by a user.

    Entries are never deleted; removal moves ``status`` from ACTIVE to
    DISCARDED.
    """

    __tablename__ = "pantry_entries"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_pantry_entries_quantity_positive"),
        Index("ix_pantry_entries_user_status", "user_id", "status"),
        # Query pattern: user_id + status, ordered by package date then created_at
        Index(
            "ix_pantry_entries_user_status_package_created",
            "user_id",
            "status",
            "date_on_package",
            "created_at",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(NAME_MAX_LENGTH), nullable=False)
    quantity = Column(Float, nullable=False)
    unit = Column(String(20), nullable=False)  # PantryUnit value
    purchase_date = Column(Date, nullable=True)
    date_label_type = Column(String(50), nullable=True)  # DateLabelType value
    date_on_package = Column(Date, nullable=True)
    status = Column(String(20), nullable=False, default=PantryStatus.ACTIVE.value, index=True)

    # Relationships
    user = relationship("User", backref="pantry_entries")

    @property
    def package_date_line(self) -> str:
        """Display line for the package date, e.g. ``Use by · 2026-03-14``."""
        return format_package_date_line(self.date_label_type, self.date_on_package)
