"""User model backing the credential store."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import validates

from pantry_tracker.database import Base
from pantry_tracker.models.mixins import TimestampMixin


def normalize_email(email: str) -> str:
    """Lower-case and trim an email so lookups are case-insensitive."""
    return email.strip().lower()


class User(Base, TimestampMixin):
    """Account that owns pantry entries.

    ``email`` is stored trimmed and lower-cased, so the unique index treats
    ``Cook@Example.com`` and ``cook@example.com`` as the same account.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)  # passlib bcrypt hash
    name = Column(String(255), nullable=True)  # display name only

    @validates("email")
    def validate_email(self, key: str, value: str) -> str:
        """Normalize the email on every assignment."""
        return normalize_email(value)
