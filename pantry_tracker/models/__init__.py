"""SQLAlchemy models."""

from pantry_tracker.models.pantry import PantryEntry
from pantry_tracker.models.user import User

__all__ = [
    "User",
    "PantryEntry",
]
