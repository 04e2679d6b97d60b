"""Pydantic schemas for API requests and responses."""

from pantry_tracker.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from pantry_tracker.schemas.pantry import (
    OptionResponse,
    PantryEntryCreate,
    PantryEntryResponse,
    PantryOptionsResponse,
    PantrySectionsResponse,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "AuthResponse",
    "UserResponse",
    "PantryEntryCreate",
    "PantryEntryResponse",
    "PantrySectionsResponse",
    "OptionResponse",
    "PantryOptionsResponse",
]
