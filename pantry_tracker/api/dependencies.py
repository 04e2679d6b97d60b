"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from pantry_tracker.config import get_settings
from pantry_tracker.database import get_db
from pantry_tracker.models.user import User
from pantry_tracker.services.auth import Identity, resolve_token_user, to_identity
from pantry_tracker.services.pantry_service import PantryEntryService
from pantry_tracker.services.pantry_store import PantryEntryStore

security = HTTPBearer(auto_error=False)


def get_session_token(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> str | None:
    """Read the session token from the Authorization header or the session cookie."""
    if credentials is not None:
        return credentials.credentials
    return request.cookies.get(get_settings().auth_cookie_name)


def get_token_user(
    token: Annotated[str | None, Depends(get_session_token)],
    db: Annotated[Session, Depends(get_db)],
) -> User | None:
    """Load the user behind the session token, or None when unauthenticated."""
    return resolve_token_user(db, token)


def get_current_identity(
    user: Annotated[User | None, Depends(get_token_user)],
) -> Identity | None:
    """Resolve the caller, or None when unauthenticated."""
    return to_identity(user)


def get_current_user(
    user: Annotated[User | None, Depends(get_token_user)],
) -> User:
    """Get the current authenticated user, or fail with 401."""
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def get_pantry_store(
    db: Annotated[Session, Depends(get_db)],
) -> PantryEntryStore:
    """Get the pantry entry store for this request's session."""
    return PantryEntryStore(db)


def get_pantry_service(
    store: Annotated[PantryEntryStore, Depends(get_pantry_store)],
) -> PantryEntryService:
    """Get pantry service with dependencies."""
    return PantryEntryService(store)
