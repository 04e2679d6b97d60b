"""Authentication service for JWT, password handling and caller identity."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from pantry_tracker.config import get_settings
from pantry_tracker.models.user import User, normalize_email

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


@dataclass(frozen=True)
class Identity:
    """A resolved caller."""

    user_id: int
    email: str


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: int, email: str) -> str:
    """Create a JWT access token."""
    settings = get_settings()
    expire = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": str(user_id),
        "email": email,
        "exp": expire,
    }
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return encoded_jwt


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT token."""
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        return payload
    except JWTError:
        return None


def resolve_token_user(db: Session, token: str | None) -> User | None:
    """Load the user a session token belongs to.

    Returns None when the token is missing, invalid, expired, lacks ``sub``
    or ``email``, or names a user that no longer exists.
    """
    if not token:
        return None

    payload = decode_access_token(token)
    if payload is None:
        return None

    user_id = payload.get("sub")
    email = payload.get("email")
    if not isinstance(user_id, str) or not isinstance(email, str):
        return None
    try:
        user_pk = int(user_id)
    except ValueError:
        return None

    user = db.query(User).filter(User.id == user_pk).first()
    if user is None:
        logger.info(f"Token for unknown user {user_pk} rejected")
        return None

    return user


def to_identity(user: User | None) -> Identity | None:
    """Reduce a loaded user to the identity services work with."""
    if user is None:
        return None
    return Identity(user_id=user.id, email=user.email)


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password."""
    user = get_user_by_email(db, email)
    if not user:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == normalize_email(email)).first()


def create_user(db: Session, email: str, password: str, name: str | None = None) -> User:
    """Create a new user."""
    hashed_password = get_password_hash(password)
    user = User(email=normalize_email(email), password_hash=hashed_password, name=name)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
