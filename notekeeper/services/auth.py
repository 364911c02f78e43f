"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from notekeeper.config import get_settings
from notekeeper.models.user import User
from notekeeper.repositories.user import UserRepository

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context; hashes below min_rounds are replaced on next login
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__min_rounds=12)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: int, email: str) -> str:
    """Create a JWT access token."""
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
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        return payload
    except JWTError:
        return None


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password.

    A hash made with outdated parameters is replaced on successful login.
    """
    users = UserRepository(db)
    user = users.find_by_email(email)
    if not user:
        return None
    verified, new_hash = pwd_context.verify_and_update(password, user.password_hash)
    if not verified:
        return None
    if new_hash:
        logger.info(f"Upgrading password hash for user {user.id}")
        users.upgrade_password(user, new_hash)
    return user
