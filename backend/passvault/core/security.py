"""
Security utilities for password hashing and JWT token management.
"""
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from passvault.config import get_settings

# Name of the JWT claim carrying the authenticated user's id
USER_ID_CLAIM = "userId"


@lru_cache
def get_pwd_context() -> CryptContext:
    """Password hashing context using bcrypt with the configured work factor."""
    settings = get_settings()
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=settings.bcrypt_rounds,
    )


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt.

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string
    """
    return get_pwd_context().hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Malformed or unknown hashes verify as False.

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if password matches, False otherwise
    """
    try:
        return get_pwd_context().verify(plain_password, hashed_password)
    except ValueError:
        return False


@lru_cache
def get_dummy_hash() -> str:
    """
    A hash no real password matches, at the configured work factor.

    Verifying against it makes unknown-email logins cost as much as real ones.
    """
    return hash_password("passvault-unknown-user-placeholder")


def create_access_token(
    user_id: str,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a JWT access token.

    Args:
        user_id: Unique user identifier, stored in the ``userId`` claim
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token string
    """
    settings = get_settings()

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_access_token_expire_minutes)

    now = datetime.now(timezone.utc)

    payload = {
        USER_ID_CLAIM: user_id,
        "exp": now + expires_delta,
        "iat": now,
    }

    return jwt.encode(
        payload,
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str) -> dict[str, Any]:
    """
    Decode and validate a JWT token.

    Signature and expiry are both checked.

    Args:
        token: The JWT token string to decode

    Returns:
        Decoded payload dictionary with keys: userId, exp, iat

    Raises:
        JWTError: If token is invalid or expired
    """
    settings = get_settings()

    return jwt.decode(
        token,
        settings.jwt_secret,
        algorithms=[settings.jwt_algorithm],
    )


def get_token_user_id(payload: dict[str, Any]) -> str:
    """
    Extract the user id claim from a decoded payload.

    Raises:
        JWTError: If the claim is missing or not a non-empty string
    """
    user_id = payload.get(USER_ID_CLAIM)
    if not isinstance(user_id, str) or not user_id:
        raise JWTError("Token is missing the user id claim")
    return user_id
