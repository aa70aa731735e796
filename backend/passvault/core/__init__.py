"""
Core module - Security, domain errors and exception handlers.
"""
from passvault.core.errors import (
    DuplicateEmail,
    InvalidCredentials,
    InvalidToken,
    NotFound,
    PassVaultError,
    ServerError,
    Unauthenticated,
)
from passvault.core.security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_token,
)

__all__ = [
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_token",
    "PassVaultError",
    "DuplicateEmail",
    "InvalidCredentials",
    "Unauthenticated",
    "InvalidToken",
    "NotFound",
    "ServerError",
]
