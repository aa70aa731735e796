"""
Domain errors raised by the service layer and the auth guard.

Each error carries the HTTP status code it maps to; the exception handlers in
``passvault.core.exception_handlers`` turn them into JSON responses.
"""
from fastapi import status


class PassVaultError(Exception):
    """Base class for expected, client-facing failures."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def code(self) -> str:
        return type(self).__name__


class DuplicateEmail(PassVaultError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User already exists"


class InvalidCredentials(PassVaultError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid credentials"


class Unauthenticated(PassVaultError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Access denied, token missing or incorrect"


class InvalidToken(PassVaultError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid or expired token"


class NotFound(PassVaultError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ServerError(PassVaultError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server error"
