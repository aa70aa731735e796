"""
Request and response schemas for API endpoints.
"""
from passvault.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserSummary,
)
from passvault.schemas.credential import (
    CredentialRequest,
    CredentialResponse,
    MessageResponse,
    SavePasswordResponse,
)
from passvault.schemas.user import UserProfile

__all__ = [
    # Auth
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "RegisterResponse",
    "UserSummary",
    # User
    "UserProfile",
    # Saved passwords
    "CredentialRequest",
    "CredentialResponse",
    "MessageResponse",
    "SavePasswordResponse",
]
