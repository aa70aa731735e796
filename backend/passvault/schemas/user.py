"""
User request/response schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from passvault.schemas.credential import CredentialResponse


class UserProfile(BaseModel):
    """User information response (excludes the password hash)."""
    id: str = Field(..., description="User ID")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="User email")
    saved_passwords: list[CredentialResponse] = Field(
        default=[],
        description="Saved website logins"
    )
    created_at: Optional[datetime] = Field(None, description="Account creation date")
