"""
User model for the vault database.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class CredentialEntry(BaseModel):
    """
    Saved website login embedded in a user's ``saved_passwords`` array.

    The password is stored as supplied, without encryption.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    website: str = Field(..., description="Website the login belongs to")
    username: str = Field(..., description="Login username for the website")
    password: str = Field(..., description="Login password for the website")

    class Config:
        populate_by_name = True


class User(BaseModel):
    """
    User document model for MongoDB users collection.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    name: str = Field(..., description="Display name")
    email: EmailStr = Field(..., description="Unique email address")
    hashed_password: str = Field(..., description="Bcrypt hashed password")
    saved_passwords: list[CredentialEntry] = Field(
        default_factory=list,
        description="Saved website logins, in insertion order"
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Account creation timestamp"
    )

    class Config:
        populate_by_name = True

    @classmethod
    def from_document(cls, doc: dict) -> "User":
        """Build a model from a raw MongoDB document, stringifying ObjectIds."""
        data = dict(doc)
        data["_id"] = str(data["_id"])
        data["saved_passwords"] = [
            {**entry, "_id": str(entry["_id"])}
            for entry in data.get("saved_passwords", [])
        ]
        return cls(**data)
