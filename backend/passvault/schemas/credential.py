"""
Saved password request/response schemas.
"""
from pydantic import BaseModel, Field


class CredentialRequest(BaseModel):
    """
    Save or update password request.

    Updates replace all three fields, so the same body is used for both.
    """
    website: str = Field(..., min_length=1, description="Website the login belongs to")
    username: str = Field(..., min_length=1, description="Login username")
    password: str = Field(..., min_length=1, description="Login password")


class CredentialResponse(BaseModel):
    """A saved password entry."""
    id: str = Field(..., description="Entry ID")
    website: str = Field(..., description="Website the login belongs to")
    username: str = Field(..., description="Login username")
    password: str = Field(..., description="Login password")

    @classmethod
    def from_document(cls, entry: dict) -> "CredentialResponse":
        """Build a response from an embedded ``saved_passwords`` document."""
        return cls(
            id=str(entry["_id"]),
            website=entry["website"],
            username=entry["username"],
            password=entry["password"],
        )


class SavePasswordResponse(BaseModel):
    """Response to saving a password: the user's whole updated list."""
    message: str = Field(
        default="Password saved successfully",
        description="Success message"
    )
    saved_passwords: list[CredentialResponse] = Field(
        ...,
        description="All saved passwords after the insert"
    )


class MessageResponse(BaseModel):
    """Plain confirmation."""
    message: str = Field(..., description="Confirmation message")
