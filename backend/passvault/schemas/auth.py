"""
Authentication request/response schemas.
"""
from pydantic import BaseModel, EmailStr, Field


class RegisterRequest(BaseModel):
    """Registration request body."""
    name: str = Field(..., min_length=1, max_length=100, description="Display name")
    email: EmailStr = Field(..., description="User email address (must be unique)")
    password: str = Field(..., min_length=1, description="Account password")


class RegisterResponse(BaseModel):
    """Registration response. No token is issued; the caller logs in separately."""
    message: str = Field(
        default="User registered successfully",
        description="Success message"
    )
    user_id: str = Field(..., description="Created user ID")
    email: str = Field(..., description="Registered email")


class LoginRequest(BaseModel):
    """Login request body."""
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="Account password")


class UserSummary(BaseModel):
    """Public identity returned alongside a fresh token."""
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="User email")


class LoginResponse(BaseModel):
    """Login response with JWT token."""
    message: str = Field(default="Login successful", description="Success message")
    token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Token expiration time in seconds")
    user: UserSummary = Field(..., description="Authenticated user")
