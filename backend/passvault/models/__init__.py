"""
Pydantic models for database documents and data structures.
"""
from passvault.models.user import CredentialEntry, User

__all__ = [
    "CredentialEntry",
    "User",
]
