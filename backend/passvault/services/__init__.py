"""
Service layer for business logic.
"""
from passvault.services.user_service import UserService
from passvault.services.vault_service import VaultService

__all__ = [
    "UserService",
    "VaultService",
]
