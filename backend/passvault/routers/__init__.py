"""
API Routers module.
"""
from passvault.routers import auth, health, vault

__all__ = ["auth", "health", "vault"]
