"""
Dependencies for dependency injection in routes.
"""
from passvault.dependencies.auth import CurrentUserId, get_current_user_id
from passvault.dependencies.database import get_database, get_mongo_client

__all__ = [
    "CurrentUserId",
    "get_current_user_id",
    "get_database",
    "get_mongo_client",
]
