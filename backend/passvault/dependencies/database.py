"""
Database dependencies.

The MongoDB client is owned by the application (``app.state.mongo_client``)
and reaches services only through these dependencies.
"""
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from passvault.database.connections import get_vault_database


def get_mongo_client(request: Request) -> AsyncIOMotorClient:
    """Dependency returning the application's MongoDB client."""
    return request.app.state.mongo_client


def get_database(request: Request) -> AsyncIOMotorDatabase:
    """Dependency returning the vault database."""
    return get_vault_database(get_mongo_client(request))
