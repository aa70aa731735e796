"""
Database connection management for MongoDB.

The client is created once by the application lifespan and kept on
``app.state``; nothing in this module holds it globally.
"""
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from passvault.config import Settings, get_settings


def create_mongo_client(settings: Settings | None = None) -> AsyncIOMotorClient:
    """Create a MongoDB client from settings."""
    settings = settings or get_settings()
    return AsyncIOMotorClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
    )


def get_vault_database(
    client: AsyncIOMotorClient,
    settings: Settings | None = None,
) -> AsyncIOMotorDatabase:
    """Get the vault database from a client."""
    settings = settings or get_settings()
    return client[settings.mongo_db_name]


async def ping(client: AsyncIOMotorClient) -> None:
    """Round-trip to the server; raises if MongoDB is unreachable."""
    await client.admin.command("ping")
