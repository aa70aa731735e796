"""
Vault database configuration.
Stores user accounts with their embedded saved passwords.

Structure:
- users: One document per account; ``saved_passwords`` is an embedded array
  of ``{_id, website, username, password}`` entries.
"""
from motor.motor_asyncio import AsyncIOMotorDatabase


class Collections:
    """Collection names in the vault database."""
    USERS = "users"

    # Index definitions for each collection
    INDEXES = {
        "users": [
            {"keys": [("email", 1)], "unique": True},
        ],
    }


async def create_vault_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create indexes for vault database collections."""
    for collection_name, indexes in Collections.INDEXES.items():
        collection = db[collection_name]
        for index_def in indexes:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            await collection.create_index(keys, **kwargs)
