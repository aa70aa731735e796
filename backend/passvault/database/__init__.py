"""
Database module - MongoDB connection and database definitions.
"""
from passvault.database.connections import (
    create_mongo_client,
    get_vault_database,
    ping,
)
from passvault.database.databases import vault_db

__all__ = [
    "create_mongo_client",
    "get_vault_database",
    "ping",
    "vault_db",
]
