"""
Database definitions and collection constants.
"""
from passvault.database.databases import vault_db

__all__ = ["vault_db"]
