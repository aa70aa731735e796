"""
Vault service for a user's saved passwords.

Entries live in the owning user's ``saved_passwords`` array. Every mutation
loads the user, edits the array in memory and writes the whole array back, so
two concurrent mutations on the same user are last-write-wins.
"""
import logging

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from passvault.core.errors import NotFound
from passvault.database.databases import vault_db
from passvault.schemas.credential import (
    CredentialRequest,
    CredentialResponse,
    MessageResponse,
    SavePasswordResponse,
)

logger = logging.getLogger(__name__)


class VaultService:
    """Service for saved password CRUD, always scoped to one user."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with vault database."""
        self.db = db
        self.users_collection = db[vault_db.Collections.USERS]

    # ==================== Queries ====================

    async def list_passwords(self, user_id: str) -> list[CredentialResponse]:
        """List every saved password of a user, in insertion order."""
        entries = await self._load_entries(user_id)
        return [CredentialResponse.from_document(e) for e in entries]

    async def get_password(self, user_id: str, entry_id: str) -> CredentialResponse:
        """
        Get a single saved password.

        Raises:
            NotFound: If the user or the entry does not exist
        """
        entries = await self._load_entries(user_id)

        entry = self._find_entry(entries, entry_id)
        if entry is None:
            raise NotFound("Password not found")

        return CredentialResponse.from_document(entry)

    # ==================== Mutations ====================

    async def add_password(
        self, user_id: str, request: CredentialRequest
    ) -> SavePasswordResponse:
        """
        Append a saved password and return the whole updated list.

        Raises:
            NotFound: If the user does not exist
        """
        entries = await self._load_entries(user_id)

        entry = {
            "_id": ObjectId(),
            "website": request.website,
            "username": request.username,
            "password": request.password,
        }
        entries.append(entry)

        await self._save_entries(user_id, entries)
        logger.info("User %s saved password %s", user_id, entry["_id"])

        return SavePasswordResponse(
            saved_passwords=[CredentialResponse.from_document(e) for e in entries]
        )

    async def update_password(
        self, user_id: str, entry_id: str, request: CredentialRequest
    ) -> MessageResponse:
        """
        Replace website, username and password of an entry.

        Raises:
            NotFound: If the user or the entry does not exist
        """
        entries = await self._load_entries(user_id)

        entry = self._find_entry(entries, entry_id)
        if entry is None:
            raise NotFound("Password not found")

        entry["website"] = request.website
        entry["username"] = request.username
        entry["password"] = request.password

        await self._save_entries(user_id, entries)
        logger.info("User %s updated password %s", user_id, entry_id)

        return MessageResponse(message="Password updated")

    async def delete_password(self, user_id: str, entry_id: str) -> MessageResponse:
        """
        Remove an entry. Deleting an id that is not present still succeeds.

        Raises:
            NotFound: If the user does not exist
        """
        entries = await self._load_entries(user_id)

        remaining = [e for e in entries if str(e["_id"]) != entry_id]
        await self._save_entries(user_id, remaining)

        if len(remaining) != len(entries):
            logger.info("User %s deleted password %s", user_id, entry_id)

        return MessageResponse(message="Password deleted successfully")

    # ==================== Helpers ====================

    async def _load_entries(self, user_id: str) -> list[dict]:
        """Fetch the user's saved passwords, or raise NotFound for an unknown user."""
        if not ObjectId.is_valid(user_id):
            raise NotFound("User not found")

        user_doc = await self.users_collection.find_one(
            {"_id": ObjectId(user_id)},
            {"saved_passwords": 1},
        )
        if not user_doc:
            raise NotFound("User not found")

        return list(user_doc.get("saved_passwords", []))

    async def _save_entries(self, user_id: str, entries: list[dict]) -> None:
        """Write the whole saved passwords array back to the user document."""
        result = await self.users_collection.update_one(
            {"_id": ObjectId(user_id)},
            {"$set": {"saved_passwords": entries}},
        )

        # The user may have disappeared between load and save
        if result.matched_count == 0:
            raise NotFound("User not found")

    @staticmethod
    def _find_entry(entries: list[dict], entry_id: str) -> dict | None:
        for entry in entries:
            if str(entry["_id"]) == entry_id:
                return entry
        return None
