"""
User directory service for registration, login and profile lookup.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from bson import ObjectId
from fastapi.concurrency import run_in_threadpool
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from passvault.config import get_settings
from passvault.core.errors import DuplicateEmail, InvalidCredentials, NotFound
from passvault.core.security import (
    create_access_token,
    get_dummy_hash,
    hash_password,
    verify_password,
)
from passvault.database.databases import vault_db
from passvault.models.user import User
from passvault.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserSummary,
)
from passvault.schemas.credential import CredentialResponse
from passvault.schemas.user import UserProfile

logger = logging.getLogger(__name__)


class UserService:
    """Service for account operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with vault database."""
        self.db = db
        self.users_collection = db[vault_db.Collections.USERS]
        self.settings = get_settings()

    async def register_user(self, request: RegisterRequest) -> RegisterResponse:
        """
        Register a new user.

        The email lookup only short-circuits the common case; the unique index
        on ``email`` is what actually guarantees uniqueness.

        Args:
            request: Registration request with name, email and password

        Returns:
            RegisterResponse with created user ID

        Raises:
            DuplicateEmail: If the email is already registered
        """
        existing = await self.users_collection.find_one({"email": request.email})
        if existing:
            raise DuplicateEmail()

        hashed_password = await run_in_threadpool(hash_password, request.password)

        user_doc = {
            "name": request.name,
            "email": request.email,
            "hashed_password": hashed_password,
            "saved_passwords": [],
            "created_at": datetime.now(timezone.utc),
        }

        try:
            result = await self.users_collection.insert_one(user_doc)
        except DuplicateKeyError:
            raise DuplicateEmail()

        user_id = str(result.inserted_id)
        logger.info("Registered user %s", user_id)

        return RegisterResponse(user_id=user_id, email=request.email)

    async def login(self, request: LoginRequest) -> LoginResponse:
        """
        Authenticate user and return JWT token.

        Args:
            request: Login request with email and password

        Returns:
            LoginResponse with JWT token and public user info

        Raises:
            InvalidCredentials: If the email is unknown or the password is wrong
        """
        user = await self.get_user_by_email(request.email)

        if user is None:
            # Same bcrypt cost as a wrong password, so timing does not reveal the email
            await run_in_threadpool(verify_password, request.password, get_dummy_hash())
            logger.info("Login failed: unknown email")
            raise InvalidCredentials()

        # bcrypt is CPU bound; verification must finish before we branch on it
        password_ok = await run_in_threadpool(
            verify_password, request.password, user.hashed_password
        )
        if not password_ok:
            logger.info("Login failed for user %s: wrong password", user.id)
            raise InvalidCredentials()

        token = create_access_token(user_id=user.id)
        logger.info("User %s logged in", user.id)

        return LoginResponse(
            token=token,
            expires_in=self.settings.jwt_access_token_expire_minutes * 60,
            user=UserSummary(name=user.name, email=user.email),
        )

    async def get_profile(self, user_id: str) -> UserProfile:
        """
        Get a user's profile without the password hash.

        Raises:
            NotFound: If no user has this ID
        """
        if not ObjectId.is_valid(user_id):
            raise NotFound("User not found")

        user_doc = await self.users_collection.find_one(
            {"_id": ObjectId(user_id)},
            {"hashed_password": 0},
        )
        if not user_doc:
            raise NotFound("User not found")

        return UserProfile(
            id=str(user_doc["_id"]),
            name=user_doc.get("name", ""),
            email=user_doc["email"],
            saved_passwords=[
                CredentialResponse.from_document(entry)
                for entry in user_doc.get("saved_passwords", [])
            ],
            created_at=user_doc.get("created_at"),
        )

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email, without the saved passwords.

        Args:
            email: User email address

        Returns:
            User model (``saved_passwords`` left empty) or None if not found
        """
        user_doc = await self.users_collection.find_one(
            {"email": email},
            {"saved_passwords": 0},
        )
        if not user_doc:
            return None

        return User.from_document(user_doc)
