"""
Tests for UserService: registration, login and profile lookup.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError


class TestRegister:
    """Tests for UserService.register_user."""

    @pytest.mark.asyncio
    async def test_register_stores_hashed_password_and_empty_vault(
        self, user_service, mock_vault_db, test_user_data
    ):
        from passvault.schemas.auth import RegisterRequest

        response = await user_service.register_user(RegisterRequest(**test_user_data))

        assert response.email == test_user_data["email"]
        assert response.message == "User registered successfully"

        doc = await mock_vault_db.users.find_one({"_id": ObjectId(response.user_id)})
        assert doc["name"] == test_user_data["name"]
        assert doc["hashed_password"] != test_user_data["password"]
        assert doc["hashed_password"].startswith("$2b$")
        assert doc["saved_passwords"] == []
        assert doc["created_at"] is not None

    @pytest.mark.asyncio
    async def test_register_same_email_twice_fails(self, user_service, test_user_data):
        from passvault.core.errors import DuplicateEmail
        from passvault.schemas.auth import RegisterRequest

        await user_service.register_user(RegisterRequest(**test_user_data))

        with pytest.raises(DuplicateEmail):
            await user_service.register_user(RegisterRequest(**test_user_data))

    @pytest.mark.asyncio
    async def test_register_race_reported_by_unique_index(self, user_service, test_user_data):
        """If the lookup misses but the insert collides, it is still a duplicate."""
        from passvault.core.errors import DuplicateEmail
        from passvault.schemas.auth import RegisterRequest

        users = MagicMock()
        users.find_one = AsyncMock(return_value=None)
        users.insert_one = AsyncMock(side_effect=DuplicateKeyError("E11000 duplicate key"))
        user_service.users_collection = users

        with pytest.raises(DuplicateEmail):
            await user_service.register_user(RegisterRequest(**test_user_data))


class TestLogin:
    """Tests for UserService.login."""

    @pytest.mark.asyncio
    async def test_login_returns_token_and_public_user(
        self, user_service, registered_user_id, test_user_data, test_user_credentials
    ):
        from passvault.core.security import decode_token
        from passvault.schemas.auth import LoginRequest

        response = await user_service.login(LoginRequest(**test_user_credentials))

        assert response.message == "Login successful"
        assert response.token_type == "bearer"
        assert response.expires_in == 3600
        assert response.user.name == test_user_data["name"]
        assert response.user.email == test_user_data["email"]
        assert decode_token(response.token)["userId"] == registered_user_id
        assert "hashed_password" not in response.model_dump_json()

    @pytest.mark.asyncio
    async def test_login_wrong_password_fails(self, user_service, registered_user_id, test_user_data):
        from passvault.core.errors import InvalidCredentials
        from passvault.schemas.auth import LoginRequest

        with pytest.raises(InvalidCredentials):
            await user_service.login(
                LoginRequest(email=test_user_data["email"], password="wrong-password")
            )

    @pytest.mark.asyncio
    async def test_login_unknown_email_fails(self, user_service):
        from passvault.core.errors import InvalidCredentials
        from passvault.schemas.auth import LoginRequest

        with pytest.raises(InvalidCredentials):
            await user_service.login(
                LoginRequest(email="nobody@example.com", password="whatever")
            )


    @pytest.mark.asyncio
    async def test_login_unknown_email_still_verifies_a_hash(self, user_service):
        """Unknown emails pay the same bcrypt cost as wrong passwords."""
        from passvault.core.errors import InvalidCredentials
        from passvault.core.security import get_dummy_hash
        from passvault.schemas.auth import LoginRequest

        with patch(
            "passvault.services.user_service.verify_password", return_value=False
        ) as mock_verify:
            with pytest.raises(InvalidCredentials):
                await user_service.login(
                    LoginRequest(email="nobody@example.com", password="whatever")
                )

        mock_verify.assert_called_once_with("whatever", get_dummy_hash())

    @pytest.mark.asyncio
    async def test_login_lookup_skips_saved_passwords(self, user_service):
        """The email lookup projects out the saved passwords array."""
        users = MagicMock()
        users.find_one = AsyncMock(return_value=None)
        user_service.users_collection = users

        assert await user_service.get_user_by_email("someone@example.com") is None

        users.find_one.assert_awaited_once_with(
            {"email": "someone@example.com"},
            {"saved_passwords": 0},
        )

    @pytest.mark.asyncio
    async def test_login_works_for_user_with_saved_passwords(
        self, user_service, vault_service, registered_user_id,
        test_user_credentials, credential_request
    ):
        from passvault.schemas.auth import LoginRequest

        await vault_service.add_password(registered_user_id, credential_request)

        response = await user_service.login(LoginRequest(**test_user_credentials))

        assert response.token


class TestGetProfile:
    """Tests for UserService.get_profile."""

    @pytest.mark.asyncio
    async def test_profile_excludes_password_hash(
        self, user_service, registered_user_id, test_user_data
    ):
        profile = await user_service.get_profile(registered_user_id)

        assert profile.id == registered_user_id
        assert profile.name == test_user_data["name"]
        assert profile.email == test_user_data["email"]
        assert profile.saved_passwords == []
        assert "hashed_password" not in profile.model_dump()

    @pytest.mark.asyncio
    async def test_profile_unknown_user_not_found(self, user_service):
        from passvault.core.errors import NotFound

        with pytest.raises(NotFound):
            await user_service.get_profile(str(ObjectId()))

    @pytest.mark.asyncio
    async def test_profile_malformed_id_not_found(self, user_service):
        from passvault.core.errors import NotFound

        with pytest.raises(NotFound):
            await user_service.get_profile("not-an-object-id")
