"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with backend-specific helpers
for testing services and routes.
"""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def user_service(mock_vault_db):
    """UserService over the mock vault database."""
    from passvault.services.user_service import UserService
    return UserService(mock_vault_db)


@pytest_asyncio.fixture
async def vault_service(mock_vault_db):
    """VaultService over the mock vault database."""
    from passvault.services.vault_service import VaultService
    return VaultService(mock_vault_db)


@pytest_asyncio.fixture
async def registered_user_id(user_service, test_user_data) -> str:
    """Register the test user directly through the service and return its ID."""
    from passvault.schemas.auth import RegisterRequest

    response = await user_service.register_user(RegisterRequest(**test_user_data))
    return response.user_id


@pytest.fixture
def credential_request(test_credential_data):
    """CredentialRequest built from the test credential data."""
    from passvault.schemas.credential import CredentialRequest
    return CredentialRequest(**test_credential_data)


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, error: str, message_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert data["error"] == error
        assert "message" in data
        if message_contains:
            assert message_contains.lower() in data["message"].lower()
    return _assert
