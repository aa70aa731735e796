"""
Global test fixtures for PassVault.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Test user data
- FastAPI test clients wired to the mock database
"""

import os
import sys
from pathlib import Path
from typing import Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

# Lowest bcrypt work factor keeps hashing fast in tests
os.environ.setdefault("BCRYPT_ROUNDS", "4")


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    This provides an in-memory MongoDB that behaves like the real thing
    for testing purposes.
    """
    from mongomock_motor import AsyncMongoMockClient

    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_vault_db(mock_async_mongo_client):
    """Provide mock vault database with the app's indexes."""
    from passvault.database.connections import get_vault_database
    from passvault.database.databases.vault_db import create_vault_indexes

    db = get_vault_database(mock_async_mongo_client)
    await create_vault_indexes(db)
    yield db


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def test_user_data() -> dict:
    """Basic test user data for registration."""
    return {
        "name": "Test User",
        "email": "testuser@example.com",
        "password": "SecurePassword123!",
    }


@pytest.fixture
def test_user_credentials(test_user_data) -> dict:
    """Login body for the test user."""
    return {
        "email": test_user_data["email"],
        "password": test_user_data["password"],
    }


@pytest.fixture
def test_credential_data() -> dict:
    """A website login to save in the vault."""
    return {
        "website": "github.com",
        "username": "octocat",
        "password": "hunter2",
    }


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app(mock_async_mongo_client):
    """
    Create FastAPI app for testing, backed by the mock MongoDB client.
    """
    from passvault.main import create_app
    return create_app(mongo_client=mock_async_mongo_client)


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Entering the client runs the lifespan, so indexes exist.
    """
    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_headers():
    """Build the Authorization header for a bearer token."""
    def _headers(token: str) -> dict:
        return {"Authorization": f"Bearer {token}"}
    return _headers


@pytest.fixture
def registered_token(client, test_user_data, test_user_credentials) -> str:
    """Register the test user over HTTP and return a fresh login token."""
    response = client.post("/register", json=test_user_data)
    assert response.status_code == 201

    response = client.post("/login", json=test_user_credentials)
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def authenticated_client(client, registered_token, auth_headers) -> TestClient:
    """A test client sending the test user's token on every request."""
    client.headers.update(auth_headers(registered_token))
    return client
