"""
Vault router for the authenticated user's saved passwords.
"""
from fastapi import APIRouter, Depends, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from passvault.dependencies.auth import CurrentUserId
from passvault.dependencies.database import get_database
from passvault.schemas.credential import (
    CredentialRequest,
    CredentialResponse,
    MessageResponse,
    SavePasswordResponse,
)
from passvault.services.vault_service import VaultService

router = APIRouter(tags=["Vault"])


def get_vault_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> VaultService:
    """Dependency to get VaultService instance."""
    return VaultService(db)


@router.post(
    "/save-password",
    response_model=SavePasswordResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Save a password",
)
async def save_password(
    body: CredentialRequest,
    user_id: CurrentUserId,
    vault_service: VaultService = Depends(get_vault_service),
):
    """
    Save a website login.

    - **website**: Website the login belongs to
    - **username**: Login username
    - **password**: Login password

    Returns every saved password of the user, including the new one.
    """
    return await vault_service.add_password(user_id, body)


@router.get(
    "/get-passwords",
    response_model=list[CredentialResponse],
    summary="List saved passwords",
)
async def get_passwords(
    user_id: CurrentUserId,
    vault_service: VaultService = Depends(get_vault_service),
):
    """List all saved passwords of the authenticated user."""
    return await vault_service.list_passwords(user_id)


@router.get(
    "/get-password/{entry_id}",
    response_model=CredentialResponse,
    summary="Get a saved password",
)
async def get_password(
    entry_id: str,
    user_id: CurrentUserId,
    vault_service: VaultService = Depends(get_vault_service),
):
    """Get a single saved password by its ID."""
    return await vault_service.get_password(user_id, entry_id)


@router.put(
    "/update-password/{entry_id}",
    response_model=MessageResponse,
    summary="Update a saved password",
)
async def update_password(
    entry_id: str,
    body: CredentialRequest,
    user_id: CurrentUserId,
    vault_service: VaultService = Depends(get_vault_service),
):
    """Replace website, username and password of a saved password."""
    return await vault_service.update_password(user_id, entry_id, body)


@router.delete(
    "/delete-password/{entry_id}",
    response_model=MessageResponse,
    summary="Delete a saved password",
)
async def delete_password(
    entry_id: str,
    user_id: CurrentUserId,
    vault_service: VaultService = Depends(get_vault_service),
):
    """
    Delete a saved password.

    Deleting an ID that does not exist is not an error.
    """
    return await vault_service.delete_password(user_id, entry_id)
