"""
Authentication router for registration, login and the current user's profile.
"""
from fastapi import APIRouter, Depends, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from passvault.dependencies.auth import CurrentUserId
from passvault.dependencies.database import get_database
from passvault.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from passvault.schemas.user import UserProfile
from passvault.services.user_service import UserService

router = APIRouter(tags=["Authentication"])


def get_user_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> UserService:
    """Dependency to get UserService instance."""
    return UserService(db)


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def register(
    body: RegisterRequest,
    user_service: UserService = Depends(get_user_service),
):
    """
    Register a new user account.

    - **name**: Display name
    - **email**: Valid email address (must be unique)
    - **password**: Account password

    No token is returned; call `POST /login` afterwards.
    """
    return await user_service.register_user(body)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login and get access token",
)
async def login(
    body: LoginRequest,
    user_service: UserService = Depends(get_user_service),
):
    """
    Authenticate with email and password to receive a JWT token valid for one hour.

    Send it to protected endpoints as `Authorization: Bearer <token>`.
    """
    return await user_service.login(body)


@router.get(
    "/me",
    response_model=UserProfile,
    summary="Get current user info",
)
async def get_me(
    user_id: CurrentUserId,
    user_service: UserService = Depends(get_user_service),
):
    """Get the authenticated user's profile, without the password hash."""
    return await user_service.get_profile(user_id)
