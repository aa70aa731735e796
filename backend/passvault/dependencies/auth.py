"""
Authentication dependencies for route protection.
"""
from typing import Annotated, Optional

from fastapi import Depends, Header
from jose import JWTError

from passvault.core.errors import InvalidToken, Unauthenticated
from passvault.core.security import decode_token, get_token_user_id

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: Optional[str]) -> str:
    """
    Pull the token out of an ``Authorization: Bearer <token>`` header value.

    Raises:
        Unauthenticated: If the header is absent or not in bearer form
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise Unauthenticated()

    token = authorization[len(BEARER_PREFIX):]
    if not token or " " in token:
        raise Unauthenticated()

    return token


async def get_current_user_id(
    authorization: Annotated[Optional[str], Header(description="Bearer JWT access token")] = None,
) -> str:
    """
    Dependency to get the authenticated user's ID from the bearer token.

    Only identity is established here; whether the user still exists is up to
    the service handling the request.

    Raises:
        Unauthenticated: If the Authorization header is missing or malformed
        InvalidToken: If the token signature, expiry or payload is invalid
    """
    token = extract_bearer_token(authorization)

    try:
        payload = decode_token(token)
        return get_token_user_id(payload)
    except JWTError:
        raise InvalidToken()


# Type alias for cleaner route signatures
CurrentUserId = Annotated[str, Depends(get_current_user_id)]
