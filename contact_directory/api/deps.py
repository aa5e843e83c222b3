"""FastAPI dependencies for session identity resolution."""

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from contact_directory.core.auth import decode_access_token
from contact_directory.core.identity import SessionIdentity
from contact_directory.core.request_context import set_user_context
from contact_directory.persistence.database import get_db
from contact_directory.persistence.models.user import User
from contact_directory.persistence.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

# Anonymous requests are allowed through; they resolve to a guest session
security = HTTPBearer(auto_error=False)


async def get_current_user_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User | None:
    """Get the signed-in user from a bearer token, if there is one.

    Args:
        credentials: HTTP bearer credentials, absent for anonymous requests
        db: Database session

    Returns:
        Current user, or None when the token is missing, invalid, expired
        or names an unknown user
    """
    if credentials is None:
        return None

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        logger.info("Ignoring invalid or expired bearer token")
        return None

    try:
        user_id = int(payload.get("sub"))
    except (ValueError, TypeError):
        logger.info("Ignoring bearer token with invalid subject")
        return None

    user = await UserRepository(db).get_by_id(user_id)
    if user is None:
        logger.info("Ignoring bearer token for unknown user", extra={"token_user_id": user_id})
        return None

    set_user_context(user.id)
    return user


async def get_identity(
    current_user: Annotated[User | None, Depends(get_current_user_optional)],
) -> SessionIdentity:
    """Classify the caller as guest, user or admin."""
    return SessionIdentity.for_user(current_user)
